"""Exceptions raised by the sprite generator.

Both concrete errors subclass ``ValueError`` so callers that already guard
construction with ``except ValueError`` keep working.
"""


class PixelSpriteError(Exception):
    """Base class for all library errors."""


class InvalidMaskError(PixelSpriteError, ValueError):
    """Mask dimensions or cell codes are inconsistent."""


class InvalidOptionError(PixelSpriteError, ValueError):
    """A render option is unknown, not numeric, or out of range in strict mode."""
