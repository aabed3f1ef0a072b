"""Render configuration.

``RenderOptions`` is a frozen value object. Numeric fields are clamped into
``[0, 1]`` on construction rather than rejected: a slightly out-of-range tuning
value degrades the look of a sprite but should never abort generation. Use
``RenderOptions.from_mapping(..., strict=True)`` when out-of-range values should
raise :class:`pixel_sprites.errors.InvalidOptionError` instead.
"""

import numbers
from dataclasses import dataclass, fields, replace
from logging import getLogger
from typing import Any, Dict, Mapping, Optional, Union

from pixel_sprites.errors import InvalidOptionError

logger = getLogger("pixel_sprites.options")

NUMERIC_OPTIONS = (
    "edge_brightness",
    "color_variations",
    "brightness_noise",
    "saturation",
)

# camelCase spellings accepted alongside the field names
OPTION_ALIASES: Dict[str, str] = {
    "edgeBrightness": "edge_brightness",
    "colorVariations": "color_variations",
    "brightnessNoise": "brightness_noise",
}


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidOptionError(f"Option {name!r} must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class RenderOptions:
    """Color mapping settings.

    Attributes:
        colored: Render hue/brightness gradients; ``False`` gives black borders
            and white bodies.
        edge_brightness: Multiplier applied to border pixels in colored mode.
        color_variations: Likelihood of hue jumps along the gradient axis.
        brightness_noise: Random jitter mixed into the brightness envelope.
        saturation: Upper bound of the per-sprite random saturation.
    """

    colored: bool = True
    edge_brightness: float = 0.3
    color_variations: float = 0.2
    brightness_noise: float = 0.3
    saturation: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "colored", bool(self.colored))
        for name in NUMERIC_OPTIONS:
            value = _as_float(name, getattr(self, name))
            clamped = clamp(value)
            if clamped != value:
                logger.warning("Option %s=%r clamped to %r", name, value, clamped)
            object.__setattr__(self, name, clamped)

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, Any], strict: bool = False
    ) -> "RenderOptions":
        """Build options from a plain mapping, filling the documented defaults.

        Accepts both snake_case field names and the camelCase aliases.

        Raises:
            InvalidOptionError: For unknown names, non-numeric values of numeric
                options, and (with ``strict=True``) values outside ``[0, 1]``.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise InvalidOptionError(f"Unknown render option: {key!r}")
            if strict and name in NUMERIC_OPTIONS:
                number = _as_float(name, value)
                if not 0.0 <= number <= 1.0:
                    raise InvalidOptionError(
                        f"Option {key!r} must be within [0, 1], got {value!r}"
                    )
            kwargs[name] = value
        return cls(**kwargs)

    def merge(self, overrides: Optional["OptionsLike"]) -> "RenderOptions":
        """Return a copy with ``overrides`` applied on top of these options.

        A mapping overrides exactly the keys it names. A ``RenderOptions``
        instance overrides the fields where it differs from
        ``DEFAULT_RENDER_OPTIONS``; its default-valued fields keep ``self``'s.
        """
        if overrides is None:
            return self
        if isinstance(overrides, RenderOptions):
            changed = {
                f.name: getattr(overrides, f.name)
                for f in fields(overrides)
                if getattr(overrides, f.name) != getattr(DEFAULT_RENDER_OPTIONS, f.name)
            }
            return replace(self, **changed)
        explicit = RenderOptions.from_mapping(overrides)
        changed = {
            OPTION_ALIASES.get(key, key): getattr(explicit, OPTION_ALIASES.get(key, key))
            for key in overrides
        }
        return replace(self, **changed)


OptionsLike = Union[RenderOptions, Mapping[str, Any]]

DEFAULT_RENDER_OPTIONS = RenderOptions()
