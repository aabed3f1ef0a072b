"""pixel_sprites
=================

Procedural generation of small symmetric pixel-art sprites (spaceships,
robots, creatures) from compact hand-authored masks.

Pipeline: a :class:`Mask` is resolved into a :class:`Grid` (apply mask,
sample, mirror, outline), which is colored into a :class:`PixelBuffer`.
Everything random draws from one injectable ``random.Random``::

    import random
    from pixel_sprites import generate
    from pixel_sprites.examples.masks import SPACESHIP

    sprite = generate(SPACESHIP, {"colored": True}, rng=random.Random(42))
    print(sprite)                   # grid dump
    sprite.to_image(scale=6).show()
"""

from .buffer import PixelBuffer
from .errors import InvalidMaskError, InvalidOptionError, PixelSpriteError
from .generator import Sprite, SpriteGenerator, generate
from .grid import Grid
from .mask import Mask
from .options import DEFAULT_RENDER_OPTIONS, RenderOptions
from .renderer.pixels import render
from .resolve import resolve
from .types import CellCode, GradientAxis
from .utils.image import resize

__version__ = "0.1.0"

__all__ = [
    "CellCode",
    "DEFAULT_RENDER_OPTIONS",
    "GradientAxis",
    "Grid",
    "InvalidMaskError",
    "InvalidOptionError",
    "Mask",
    "PixelBuffer",
    "PixelSpriteError",
    "RenderOptions",
    "Sprite",
    "SpriteGenerator",
    "generate",
    "render",
    "resize",
    "resolve",
    "__version__",
]
