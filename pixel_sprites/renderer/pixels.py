"""Color mapping from a resolved grid to RGBA pixels.

The renderer is a pure function of the grid, the options and the random
source. Per render it draws, in order: the gradient axis, the sprite's
saturation, and the starting hue. Then for every line ``u`` along the gradient
axis it may jump to a new hue, and for every pixel on that line it jitters the
brightness envelope ``sin(pi * u / ulen)``.
"""

import math
import random
from logging import getLogger
from typing import Optional

import numpy as np

from pixel_sprites.buffer import PixelBuffer, UInt8Array
from pixel_sprites.grid import Grid
from pixel_sprites.options import DEFAULT_RENDER_OPTIONS, RenderOptions, clamp
from pixel_sprites.types import CellCode, GradientAxis, RandomSource
from pixel_sprites.utils.color import FloatArray, hsl_to_rgb_np

logger = getLogger("pixel_sprites.renderer.pixels")


def choose_gradient_axis(rng: RandomSource) -> GradientAxis:
    return GradientAxis.VERTICAL if rng.random() > 0.5 else GradientAxis.HORIZONTAL


def hue_change_roll(rng: RandomSource) -> float:
    """
    Non-uniform value in [0, 1]: the absolute mean of three uniform draws in
    [-1, 1]. Small values are common, values near 1 are rare.
    """
    total = (
        (rng.random() * 2 - 1) + (rng.random() * 2 - 1) + (rng.random() * 2 - 1)
    )
    return abs(total / 3)


def render_line(
    line: np.ndarray,
    u: int,
    ulen: int,
    hue: float,
    saturation: float,
    options: RenderOptions,
    rng: RandomSource,
) -> FloatArray:
    """
    Color one line of cells across the gradient axis. Returns a (len(line), 4)
    float array of RGBA values in [0, 1].
    """
    vlen = len(line)
    visible = line != int(CellCode.EMPTY)
    border = line == int(CellCode.BORDER)

    rgba: FloatArray = np.zeros((vlen, 4), dtype=np.float64)
    if options.colored:
        noise = np.array([rng.random() for _ in range(vlen)], dtype=np.float64)
        envelope = math.sin((u / ulen) * math.pi)
        brightness = (
            envelope * (1 - options.brightness_noise) + noise * options.brightness_noise
        )
        r, g, b = hsl_to_rgb_np(
            np.full(vlen, hue), np.full(vlen, saturation), brightness
        )
        rgb = np.stack([r, g, b], axis=-1)
        rgb[border] *= options.edge_brightness
    else:
        rgb = np.where(border[:, None], 0.0, 1.0) * np.ones((vlen, 3))

    rgba[:, :3] = rgb
    rgba[:, 3] = 1.0
    rgba[~visible] = 0.0
    return rgba


def render(
    grid: Grid,
    options: RenderOptions = DEFAULT_RENDER_OPTIONS,
    rng: Optional[RandomSource] = None,
) -> PixelBuffer:
    """Map a resolved grid to an RGBA pixel buffer.

    Args:
        grid (Grid): Finished grid (cells in {-1, 0, 1}).
        options (RenderOptions): Color mapping settings.
        rng (random.Random | None): Random source for axis, hue, saturation and
            brightness draws. An unseeded ``random.Random`` is used when omitted.

    Returns:
        PixelBuffer: ``grid.width x grid.height`` RGBA pixels. Empty cells are
            fully transparent; every other cell is opaque.
    """
    if rng is None:
        rng = random.Random()

    axis = choose_gradient_axis(rng)
    saturation = clamp(rng.random() * options.saturation)
    hue = rng.random()

    cells = grid.to_array()
    # lines[u] is the run of cells across the gradient axis at position u
    lines = cells if axis == GradientAxis.VERTICAL else cells.T
    ulen, vlen = lines.shape

    out: FloatArray = np.zeros((ulen, vlen, 4), dtype=np.float64)
    for u in range(ulen):
        if hue_change_roll(rng) > 1 - options.color_variations:
            hue = rng.random()
        out[u] = render_line(lines[u], u, ulen, hue, saturation, options, rng)

    if axis == GradientAxis.HORIZONTAL:
        out = out.transpose(1, 0, 2)

    pixels: UInt8Array = np.clip(np.round(out * 255.0), 0, 255).astype(np.uint8)
    logger.debug(
        "Rendered %dx%d sprite (axis=%s, saturation=%.3f, colored=%s)",
        grid.width,
        grid.height,
        axis,
        saturation,
        options.colored,
    )
    return PixelBuffer.from_array(pixels)
