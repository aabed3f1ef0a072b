"""Hue/saturation/lightness to RGB conversion.

The generator's "HSL" is the six-sextant piecewise-linear model where the
third component scales the whole color (``p``, ``q`` and ``t`` are fractions of
``l``). Both a scalar form and a numpy-vectorized form are provided; they share
the same sextant-to-channel table and agree to float precision.
"""

import math
import numpy as np
import numpy.typing as npt
from typing import Tuple

FloatArray = npt.NDArray[np.float32 | np.float64]


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert one (h, s, l) triple in [0,1] to (r, g, b) floats in [0,1].
    """
    i = math.floor(h * 6)
    f = h * 6 - i
    p = l * (1 - s)
    q = l * (1 - f * s)
    t = l * (1 - (1 - f) * s)

    sextant = i % 6
    if sextant == 0:
        return l, t, p
    if sextant == 1:
        return q, l, p
    if sextant == 2:
        return p, l, t
    if sextant == 3:
        return p, q, l
    if sextant == 4:
        return t, p, l
    return l, p, q


def hsl_to_rgb_np(
    h: FloatArray, s: FloatArray, l: FloatArray
) -> Tuple[FloatArray, FloatArray, FloatArray]:
    """
    Vectorized hsl_to_rgb for same-shape arrays in [0,1]. Returns float64 arrays.
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)

    i: npt.NDArray[np.int64] = np.floor(h * 6.0).astype(np.int64)
    f: FloatArray = h * 6.0 - i
    p: FloatArray = l * (1.0 - s)
    q: FloatArray = l * (1.0 - s * f)
    t: FloatArray = l * (1.0 - s * (1.0 - f))

    i_mod = i % 6

    r: FloatArray = np.choose(i_mod, [l, q, p, p, t, l])
    g: FloatArray = np.choose(i_mod, [t, l, l, q, p, p])
    b: FloatArray = np.choose(i_mod, [p, p, t, l, l, q])
    return r, g, b
