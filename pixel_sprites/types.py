"""Common type aliases and enumerations.

``CellCode`` is the integer tag stored in every ``Mask`` and ``Grid`` cell.
``RandomSource`` is the injectable random generator threaded through every
stochastic step of generation and rendering.
"""

import random
from enum import IntEnum, StrEnum, auto
from typing import Tuple

RandomSource = random.Random

RGBA = Tuple[int, int, int, int]


class CellCode(IntEnum):
    """Cell codes shared by masks and grids.

    ``BODY_OR_BORDER`` only appears in authored masks; it never survives the
    sampling step. ``BODY`` in a mask means "randomly body or empty".
    """

    BORDER = -1
    EMPTY = 0
    BODY = 1
    BODY_OR_BORDER = 2


MASK_CODES = frozenset(code.value for code in CellCode)


class GradientAxis(StrEnum):
    """Direction along which hue and brightness vary in a rendered sprite."""

    VERTICAL = auto()
    HORIZONTAL = auto()
