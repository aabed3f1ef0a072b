"""Mask template.

A ``Mask`` is the hand-authored quadrant of a sprite. Each cell declares how
the matching grid cell is produced:

* ``-1`` always border
* ``0`` always empty
* ``1`` randomly body or empty
* ``2`` randomly body or border

Masks are immutable and validated on construction, so a single mask can be
reused for any number of generations.
"""

from dataclasses import dataclass
from typing import Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from pixel_sprites.errors import InvalidMaskError
from pixel_sprites.types import MASK_CODES


@dataclass(frozen=True)
class Mask:
    """Authored sprite template.

    Attributes:
        cells: Row-major cell codes, exactly ``width * height`` long.
        width: Number of columns in the authored quadrant.
        height: Number of rows in the authored quadrant.
        mirror_x: Reflect the quadrant onto the right half of the sprite.
        mirror_y: Reflect the quadrant onto the bottom half of the sprite.

    Raises:
        InvalidMaskError: On non-positive dimensions, a cell count that does
            not match ``width * height``, a non-int cell, or an unknown cell
            code.
    """

    cells: PVector[int]
    width: int
    height: int
    mirror_x: bool = True
    mirror_y: bool = True

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidMaskError(f"Mask {name} must be a positive int, got {value!r}")

        cells = pvector(self.cells)
        if len(cells) != self.width * self.height:
            raise InvalidMaskError(
                f"Mask has {len(cells)} cells, expected {self.width}x{self.height}"
                f" = {self.width * self.height}"
            )
        for i, c in enumerate(cells):
            if isinstance(c, bool) or not isinstance(c, int):
                raise InvalidMaskError(f"Mask cell {i} must be an int code, got {c!r}")
        bad = sorted({int(c) for c in cells if c not in MASK_CODES})
        if bad:
            raise InvalidMaskError(f"Mask contains unknown cell codes: {bad}")

        object.__setattr__(self, "cells", pvector(int(c) for c in cells))

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        mirror_x: bool = True,
        mirror_y: bool = True,
    ) -> "Mask":
        """Build a mask from a list of equal-length rows."""
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidMaskError("Mask rows must be non-empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidMaskError(
                    f"Mask row {y} has {len(row)} cells, expected {width}"
                )
        cells = [code for row in rows for code in row]
        return cls(cells, width, len(rows), mirror_x=mirror_x, mirror_y=mirror_y)

    @property
    def grid_size(self) -> tuple[int, int]:
        """(width, height) of the grid this mask resolves into."""
        return (
            self.width * (2 if self.mirror_x else 1),
            self.height * (2 if self.mirror_y else 1),
        )

    def cell(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for mask {self.width}x{self.height}"
            )
        return self.cells[y * self.width + x]
