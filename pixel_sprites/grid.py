from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np
import numpy.typing as npt

from pixel_sprites.types import CellCode


@dataclass
class Grid:
    """
    Mutable, row-major array of cell codes for one sprite instance.
    - `cells[y * width + x]` holds the code at column x, row y.
    - A fresh grid is fully solid (every cell is a border).
    - The resolution phases in `pixel_sprites.resolve` mutate it in place; once
      edges are synthesized it is treated as read-only input to the renderer.
    """

    width: int
    height: int
    cells: List[int] = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid size must be positive, got {self.width}x{self.height}")
        self.cells = [int(CellCode.BORDER)] * (self.width * self.height)

    # -------- Cell access --------

    def get(self, x: int, y: int) -> int:
        self._check_bounds(x, y)
        return self.cells[y * self.width + x]

    def set(self, x: int, y: int, value: int) -> None:
        self._check_bounds(x, y)
        self.cells[y * self.width + x] = value

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def rows(self) -> List[List[int]]:
        """
        Return a copy of the cells as a list of rows.
        """
        return [
            self.cells[y * self.width : (y + 1) * self.width]
            for y in range(self.height)
        ]

    def count(self, code: int) -> int:
        return self.cells.count(code)

    def copy(self) -> Grid:
        clone = Grid(self.width, self.height)
        clone.cells = list(self.cells)
        return clone

    def to_array(self) -> npt.NDArray[np.int8]:
        """
        Return the cells as an int8 array of shape (height, width).
        """
        return np.array(self.cells, dtype=np.int8).reshape(self.height, self.width)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Grid:
        materialized = [list(row) for row in rows]
        grid = cls(len(materialized[0]) if materialized else 0, len(materialized))
        for y, row in enumerate(materialized):
            if len(row) != grid.width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {grid.width}")
            for x, value in enumerate(row):
                grid.set(x, y, value)
        return grid

    # -------- Debug dump --------

    def dump(self) -> str:
        """
        Render the grid as text: one line per row, non-negative codes padded
        with a leading space, every line newline-terminated.
        """
        lines = []
        for row in self.rows():
            lines.append("".join(f" {v}" if v >= 0 else f"{v}" for v in row) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.dump()

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
