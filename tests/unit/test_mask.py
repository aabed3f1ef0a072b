# tests/unit/test_mask.py

import pytest
from typing import Any, List

from pixel_sprites.errors import InvalidMaskError, PixelSpriteError
from pixel_sprites.mask import Mask
from pixel_sprites.types import CellCode


def test_mask_defaults_and_cells() -> None:
    mask = Mask([-1, 0, 1, 2], 2, 2)
    assert mask.mirror_x is True
    assert mask.mirror_y is True
    assert list(mask.cells) == [-1, 0, 1, 2]
    assert mask.cell(1, 1) == 2
    assert mask.cell(0, 1) == 1


def test_mask_cells_are_immutable_copy() -> None:
    source: List[int] = [0, 1, 1, 0]
    mask = Mask(source, 4, 1)
    source[0] = 2
    assert mask.cells[0] == 0
    with pytest.raises(TypeError):
        mask.cells[0] = 2  # type: ignore[index]


@pytest.mark.parametrize(
    "cells, width, height",
    [
        ([], 1, 1),
        ([0], 2, 1),
        ([0, 0, 0], 2, 2),
        ([0] * 5, 2, 2),
        ([0] * 12, 3, 3),
    ],
)
def test_mask_length_mismatch_raises(cells: List[int], width: int, height: int) -> None:
    with pytest.raises(InvalidMaskError):
        Mask(cells, width, height)


@pytest.mark.parametrize("bad_code", [-2, 3, 7, 100])
def test_mask_unknown_code_raises(bad_code: int) -> None:
    with pytest.raises(InvalidMaskError, match="unknown cell codes"):
        Mask([0, bad_code], 2, 1)


@pytest.mark.parametrize(
    "cells",
    [
        [-1.0, 0.0],
        [0, 1.0],
        [True, 0],
        [0, False],
        [[0], 0],
        [0, "1"],
        [None, 0],
    ],
)
def test_mask_non_int_cell_raises(cells: List[Any]) -> None:
    with pytest.raises(InvalidMaskError, match="must be an int code"):
        Mask(cells, 2, 1, mirror_x=False, mirror_y=False)


def test_mask_accepts_cell_code_members() -> None:
    mask = Mask([CellCode.BORDER, CellCode.BODY_OR_BORDER], 2, 1)
    assert list(mask.cells) == [-1, 2]
    assert all(type(c) is int for c in mask.cells)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 3)])
def test_mask_non_positive_size_raises(width: int, height: int) -> None:
    with pytest.raises(InvalidMaskError):
        Mask([], width, height)


def test_invalid_mask_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Mask([0, 0], 3, 1)
    assert issubclass(InvalidMaskError, PixelSpriteError)


def test_from_rows_builds_row_major() -> None:
    mask = Mask.from_rows([[0, 1, 2], [-1, 0, 1]], mirror_x=False, mirror_y=True)
    assert (mask.width, mask.height) == (3, 2)
    assert list(mask.cells) == [0, 1, 2, -1, 0, 1]
    assert mask.mirror_x is False
    assert mask.mirror_y is True


@pytest.mark.parametrize("rows", [[], [[]], [[0, 1], [0]]])
def test_from_rows_rejects_ragged_or_empty(rows: List[List[int]]) -> None:
    with pytest.raises(InvalidMaskError):
        Mask.from_rows(rows)


@pytest.mark.parametrize(
    "mirror_x, mirror_y, expected",
    [
        (True, True, (6, 4)),
        (True, False, (6, 2)),
        (False, True, (3, 4)),
        (False, False, (3, 2)),
    ],
)
def test_grid_size(mirror_x: bool, mirror_y: bool, expected: tuple[int, int]) -> None:
    mask = Mask([0] * 6, 3, 2, mirror_x=mirror_x, mirror_y=mirror_y)
    assert mask.grid_size == expected


def test_cell_out_of_bounds() -> None:
    mask = Mask([0, 0], 2, 1)
    with pytest.raises(IndexError):
        mask.cell(2, 0)
