"""Grid resolution pipeline.

This module turns an immutable :class:`pixel_sprites.mask.Mask` into a
finished :class:`pixel_sprites.grid.Grid` silhouette. The exported
:func:`resolve` is the only entry point that callers should need; the phase
functions are public so they can be tested one at a time.

Phase ordering (fixed, never skipped):

1. ``init_grid`` allocates a fully solid grid (every cell a border) so that any
    region the mask does not touch renders as border.
2. ``apply_mask`` copies the authored quadrant into the top-left corner.
3. ``sample`` resolves the stochastic codes (1 -> body/empty, 2 -> body/border).
4. ``mirror`` reflects the resolved quadrant: X first, then Y reading the
    already X-mirrored rows, so the bottom-right quadrant is a reflection and
    not an independent resample.
5. ``synthesize_edges`` outlines every body cell that touches an empty cell.
    It must run after mirroring so both halves get outlines.
"""

import random
from logging import getLogger
from typing import Optional

from pixel_sprites.grid import Grid
from pixel_sprites.mask import Mask
from pixel_sprites.types import CellCode, RandomSource

logger = getLogger("pixel_sprites.resolve")

NEIGHBORS: list[tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]

BORDER = int(CellCode.BORDER)
EMPTY = int(CellCode.EMPTY)
BODY = int(CellCode.BODY)


def init_grid(mask: Mask) -> Grid:
    width, height = mask.grid_size
    return Grid(width, height)


def apply_mask(grid: Grid, mask: Mask) -> Grid:
    """Copy the mask cells into the top-left ``mask.width x mask.height`` block."""
    for y in range(mask.height):
        for x in range(mask.width):
            grid.set(x, y, mask.cells[y * mask.width + x])
    return grid


def sample(grid: Grid, rng: RandomSource) -> Grid:
    """Resolve stochastic codes in row-major order.

    ``BODY`` (1) stays body with probability 0.5, otherwise becomes empty.
    ``BODY_OR_BORDER`` (2) becomes body with probability 0.5, otherwise border.
    Borders and empties are left untouched and consume no random draws.
    """
    cells = grid.cells
    for i, value in enumerate(cells):
        if value == CellCode.BODY:
            cells[i] = BODY if rng.random() >= 0.5 else EMPTY
        elif value == CellCode.BODY_OR_BORDER:
            cells[i] = BODY if rng.random() > 0.5 else BORDER
    return grid


def mirror_x(grid: Grid) -> Grid:
    """Reflect the left half onto the right half (column x -> width-1-x)."""
    for y in range(grid.height):
        for x in range(grid.width // 2):
            grid.set(grid.width - 1 - x, y, grid.get(x, y))
    return grid


def mirror_y(grid: Grid) -> Grid:
    """Reflect the top half onto the bottom half (row y -> height-1-y)."""
    for y in range(grid.height // 2):
        for x in range(grid.width):
            grid.set(x, grid.height - 1 - y, grid.get(x, y))
    return grid


def mirror(grid: Grid, mask: Mask) -> Grid:
    if mask.mirror_x:
        grid = mirror_x(grid)
    if mask.mirror_y:
        grid = mirror_y(grid)
    return grid


def synthesize_edges(grid: Grid) -> Grid:
    """Turn every empty cell orthogonally adjacent to a body cell into a border."""
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.get(x, y) <= 0:
                continue
            for dx, dy in NEIGHBORS:
                nx, ny = x + dx, y + dy
                if grid.in_bounds(nx, ny) and grid.get(nx, ny) == EMPTY:
                    grid.set(nx, ny, BORDER)
    return grid


def resolve(mask: Mask, rng: Optional[RandomSource] = None) -> Grid:
    """Resolve ``mask`` into a finished grid.

    Args:
        mask (Mask): Validated template.
        rng (random.Random | None): Random source for the sampling phase. An
            unseeded ``random.Random`` is used when omitted.

    Returns:
        Grid: Grid whose cells are all border (-1), empty (0) or body (1).
    """
    if rng is None:
        rng = random.Random()

    grid = init_grid(mask)
    grid = apply_mask(grid, mask)
    grid = sample(grid, rng)
    grid = mirror(grid, mask)
    grid = synthesize_edges(grid)

    logger.debug(
        "Resolved %dx%d grid: %d body, %d border, %d empty",
        grid.width,
        grid.height,
        grid.count(CellCode.BODY),
        grid.count(CellCode.BORDER),
        grid.count(CellCode.EMPTY),
    )
    return grid
