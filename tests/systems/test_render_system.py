# tests/systems/test_render_system.py

import math
import pytest

from pixel_sprites.options import RenderOptions
from pixel_sprites.renderer.pixels import (
    choose_gradient_axis,
    hue_change_roll,
    render,
)
from pixel_sprites.types import GradientAxis
from pixel_sprites.utils.color import hsl_to_rgb
from tests.test_utils import FixedRandom, make_grid, make_rng


SAMPLE_ROWS = [
    [0, -1, -1, 0],
    [-1, 1, 1, -1],
    [-1, 1, 1, -1],
    [0, -1, -1, 0],
]


def test_gradient_axis_choice() -> None:
    assert choose_gradient_axis(FixedRandom([0.9])) == GradientAxis.VERTICAL
    assert choose_gradient_axis(FixedRandom([0.5])) == GradientAxis.HORIZONTAL
    assert choose_gradient_axis(FixedRandom([0.1])) == GradientAxis.HORIZONTAL


@pytest.mark.parametrize(
    "draws, expected",
    [
        ([0.5, 0.5, 0.5], 0.0),
        ([1.0, 1.0, 1.0], 1.0),
        ([0.0, 0.0, 0.0], 1.0),
        ([1.0, 0.0, 0.5], 0.0),
        ([1.0, 1.0, 0.5], 2 / 3),
    ],
)
def test_hue_change_roll(draws: list[float], expected: float) -> None:
    assert hue_change_roll(FixedRandom(draws)) == pytest.approx(expected)


def test_hue_change_roll_favors_small_values() -> None:
    rng = make_rng(1)
    rolls = [hue_change_roll(rng) for _ in range(5000)]
    assert all(0.0 <= r <= 1.0 for r in rolls)
    assert sum(r > 0.8 for r in rolls) < sum(r < 0.2 for r in rolls)


@pytest.mark.parametrize("seed", list(range(10)))
def test_alpha_zero_iff_empty(seed: int) -> None:
    grid = make_grid(SAMPLE_ROWS)
    buffer = render(grid, RenderOptions(), make_rng(seed))
    assert (buffer.width, buffer.height) == (4, 4)
    for y in range(4):
        for x in range(4):
            alpha = buffer.pixel(x, y)[3]
            if grid.get(x, y) == 0:
                assert alpha == 0
            else:
                assert alpha == 255


@pytest.mark.parametrize("seed", list(range(10)))
def test_monochrome_is_black_and_white(seed: int) -> None:
    grid = make_grid(SAMPLE_ROWS)
    buffer = render(grid, RenderOptions(colored=False), make_rng(seed))
    for y in range(4):
        for x in range(4):
            code = grid.get(x, y)
            if code == 1:
                assert buffer.pixel(x, y) == (255, 255, 255, 255)
            elif code == -1:
                assert buffer.pixel(x, y) == (0, 0, 0, 255)


def test_colored_pixel_follows_envelope_and_edge_darkening() -> None:
    # draws: axis 0.9 (vertical), saturation 1.0, hue 0.0,
    # then every roll/noise draw is 0.5 -> roll 0, noise contributes 0.5*n
    rng = FixedRandom([0.9, 1.0, 0.0, 0.5])
    options = RenderOptions(
        saturation=1.0,
        brightness_noise=0.0,
        edge_brightness=0.5,
        color_variations=0.2,
    )
    grid = make_grid([[1, -1], [1, -1], [1, -1], [1, -1]])
    buffer = render(grid, options, rng)

    # vertical gradient: u runs along rows, ulen = 4
    for y in range(4):
        brightness = math.sin(y / 4 * math.pi)
        r, g, b = hsl_to_rgb(0.0, 1.0, brightness)
        assert buffer.pixel(0, y) == (
            round(r * 255),
            round(g * 255),
            round(b * 255),
            255,
        )
        assert buffer.pixel(1, y) == (
            round(r * 0.5 * 255),
            round(g * 0.5 * 255),
            round(b * 0.5 * 255),
            255,
        )


def test_horizontal_gradient_runs_along_columns() -> None:
    # axis 0.1 (horizontal), saturation 0 (grey), hue irrelevant
    rng = FixedRandom([0.1, 0.0, 0.3, 0.5])
    options = RenderOptions(brightness_noise=0.0, edge_brightness=1.0)
    grid = make_grid([[1, 1, 1, 1], [1, 1, 1, 1]])
    buffer = render(grid, options, rng)
    for x in range(4):
        level = round(math.sin(x / 4 * math.pi) * 255)
        for y in range(2):
            assert buffer.pixel(x, y) == (level, level, level, 255)


def expected_body_pixel(hue: float, u: int, ulen: int) -> tuple[int, int, int, int]:
    r, g, b = hsl_to_rgb(hue, 1.0, math.sin(u / ulen * math.pi))
    return (round(r * 255), round(g * 255), round(b * 255), 255)


def test_hue_is_kept_when_roll_does_not_exceed_threshold() -> None:
    # axis 0.9 (vertical), saturation 1.0, hue 0.25, then every draw is 0.0:
    # each roll is abs(mean(-1, -1, -1)) = 1.0, which is not > 1 - 0
    rng = FixedRandom([0.9, 1.0, 0.25, 0.0])
    options = RenderOptions(color_variations=0.0, brightness_noise=0.0, saturation=1.0)
    grid = make_grid([[1, 1]] * 4)
    buffer = render(grid, options, rng)
    for y in range(1, 4):
        for x in range(2):
            assert buffer.pixel(x, y) == expected_body_pixel(0.25, y, 4)
    # 3 header draws, then 3 roll draws and 2 noise draws per line, no hue draws
    assert rng.calls == 3 + 4 * (3 + 2)


def test_hue_jumps_when_roll_exceeds_threshold_and_persists() -> None:
    # threshold is 1 - 1.0 = 0: a roll of 0 keeps the hue, a roll of 1 jumps
    draws = [
        0.9, 1.0, 0.0,  # axis (vertical), saturation, starting hue 0.0
        0.5, 0.5, 0.5, 0.5, 0.5,  # line 0: roll 0.0, two noise draws
        1.0, 1.0, 1.0, 0.5,  # line 1: roll 1.0, new hue 0.5
        # remaining draws repeat 0.5: noise, then roll 0.0 on lines 2 and 3
    ]
    rng = FixedRandom(draws)
    options = RenderOptions(color_variations=1.0, brightness_noise=0.0, saturation=1.0)
    grid = make_grid([[1, 1]] * 4)
    buffer = render(grid, options, rng)
    for y in range(1, 4):
        for x in range(2):
            assert buffer.pixel(x, y) == expected_body_pixel(0.5, y, 4)
            assert buffer.pixel(x, y) != expected_body_pixel(0.0, y, 4)
    assert rng.calls == 3 + 4 * (3 + 2) + 1


def test_same_seed_same_pixels() -> None:
    grid = make_grid(SAMPLE_ROWS)
    a = render(grid, RenderOptions(), make_rng(21))
    b = render(grid, RenderOptions(), make_rng(21))
    assert a == b


def test_render_does_not_mutate_grid() -> None:
    grid = make_grid(SAMPLE_ROWS)
    before = list(grid.cells)
    render(grid, RenderOptions(), make_rng(2))
    assert grid.cells == before
