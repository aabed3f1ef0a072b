"""Preset masks.

Classic templates for the three sprite families the algorithm is known for.
Only the authored quadrant is listed; mirroring fills in the rest.
"""

from typing import Dict, List

from pixel_sprites.mask import Mask

SPACESHIP = Mask.from_rows(
    [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 1],
        [0, 0, 0, 0, 1, -1],
        [0, 0, 0, 1, 1, -1],
        [0, 0, 0, 1, 1, -1],
        [0, 0, 1, 1, 1, -1],
        [0, 1, 1, 1, 2, 2],
        [0, 1, 1, 1, 2, 2],
        [0, 1, 1, 1, 2, 2],
        [0, 1, 1, 1, 1, -1],
        [0, 0, 0, 1, 1, 1],
        [0, 0, 0, 0, 0, 0],
    ],
    mirror_x=True,
    mirror_y=False,
)

ROBOT = Mask.from_rows(
    [
        [0, 0, 0, 0],
        [0, 1, 1, 1],
        [0, 1, 2, 2],
        [0, 0, 1, 2],
        [0, 0, 0, 2],
        [1, 1, 1, 2],
        [0, 1, 1, 2],
        [0, 0, 0, 2],
        [0, 0, 0, 2],
        [0, 1, 2, 2],
        [1, 1, 0, 0],
    ],
    mirror_x=True,
    mirror_y=False,
)

DRAGON = Mask.from_rows(
    [
        [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
        [0, 0, 0, 1, 1, 2, 2, 1, 1, 0, 0, 0],
        [0, 0, 1, 1, 1, 2, 2, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 1, 1, 1, 1, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    ],
    mirror_x=False,
    mirror_y=False,
)

MASK_PRESETS: Dict[str, Mask] = {
    "spaceship": SPACESHIP,
    "robot": ROBOT,
    "dragon": DRAGON,
}


def preset_names() -> List[str]:
    return list(MASK_PRESETS.keys())


def get_mask_preset(name: str) -> Mask:
    if name not in MASK_PRESETS:
        raise ValueError(f"Unknown mask preset: {name}")
    return MASK_PRESETS[name]
