"""RGBA pixel buffer.

The buffer is the generator's only externally visible artifact: ``width``,
``height`` and ``width * height * 4`` bytes in row-major R, G, B, A order. It
is deliberately free of any drawing surface; use ``to_image`` to hand it to
Pillow or ``to_array`` for numpy.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from pixel_sprites.types import RGBA

UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA bytes.

    Attributes:
        width: Pixels per row.
        height: Number of rows.
        pixels: ``width * height * 4`` bytes.
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel buffer of {self.width}x{self.height} needs {expected} bytes,"
                f" got {len(self.pixels)}"
            )
        object.__setattr__(self, "pixels", bytes(self.pixels))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> RGBA:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for buffer {self.width}x{self.height}"
            )
        i = (y * self.width + x) * 4
        r, g, b, a = self.pixels[i : i + 4]
        return (r, g, b, a)

    def to_array(self) -> UInt8Array:
        """Return a writable ``(height, width, 4)`` uint8 copy of the pixels."""
        return (
            np.frombuffer(self.pixels, dtype=np.uint8)
            .reshape(self.height, self.width, 4)
            .copy()
        )

    @classmethod
    def from_array(cls, arr: UInt8Array) -> "PixelBuffer":
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError(f"Expected a (height, width, 4) array, got {arr.shape}")
        height, width = arr.shape[:2]
        return cls(width, height, np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.pixels)
