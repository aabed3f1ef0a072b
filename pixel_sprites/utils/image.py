import numpy as np
from PIL import Image

from pixel_sprites.buffer import PixelBuffer, UInt8Array


def resize(buffer: PixelBuffer, scale: int) -> PixelBuffer:
    """
    Nearest-neighbor integer upscale. Destination pixel (x, y) copies source
    pixel (x // scale, y // scale), so every source pixel becomes a
    scale x scale block.
    """
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
        raise ValueError(f"Scale must be a positive int, got {scale!r}")
    if scale == 1:
        return buffer

    arr: UInt8Array = buffer.to_array()
    scaled: UInt8Array = np.repeat(np.repeat(arr, scale, axis=0), scale, axis=1)
    return PixelBuffer.from_array(scaled)


def buffer_to_image(buffer: PixelBuffer, scale: int = 1) -> Image.Image:
    return resize(buffer, scale).to_image()


def image_to_buffer(image: Image.Image) -> PixelBuffer:
    """
    Wrap any Pillow image as an RGBA pixel buffer (converting the mode if needed).
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    width, height = image.size
    return PixelBuffer(width, height, image.tobytes())
