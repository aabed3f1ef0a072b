from typing import Sequence, Tuple

from PIL import Image

from pixel_sprites.buffer import PixelBuffer
from pixel_sprites.types import RGBA
from pixel_sprites.utils.image import buffer_to_image


def sheet_size(
    buffers: Sequence[PixelBuffer], columns: int, scale: int = 1, padding: int = 0
) -> Tuple[int, int, int, int]:
    """
    Returns (cell_width, cell_height, sheet_width, sheet_height) for a sheet of
    the given buffers. Cells are sized to the largest buffer after scaling.
    """
    cell_w = max(b.width for b in buffers) * scale
    cell_h = max(b.height for b in buffers) * scale
    cols = min(columns, len(buffers))
    rows = -(-len(buffers) // columns)
    width = cols * cell_w + (cols + 1) * padding
    height = rows * cell_h + (rows + 1) * padding
    return cell_w, cell_h, width, height


def compose_sheet(
    buffers: Sequence[PixelBuffer],
    columns: int,
    scale: int = 1,
    padding: int = 0,
    background: RGBA = (0, 0, 0, 0),
) -> Image.Image:
    """
    Tile buffers left to right, top to bottom into one RGBA image.
    Each sprite is upscaled by `scale` and centered in its cell.
    """
    if len(buffers) == 0:
        raise ValueError("No sprites to compose")
    if columns < 1:
        raise ValueError(f"Columns must be at least 1, got {columns}")
    if padding < 0:
        raise ValueError(f"Padding must be non-negative, got {padding}")

    cell_w, cell_h, width, height = sheet_size(buffers, columns, scale, padding)
    sheet = Image.new("RGBA", (width, height), background)

    for idx, buffer in enumerate(buffers):
        row, col = divmod(idx, columns)
        tile = buffer_to_image(buffer, scale)
        x0 = padding + col * (cell_w + padding) + (cell_w - tile.width) // 2
        y0 = padding + row * (cell_h + padding) + (cell_h - tile.height) // 2
        sheet.alpha_composite(tile, (x0, y0))

    return sheet
