from dataclasses import dataclass
from typing import NamedTuple

from blockascii.pixel import RasterImage, luminance_array

# Points to pixels at 96 DPI
PIXELS_PER_POINT_NUM = 4
PIXELS_PER_POINT_DEN = 3


class BlockSize(NamedTuple):
    rows: int
    cols: int


@dataclass(frozen=True)
class PixelBlock:
    pixel_count: int = 0
    luminance_sum: float = 0.0

    @property
    def mean(self) -> float:
        return self.luminance_sum / self.pixel_count


def block_size(font_points: int, ratio: tuple[int, int]) -> BlockSize:
    """Pixel block covered by one character of the given font size and width:height ratio."""
    if font_points <= 0:
        raise ValueError(f"Font size must be positive, got {font_points}")
    num, den = ratio
    rows = -(-font_points * PIXELS_PER_POINT_NUM // PIXELS_PER_POINT_DEN)
    cols = num * rows // den
    if cols <= 0:
        raise ValueError(f"Ratio {num}:{den} gives an empty block at {font_points}pt")
    return BlockSize(rows, cols)


def create_block(image: RasterImage, size: BlockSize, x: int, y: int) -> PixelBlock:
    """Sum luminance over the block at (x, y), skipping positions past the image edge."""
    rows, cols = size
    x0 = max(0, x)
    x1 = min(image.width, x + cols)
    y0 = max(0, y)
    y1 = min(image.height, y + rows)
    if x0 >= x1 or y0 >= y1:
        return PixelBlock()
    region = image.rgba[y0:y1, x0:x1]
    return PixelBlock(
        pixel_count=(y1 - y0) * (x1 - x0),
        luminance_sum=float(luminance_array(region).sum()),
    )
