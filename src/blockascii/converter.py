from collections.abc import Iterator
from pathlib import Path

from loguru import logger
from PIL import Image

from blockascii.decoder import from_pil, load_image
from blockascii.pixel import RasterImage
from blockascii.ramp import Ramp
from blockascii.sampling import BlockSize, create_block


def render_lines(image: RasterImage, ramp: Ramp, size: BlockSize) -> Iterator[str]:
    """Yield one line of glyphs per row of blocks, walking block origins in row-major order."""
    rows, cols = size
    for y in range(0, image.height, rows):
        line = []
        for x in range(0, image.width, cols):
            block = create_block(image, size, x, y)
            if block.pixel_count == 0:
                logger.debug("Skipping empty block at ({}, {})", x, y)
                continue
            line.append(ramp.quantize(block))
        if line:
            yield "".join(line)


def image_to_ascii(
    image: RasterImage | Image.Image | str | Path,
    ramp: Ramp,
    size: BlockSize,
) -> str:
    if isinstance(image, Image.Image):
        image = from_pil(image)
    elif not isinstance(image, RasterImage):
        image = load_image(image)

    if image.is_empty:
        return ""

    return "\n".join(render_lines(image, ramp, size))
