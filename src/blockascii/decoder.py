from pathlib import Path

import numpy as np
from PIL import Image

from blockascii.errors import DecodeFailure
from blockascii.pixel import RasterImage


def from_pil(image: Image.Image) -> RasterImage:
    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    return RasterImage(width=image.width, height=image.height, rgba=rgba)


def load_image(path: str | Path) -> RasterImage:
    """Decode an image file into RGBA pixels, raising DecodeFailure if it can't be read."""
    path = Path(path)
    try:
        with Image.open(path) as image:
            raster = from_pil(image)
    except FileNotFoundError as exc:
        raise DecodeFailure(path, "file not found") from exc
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise DecodeFailure(path, str(exc) or type(exc).__name__) from exc
    if raster.is_empty:
        raise DecodeFailure(path, "image has no pixels")
    return raster
