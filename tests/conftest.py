import numpy as np
import pytest
from PIL import Image

from blockascii.pixel import RasterImage
from blockascii.ramp import build_ramp


def _solid(width, height, rgba=(255, 255, 255, 255)):
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[...] = rgba
    return RasterImage(width=width, height=height, rgba=arr)


@pytest.fixture
def solid_image():
    """Factory for single-colour RasterImages."""
    return _solid


@pytest.fixture
def ramp():
    return build_ramp(0)


@pytest.fixture
def png_file(tmp_path):
    """Factory writing a solid RGBA PNG into tmp_path and returning its path."""

    def make(name="image.png", size=(4, 4), colour=(255, 255, 255, 255), directory=None):
        path = (directory or tmp_path) / name
        Image.new("RGBA", size, colour).save(path)
        return path

    return make


@pytest.fixture
def corrupt_png(tmp_path):
    """Factory writing a PNG whose IDAT length is cut short, so the chunk stream is misaligned."""

    def make(name="corrupt.png", directory=None):
        path = (directory or tmp_path) / name
        Image.new("RGBA", (16, 16)).save(path)
        data = bytearray(path.read_bytes())
        length_at = data.index(b"IDAT") - 4
        data[length_at : length_at + 4] = (1).to_bytes(4, "big")
        path.write_bytes(bytes(data))
        return path

    return make
