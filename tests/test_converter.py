import numpy as np
from PIL import Image

from blockascii.converter import image_to_ascii, render_lines
from blockascii.engine import AsciiGrid, RampEngine
from blockascii.pixel import RasterImage
from blockascii.ramp import build_ramp
from blockascii.sampling import BlockSize


def test_solid_white_maps_to_last_glyph(solid_image, ramp):
    result = image_to_ascii(solid_image(2, 2), ramp, BlockSize(2, 2))
    assert result == "@"


def test_transparent_black_maps_to_space(solid_image, ramp):
    result = image_to_ascii(solid_image(2, 2, (0, 0, 0, 0)), ramp, BlockSize(2, 2))
    assert result == " "


def test_transparent_white_is_dark(solid_image, ramp):
    result = image_to_ascii(solid_image(2, 2, (255, 255, 255, 0)), ramp, BlockSize(2, 2))
    assert result == " "


def test_output_dimensions(solid_image, ramp):
    lines = list(render_lines(solid_image(4, 4), ramp, BlockSize(2, 2)))
    assert lines == ["@@", "@@"]


def test_partial_blocks_still_render(solid_image, ramp):
    lines = list(render_lines(solid_image(5, 3, (128, 128, 128, 255)), ramp, BlockSize(2, 2)))
    assert len(lines) == 2  # ceil(3 / 2)
    assert all(len(line) == 3 for line in lines)  # ceil(5 / 2)
    assert len(set("".join(lines))) == 1


def test_block_larger_than_image(solid_image, ramp):
    lines = list(render_lines(solid_image(3, 2), ramp, BlockSize(16, 8)))
    assert lines == ["@"]


def test_inverted_ramp(solid_image):
    ramp = build_ramp(0, inverted=True)
    assert image_to_ascii(solid_image(2, 2), ramp, BlockSize(2, 2)) == " "


def test_gradient_produces_varying_characters(ramp):
    rgba = np.zeros((2, 4, 4), dtype=np.uint8)
    rgba[..., 3] = 255
    rgba[:, 2:, :3] = 255  # right half white
    image = RasterImage(width=4, height=2, rgba=rgba)
    assert image_to_ascii(image, ramp, BlockSize(2, 2)) == " @"


def test_rendering_is_idempotent(ramp):
    rng = np.random.default_rng(3)
    rgba = rng.integers(0, 256, size=(23, 17, 4), dtype=np.uint8)
    image = RasterImage(width=17, height=23, rgba=rgba)
    first = image_to_ascii(image, ramp, BlockSize(4, 3))
    second = image_to_ascii(image, ramp, BlockSize(4, 3))
    assert first == second
    assert all(c in ramp.glyphs for c in first.replace("\n", ""))


def test_empty_image(ramp):
    image = RasterImage.from_bytes(0, 0, b"")
    assert image_to_ascii(image, ramp, BlockSize(2, 2)) == ""


def test_accepts_pil_image(ramp):
    img = Image.new("RGB", (4, 4), (255, 255, 255))
    assert image_to_ascii(img, ramp, BlockSize(2, 2)) == "@@\n@@"


def test_accepts_file_path(png_file, ramp):
    path = png_file(size=(4, 2))
    assert image_to_ascii(path, ramp, BlockSize(2, 2)) == "@@"


def test_engine_render(solid_image, ramp):
    grid = RampEngine(ramp, BlockSize(2, 2)).render(solid_image(4, 4))
    assert grid.lines == ["@@", "@@"]
    assert grid.to_text() == "@@\n@@\n"


def test_grid_drops_empty_lines():
    assert AsciiGrid(lines=["ab", "", "c"]).to_text() == "ab\nc\n"
    assert AsciiGrid().to_text() == ""
