from dataclasses import dataclass, field

from blockascii.converter import render_lines
from blockascii.pixel import RasterImage
from blockascii.ramp import Ramp
from blockascii.sampling import BlockSize


@dataclass
class AsciiGrid:
    lines: list[str] = field(default_factory=list)  # one string per row of blocks

    def to_text(self) -> str:
        """Non-empty lines, each newline-terminated, ready to write to disk."""
        return "".join(f"{line}\n" for line in self.lines if line)


class RampEngine:
    """Rendering engine that maps each pixel block to a glyph by mean luminance."""

    def __init__(self, ramp: Ramp, size: BlockSize):
        self.ramp = ramp
        self.size = size

    def render(self, image: RasterImage) -> AsciiGrid:
        return AsciiGrid(lines=list(render_lines(image, self.ramp, self.size)))
