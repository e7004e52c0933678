from bisect import bisect_right
from dataclasses import dataclass

from blockascii.charsets import SCHEMES
from blockascii.errors import DegenerateBlock, InvalidScheme
from blockascii.sampling import PixelBlock


@dataclass(frozen=True)
class Ramp:
    """Ordered (threshold, glyph) table mapping mean luminance to a character.

    Thresholds are evenly spaced over (0, 1] and strictly increasing; glyph i
    covers luminance values in [threshold[i-1], threshold[i]).
    """

    thresholds: tuple[float, ...]
    glyphs: str

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError("A ramp needs at least one glyph")
        if len(self.thresholds) != len(self.glyphs):
            raise ValueError(f"{len(self.thresholds)} thresholds for {len(self.glyphs)} glyphs")
        if any(a >= b for a, b in zip(self.thresholds, self.thresholds[1:])):
            raise ValueError("Ramp thresholds must be strictly increasing")

    @classmethod
    def from_glyphs(cls, glyphs: str) -> "Ramp":
        n = len(glyphs)
        return cls(thresholds=tuple((i + 1) / n for i in range(n)), glyphs=glyphs)

    def inverted(self) -> "Ramp":
        return Ramp.from_glyphs(self.glyphs[::-1])

    def lookup(self, mean: float) -> str:
        # Upper bound: first threshold strictly greater than mean
        index = bisect_right(self.thresholds, mean)
        return self.glyphs[min(index, len(self.glyphs) - 1)]

    def quantize(self, block: PixelBlock) -> str:
        if block.pixel_count == 0:
            raise DegenerateBlock("Cannot quantize a block with no pixels")
        return self.lookup(block.mean)


def build_ramp(scheme: int = 0, inverted: bool = False) -> Ramp:
    """Build the ramp for a built-in character scheme, optionally inverted."""
    if isinstance(scheme, bool) or not isinstance(scheme, int) or not 0 <= scheme < len(SCHEMES):
        raise InvalidScheme(scheme, len(SCHEMES))
    ramp = Ramp.from_glyphs(SCHEMES[scheme])
    return ramp.inverted() if inverted else ramp
