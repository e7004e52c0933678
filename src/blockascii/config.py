from dataclasses import dataclass

from blockascii.engine import RampEngine
from blockascii.errors import InvalidRatio
from blockascii.ramp import Ramp, build_ramp
from blockascii.sampling import BlockSize, block_size

# Character cell width:height ratios of common monospace fonts
RATIOS = {"1:2": (1, 2), "3:5": (3, 5)}


@dataclass(frozen=True)
class RenderConfig:
    font_size: int
    ratio: tuple[int, int] = RATIOS["1:2"]
    scheme: int = 0
    inverted: bool = False

    def __post_init__(self):
        if isinstance(self.font_size, bool) or not isinstance(self.font_size, int) or self.font_size <= 0:
            raise ValueError(f"Font size must be a positive integer, got {self.font_size!r}")
        if tuple(self.ratio) not in RATIOS.values():
            raise InvalidRatio(self.ratio, list(RATIOS))
        # Validates the scheme
        build_ramp(self.scheme, self.inverted)

    @staticmethod
    def parse_ratio(text: str) -> tuple[int, int]:
        try:
            return RATIOS[text.strip()]
        except KeyError:
            raise InvalidRatio(text, list(RATIOS)) from None

    @property
    def block_size(self) -> BlockSize:
        return block_size(self.font_size, self.ratio)

    def ramp(self) -> Ramp:
        return build_ramp(self.scheme, self.inverted)

    def engine(self) -> RampEngine:
        return RampEngine(self.ramp(), self.block_size)
