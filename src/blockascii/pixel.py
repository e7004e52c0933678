from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

# ITU-R BT.601 luma weights
RED_WEIGHT = 0.299
GREEN_WEIGHT = 0.587
BLUE_WEIGHT = 0.114


@dataclass(frozen=True)
class Pixel:
    r: int
    g: int
    b: int
    a: int

    def luminance(self) -> float:
        """Perceptual brightness in [0, 1], weighted by alpha so transparent pixels are dark."""
        rgb = min(1.0, (RED_WEIGHT * self.r + GREEN_WEIGHT * self.g + BLUE_WEIGHT * self.b) / 255.0)
        return rgb * (self.a / 255.0)


def luminance_array(rgba: np.ndarray) -> np.ndarray:
    """Vectorised Pixel.luminance over an array whose last axis is (r, g, b, a)."""
    arr = np.asarray(rgba, dtype=np.float64)
    rgb = arr[..., 0] * RED_WEIGHT + arr[..., 1] * GREEN_WEIGHT + arr[..., 2] * BLUE_WEIGHT
    # Weights sum to 1 only up to float rounding
    return np.minimum(rgb / 255.0, 1.0) * (arr[..., 3] / 255.0)


@dataclass(frozen=True, eq=False)
class RasterImage:
    width: int
    height: int
    rgba: np.ndarray  # (height, width, 4) uint8

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {self.width}x{self.height}")
        if self.rgba.shape != (self.height, self.width, 4):
            raise ValueError(f"Pixel array shape {self.rgba.shape} does not match {self.width}x{self.height} RGBA")

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes | Sequence[int]) -> "RasterImage":
        """Build an image from row-major R,G,B,A bytes, as produced by a decoder."""
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(f"Expected {expected} bytes for a {width}x{height} RGBA image, got {len(data)}")
        rgba = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4)
        return cls(width=width, height=height, rgba=rgba)

    @property
    def is_empty(self) -> bool:
        return self.width * self.height == 0

    @property
    def pixels(self) -> list[Pixel]:
        return [Pixel(*(int(v) for v in px)) for px in self.rgba.reshape(-1, 4)]

    def pixel(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return Pixel(*(int(v) for v in self.rgba[y, x]))
