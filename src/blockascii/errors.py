from pathlib import Path


class AsciiArtError(Exception):
    """Base class for all blockascii errors."""


class DecodeFailure(AsciiArtError):
    def __init__(self, path: str | Path, reason: str = "unreadable or unsupported image"):
        self.path = Path(path)
        super().__init__(f"Cannot decode {self.path}: {reason}")


class DegenerateBlock(AsciiArtError, ValueError):
    """Raised when a block has no in-bounds pixels to average."""


class InvalidScheme(AsciiArtError, ValueError):
    def __init__(self, scheme: object, count: int):
        self.scheme = scheme
        super().__init__(f"Invalid character scheme {scheme!r}; expected one of {list(range(count))}")


class InvalidRatio(AsciiArtError, ValueError):
    def __init__(self, ratio: object, allowed: list[str]):
        self.ratio = ratio
        super().__init__(f"Invalid aspect ratio {ratio!r}; expected one of {allowed}")


class OutputWriteFailure(AsciiArtError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Cannot write {self.path}: {reason}")
