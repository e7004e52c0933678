from enum import IntEnum
from pathlib import Path

from loguru import logger

from blockascii.decoder import load_image
from blockascii.engine import RampEngine
from blockascii.errors import DecodeFailure, OutputWriteFailure


class ExitStatus(IntEnum):
    SUCCESS = 0
    DECODE_FAILURE = 1
    WRITE_FAILURE = 2


def output_path(image_path: str | Path) -> Path:
    return Path(image_path).with_suffix(".txt")


def write_text(path: Path, text: str) -> None:
    """Write text via a hidden sibling file so a failed write never leaves a partial output."""
    partial = path.with_name(f".{path.name}.partial")
    try:
        partial.write_text(text, encoding="utf-8")
        partial.replace(path)
    except OSError as exc:
        partial.unlink(missing_ok=True)
        raise OutputWriteFailure(path, exc.strerror or str(exc)) from exc


def convert_file(image_path: str | Path, engine: RampEngine) -> Path:
    """Render one image to its sibling .txt file; raises DecodeFailure or OutputWriteFailure."""
    image = load_image(image_path)
    grid = engine.render(image)
    destination = output_path(image_path)
    write_text(destination, grid.to_text())
    return destination


def process_image(image_path: str | Path, engine: RampEngine) -> ExitStatus:
    try:
        destination = convert_file(image_path, engine)
    except DecodeFailure as exc:
        logger.warning("{}", exc)
        return ExitStatus.DECODE_FAILURE
    except OutputWriteFailure as exc:
        logger.error("{}", exc)
        return ExitStatus.WRITE_FAILURE
    logger.success("Wrote {}", destination)
    return ExitStatus.SUCCESS


def process_directory(directory: str | Path, engine: RampEngine) -> int:
    """Convert every file directly inside directory, returning how many failed."""
    failures = 0
    for entry in sorted(Path(directory).iterdir()):
        if entry.is_dir():
            continue
        if process_image(entry, engine) is not ExitStatus.SUCCESS:
            failures += 1
    logger.info("Processed {}: {} failure(s)", directory, failures)
    return failures
