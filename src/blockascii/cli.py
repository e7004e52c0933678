import argparse
import sys
from pathlib import Path

from loguru import logger

from blockascii.charsets import SCHEMES
from blockascii.config import RATIOS, RenderConfig
from blockascii.driver import process_directory, process_image


def configure_logging(verbose: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _prompt(label: str, default: str | None = None) -> str:
    answer = input(f"{label}: ").strip()
    if not answer and default is None:
        raise ValueError(f"{label} is required")
    return answer or default


def _parse_int(text: str, label: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{label} must be an integer, got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render an image, or every image in a directory, as ASCII art in a sibling .txt file. "
        "Options left out are asked for interactively."
    )
    parser.add_argument("path", nargs="?", default=None, help="Image file or directory of images")
    parser.add_argument("-f", "--font-size", type=int, default=None, help="Font size in points")
    parser.add_argument("-r", "--ratio", default=None, help=f"Character width:height ratio ({' or '.join(RATIOS)})")
    parser.add_argument(
        "-s", "--scheme", type=int, default=None, help=f"Character scheme (0-{len(SCHEMES) - 1}, default: 0)"
    )
    parser.add_argument(
        "-i",
        "--invert",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Swap the ramp so bright areas get sparse characters",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def collect_config(args: argparse.Namespace) -> tuple[Path, RenderConfig]:
    """Fill in any missing arguments from the interactive prompt and validate them."""
    path = args.path if args.path is not None else _prompt("Path")

    font_size = args.font_size
    if font_size is None:
        font_size = _parse_int(_prompt("Font Size (Points)"), "Font size")

    ratio = args.ratio if args.ratio is not None else _prompt(f"Ratio ({' or '.join(RATIOS)})", "1:2")

    inverted = args.invert
    if inverted is None:
        inverted = _prompt("Inverted (y/n)", "n").lower().startswith("y")

    scheme = args.scheme
    if scheme is None:
        scheme = _parse_int(_prompt(f"Character Scheme (Default = 0; 0-{len(SCHEMES) - 1})", "0"), "Scheme")

    config = RenderConfig(
        font_size=font_size,
        ratio=RenderConfig.parse_ratio(ratio),
        scheme=scheme,
        inverted=inverted,
    )
    return Path(path), config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        path, config = collect_config(args)
    except (ValueError, EOFError) as exc:
        print(f"Invalid input: {str(exc) or 'no input'}", file=sys.stderr)
        return 2

    logger.debug("Block size {} for {}", config.block_size, config)
    engine = config.engine()

    if path.is_dir():
        failures = process_directory(path, engine)
        return 1 if failures else 0
    return int(process_image(path, engine))


if __name__ == "__main__":
    sys.exit(main())
