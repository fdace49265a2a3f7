"""
Command-line interface for pathfit.

Usage:
  pathfit -i art.svg -o fitted.svg                 # keep the art's own size
  pathfit -i art.svg -o fitted.svg -w 100 -l 50    # fit into a 100 x 50 frame
  pathfit -i art.svg -o fitted.svg -w 100 -p 3     # round coordinates to 3 places
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from pathfit.config import settings
from pathfit.errors import PathFitError
from pathfit.normalize import normalize_svg
from pathfit.svg.files import read_svg, write_svg

logger = logging.getLogger(__name__)

MAX_DIMENSION = 255


def dimension(value: str) -> int:
    """argparse type for a frame dimension in 1..255."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid dimension: {value!r}")
    if not 1 <= n <= MAX_DIMENSION:
        raise argparse.ArgumentTypeError(f"dimension must be between 1 and {MAX_DIMENSION}, got {n}")
    return n


def precision(value: str) -> int:
    """argparse type for a non-negative count of decimal places."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid precision: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"precision must not be negative, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathfit",
        description="Rescale SVG move/line paths into a fixed frame with absolute coordinates",
    )
    parser.add_argument("-i", "--input", required=True, help="Source SVG file")
    parser.add_argument("-o", "--output", required=True, help="Destination SVG file")
    parser.add_argument("-w", "--width", type=dimension, help="Target frame width (1-255)")
    parser.add_argument("-l", "--length", type=dimension, help="Target frame height (1-255)")
    parser.add_argument(
        "-p", "--precision", type=precision, default=None,
        help="Decimal places for emitted coordinates (default: full precision)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(
        logging, settings.pathfit_log_level.upper(), logging.WARNING
    )
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.debug("%s", args)

    precision = args.precision if args.precision is not None else settings.pathfit_precision

    try:
        svg_text = read_svg(args.input)
        output = normalize_svg(svg_text, args.width, args.length, precision)
        write_svg(args.output, output)
    except PathFitError as e:
        print(f"pathfit: error: {e}", file=sys.stderr)
        return e.exit_code

    logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
