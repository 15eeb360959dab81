"""Command-line entry point for pixelator.

This tool loads an SVG or raster image, pixelates it by nearest-neighbor
downscaling and upscaling with a given block size, and saves the result.

All processing occurs on NumPy arrays; CairoSVG and Pillow are used only
for loading and saving.

Usage example:
    python -m pixelator input.svg output.png 8
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .convert import convert, detect_format
from .errors import ArgumentError, PixelatorError, UnsupportedFormat


def positive_int(text: str) -> int:
    """argparse type for the pixel size: an integer >= 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"pixel size must be an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"pixel size must be >= 1, got {value}")
    return value


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Wrong argument counts and unparsable pixel sizes print the usage line to
    stderr and exit with status 2.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="pixelator",
        description="Turn an SVG or PNG image into pixel art.",
    )
    parser.add_argument("input", help="Path to input image (.svg, .png, .jpg, .gif, .webp)")
    parser.add_argument("output", help="Path to output image; format inferred from its extension")
    parser.add_argument(
        "pixel_size",
        type=positive_int,
        help="Edge length in pixels of each flattened block (>=1)",
    )
    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values before any file is read or written.

    Raises
    ------
    UnsupportedFormat
        If the input extension is not recognized.
    ArgumentError
        If the input file does not exist.
    """
    detect_format(ns.input)
    if not Path(ns.input).is_file():
        raise ArgumentError(f"Input file not found: {ns.input}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code: 0 on success, 2 for argument or format errors,
        1 when decoding, pixelating or saving fails.
    """
    args = parse_args(argv)
    try:
        validate_args(args)
    except (ArgumentError, UnsupportedFormat) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        out = convert(args.input, args.output, args.pixel_size)
    except PixelatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Pixelated image saved at {out}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
