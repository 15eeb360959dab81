"""Exception types raised by pixelator.

Every failure of a conversion is local to that call. The CLI maps these to
exit codes: argument and format errors exit with 2, pipeline errors with 1.
"""
from __future__ import annotations


class PixelatorError(Exception):
    """Base class for all pixelator errors."""


class ArgumentError(PixelatorError):
    """Bad command-line arguments (count, pixel size, missing input)."""


class UnsupportedFormat(PixelatorError):
    """Input file extension is not one we know how to decode."""


class DecodeError(PixelatorError):
    """The codec or the SVG rasterizer could not parse the input bytes."""


class InvalidBlockSize(PixelatorError, ValueError):
    """Block size is < 1 or larger than an image dimension."""


class EncodeError(PixelatorError):
    """The output image could not be encoded or written."""


__all__ = [
    "PixelatorError",
    "ArgumentError",
    "UnsupportedFormat",
    "DecodeError",
    "InvalidBlockSize",
    "EncodeError",
]
