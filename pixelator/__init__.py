"""pixelator: turn SVG and raster images into pixel art.

Public API re-exported from the submodules.
"""
from __future__ import annotations

from .convert import convert, detect_format, raster_to_pixel_art, svg_to_pixel_art
from .errors import (
    ArgumentError,
    DecodeError,
    EncodeError,
    InvalidBlockSize,
    PixelatorError,
    UnsupportedFormat,
)
from .utils.loader import decode_image, load_image, save_image
from .utils.pixelate import pixelate
from .utils.rasterize import load_svg, rasterize_svg
from .utils.resize import resize_nearest

__version__ = "0.1.0"

__all__ = [
    "convert",
    "detect_format",
    "raster_to_pixel_art",
    "svg_to_pixel_art",
    "ArgumentError",
    "DecodeError",
    "EncodeError",
    "InvalidBlockSize",
    "PixelatorError",
    "UnsupportedFormat",
    "decode_image",
    "load_image",
    "save_image",
    "pixelate",
    "load_svg",
    "rasterize_svg",
    "resize_nearest",
]
