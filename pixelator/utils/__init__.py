"""Utility functions for pixelator.

Modules:
- loader: Load/save Pillow <-> NumPy conversion utilities.
- rasterize: SVG -> NumPy rendering through CairoSVG.
- pixelate: Pixelation via nearest downscale then nearest upscale.
- resize: Nearest-neighbor resizing to arbitrary sizes.
"""
from .loader import decode_image, load_image, save_image
from .rasterize import load_svg, rasterize_svg
from .pixelate import pixelate, reduced_size
from .resize import resize_nearest

__all__ = [
    "decode_image",
    "load_image",
    "save_image",
    "load_svg",
    "rasterize_svg",
    "pixelate",
    "reduced_size",
    "resize_nearest",
]
