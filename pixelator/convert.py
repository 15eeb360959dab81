"""Format dispatch: decode an input file, pixelate it, write the result.

SVG inputs go through CairoSVG, raster inputs through Pillow. Extensions are
matched case-sensitively against the lowercase names below.
"""
from __future__ import annotations

from pathlib import Path
from typing import Literal, Union

from .errors import UnsupportedFormat
from .utils.loader import load_image, save_image
from .utils.pixelate import pixelate
from .utils.rasterize import load_svg

PathLike = Union[str, Path]

SVG_EXTENSIONS = frozenset({"svg"})
RASTER_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp"})


def detect_format(path: PathLike) -> Literal["svg", "raster"]:
    """Classify an input path by its extension.

    Raises
    ------
    UnsupportedFormat
        For any extension other than the SVG and raster ones above.
    """
    ext = Path(path).suffix[1:]
    if ext in SVG_EXTENSIONS:
        return "svg"
    if ext in RASTER_EXTENSIONS:
        return "raster"
    supported = ", ".join(sorted(SVG_EXTENSIONS | RASTER_EXTENSIONS))
    raise UnsupportedFormat(
        f"Unsupported file format {ext!r} for {path}. Supported: {supported}."
    )


def svg_to_pixel_art(svg_path: PathLike, output_path: PathLike, pixel_size: int) -> Path:
    """Rasterize an SVG file, pixelate it and save it to ``output_path``."""
    image = load_svg(svg_path)
    pixelated = pixelate(image, pixel_size)
    out = Path(output_path)
    save_image(pixelated, out)
    return out


def raster_to_pixel_art(img_path: PathLike, output_path: PathLike, pixel_size: int) -> Path:
    """Decode a raster file, pixelate it and save it to ``output_path``."""
    image = load_image(img_path)
    pixelated = pixelate(image, pixel_size)
    out = Path(output_path)
    save_image(pixelated, out)
    return out


def convert(input_path: PathLike, output_path: PathLike, pixel_size: int) -> Path:
    """Pixelate ``input_path`` into ``output_path`` with blocks of ``pixel_size``.

    The input format is checked before anything is read, so nothing is
    written for an unsupported input. Any decode, pixelate or encode failure
    propagates as a :class:`~pixelator.errors.PixelatorError`.

    Returns
    -------
    Path
        The path the pixelated image was written to.
    """
    if detect_format(input_path) == "svg":
        return svg_to_pixel_art(input_path, output_path, pixel_size)
    return raster_to_pixel_art(input_path, output_path, pixel_size)


__all__ = [
    "SVG_EXTENSIONS",
    "RASTER_EXTENSIONS",
    "detect_format",
    "svg_to_pixel_art",
    "raster_to_pixel_art",
    "convert",
]
