"""SVG rasterization via CairoSVG.

The SVG document is rendered at its intrinsic size (the ``width``/``height``
declared on the root element, as CairoSVG resolves them) into a PNG
buffer, which is then decoded into an RGBA NumPy array like any other
raster input.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union
from xml.etree.ElementTree import ParseError

import cairocffi
import cairosvg

from ..errors import DecodeError
from .loader import Array, decode_image


def rasterize_svg(svg_bytes: bytes) -> Array:
    """Render SVG document bytes into an RGBA NumPy array (uint8).

    Raises
    ------
    DecodeError
        If the document cannot be parsed or rendered, or renders to an
        empty image.
    """
    try:
        png_bytes = cairosvg.svg2png(bytestring=svg_bytes)
    except (ParseError, ValueError, OSError, cairocffi.CairoError) as exc:
        raise DecodeError(f"cannot rasterize SVG: {exc}") from exc
    if not png_bytes:
        raise DecodeError("SVG rendered to an empty image")
    return decode_image(png_bytes)


def load_svg(path: Union[str, Path]) -> Array:
    """Read an SVG file and rasterize it at its intrinsic size."""
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise DecodeError(f"cannot read {p}: {exc}") from exc
    return rasterize_svg(data)
