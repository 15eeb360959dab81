"""Image loading and saving utilities using Pillow, with NumPy arrays.

All processing in this project should occur on NumPy arrays. These helpers
only convert between Pillow images and NumPy `uint8` RGBA arrays for IO.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..errors import DecodeError, EncodeError


Array = np.ndarray

# Pillow formats that cannot store an alpha channel.
_NO_ALPHA_FORMATS = {"JPEG"}


def decode_image(data: bytes) -> Array:
    """Decode encoded image bytes into an RGBA NumPy array (uint8).

    Raises
    ------
    DecodeError
        If Pillow cannot identify or decode the bytes.
    """
    try:
        with Image.open(io.BytesIO(data)) as im:
            im = im.convert("RGBA")
            arr = np.array(im, dtype=np.uint8)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"cannot decode image: {exc}") from exc
    if arr.ndim != 3 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise DecodeError("decoded image is empty")
    return arr


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an RGBA NumPy array (uint8).

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 4), dtype=uint8, in RGBA order.
    """
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise DecodeError(f"cannot read {p}: {exc}") from exc
    return decode_image(data)


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGBA NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 4), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.

    Raises
    ------
    EncodeError
        If the extension is unknown to Pillow or the file cannot be written.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must have shape (H, W, 4)")

    p = Path(path)
    fmt = Image.registered_extensions().get(p.suffix.lower())
    if fmt is None:
        raise EncodeError(f"unknown output format for {p}")

    im = Image.fromarray(arr)
    if fmt in _NO_ALPHA_FORMATS:
        im = im.convert("RGB")
    try:
        im.save(p, format=fmt)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodeError(f"cannot write {p}: {exc}") from exc
