"""Pixelation utilities operating on NumPy arrays.

Pixelation is implemented by nearest-neighbor downscaling the image to
``floor(W / b) x floor(H / b)`` and then nearest-neighbor upscaling it back to
the original size. Each ``b x b`` region collapses to a single source pixel,
giving the classic pixel-art look with square blocks.
"""
from __future__ import annotations

import numpy as np

from ..errors import InvalidBlockSize
from .resize import resize_nearest

Array = np.ndarray


def reduced_size(height: int, width: int, block_size: int) -> tuple[int, int]:
    """Return the (height, width) of the intermediate downscaled image.

    Raises
    ------
    InvalidBlockSize
        If ``block_size`` is < 1 or exceeds either image dimension.
    """
    if block_size < 1:
        raise InvalidBlockSize(f"block size must be >= 1, got {block_size}")
    small_h = height // block_size
    small_w = width // block_size
    if small_h == 0 or small_w == 0:
        raise InvalidBlockSize(
            f"block size {block_size} is larger than the image ({width}x{height})"
        )
    return small_h, small_w


def pixelate(arr: Array, block_size: int) -> Array:
    """Pixelate an RGBA image array by a given integer block size.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 4), dtype=uint8. It is not modified.
    block_size : int
        Edge length in pixels of each square flattened to one color (>=1).

    Returns
    -------
    np.ndarray
        Pixelated image of the same shape and dtype as the input.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
    H, W, _ = arr.shape
    if H == 0 or W == 0:
        raise ValueError("arr must not be empty")

    small_h, small_w = reduced_size(H, W, block_size)

    # Resize down to pixelate
    small = resize_nearest(arr, small_h, small_w)
    # Resize back up to original dimensions
    return resize_nearest(small, H, W)
