"""Nearest-neighbor resizing utilities for NumPy arrays.

Provides integer-agnostic nearest-neighbor scaling to arbitrary output size
for crisp pixel-art operations. Source indices are computed with integer
arithmetic so that resizing never blends channel values.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def _source_indices(src: int, dst: int) -> Array:
    """Map each of ``dst`` target positions to a source index in ``[0, src)``.

    Target position ``i`` samples ``floor(i * src / dst)``.
    """
    return (np.arange(dst, dtype=np.int64) * src) // dst


def resize_nearest(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an RGBA image to (new_h, new_w) via nearest-neighbor.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 4), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image, a new array of shape (new_h, new_w, 4).
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("arr must be an RGBA image with shape (H, W, 4)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")

    H, W, _ = arr.shape
    if H == new_h and W == new_w:
        return arr.copy()

    yi = _source_indices(H, new_h)
    xi = _source_indices(W, new_w)

    out = arr[yi[:, None], xi[None, :], :]
    return np.ascontiguousarray(out, dtype=np.uint8)
