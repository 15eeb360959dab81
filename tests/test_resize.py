from __future__ import annotations

import numpy as np
import pytest

from pixelator.utils.resize import resize_nearest

from conftest import make_noise


def test_same_size_is_copy():
    img = make_noise(7, 5)
    out = resize_nearest(img, 7, 5)
    assert np.array_equal(out, img)
    assert out is not img


def test_downscale_picks_floor_indices():
    img = make_noise(10, 10)
    out = resize_nearest(img, 3, 3)
    # floor(i * 10 / 3) for i in 0..2
    idx = [0, 3, 6]
    assert out.shape == (3, 3, 4)
    assert np.array_equal(out, img[np.ix_(idx, idx)])


def test_upscale_repeats_source_pixels():
    img = make_noise(2, 3)
    out = resize_nearest(img, 4, 6)
    assert np.array_equal(out, np.repeat(np.repeat(img, 2, axis=0), 2, axis=1))


def test_output_values_come_from_source():
    img = make_noise(13, 17)
    out = resize_nearest(img, 5, 4)
    source_pixels = {tuple(p) for p in img.reshape(-1, 4)}
    assert all(tuple(p) in source_pixels for p in out.reshape(-1, 4))


def test_rejects_rgb_arrays():
    with pytest.raises(ValueError):
        resize_nearest(np.zeros((4, 4, 3), dtype=np.uint8), 2, 2)


def test_rejects_non_uint8():
    with pytest.raises(TypeError):
        resize_nearest(np.zeros((4, 4, 4), dtype=np.float32), 2, 2)


def test_rejects_zero_target():
    with pytest.raises(ValueError):
        resize_nearest(make_noise(4, 4), 0, 2)
