"""Shared synthetic-image helpers for the test suite."""
from __future__ import annotations

import struct
import zlib
from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def make_solid(height: int, width: int, color=(255, 0, 0, 255)) -> np.ndarray:
    """Create an RGBA image filled with a single color."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :] = color
    return pixels


def make_checkerboard(size: int = 64, block: int = 8) -> np.ndarray:
    """Create an RGBA black/white checkerboard with ``block``-sized squares."""
    ys, xs = np.mgrid[0:size, 0:size]
    white = ((xs // block) + (ys // block)) % 2 == 1
    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    pixels[..., 3] = 255
    pixels[white, :3] = 255
    return pixels


def make_noise(height: int, width: int, seed: int = 42) -> np.ndarray:
    """Create an RGBA image of random pixels."""
    rng = np.random.RandomState(seed)
    return rng.randint(0, 256, (height, width, 4), dtype=np.uint8)


def write_png(path: Path, pixels: np.ndarray) -> Path:
    Image.fromarray(pixels).save(path)
    return path


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


def write_oversized_png(path: Path, width: int = 20000, height: int = 20000) -> Path:
    """Write a PNG whose header declares a huge size but carries no real pixel data."""
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(b"\x00"))
        + _png_chunk(b"IEND", b"")
    )
    return path


@pytest.fixture
def solid_red_png(tmp_path: Path) -> Path:
    return write_png(tmp_path / "red.png", make_solid(100, 100))


@pytest.fixture
def checkerboard_png(tmp_path: Path) -> Path:
    return write_png(tmp_path / "checker.png", make_checkerboard())


@pytest.fixture
def blue_svg(tmp_path: Path) -> Path:
    path = tmp_path / "blue.svg"
    path.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="40" height="30">'
        '<rect x="0" y="0" width="40" height="30" fill="#0000ff"/>'
        "</svg>"
    )
    return path
