"""Shared test fixtures."""

from __future__ import annotations

from io import BytesIO

import numpy as np
import pytest
from PIL import Image


def make_grid(height: int, width: int, value: int = 0, channels: int = 3) -> np.ndarray:
    """Uniform uint8 pixel grid."""
    return np.full((height, width, channels), value, dtype=np.uint8)


def encode_png(grid: np.ndarray) -> bytes:
    pixels = grid[:, :, 0] if grid.shape[2] == 1 else grid
    buffer = BytesIO()
    Image.fromarray(pixels).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def black_grid() -> np.ndarray:
    return make_grid(60, 100, value=0)


@pytest.fixture
def white_grid() -> np.ndarray:
    return make_grid(60, 100, value=255)


@pytest.fixture
def noisy_grid() -> np.ndarray:
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(90, 120, 3), dtype=np.uint8)


@pytest.fixture
def png_file(tmp_path):
    """A dark PNG image with a white stripe, written to disk."""
    grid = make_grid(80, 120, value=20)
    grid[30:50, :, :] = 255
    path = tmp_path / "input.png"
    path.write_bytes(encode_png(grid))
    return path
