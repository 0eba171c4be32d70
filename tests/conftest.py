# tests/conftest.py
from pathlib import Path
import sys

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _wave_pixels(size: int = 200, invert: bool = False) -> np.ndarray:
    """Smooth RGB test card: a product of sinusoids spanning a few periods."""
    y, x = np.mgrid[0:size, 0:size].astype(np.float64)
    field = np.sin(2 * np.pi * 1.5 * x / size) * np.cos(2 * np.pi * 1.2 * y / size)
    gray = np.clip(128 + 100 * field, 0, 255).astype(np.uint8)
    if invert:
        gray = 255 - gray
    return np.repeat(gray[:, :, np.newaxis], 3, axis=2)


def _noise_pixels(size: int = 64, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(size, size, 3), dtype=np.uint8)


def _perturb(rgb: np.ndarray, amount: int = 5, seed: int = 7) -> np.ndarray:
    """Return *rgb* with every channel moved by at most *amount*."""
    rng = np.random.default_rng(seed)
    noise = rng.integers(-amount, amount + 1, size=rgb.shape)
    return np.clip(rgb.astype(np.int16) + noise, 0, 255).astype(np.uint8)


def _rgba_bytes(rgb: np.ndarray, alpha: int = 255) -> bytes:
    height, width, _ = rgb.shape
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[:, :, :3] = rgb
    rgba[:, :, 3] = alpha
    return rgba.tobytes()


@pytest.fixture
def wave_pixels():
    return _wave_pixels


@pytest.fixture
def noise_pixels():
    return _noise_pixels


@pytest.fixture
def perturb():
    return _perturb


@pytest.fixture
def rgba_bytes():
    return _rgba_bytes


@pytest.fixture
def solid_rgba():
    def make(color: tuple[int, int, int, int], width: int = 64, height: int = 64) -> bytes:
        return bytes(color) * (width * height)

    return make
