"""Reduction of raw RGBA buffers to 8-bit luminance grids."""

from __future__ import annotations

import numbers

import numpy as np

from ..errors import InvalidDimensions

_CHANNELS = 4


def grayscale_buffer(rgba: bytes, width: int) -> np.ndarray:
    """Return a ``(rows, width)`` uint8 grid of luminance values for *rgba*.

    Each pixel is the truncated mean of its R, G and B channels, scaled by
    ``alpha / 255``. Transparency darkens toward black; nothing is blended.
    """
    if isinstance(width, bool) or not isinstance(width, numbers.Integral) or width <= 0:
        raise InvalidDimensions(f"width must be a positive integer, got {width!r}")

    width = int(width)
    row_stride = _CHANNELS * width
    size = len(rgba)
    if size == 0:
        raise InvalidDimensions("RGBA buffer is empty")
    if size % row_stride:
        raise InvalidDimensions(
            f"RGBA buffer of {size} bytes is not a multiple of 4 * width ({row_stride})"
        )

    pixels = np.frombuffer(bytes(rgba), dtype=np.uint8).reshape(-1, width, _CHANNELS)
    channels = pixels.astype(np.uint16)
    rgb_avg = (channels[:, :, 0] + channels[:, :, 1] + channels[:, :, 2]) // 3
    alpha = pixels[:, :, 3].astype(np.float32) / np.float32(255.0)
    return (rgb_avg.astype(np.float32) * alpha).astype(np.uint8)
