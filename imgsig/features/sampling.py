"""Soft-edged luminance sampling around lattice points."""

from __future__ import annotations

import logging
import math

import numpy as np

from ..errors import OutOfRange
from ..io.models import Bounds

logger = logging.getLogger(__name__)

_BOX = 3
_BOX_AREA = _BOX * _BOX


def square_edge(bounds: Bounds) -> int:
    """Return the half-width of the sampling square for *bounds*."""
    span = min(bounds.width, bounds.height)
    return int(max(2.0, math.floor(0.5 + span / 20.0)) / 2.0)


def box_sums(gray: np.ndarray) -> np.ndarray:
    """Return 3x3 neighbourhood sums; entry ``[y - 1, x - 1]`` is centred on ``(x, y)``."""
    pixels = gray.astype(np.int64)
    rows, cols = pixels.shape
    out_rows, out_cols = max(rows - 2, 0), max(cols - 2, 0)
    sums = np.zeros((out_rows, out_cols), dtype=np.int64)
    if out_rows == 0 or out_cols == 0:
        return sums

    for dy in range(_BOX):
        for dx in range(_BOX):
            sums += pixels[dy : dy + out_rows, dx : dx + out_cols]
    return sums


def grid_averages(gray: np.ndarray, points: np.ndarray, bounds: Bounds) -> np.ndarray:
    """Return the smoothed luminance byte at every lattice point.

    Each value is the mean of the 3x3 box means over the square of half-width
    :func:`square_edge` centred on the point, truncated to an integer. Box
    centres and box pixels past the image edge are clamped onto the edge, so
    points crowded against a border still sample. A grid smaller than one
    3x3 box cannot be sampled and raises :class:`OutOfRange`.
    """
    edge = square_edge(bounds)
    rows, cols = gray.shape
    side_y, side_x = points.shape[:2]
    if rows < _BOX or cols < _BOX:
        px, py = (int(value) for value in points[0, 0])
        raise OutOfRange((1, 1), (px, py))

    # entry [y, x] is centred on (x, y) for every pixel of the grid
    sums = box_sums(np.pad(gray, 1, mode="edge"))
    divisor = _BOX_AREA * (2 * edge + 1) ** 2
    offsets = np.arange(-edge, edge + 1)

    averages = np.empty((side_y, side_x), dtype=np.uint8)
    for row in range(side_y):
        for col in range(side_x):
            px, py = (int(value) for value in points[row, col])
            ys = np.clip(py + offsets, 0, rows - 1)
            xs = np.clip(px + offsets, 0, cols - 1)
            window = sums[np.ix_(ys, xs)]
            averages[row, col] = int(window.sum()) // divisor

    logger.debug("sampled %d points with square edge %d", averages.size, edge)
    return averages
