"""Placement of the sampling lattice inside the cropped region."""

from __future__ import annotations

import numpy as np

from ..config import validate_grid_size
from ..io.models import Bounds


def grid_points(bounds: Bounds, grid_size: int) -> np.ndarray:
    """Return pixel coordinates for every interior lattice point.

    The result has shape ``(grid_size - 1, grid_size - 1, 2)`` and is indexed
    ``[gy - 1, gx - 1]``, each entry holding ``(px, py)``. The cropped span is
    cut into *grid_size* cells of equal integer width; spans narrower than
    *grid_size* give zero-width cells and the points collapse onto ``lower``.
    """
    validate_grid_size(grid_size)

    steps = np.arange(1, grid_size, dtype=np.int64)
    xs = bounds.lower_x + steps * (bounds.width // grid_size)
    ys = bounds.lower_y + steps * (bounds.height // grid_size)

    points = np.empty((grid_size - 1, grid_size - 1, 2), dtype=np.int64)
    points[:, :, 0] = xs[np.newaxis, :]
    points[:, :, 1] = ys[:, np.newaxis]
    return points
