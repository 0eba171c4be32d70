"""Content-aware crop detection driven by where edges concentrate."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..config import validate_crop
from ..errors import InvalidDimensions
from ..io.models import Bounds

logger = logging.getLogger(__name__)


def crop_boundaries(gray: np.ndarray, crop: float) -> Bounds:
    """Return the bounds that trim *crop* of the edge activity from every side.

    Row activity sums absolute differences between horizontally adjacent
    pixels; column activity does the same vertically. Margins are trimmed
    until *crop* of the total activity lies outside the bounds on each side.
    """
    validate_crop(crop)
    if gray.ndim != 2 or gray.size == 0:
        raise InvalidDimensions(f"grayscale grid must be a non-empty 2-D array, got shape {gray.shape}")

    pixels = gray.astype(np.int32)
    row_activity = np.abs(np.diff(pixels, axis=1)).sum(axis=1)
    col_activity = np.abs(np.diff(pixels, axis=0)).sum(axis=0)

    lower_y, upper_y = walk_bounds(row_activity, crop)
    lower_x, upper_x = walk_bounds(col_activity, crop)

    bounds = Bounds(lower_x=lower_x, upper_x=upper_x, lower_y=lower_y, upper_y=upper_y)
    logger.debug("crop=%s bounds=%s for grid %s", crop, bounds, gray.shape)
    return bounds


def walk_bounds(activity: Sequence[int] | np.ndarray, crop: float) -> tuple[int, int]:
    """Return ``(lower, upper)`` indices after trimming *crop* of *activity* per side."""
    values = [int(value) for value in activity]
    if not values:
        raise InvalidDimensions("activity profile is empty")

    threshold = int(sum(values) * crop)
    last = len(values) - 1

    lower = 0
    running = 0
    while running < threshold and lower < last:
        running += values[lower]
        lower += 1

    upper = last
    running = 0
    while running < threshold and upper > 0:
        running += values[upper]
        upper -= 1

    if lower > upper:
        # Both walks passed the same activity peak; collapse onto it.
        lower = upper = (lower + upper) // 2
    return lower, upper
