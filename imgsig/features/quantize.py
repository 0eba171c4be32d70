"""Neighbour comparison and adaptive quantisation into the final signature.

Every lattice point is compared with up to eight neighbours. Differences
within :data:`~imgsig.config.SAME_TOLERANCE` count as "same"; the remaining
ones are split into darker and lighter groups whose medians decide between the
"much" and plain levels, so both levels of each group are equally populated.
Neighbours outside the lattice are left out rather than padded with zeros,
which keeps them out of the medians as well.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from ..config import SAME_TOLERANCE
from ..io.models import Signature

logger = logging.getLogger(__name__)

# (dx, dy) in left-to-right, top-to-bottom order.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

RawDifferences = List[List[int]]


def compute_signature(averages: np.ndarray) -> Signature:
    """Return the quantised signature for a ``[gy - 1, gx - 1]`` average map."""
    raw = raw_differences(averages)
    dark_threshold, light_threshold = thresholds(raw)
    logger.debug(
        "thresholds dark=%d light=%d over %d points",
        dark_threshold,
        light_threshold,
        len(raw),
    )

    signature: Signature = []
    for diffs in raw:
        for diff in diffs:
            if diff > 0:
                signature.append(_collapse(diff, light_threshold))
            elif diff < 0:
                signature.append(_collapse(diff, dark_threshold))
            else:
                signature.append(0)
    return signature


def raw_differences(averages: np.ndarray) -> RawDifferences:
    """Return per-point signed neighbour differences, row-major over the lattice."""
    side_y, side_x = averages.shape
    raw: RawDifferences = []
    for row in range(side_y):
        for col in range(side_x):
            own = int(averages[row, col])
            diffs = []
            for dx, dy in NEIGHBOUR_OFFSETS:
                other_row, other_col = row + dy, col + dx
                if 0 <= other_row < side_y and 0 <= other_col < side_x:
                    diffs.append(_difference(own, int(averages[other_row, other_col])))
            raw.append(diffs)
    return raw


def thresholds(raw: RawDifferences) -> tuple[int, int]:
    """Return ``(dark, light)`` medians of the negative and positive differences."""
    nonzero = [diff for diffs in raw for diff in diffs if diff]
    dark = [diff for diff in nonzero if diff < 0]
    light = [diff for diff in nonzero if diff > 0]
    return median(dark), median(light)


def median(values: Sequence[int]) -> int:
    """Return the median of *values*, truncating toward zero; ``0`` when empty."""
    ordered = sorted(values)
    count = len(ordered)
    if count == 0:
        return 0
    middle = count // 2
    if count % 2:
        return ordered[middle]
    return int((ordered[middle - 1] + ordered[middle]) / 2)


def _difference(own: int, other: int) -> int:
    diff = own - other
    return 0 if abs(diff) <= SAME_TOLERANCE else diff


def _collapse(diff: int, threshold: int) -> int:
    level = 2 if abs(diff) >= abs(threshold) else 1
    return level if diff > 0 else -level
