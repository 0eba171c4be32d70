"""Similarity scoring between image signatures."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..config import SIMILARITY_CUTOFF
from ..errors import LengthMismatch


def cosine_similarity(a: Sequence[int], b: Sequence[int]) -> float:
    """Return the cosine of the angle between signatures *a* and *b*.

    Both signatures must come from the same tuning parameters, so their
    lengths must match. A signature with no nonzero entries has no direction;
    any comparison involving one scores ``0.0``. Non-integer entries raise
    :class:`TypeError` rather than being truncated.
    """
    if len(a) != len(b):
        raise LengthMismatch(len(a), len(b))

    left = _as_vector(a)
    right = _as_vector(b)

    dot = int(np.dot(left, right))
    left_sq = int(np.dot(left, left))
    right_sq = int(np.dot(right, right))
    if left_sq == 0 or right_sq == 0:
        return 0.0

    return float(dot / math.sqrt(left_sq * right_sq))


def is_similar(
    a: Sequence[int], b: Sequence[int], threshold: float = SIMILARITY_CUTOFF
) -> bool:
    """Return ``True`` when *a* and *b* score at or above *threshold*."""
    return cosine_similarity(a, b) >= threshold


def _as_vector(values: Sequence[int]) -> np.ndarray:
    vector = np.asarray(values)
    if vector.size and vector.dtype.kind not in "biu":
        raise TypeError(f"Signatures must hold integers, got dtype {vector.dtype}")
    return vector.astype(np.int64)
