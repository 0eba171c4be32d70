"""Tuning constants and parameter bundles for signature computation."""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from .errors import InvalidDimensions

DEFAULT_CROP: float = 0.05
DEFAULT_GRID_SIZE: int = 10
DEFAULT_SIGNATURE_LENGTH: int = 544

# Cosine similarity at or above this value marks two default signatures as a match.
SIMILARITY_CUTOFF: float = 0.6

# Neighbour differences within this many gray levels count as "same".
SAME_TOLERANCE: int = 2

MAX_CROP: float = 0.5
MIN_GRID_SIZE: int = 2


@dataclass(slots=True, frozen=True)
class SignatureParams:
    """Tuning for a signature; only signatures with equal params are comparable."""

    crop: float = DEFAULT_CROP
    grid_size: int = DEFAULT_GRID_SIZE

    def __post_init__(self) -> None:
        validate_crop(self.crop)
        validate_grid_size(self.grid_size)


def validate_crop(crop: float) -> None:
    if not 0.0 <= crop <= MAX_CROP:
        raise InvalidDimensions(f"crop must be within [0, {MAX_CROP}], got {crop!r}")


def validate_grid_size(grid_size: int) -> None:
    if isinstance(grid_size, bool) or not isinstance(grid_size, numbers.Integral):
        raise InvalidDimensions(f"grid_size must be an integer, got {grid_size!r}")
    if grid_size < MIN_GRID_SIZE:
        raise InvalidDimensions(
            f"grid_size must be at least {MIN_GRID_SIZE}, got {grid_size}"
        )


DEFAULT_PARAMS = SignatureParams()
