"""Signature pipeline: grayscale, crop, grid, sampling and quantisation."""

from __future__ import annotations

import logging

import numpy as np

from .config import DEFAULT_PARAMS, SignatureParams, validate_grid_size
from .features.crop import crop_boundaries
from .features.grayscale import grayscale_buffer
from .features.grid import grid_points
from .features.quantize import NEIGHBOUR_OFFSETS, compute_signature
from .features.sampling import grid_averages
from .io.models import Signature

logger = logging.getLogger(__name__)


def compute_default_signature(rgba: bytes, width: int) -> Signature:
    """Return the 544-value signature of an RGBA buffer *width* pixels wide."""
    return compute_signature_with(rgba, width, DEFAULT_PARAMS)


def compute_tuned_signature(
    rgba: bytes, width: int, crop: float, grid_size: int
) -> Signature:
    """Return a signature computed with custom *crop* and *grid_size*.

    Only signatures produced with identical parameters may be compared. The
    result has :func:`signature_length` ``(grid_size)`` values.
    """
    return compute_signature_with(
        rgba, width, SignatureParams(crop=crop, grid_size=grid_size)
    )


def compute_signature_with(
    rgba: bytes, width: int, params: SignatureParams = DEFAULT_PARAMS
) -> Signature:
    """Return the signature of an RGBA buffer using *params*."""
    gray = grayscale_buffer(rgba, width)
    return signature_from_gray(gray, params)


def signature_from_gray(
    gray: np.ndarray, params: SignatureParams = DEFAULT_PARAMS
) -> Signature:
    """Return the signature of an already reduced grayscale grid."""
    bounds = crop_boundaries(gray, params.crop)
    points = grid_points(bounds, params.grid_size)
    averages = grid_averages(gray, points, bounds)
    signature = compute_signature(averages)
    logger.debug(
        "signature of %d values for %dx%d image (crop=%s, grid_size=%d)",
        len(signature),
        gray.shape[1],
        gray.shape[0],
        params.crop,
        params.grid_size,
    )
    return signature


def signature_length(grid_size: int) -> int:
    """Return the number of values in a signature for *grid_size*.

    Counts the lattice neighbour pairs directly; points on the lattice edge
    contribute fewer than eight values.
    """
    validate_grid_size(grid_size)
    side = grid_size - 1
    total = 0
    for row in range(side):
        for col in range(side):
            for dx, dy in NEIGHBOUR_OFFSETS:
                if 0 <= row + dy < side and 0 <= col + dx < side:
                    total += 1
    return total
