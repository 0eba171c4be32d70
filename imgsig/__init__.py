"""Perceptual image signatures for near-duplicate detection."""

from .config import (
    DEFAULT_CROP,
    DEFAULT_GRID_SIZE,
    DEFAULT_PARAMS,
    DEFAULT_SIGNATURE_LENGTH,
    SIMILARITY_CUTOFF,
    SignatureParams,
)
from .errors import InvalidDimensions, LengthMismatch, OutOfRange, SignatureError
from .extract.normalize import image_signature, image_to_rgba
from .group.similarity import cosine_similarity, is_similar
from .signature import (
    compute_default_signature,
    compute_signature_with,
    compute_tuned_signature,
    signature_length,
)

__all__ = [
    "DEFAULT_CROP",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_PARAMS",
    "DEFAULT_SIGNATURE_LENGTH",
    "SIMILARITY_CUTOFF",
    "InvalidDimensions",
    "LengthMismatch",
    "OutOfRange",
    "SignatureError",
    "SignatureParams",
    "compute_default_signature",
    "compute_signature_with",
    "compute_tuned_signature",
    "cosine_similarity",
    "image_signature",
    "image_to_rgba",
    "is_similar",
    "signature_length",
]
