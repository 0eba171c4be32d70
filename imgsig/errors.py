"""Exceptions raised by the signature pipeline."""

from __future__ import annotations


class SignatureError(ValueError):
    """Base class for every precondition failure in the pipeline."""


class InvalidDimensions(SignatureError):
    """Raised when a buffer, width or tuning parameter is out of range."""


class LengthMismatch(SignatureError):
    """Raised when two signatures of different lengths are compared."""

    def __init__(self, left_length: int, right_length: int) -> None:
        super().__init__(
            f"Cannot compare signatures of length {left_length} and {right_length}"
        )
        self.left_length = left_length
        self.right_length = right_length


class OutOfRange(SignatureError):
    """Raised when the grayscale grid is too small to hold a sampling box."""

    def __init__(self, grid_coord: tuple[int, int], pixel: tuple[int, int]) -> None:
        gx, gy = grid_coord
        px, py = pixel
        super().__init__(
            f"Sampling window for grid point ({gx}, {gy}) at pixel ({px}, {py}) "
            "extends past the image edge"
        )
        self.grid_coord = grid_coord
        self.pixel = pixel
