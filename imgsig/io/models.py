"""Data models shared across the signature pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

Signature = List[int]


@dataclass(slots=True, frozen=True)
class Bounds:
    """Cropped sub-rectangle of a grayscale grid, in pixel coordinates."""

    lower_x: int
    upper_x: int
    lower_y: int
    upper_y: int

    @property
    def width(self) -> int:
        return self.upper_x - self.lower_x

    @property
    def height(self) -> int:
        return self.upper_y - self.lower_y
