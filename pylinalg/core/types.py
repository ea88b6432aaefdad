"""
Common types for PyLinalg.

Matrices and vectors are plain Python sequences; results are always
freshly allocated lists of floats.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]

# Types produced by every operation
MatrixResult = list[list[float]]
VectorResult = list[float]


@dataclass(frozen=True)
class Size:
    """Dimensions of a matrix as (height, width)."""
    height: int
    width: int

    @property
    def is_square(self) -> bool:
        return self.height == self.width

    def __iter__(self):
        yield self.height
        yield self.width
