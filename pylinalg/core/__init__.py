"""
Core infrastructure for PyLinalg.

This module provides the shared abstractions used by the arithmetic,
cofactor and formatting submodules.

Key components:
    types: Matrix, Vector aliases and the Size value type
    exceptions: Exception hierarchy
    validation: Validity predicate, sizing and numpy conversion
    settings: Formatting and cost-warning constants
    tolerances: Tolerance tiers for comparing results
"""

from pylinalg.core.types import Matrix, Vector, Size
from pylinalg.core.exceptions import (
    LinearAlgebraError,
    MatrixError,
    InvalidMatrixError,
    NotSquareError,
    MatrixSizeMismatchError,
    IndexOutOfRangeError,
    VectorError,
    VectorSizeMismatchError,
)

__all__ = [
    # Types
    "Matrix",
    "Vector",
    "Size",
    # Exceptions
    "LinearAlgebraError",
    "MatrixError",
    "InvalidMatrixError",
    "NotSquareError",
    "MatrixSizeMismatchError",
    "IndexOutOfRangeError",
    "VectorError",
    "VectorSizeMismatchError",
]
