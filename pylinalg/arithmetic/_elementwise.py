"""
Element-wise matrix and vector arithmetic.

All functions validate first and return a new container; inputs are
never modified.
"""

from __future__ import annotations

from pylinalg.core.exceptions import MatrixSizeMismatchError
from pylinalg.core.types import Matrix, MatrixResult, Vector, VectorResult
from pylinalg.core.validation import check_matrix, check_vectors_match


def _check_same_size(m1: Matrix, m2: Matrix, operation: str) -> None:
    check_matrix(m1)
    check_matrix(m2)
    if len(m1) != len(m2) or len(m1[0]) != len(m2[0]):
        raise MatrixSizeMismatchError(
            m1, m2,
            f"Matrices must be the same size to {operation}: "
            f"{len(m1)}x{len(m1[0])} vs {len(m2)}x{len(m2[0])}",
        )


def add_matrices(m1: Matrix, m2: Matrix) -> MatrixResult:
    """
    Add two matrices element by element.

    Raises:
        InvalidMatrixError: If either matrix is ragged
        MatrixSizeMismatchError: If the matrices differ in size
    """
    _check_same_size(m1, m2, "add")
    return [
        [float(a) + float(b) for a, b in zip(row1, row2)]
        for row1, row2 in zip(m1, m2)
    ]


def subtract_matrices(m1: Matrix, m2: Matrix) -> MatrixResult:
    """
    Subtract m2 from m1 element by element.

    Raises:
        InvalidMatrixError: If either matrix is ragged
        MatrixSizeMismatchError: If the matrices differ in size
    """
    _check_same_size(m1, m2, "subtract")
    return [
        [float(a) - float(b) for a, b in zip(row1, row2)]
        for row1, row2 in zip(m1, m2)
    ]


def add_vectors(v1: Vector, v2: Vector) -> VectorResult:
    """Add two vectors of equal length."""
    check_vectors_match(v1, v2, "add")
    return [float(a) + float(b) for a, b in zip(v1, v2)]


def subtract_vectors(v1: Vector, v2: Vector) -> VectorResult:
    """Subtract v2 from v1; lengths must match."""
    check_vectors_match(v1, v2, "subtract")
    return [float(a) - float(b) for a, b in zip(v1, v2)]


def scale_matrix(k: float, m: Matrix) -> MatrixResult:
    """Multiply every element of a validated matrix by k."""
    check_matrix(m)
    return [[float(k) * float(x) for x in row] for row in m]


def scale_vector(k: float, v: Vector) -> VectorResult:
    return [float(k) * float(x) for x in v]
