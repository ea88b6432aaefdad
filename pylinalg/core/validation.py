"""
Input validation and sizing utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. Every public
operation validates its inputs before computing anything, and raises with
the offending data attached rather than silently correcting it.

Design principles:
    - valid_matrix() is a predicate; check_*() functions raise
    - No matrix carries validity state, it is checked on demand
    - Each function validates ONE thing
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    InvalidMatrixError,
    NotSquareError,
    VectorSizeMismatchError,
)
from pylinalg.core.types import Matrix, MatrixResult, Size, Vector


def valid_matrix(m: Matrix) -> bool:
    """
    Check that every row has the same length as the first row.

    A matrix with no rows is vacuously valid, although its width is
    undefined.
    """
    if len(m) == 0:
        return True
    width = len(m[0])
    for row in m[1:]:
        if len(row) != width:
            return False
    return True


def check_matrix(m: Matrix) -> None:
    """
    Verify a matrix is rectangular.

    Raises:
        InvalidMatrixError: If rows differ in length
    """
    if not valid_matrix(m):
        raise InvalidMatrixError(m)


def get_height(m: Matrix) -> int:
    """Number of rows of a validated matrix."""
    check_matrix(m)
    return len(m)


def get_width(m: Matrix) -> int:
    """Number of columns of a validated matrix."""
    check_matrix(m)
    return len(m[0])


def get_size(m: Matrix) -> Size:
    """
    Dimensions of a validated matrix.

    Returns:
        Size(height, width)

    Raises:
        InvalidMatrixError: If rows differ in length
    """
    check_matrix(m)
    return Size(height=len(m), width=len(m[0]))


def is_square(m: Matrix) -> bool:
    """
    Check whether the number of rows equals the number of columns.

    Raises:
        InvalidMatrixError: If rows differ in length
    """
    return get_height(m) == get_width(m)


def check_square(m: Matrix, message: str | None = None) -> None:
    """
    Verify a matrix is square.

    Raises:
        InvalidMatrixError: If rows differ in length
        NotSquareError: If height != width
    """
    if not is_square(m):
        raise NotSquareError(m, message)


def check_vectors_match(v1: Vector, v2: Vector, operation: str) -> None:
    """
    Verify two vectors have the same length.

    Args:
        v1, v2: Vectors to compare
        operation: Verb used in the error message ("add", "subtract")

    Raises:
        VectorSizeMismatchError: If lengths differ
    """
    if len(v1) != len(v2):
        raise VectorSizeMismatchError(
            v1, v2,
            f"Vectors must be the same size to {operation}: "
            f"{len(v1)} vs {len(v2)}",
        )


def as_matrix(array: ArrayLike) -> MatrixResult:
    """
    Convert a 2D array-like into a fresh list-of-lists matrix of floats.

    Args:
        array: ndarray, nested list or nested tuple

    Returns:
        New matrix with every element converted to float

    Raises:
        InvalidMatrixError: If the input is not 2D, is ragged, or holds
            non-numeric values
    """
    if isinstance(array, np.ndarray) and array.ndim != 2:
        raise InvalidMatrixError(
            array, f"expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    try:
        flat_rows = any(np.ndim(row) != 1 for row in array)
    except ValueError as e:
        raise InvalidMatrixError(array, f"non-numeric matrix element: {e}") from e
    if flat_rows:
        raise InvalidMatrixError(array, "expected 2D array, rows must be sequences")
    check_matrix(array)
    try:
        return [[float(x) for x in row] for row in array]
    except (ValueError, TypeError) as e:
        raise InvalidMatrixError(array, f"non-numeric matrix element: {e}") from e


def as_array(m: Matrix) -> NDArray[np.floating[Any]]:
    """
    Copy a validated matrix into a float64 numpy array.

    Raises:
        InvalidMatrixError: If rows differ in length or hold non-numeric values
    """
    return np.array(as_matrix(m), dtype=np.float64)
