"""
Minors, determinants and cofactors by recursive Laplace expansion.

determinant() expands along the first row:

    det(m) = sum_i (-1)^i * m[0][i] * det(minor(m, 1, i + 1))

with 1x1 and 2x2 base cases. There is no memoization, so an n x n
determinant costs O(n!) and allocates a fresh reduced matrix at every
level of recursion.
"""

from __future__ import annotations

import warnings

from pylinalg.core import settings
from pylinalg.core.exceptions import IndexOutOfRangeError
from pylinalg.core.types import Matrix, MatrixResult
from pylinalg.core.validation import check_matrix, check_square


def minor(m: Matrix, r: int, c: int) -> MatrixResult:
    """
    Matrix with row r and column c removed.

    Args:
        m: Matrix to reduce
        r: 1-indexed row to remove
        c: 1-indexed column to remove

    Returns:
        New (height - 1) x (width - 1) matrix

    Raises:
        InvalidMatrixError: If the matrix is ragged
        IndexOutOfRangeError: If r or c lies outside [1, height] / [1, width]
    """
    check_matrix(m)
    height = len(m)
    width = len(m[0])
    if r < 1 or c < 1 or r > height or c > width:
        raise IndexOutOfRangeError(m, r, c)

    result = [[0.0] * (width - 1) for _ in range(height - 1)]
    for i in range(height - 1):
        src_row = m[i if i < r - 1 else i + 1]
        for j in range(width - 1):
            result[i][j] = float(src_row[j if j < c - 1 else j + 1])
    return result


def _expand(m: Matrix) -> float:
    """Recursive expansion of an already validated square matrix."""
    n = len(m)
    if n == 1:
        return float(m[0][0])
    if n == 2:
        return (float(m[0][0]) * float(m[1][1])
                - float(m[0][1]) * float(m[1][0]))

    result = 0.0
    for i in range(n):
        sign = -1.0 if i % 2 != 0 else 1.0
        result += sign * float(m[0][i]) * _expand(minor(m, 1, i + 1))
    return result


def _cofactor(m: Matrix, r: int, c: int) -> float:
    """Cofactor of an already validated square matrix."""
    reduced = minor(m, r + 1, c + 1)
    det = _expand(reduced) if reduced else 1.0
    return (1.0 if (r + c) % 2 == 0 else -1.0) * det


def check_expansion(m: Matrix) -> None:
    """
    Validate a matrix for cofactor expansion and warn about its cost.

    Called once by each public entry point of the determinant family, so
    the warning points at the caller of that entry point.

    Raises:
        InvalidMatrixError: If the matrix is ragged
        NotSquareError: If the matrix is not square

    Warns:
        RuntimeWarning: If the matrix is larger than
            settings.COFACTOR_WARN_SIZE, as the expansion is factorial-time
    """
    check_square(m)
    n = len(m)
    if n > settings.COFACTOR_WARN_SIZE:
        warnings.warn(
            f"Cofactor expansion of a {n}x{n} matrix evaluates {n}! terms "
            f"and may take a very long time",
            RuntimeWarning,
            stacklevel=3,
        )


def determinant(m: Matrix) -> float:
    """
    Determinant of a square matrix by cofactor expansion along row 0.

    Raises:
        InvalidMatrixError: If the matrix is ragged
        NotSquareError: If the matrix is not square

    Warns:
        RuntimeWarning: If the matrix is larger than
            settings.COFACTOR_WARN_SIZE
    """
    check_expansion(m)
    return _expand(m)


def cofactor(m: Matrix, r: int, c: int) -> float:
    """
    Signed minor determinant (-1)^(r+c) * det(minor(m, r+1, c+1)).

    Unlike minor(), r and c are 0-indexed. The cofactor of a 1x1 matrix
    is 1.0, the determinant of its empty minor.

    Raises:
        InvalidMatrixError: If the matrix is ragged
        NotSquareError: If the matrix is not square
        IndexOutOfRangeError: If r or c lies outside the matrix
    """
    check_expansion(m)
    return _cofactor(m, r, c)
