"""
Matrices built from cofactors: cofactor matrix, matrix of minors,
adjugate and inverse.

Each function validates and checks the expansion cost once, then works
on the private helpers so the n^2 inner cofactors do not re-validate.
"""

from __future__ import annotations

from pylinalg.cofactor._expansion import (
    _cofactor,
    _expand,
    check_expansion,
    minor,
)
from pylinalg.core.types import Matrix, MatrixResult


def matrix_of_cofactors(m: Matrix) -> MatrixResult:
    """result[i][j] = cofactor(m, i, j)."""
    check_expansion(m)
    n = len(m)
    return [[_cofactor(m, i, j) for j in range(n)] for i in range(n)]


def matrix_of_minors(m: Matrix) -> MatrixResult:
    """
    Unsigned minor determinants, result[i][j] = det(minor(m, i+1, j+1)).

    Contrast with matrix_of_cofactors(), which applies the (-1)^(i+j) sign.
    """
    check_expansion(m)
    n = len(m)
    result = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            reduced = minor(m, i + 1, j + 1)
            result[i][j] = _expand(reduced) if reduced else 1.0
    return result


def adjugate_matrix(m: Matrix) -> MatrixResult:
    """
    Transpose of the cofactor matrix.

    Computed directly as result[j][i] = cofactor(m, i, j).

    Raises:
        InvalidMatrixError: If the matrix is ragged
        NotSquareError: If the matrix is not square
    """
    check_expansion(m)
    n = len(m)
    result = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            result[j][i] = _cofactor(m, i, j)
    return result


def inverse(m: Matrix) -> MatrixResult | None:
    """
    Inverse of a square matrix as adjugate / determinant.

    A singular matrix is an expected outcome, not an error: if the
    determinant is exactly 0.0 the result is None. No tolerance is
    applied, so a nearly singular matrix yields a (huge) inverse.

    Returns:
        New matrix with result[j][i] = cofactor(m, i, j) / det(m), or
        None when det(m) == 0.0

    Raises:
        InvalidMatrixError: If the matrix is ragged
        NotSquareError: If the matrix is not square
    """
    check_expansion(m)
    d = _expand(m)
    if d == 0.0:
        return None

    n = len(m)
    result = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            result[j][i] = _cofactor(m, i, j) / d
    return result
