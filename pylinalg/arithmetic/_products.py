"""
Matrix product, transpose, trace and identity construction.

The product is the textbook triple loop. No blocking, no BLAS.
"""

from __future__ import annotations

from pylinalg.core.exceptions import MatrixSizeMismatchError
from pylinalg.core.types import Matrix, MatrixResult
from pylinalg.core.validation import check_matrix, check_square


def multiply_matrices(m1: Matrix, m2: Matrix) -> MatrixResult:
    """
    Standard matrix product m1 @ m2.

    Parameters
    ----------
    m1 : Matrix
        Left operand, shape (n, k).
    m2 : Matrix
        Right operand, shape (k, p).

    Returns
    -------
    New matrix of shape (n, p) where each cell is the dot product of a
    row of m1 with a column of m2.

    Raises
    ------
    InvalidMatrixError
        If either matrix is ragged.
    MatrixSizeMismatchError
        If the column count of m1 differs from the row count of m2.
    """
    check_matrix(m1)
    check_matrix(m2)
    n_rows = len(m1)
    inner = len(m1[0])
    n_cols = len(m2[0]) if len(m2) else 0
    if inner != len(m2):
        raise MatrixSizeMismatchError(
            m1, m2,
            "Number of columns in matrix 1 must be equal to number of rows "
            f"in matrix 2: {n_rows}x{inner} vs {len(m2)}x{n_cols}",
        )

    result = [[0.0] * n_cols for _ in range(n_rows)]

    for i in range(n_rows):
        for j in range(n_cols):
            x = 0.0
            for k in range(inner):
                x += float(m1[i][k]) * float(m2[k][j])
            result[i][j] = x

    return result


def transpose(m: Matrix) -> MatrixResult:
    """Swap rows and columns: result[j][i] = m[i][j]."""
    check_matrix(m)
    height = len(m)
    width = len(m[0])
    return [[float(m[i][j]) for i in range(height)] for j in range(width)]


def trace(m: Matrix) -> float:
    """
    Sum of the diagonal of a square matrix.

    Raises:
        InvalidMatrixError: If the matrix is ragged
        NotSquareError: If the matrix is not square
    """
    check_square(m, "Matrix must be square to find the trace")
    result = 0.0
    for i in range(len(m)):
        result += float(m[i][i])
    return result


def new_identity_matrix(size: int) -> MatrixResult:
    """
    Identity matrix with 1.0 on the diagonal and 0.0 elsewhere.

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    result = [[0.0] * size for _ in range(size)]
    for i in range(size):
        result[i][i] = 1.0
    return result
