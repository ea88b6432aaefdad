"""
Exception hierarchy for PyLinalg.

All exceptions inherit from LinearAlgebraError to allow catching any
library-specific error. Matrix errors carry the offending matrix (or pair
of matrices), vector errors carry the offending vectors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

A singular matrix is NOT an error: inverse() returns None for it.
"""

from __future__ import annotations

from typing import Any, Sequence


def _shape(m: Sequence[Sequence[Any]]) -> str:
    """Describe a matrix shape for messages, tolerating ragged rows."""
    if len(m) == 0:
        return "0x0"
    widths = {len(row) for row in m}
    if len(widths) == 1:
        return f"{len(m)}x{len(m[0])}"
    return f"{len(m)} rows of widths {sorted(widths)}"


class LinearAlgebraError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class MatrixError(LinearAlgebraError):
    """
    Base class for errors caused by a single matrix.

    Attributes:
        matrix: The matrix that caused the error
    """

    def __init__(self, matrix: Sequence[Sequence[float]], message: str):
        super().__init__(message)
        self.matrix = matrix


class InvalidMatrixError(MatrixError):
    """
    Matrix rows are not all the same length.

    Raised by every operation that accepts a matrix, before any
    computation proceeds.
    """

    def __init__(
        self,
        matrix: Sequence[Sequence[float]],
        message: str | None = None,
    ):
        if message is None:
            message = (
                f"Not all rows are of the same size: got {_shape(matrix)}"
            )
        super().__init__(matrix, message)


class NotSquareError(MatrixError):
    """Operation requires a square matrix but height != width."""

    def __init__(
        self,
        matrix: Sequence[Sequence[float]],
        message: str | None = None,
    ):
        if message is None:
            message = (
                f"Operation requires matrix to be square, got {_shape(matrix)}"
            )
        super().__init__(matrix, message)


class MatrixSizeMismatchError(MatrixError):
    """
    Two matrices do not have compatible sizes.

    Attributes:
        matrix: The first operand
        matrix2: The second operand
    """

    def __init__(
        self,
        matrix: Sequence[Sequence[float]],
        matrix2: Sequence[Sequence[float]],
        message: str | None = None,
    ):
        if message is None:
            message = (
                "Matrices must have compatible sizes to perform operation: "
                f"{_shape(matrix)} vs {_shape(matrix2)}"
            )
        super().__init__(matrix, message)
        self.matrix2 = matrix2

    @property
    def matrices(self) -> tuple[Sequence[Sequence[float]], Sequence[Sequence[float]]]:
        return self.matrix, self.matrix2


class IndexOutOfRangeError(MatrixError, IndexError):
    """
    Row or column to remove lies outside the matrix.

    Attributes:
        matrix: The matrix being reduced
        row: The requested 1-indexed row
        column: The requested 1-indexed column
    """

    def __init__(
        self,
        matrix: Sequence[Sequence[float]],
        row: int,
        column: int,
        message: str | None = None,
    ):
        if message is None:
            message = (
                "The row and/or column to be removed is outside of the "
                f"bounds of the matrix. Row: {row} Column: {column} "
                f"Matrix size: {_shape(matrix)}"
            )
        super().__init__(matrix, message)
        self.row = row
        self.column = column


class VectorError(LinearAlgebraError):
    """
    Base class for errors caused by a vector.

    Attributes:
        vector: The vector that caused the error
    """

    def __init__(self, vector: Sequence[float], message: str):
        super().__init__(message)
        self.vector = vector


class VectorSizeMismatchError(VectorError):
    """
    Two vectors differ in length for an element-wise operation.

    Attributes:
        vector: The first operand
        vector2: The second operand
    """

    def __init__(
        self,
        vector: Sequence[float],
        vector2: Sequence[float],
        message: str | None = None,
    ):
        if message is None:
            message = (
                "Vectors must be the same size to perform operation: "
                f"{len(vector)} vs {len(vector2)}"
            )
        super().__init__(vector, message)
        self.vector2 = vector2

    @property
    def vectors(self) -> tuple[Sequence[float], Sequence[float]]:
        return self.vector, self.vector2
