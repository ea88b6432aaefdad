"""
Fixed-width text rendering of matrices and vectors.

Each value is printed as its shortest float text truncated to five
characters and right-aligned in six, e.g. ``0.3333333`` -> ``' 0.333'``.
Values whose magnitude reaches 10000 (and NaN) print as ``ovrflw``.
"""

from __future__ import annotations

from pylinalg.core.settings import FORMAT
from pylinalg.core.types import Matrix, Vector
from pylinalg.core.validation import check_matrix


def format_value(x: float) -> str:
    """Render one value to the fixed-width cell used by describe_*()."""
    x = float(x)
    if not (-FORMAT.overflow_limit < x < FORMAT.overflow_limit):
        return FORMAT.overflow_token.rjust(FORMAT.width)
    return repr(x)[:FORMAT.precision].rjust(FORMAT.width)


def _describe_row(row: Vector) -> str:
    return "[" + ",".join(format_value(x) for x in row) + "]\n"


def describe_matrix(m: Matrix) -> str:
    """
    Bracketed, comma-separated rendering with one line per row.

    Examples:
        >>> print(describe_matrix([[1, 2], [3, 4]]), end='')
        [   1.0,   2.0]
        [   3.0,   4.0]

    Raises:
        InvalidMatrixError: If the matrix is ragged
    """
    check_matrix(m)
    return "".join(_describe_row(row) for row in m)


def describe_vector(v: Vector) -> str:
    """Bracketed, comma-separated rendering on a single line."""
    return _describe_row(v)
