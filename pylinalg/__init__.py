"""
PyLinalg: dense matrix and vector arithmetic for Python.

Naive reference implementations of the standard linear-algebra
operations over plain lists of floats, including the recursive
cofactor-expansion family (determinant, cofactors, adjugate, inverse).

Submodules:
    core: Types, exceptions, validation, settings, tolerances
    arithmetic: Element-wise operations, products, transpose, trace
    cofactor: Minor, determinant, cofactor, adjugate, inverse
    formatting: Fixed-width text rendering
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

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
from pylinalg.core.validation import (
    valid_matrix,
    is_square,
    get_height,
    get_width,
    get_size,
    as_array,
    as_matrix,
)
from pylinalg.arithmetic import (
    add_matrices,
    subtract_matrices,
    add_vectors,
    subtract_vectors,
    scale_matrix,
    scale_vector,
    multiply_matrices,
    transpose,
    trace,
    new_identity_matrix,
)
from pylinalg.cofactor import (
    minor,
    determinant,
    cofactor,
    matrix_of_cofactors,
    matrix_of_minors,
    adjugate_matrix,
    inverse,
)
from pylinalg.formatting import describe_matrix, describe_vector

__all__ = [
    "__version__",
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
    # Validation & sizing
    "valid_matrix",
    "is_square",
    "get_height",
    "get_width",
    "get_size",
    "as_array",
    "as_matrix",
    # Arithmetic
    "add_matrices",
    "subtract_matrices",
    "add_vectors",
    "subtract_vectors",
    "scale_matrix",
    "scale_vector",
    "multiply_matrices",
    "transpose",
    "trace",
    "new_identity_matrix",
    # Cofactor family
    "minor",
    "determinant",
    "cofactor",
    "matrix_of_cofactors",
    "matrix_of_minors",
    "adjugate_matrix",
    "inverse",
    # Formatting
    "describe_matrix",
    "describe_vector",
]
