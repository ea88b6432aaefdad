"""
Matrix and vector arithmetic.

Public API:
    add_matrices(m1, m2)       - Element-wise sum
    subtract_matrices(m1, m2)  - Element-wise difference
    add_vectors(v1, v2)        - Element-wise vector sum
    subtract_vectors(v1, v2)   - Element-wise vector difference
    scale_matrix(k, m)         - Scalar multiple of a matrix
    scale_vector(k, v)         - Scalar multiple of a vector
    multiply_matrices(m1, m2)  - Matrix product
    transpose(m)               - Transpose
    trace(m)                   - Sum of the diagonal
    new_identity_matrix(n)     - n x n identity
"""

from pylinalg.arithmetic._elementwise import (
    add_matrices,
    subtract_matrices,
    add_vectors,
    subtract_vectors,
    scale_matrix,
    scale_vector,
)
from pylinalg.arithmetic._products import (
    multiply_matrices,
    transpose,
    trace,
    new_identity_matrix,
)

__all__ = [
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
]
