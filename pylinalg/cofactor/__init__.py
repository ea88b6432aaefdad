"""
Recursive determinant family.

Public API:
    minor(m, r, c)           - Remove 1-indexed row r and column c
    determinant(m)           - Laplace expansion along the first row
    cofactor(m, r, c)        - Signed minor determinant (0-indexed)
    matrix_of_cofactors(m)   - All cofactors
    matrix_of_minors(m)      - All unsigned minor determinants
    adjugate_matrix(m)       - Transposed cofactor matrix
    inverse(m)               - Adjugate / determinant, or None if singular
"""

from pylinalg.cofactor._expansion import minor, determinant, cofactor
from pylinalg.cofactor._derived import (
    matrix_of_cofactors,
    matrix_of_minors,
    adjugate_matrix,
    inverse,
)

__all__ = [
    "minor",
    "determinant",
    "cofactor",
    "matrix_of_cofactors",
    "matrix_of_minors",
    "adjugate_matrix",
    "inverse",
]
