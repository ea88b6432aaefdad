"""
Tolerance tiers for comparing matrices.

The library itself never uses a tolerance (inverse() checks for an
exactly zero determinant). These tiers exist for callers and for the
test suite, which compare results such as m @ inverse(m) against the
identity.
"""

from dataclasses import dataclass

import numpy as np

from pylinalg.core.exceptions import MatrixSizeMismatchError
from pylinalg.core.types import Matrix
from pylinalg.core.validation import as_array


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerances for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact double-precision arithmetic on well-conditioned inputs
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, well-conditioned',
)

# Recursive expansion on ill-conditioned inputs (cond > 1e4)
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='double precision, ill-conditioned (cond > 1e4)',
)


def allclose(m1: Matrix, m2: Matrix, tier: ToleranceTier = FP64) -> bool:
    """
    Element-wise comparison of two matrices within a tolerance tier.

    Raises:
        InvalidMatrixError: If either matrix is ragged
        MatrixSizeMismatchError: If the sizes differ
    """
    a1 = as_array(m1)
    a2 = as_array(m2)
    if a1.shape != a2.shape:
        raise MatrixSizeMismatchError(m1, m2)
    return bool(np.allclose(a1, a2, rtol=tier.rtol, atol=tier.atol))
