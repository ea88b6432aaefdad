"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square3():
    """3x3 matrix with determinant 1 and an integer inverse."""
    return [[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [5.0, 6.0, 0.0]]


@pytest.fixture
def singular3():
    """3x3 matrix whose rows are linearly dependent."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]


@pytest.fixture
def random_square(rng):
    """Factory for random well-conditioned n x n matrices as lists."""
    def make(n):
        a = rng.standard_normal((n, n)) + n * np.eye(n)
        return a.tolist()
    return make
