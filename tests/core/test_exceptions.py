"""
Tests for PyLinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via LinearAlgebraError)
    - Diagnostic payloads (offending matrices / vectors, indices)
    - Default and overridden messages
"""

import pytest

from pylinalg.core.exceptions import (
    IndexOutOfRangeError,
    InvalidMatrixError,
    LinearAlgebraError,
    MatrixError,
    MatrixSizeMismatchError,
    NotSquareError,
    VectorError,
    VectorSizeMismatchError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via LinearAlgebraError."""

    def test_invalid_matrix_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise InvalidMatrixError([[1.0], [1.0, 2.0]])

    def test_not_square_is_linear_algebra_error(self):
        with pytest.raises(LinearAlgebraError):
            raise NotSquareError([[1.0, 2.0]])

    def test_size_mismatch_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise MatrixSizeMismatchError([[1.0]], [[1.0, 2.0]])

    def test_index_out_of_range_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError([[1.0]], 2, 1)

    def test_index_out_of_range_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise IndexOutOfRangeError([[1.0]], 0, 1)

    def test_vector_mismatch_is_vector_error(self):
        with pytest.raises(VectorError):
            raise VectorSizeMismatchError([1.0], [1.0, 2.0])

    def test_vector_error_is_not_matrix_error(self):
        err = VectorSizeMismatchError([1.0], [1.0, 2.0])
        assert not isinstance(err, MatrixError)
        assert isinstance(err, LinearAlgebraError)


# ═══════════════════════════════════════════════════════════════════════
# Payloads and messages
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixPayloads:
    """Matrix errors carry the offending matrix."""

    def test_invalid_matrix_carries_matrix(self):
        m = [[1.0, 2.0], [3.0]]
        err = InvalidMatrixError(m)
        assert err.matrix is m
        assert "same size" in str(err)
        assert "widths [1, 2]" in str(err)

    def test_not_square_default_message(self):
        err = NotSquareError([[1.0, 2.0, 3.0]])
        assert "square" in str(err)
        assert "1x3" in str(err)

    def test_custom_message(self):
        err = NotSquareError([[1.0, 2.0]], "trace needs a square matrix")
        assert str(err) == "trace needs a square matrix"

    def test_size_mismatch_carries_both(self):
        m1 = [[1.0, 2.0]]
        m2 = [[1.0, 2.0], [3.0, 4.0]]
        err = MatrixSizeMismatchError(m1, m2)
        assert err.matrix is m1
        assert err.matrix2 is m2
        assert err.matrices == (m1, m2)
        assert "1x2 vs 2x2" in str(err)

    def test_index_out_of_range_attributes(self):
        m = [[1.0, 2.0], [3.0, 4.0]]
        err = IndexOutOfRangeError(m, 3, 1)
        assert err.matrix is m
        assert err.row == 3
        assert err.column == 1
        assert "Row: 3 Column: 1" in str(err)
        assert "2x2" in str(err)

    def test_empty_matrix_shape_in_message(self):
        err = InvalidMatrixError([])
        assert "0x0" in str(err)


class TestVectorPayloads:
    """Vector errors carry both offending vectors."""

    def test_vector_mismatch_attributes(self):
        v1 = [1.0, 2.0]
        v2 = [1.0, 2.0, 3.0]
        err = VectorSizeMismatchError(v1, v2)
        assert err.vector is v1
        assert err.vector2 is v2
        assert err.vectors == (v1, v2)
        assert "2 vs 3" in str(err)

    def test_catchable_with_attributes(self):
        with pytest.raises(VectorSizeMismatchError) as exc_info:
            raise VectorSizeMismatchError([1.0], [], "lengths differ")
        assert str(exc_info.value) == "lengths differ"
        assert exc_info.value.vector2 == []
