"""
Tests for Matrix.dot across the four row/column orientations.

A = [[1, 2], [3, 4]], B = [[5, 6], [7, 8]] (square_pair fixture).
"""

import warnings

import pytest

from intmatrix import (
    COLUMN,
    ROW,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    Matrix,
)
from intmatrix.matrix.products import dot_product, oriented_dot


# ═══════════════════════════════════════════════════════════════════════
# Values
# ═══════════════════════════════════════════════════════════════════════


class TestOrientations:

    def test_row_times_column_vector(self):
        """[1, 2] . [3, 4]^T = 1*3 + 2*4."""
        assert Matrix([[1, 2]]).dot(True, False, 0, 0, Matrix([[3], [4]])) == 11

    def test_row_row(self, square_pair):
        a, b = square_pair
        assert a.dot(ROW, ROW, 0, 1, b) == 1 * 7 + 2 * 8

    def test_row_column(self, square_pair):
        a, b = square_pair
        assert a.dot(ROW, COLUMN, 1, 0, b) == 3 * 5 + 4 * 7

    def test_column_row(self, square_pair):
        a, b = square_pair
        assert a.dot(COLUMN, ROW, 0, 1, b) == 1 * 7 + 3 * 8

    def test_column_column(self, square_pair):
        a, b = square_pair
        assert a.dot(COLUMN, COLUMN, 1, 0, b) == 2 * 5 + 4 * 7

    def test_returns_python_int(self, square_pair):
        a, b = square_pair
        assert type(a.dot(ROW, ROW, 0, 0, b)) is int

    def test_row_row_rectangular(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        b = Matrix([[1, 0, -1]])
        assert a.dot(ROW, ROW, 1, 0, b) == 4 - 6

    def test_row_column_rectangular(self):
        a = Matrix([[1, 2, 3]])
        b = Matrix([[1, 4], [2, 5], [3, 6]])
        assert a.dot(ROW, COLUMN, 0, 1, b) == 4 + 10 + 18

    def test_inputs_unchanged(self, square_pair):
        a, b = square_pair
        a.dot(COLUMN, COLUMN, 0, 0, b)
        assert a == Matrix([[1, 2], [3, 4]])
        assert b == Matrix([[5, 6], [7, 8]])

    def test_with_self(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a.dot(ROW, ROW, 1, 1, a) == 9 + 16

    @pytest.mark.parametrize("orientation", [
        (ROW, ROW), (ROW, COLUMN), (COLUMN, ROW), (COLUMN, COLUMN),
    ])
    def test_square_receiver_never_warns(self, square_pair, orientation):
        a, b = square_pair
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            a.dot(*orientation, 1, 1, b)


# ═══════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatch:

    def test_row_row(self):
        with pytest.raises(DimensionMismatchError, match="left cols and right cols"):
            Matrix(2, 2).dot(ROW, ROW, 0, 0, Matrix(2, 3))

    def test_row_column(self):
        with pytest.raises(DimensionMismatchError, match="left cols and right rows"):
            Matrix(2, 3).dot(ROW, COLUMN, 0, 0, Matrix(2, 2))

    def test_column_row(self):
        with pytest.raises(DimensionMismatchError, match="left rows and right cols"):
            Matrix(2, 2).dot(COLUMN, ROW, 0, 0, Matrix(2, 3))

    def test_column_column(self):
        with pytest.raises(DimensionMismatchError, match="left cols and right rows"):
            Matrix(2, 3).dot(COLUMN, COLUMN, 0, 0, Matrix(2, 2))

    def test_operation_named(self):
        with pytest.raises(DimensionMismatchError) as excinfo:
            Matrix(2, 2).dot(ROW, COLUMN, 0, 0, Matrix(3, 2))
        assert excinfo.value.operation == "dot (row . column)"


class TestIndexOutOfBounds:

    def test_row_index_on_receiver(self, square_pair):
        a, b = square_pair
        with pytest.raises(IndexOutOfBoundsError):
            a.dot(ROW, ROW, 2, 0, b)

    def test_column_index_on_other(self, square_pair):
        a, b = square_pair
        with pytest.raises(IndexOutOfBoundsError):
            a.dot(ROW, COLUMN, 0, 5, b)

    def test_negative_index(self, square_pair):
        a, b = square_pair
        with pytest.raises(IndexOutOfBoundsError):
            a.dot(COLUMN, ROW, -1, 0, b)

    def test_indices_checked_before_shapes(self):
        """row . row with both a bad index and a mismatch reports the index."""
        with pytest.raises(IndexOutOfBoundsError):
            Matrix(2, 2).dot(ROW, ROW, 9, 0, Matrix(2, 3))

    def test_column_column_checks_shapes_first(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 3).dot(COLUMN, COLUMN, 9, 0, Matrix(2, 2))


# ═══════════════════════════════════════════════════════════════════════
# Column walk over a non-square receiver (known-narrow cases)
# ═══════════════════════════════════════════════════════════════════════


class TestColumnWalk:
    """A left column is walked over the receiver's column count."""

    def test_column_row_wide_receiver_raises(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(IndexOutOfBoundsError) as excinfo:
            a.dot(COLUMN, ROW, 0, 0, Matrix([[1, 1]]))
        assert excinfo.value.row == 2
        assert excinfo.value.shape == (2, 3)

    def test_column_column_wide_receiver_raises(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(IndexOutOfBoundsError):
            a.dot(COLUMN, COLUMN, 0, 0, Matrix(3, 1, 1))

    def test_column_row_tall_receiver_truncates(self):
        a = Matrix([[1, 2], [3, 4], [5, 6]])
        b = Matrix([[10, 20, 30]])
        with pytest.warns(UserWarning, match="only the first 2"):
            result = a.dot(COLUMN, ROW, 0, 0, b)
        assert result == 1 * 10 + 3 * 20

    def test_column_column_tall_receiver_truncates(self):
        a = Matrix([[1, 2], [3, 4], [5, 6]])
        b = Matrix([[10], [20]])
        with pytest.warns(UserWarning, match="3 entries"):
            result = a.dot(COLUMN, COLUMN, 1, 0, b)
        assert result == 2 * 10 + 4 * 20


# ═══════════════════════════════════════════════════════════════════════
# Kernels
# ═══════════════════════════════════════════════════════════════════════


class TestKernels:

    def test_dot_product(self, rng):
        a = rng.integers(-10, 10, size=6)
        b = rng.integers(-10, 10, size=6)
        expected = sum(int(x) * int(y) for x, y in zip(a, b))
        assert dot_product(a, b) == expected

    def test_oriented_dot_on_grids(self, square_pair):
        a, b = square_pair
        assert oriented_dot(a.get_matrix(), b.get_matrix(), ROW, COLUMN, 0, 0) == 19
