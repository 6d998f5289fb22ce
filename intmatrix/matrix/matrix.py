"""
Matrix: a mutable, fixed-shape grid of integers.

The grid is a 2D NumPy array of STORAGE_DTYPE. Its shape is the matrix's
(rows, cols), so the two can never disagree; replacing the grid replaces
both dimensions at once.

Construction:
    Matrix(rows, cols)               zero-filled
    Matrix(rows, cols, initial_val)  every cell initial_val
    Matrix(grid)                     wrap a rectangular grid

Aliasing:
    get_matrix() and set_matrix() share the grid instead of copying it,
    and Matrix(grid) wraps a storage-dtype array without copying. Writes
    through a shared grid are visible to every holder. Use get_copy() or
    copy() for an independent grid.

Instances are not safe for concurrent mutation; callers synchronize.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from intmatrix.core.dtypes import STORAGE_DTYPE
from intmatrix.core.validation import (
    check_grid,
    check_integer,
    check_dimension,
    check_index,
    check_same_shape,
)
from intmatrix.matrix.products import oriented_dot, matrix_product


class Matrix:
    """
    Mutable integer matrix with zero-based, bounds-checked indexing.
    
    Arithmetic mutates the receiver in place, except Matrix.product which
    returns a new matrix. Every operation validates before touching a cell,
    so a failed call leaves the matrix unchanged.
    
    Examples:
        >>> a = Matrix([[1, 2], [3, 4]])
        >>> a.multiply(Matrix([[5, 6], [7, 8]]))
        >>> str(a)
        '[19, 22][43, 50]'
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        rows_or_grid: int | ArrayLike,
        cols: int | None = None,
        initial_val: int = 0,
    ):
        """
        Args:
            rows_or_grid: Row count, or a rectangular grid when cols is None
            cols: Column count
            initial_val: Value of every cell of a dimensional matrix
            
        Raises:
            ShapeError: If a grid is empty or ragged, or a count is below 1
            ValidationError: If a count, value or grid cell is not an integer
        """
        if cols is None:
            self._grid = check_grid(rows_or_grid, "grid")
        else:
            rows = check_dimension(rows_or_grid, "rows")
            cols = check_dimension(cols, "cols")
            initial_val = check_integer(initial_val, "initial_val")
            self._grid = np.full((rows, cols), initial_val, dtype=STORAGE_DTYPE)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Zero-filled rows x cols matrix."""
        return cls(rows, cols)

    @classmethod
    def filled(cls, rows: int, cols: int, initial_val: int) -> Matrix:
        """rows x cols matrix with every cell set to initial_val."""
        return cls(rows, cols, initial_val)

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> Matrix:
        """Matrix wrapping grid (no copy for a 2D storage-dtype array)."""
        return cls(grid)

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return int(self._grid.shape[0])

    @property
    def cols(self) -> int:
        """Number of columns."""
        return int(self._grid.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def get_matrix(self) -> NDArray[np.int64]:
        """
        The backing grid itself, not a copy.
        
        Writes to the returned array change this matrix. Read from it, or
        use get_copy() when the result will be modified.
        """
        return self._grid

    def get_copy(self) -> NDArray[np.int64]:
        """Independent deep copy of the grid."""
        return self._grid.copy()

    def copy(self) -> Matrix:
        """Independent deep copy of this matrix."""
        return Matrix(self.get_copy())

    def set_matrix(self, source: Matrix | ArrayLike) -> None:
        """
        Replace the grid and both dimensions.
        
        With another Matrix, both matrices share one grid afterwards. With
        a grid, the same rules as Matrix(grid) apply; a storage-dtype array
        is shared, not copied.
        
        Raises:
            ShapeError: If a grid is empty or ragged
            ValidationError: If a grid holds non-integer data
        """
        if isinstance(source, Matrix):
            self._grid = source._grid
        else:
            self._grid = check_grid(source, "grid")

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get_element(self, row: int, col: int) -> int:
        """
        Value at (row, col).
        
        Raises:
            IndexOutOfBoundsError: If (row, col) is outside the matrix
        """
        check_index(row, col, self.shape, "matrix")
        return int(self._grid[row, col])

    def set_element(self, row: int, col: int, value: int) -> None:
        """
        Store value at (row, col).
        
        Raises:
            IndexOutOfBoundsError: If (row, col) is outside the matrix
            ValidationError: If value is not an integer
        """
        check_index(row, col, self.shape, "matrix")
        self._grid[row, col] = check_integer(value, "value")

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, col = self._unpack_key(key)
        return self.get_element(row, col)

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, col = self._unpack_key(key)
        self.set_element(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, col) pair, got {key!r}")
        return key

    # ------------------------------------------------------------------
    # Structural queries
    # ------------------------------------------------------------------

    def is_upper_triangular(self) -> bool:
        """True if every cell below the main diagonal is zero."""
        return not np.any(np.tril(self._grid, k=-1))

    def is_lower_triangular(self) -> bool:
        """True if every cell above the main diagonal is zero."""
        return not np.any(np.triu(self._grid, k=1))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> None:
        """
        Add other to this matrix cell by cell, in place.
        
        Raises:
            DimensionMismatchError: If the shapes differ
        """
        check_same_shape(self.shape, other.shape, "add")
        self._grid += other._grid

    def subtract(self, other: Matrix) -> None:
        """
        Subtract other from this matrix cell by cell, in place.
        
        Raises:
            DimensionMismatchError: If the shapes differ
        """
        check_same_shape(self.shape, other.shape, "subtract")
        self._grid -= other._grid

    def scalar_multiply(self, scalar: int) -> None:
        """Multiply every cell by scalar, in place."""
        self._grid *= check_integer(scalar, "scalar")

    def dot(
        self,
        is_row_one: bool,
        is_row_two: bool,
        index_one: int,
        index_two: int,
        other: Matrix,
    ) -> int:
        """
        Dot product of a vector of this matrix with a vector of other.
        
        Each vector is a row (ROW) or a column (COLUMN) of its matrix:
        
            row . row   rows index_one and index_two, needs equal cols
            row . col   needs self.cols == other.rows (a multiply step)
            col . row   needs self.rows == other.cols
            col . col   needs self.cols == other.rows
        
        The sum always runs over self.cols terms. When the first vector is
        a column that only covers the whole column for a square receiver:
        a wide receiver raises IndexOutOfBoundsError and a tall one sums
        the first self.cols entries and emits a UserWarning.
        
        Args:
            is_row_one: Orientation of the vector drawn from this matrix
            is_row_two: Orientation of the vector drawn from other
            index_one: Row/column index into this matrix
            index_two: Row/column index into other
            other: Matrix supplying the second vector
            
        Returns:
            The dot product as an int
            
        Raises:
            IndexOutOfBoundsError: If an index does not name a vector
            DimensionMismatchError: If the contracted sizes differ
        """
        return oriented_dot(
            self._grid, other._grid,
            is_row_one, is_row_two, index_one, index_two,
        )

    def multiply(self, other: Matrix) -> None:
        """
        Replace this matrix with self x other.
        
        Cell (i, j) of the result is self.dot(ROW, COLUMN, i, j, other).
        rows is unchanged and cols becomes other.cols. The product is
        complete before the grid is replaced.
        
        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        self._grid = matrix_product(self._grid, other._grid)

    @staticmethod
    def product(m1: Matrix, m2: Matrix) -> Matrix:
        """
        New matrix equal to m1 x m2; neither input is modified.
        
        Raises:
            DimensionMismatchError: If m1.cols != m2.rows
        """
        result = Matrix(m1.get_copy())
        result.multiply(m2)
        return result

    # ------------------------------------------------------------------
    # Comparison and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._grid, other._grid))

    def __str__(self) -> str:
        # "[1, 2][3, 4]": rows side by side, no separator
        return "".join(str(row) for row in self._grid.tolist())

    def __repr__(self) -> str:
        return f"Matrix({self._grid.tolist()!r})"


__all__ = ["Matrix"]
