"""
Dot-product and matrix-product kernels.

Kernels work on raw storage grids (2D arrays of STORAGE_DTYPE) and are
wrapped by Matrix.dot and Matrix.multiply. They validate before computing
and never modify their inputs.

A dot product pairs one vector of the left grid with one vector of the
right grid. Each vector is independently a row or a column:

    left   right   contracted sizes            terms summed (k < left cols)
    row    row     left cols  == right cols    L[i, k] * R[j, k]
    row    col     left cols  == right rows    L[i, k] * R[k, j]
    col    row     left rows  == right cols    L[k, i] * R[j, k]
    col    col     left cols  == right rows    L[k, i] * R[k, j]

Every orientation walks the left grid's column count. For a column of the
left grid that walk only lines up with the column's length when the left
grid is square; see _column_terms.
"""

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from intmatrix.core.exceptions import IndexOutOfBoundsError
from intmatrix.core.orientation import ROW, COLUMN, ORIENTATION_NAMES
from intmatrix.core.validation import check_index, check_contracted


def _shape(grid: NDArray[Any]) -> tuple[int, int]:
    rows, cols = grid.shape
    return int(rows), int(cols)


def _column_terms(grid: NDArray[Any], index: int) -> int:
    """
    Number of terms summed when a column of grid is the left vector.
    
    The walk runs over the grid's column count, not its row count.
    
    Raises:
        IndexOutOfBoundsError: If cols > rows (the walk leaves the grid)
    """
    rows, cols = _shape(grid)
    if cols > rows:
        raise IndexOutOfBoundsError(
            f"dot: column {index} walked over {cols} terms but the left "
            f"matrix has only {rows} rows (shape {(rows, cols)})",
            row=rows,
            col=index,
            shape=(rows, cols),
        )
    if cols < rows:
        warnings.warn(
            f"dot: column {index} of the left matrix has {rows} entries but "
            f"only the first {cols} are summed (left matrix shape {(rows, cols)})",
            stacklevel=4,
        )
    return cols


def dot_product(a: NDArray[Any], b: NDArray[Any]) -> int:
    """Sum of elementwise products of two equal-length integer vectors."""
    return int(np.dot(a, b))


def oriented_dot(
    left: NDArray[Any],
    right: NDArray[Any],
    is_row_one: bool,
    is_row_two: bool,
    index_one: int,
    index_two: int,
) -> int:
    """
    Dot product of one vector of left with one vector of right.
    
    Args:
        left: Receiver grid
        right: Other grid
        is_row_one: ROW if the left vector is a row, COLUMN for a column
        is_row_two: ROW if the right vector is a row, COLUMN for a column
        index_one: Row or column index into left
        index_two: Row or column index into right
        
    Returns:
        The dot product as a Python int
        
    Raises:
        IndexOutOfBoundsError: If an index does not address a vector of
            its grid, or the left column walk leaves the left grid
        DimensionMismatchError: If the contracted sizes differ
    """
    lshape, rshape = _shape(left), _shape(right)
    lrows, lcols = lshape
    rrows, rcols = rshape
    orientation = (
        f"{ORIENTATION_NAMES[bool(is_row_one)]} . {ORIENTATION_NAMES[bool(is_row_two)]}"
    )

    if is_row_one == ROW and is_row_two == ROW:
        check_index(index_one, 0, lshape, "left")
        check_index(index_two, 0, rshape, "right")
        check_contracted(
            lcols, rcols, operation=f"dot ({orientation})",
            what="left cols and right cols", left=lshape, right=rshape,
        )
        a = left[index_one, :lcols]
        b = right[index_two, :lcols]

    elif is_row_one == ROW and is_row_two == COLUMN:
        check_index(index_one, 0, lshape, "left")
        check_index(0, index_two, rshape, "right")
        check_contracted(
            lcols, rrows, operation=f"dot ({orientation})",
            what="left cols and right rows", left=lshape, right=rshape,
        )
        a = left[index_one, :lcols]
        b = right[:lcols, index_two]

    elif is_row_two == ROW:
        check_index(0, index_one, lshape, "left")
        check_index(index_two, 0, rshape, "right")
        check_contracted(
            lrows, rcols, operation=f"dot ({orientation})",
            what="left rows and right cols", left=lshape, right=rshape,
        )
        n = _column_terms(left, index_one)
        a = left[:n, index_one]
        b = right[index_two, :n]

    else:
        # column . column checks shapes before indices
        check_contracted(
            lcols, rrows, operation=f"dot ({orientation})",
            what="left cols and right rows", left=lshape, right=rshape,
        )
        check_index(0, index_one, lshape, "left")
        check_index(0, index_two, rshape, "right")
        n = _column_terms(left, index_one)
        a = left[:n, index_one]
        b = right[:n, index_two]

    return dot_product(a, b)


def matrix_product(left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
    """
    Product of two grids as a new grid.
    
    Cell (i, j) equals oriented_dot(left, right, ROW, COLUMN, i, j).
    
    Raises:
        DimensionMismatchError: If left cols != right rows
    """
    lshape, rshape = _shape(left), _shape(right)
    check_contracted(
        lshape[1], rshape[0], operation="multiply",
        what="left cols and right rows", left=lshape, right=rshape,
    )
    return np.matmul(left, right)
