"""
Input validation utilities for intmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on integer array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from intmatrix.core.dtypes import STORAGE_DTYPE, INT_MIN, INT_MAX
from intmatrix.core.exceptions import (
    ValidationError,
    ShapeError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)


def check_grid(grid: ArrayLike, name: str) -> NDArray[np.int64]:
    """
    Validate and convert a grid to matrix storage.
    
    A 2D array that already has STORAGE_DTYPE is returned as-is, so the
    caller shares it with whoever passed it in. Anything else is converted
    once into a new storage array.
    
    Args:
        grid: Rectangular array-like of integers
        name: Parameter name for error messages
        
    Returns:
        2D numpy.ndarray with STORAGE_DTYPE and at least one cell
        
    Raises:
        ShapeError: If grid is ragged, empty or not two-dimensional
        ValidationError: If grid holds non-integer data or values outside
            the storage range
    """
    if isinstance(grid, np.ndarray) and grid.dtype == STORAGE_DTYPE:
        result = grid
    else:
        try:
            result = np.asarray(grid)
        except ValueError as e:
            raise ShapeError(
                f"{name}: rows must all have the same length: {e}"
            ) from e
        except (TypeError, OverflowError) as e:
            raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.size == 0:
        raise ShapeError(
            f"{name}: grid must have at least one row and one column, "
            f"got shape {result.shape}",
            shape=result.shape,
        )

    if result.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D grid, got {result.ndim}D with shape {result.shape}",
            shape=result.shape,
        )

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"non-numeric data or integers outside [{INT_MIN}, {INT_MAX}]"
        )

    # bool is not an integer dtype for numpy, so it is rejected here too
    if not np.issubdtype(result.dtype, np.integer):
        raise ValidationError(
            f"{name}: non-integer dtype {result.dtype}, expected integer data"
        )

    if result.dtype != STORAGE_DTYPE:
        if not np.can_cast(result.dtype, STORAGE_DTYPE):
            lo, hi = int(result.min()), int(result.max())
            if lo < INT_MIN or hi > INT_MAX:
                raise ValidationError(
                    f"{name}: values in [{lo}, {hi}] do not fit "
                    f"[{INT_MIN}, {INT_MAX}]"
                )
        result = result.astype(STORAGE_DTYPE)

    return result


def check_integer(value: object, name: str) -> int:
    """
    Verify value is an integer that fits matrix storage.
    
    Python ints and NumPy integer scalars are accepted; bool is not.
    
    Args:
        value: Value to check
        name: Parameter name for error messages
        
    Returns:
        value as a Python int
        
    Raises:
        ValidationError: If value is not an integer or is out of range
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    if value < INT_MIN or value > INT_MAX:
        raise ValidationError(
            f"{name}: {value} does not fit [{INT_MIN}, {INT_MAX}]"
        )
    return value


def check_dimension(value: object, name: str) -> int:
    """
    Verify value is a usable row or column count.
    
    Args:
        value: Requested count
        name: Parameter name for error messages
        
    Returns:
        value as a Python int
        
    Raises:
        ValidationError: If value is not an integer
        ShapeError: If value is less than 1
    """
    value = check_integer(value, name)
    if value < 1:
        raise ShapeError(f"{name}: must be at least 1, got {value}")
    return value


def check_index(row: object, col: object, shape: tuple[int, int], name: str) -> None:
    """
    Verify (row, col) addresses a cell of a matrix with the given shape.
    
    Negative indices are rejected; there is no wrap-around.
    
    Args:
        row: Row index
        col: Column index
        shape: (rows, cols) of the matrix being addressed
        name: Matrix name for error messages
        
    Raises:
        ValidationError: If an index is not an integer
        IndexOutOfBoundsError: If the cell is outside [0, rows) x [0, cols)
    """
    row = check_integer(row, "row")
    col = check_integer(col, "col")
    rows, cols = shape
    if row < 0 or row >= rows or col < 0 or col >= cols:
        raise IndexOutOfBoundsError(
            f"{name}: index ({row}, {col}) out of bounds for shape {shape}",
            row=row,
            col=col,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.
    
    Args:
        left: Shape of the receiver
        right: Shape of the other operand
        operation: Operation name for error messages
        
    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: matrices must have the same dimensions, "
            f"got {left} and {right}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_contracted(
    left_size: int,
    right_size: int,
    *,
    operation: str,
    what: str,
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify the contracted dimensions of two operands agree.
    
    Args:
        left_size: Contracted size on the receiver
        right_size: Contracted size on the other operand
        operation: Operation name for error messages
        what: Human description of the pairing, e.g. "left cols and right rows"
        left: Shape of the receiver
        right: Shape of the other operand
        
    Raises:
        DimensionMismatchError: If the sizes differ
    """
    if left_size != right_size:
        raise DimensionMismatchError(
            f"{operation}: {what} must match, got {left_size} and {right_size} "
            f"(shapes {left} and {right})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )
