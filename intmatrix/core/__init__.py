"""
Core infrastructure for intmatrix.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    dtypes: Storage dtype and its integer range
    orientation: ROW / COLUMN constants for dot products
"""

from intmatrix.core.exceptions import (
    IntMatrixError,
    ValidationError,
    DimensionError,
    ShapeError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)
from intmatrix.core.dtypes import STORAGE_DTYPE
from intmatrix.core.orientation import ROW, COLUMN

__all__ = [
    # Exceptions
    "IntMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    # Constants
    "STORAGE_DTYPE",
    "ROW",
    "COLUMN",
]
