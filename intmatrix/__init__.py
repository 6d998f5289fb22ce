"""
intmatrix: a mutable integer matrix for Python.

Construction, bounds-checked element access, triangularity checks and
in-place arithmetic over a fixed-shape grid of integers, including a dot
product that pairs any combination of row and column vectors.

Submodules:
    matrix: The Matrix type and its product kernels
    core: Exceptions, validators and constants
"""

__version__ = "0.1.0"

from intmatrix.core import (
    IntMatrixError,
    ValidationError,
    DimensionError,
    ShapeError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    ROW,
    COLUMN,
)
from intmatrix.matrix import Matrix

__all__ = [
    "__version__",
    "Matrix",
    "ROW",
    "COLUMN",
    "IntMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
]
