"""
Exception hierarchy for intmatrix.

All exceptions inherit from IntMatrixError to allow catching any
library-specific error with a single clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class IntMatrixError(Exception):
    """Base exception for all intmatrix errors."""
    pass


class ValidationError(IntMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks, e.g. a
    non-integer value, index or scalar.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Base class for shape problems of a single grid (ShapeError) and
    between two operands (DimensionMismatchError).
    """
    pass


class ShapeError(DimensionError):
    """
    A grid or requested shape cannot back a matrix.
    
    Raised when a grid is empty, ragged (rows of unequal length) or not
    two-dimensional, and when a requested row or column count is not
    positive.
    
    Attributes:
        shape: Offending shape, if one could be determined
    """
    
    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.
    
    Raised by elementwise arithmetic when shapes differ and by dot/multiply
    when the contracted dimensions disagree.
    
    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the receiver
        right_shape: Shape of the other operand
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    A row or column index is outside the matrix.
    
    Valid cells are [0, rows) x [0, cols). Negative indices are always
    out of bounds. Also an IndexError, so generic index handling works.
    
    Attributes:
        row: Requested row index
        col: Requested column index
        shape: Shape of the matrix that was addressed
    """
    
    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape
