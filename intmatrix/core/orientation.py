"""
Vector orientation constants for Matrix.dot.

Usage:
    from intmatrix.core.orientation import ROW, COLUMN

    a.dot(ROW, COLUMN, i, j, b)   # row i of a . column j of b
"""

# Vector is a row of its matrix (1 x n)
ROW = True

# Vector is a column of its matrix (n x 1)
COLUMN = False

ORIENTATION_NAMES = {
    ROW: 'row',
    COLUMN: 'column',
}

__all__ = [
    'ROW',
    'COLUMN',
    'ORIENTATION_NAMES',
]
