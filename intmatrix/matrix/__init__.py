"""
Integer matrix module.

Public API:
    Matrix                  - mutable integer matrix
    oriented_dot(l, r, ...) - dot product of row/column vectors of two grids
    matrix_product(l, r)    - product of two grids
"""

from intmatrix.matrix.matrix import Matrix
from intmatrix.matrix.products import oriented_dot, matrix_product, dot_product

__all__ = [
    "Matrix",
    "oriented_dot",
    "matrix_product",
    "dot_product",
]
