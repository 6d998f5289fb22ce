"""
Storage dtype for matrix grids.

Every grid is a 2D NumPy array of STORAGE_DTYPE. This module is the
single source of truth for that choice; import from here, never spell
the dtype out elsewhere.

Arithmetic on the grid is fixed-width: sums and products that leave
[INT_MIN, INT_MAX] wrap around the way NumPy integer arrays do.
"""

import numpy as np

STORAGE_DTYPE = np.int64

INT_MIN = int(np.iinfo(STORAGE_DTYPE).min)
INT_MAX = int(np.iinfo(STORAGE_DTYPE).max)

__all__ = [
    'STORAGE_DTYPE',
    'INT_MIN',
    'INT_MAX',
]
