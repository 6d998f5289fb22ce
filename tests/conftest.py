"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from intmatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_pair():
    """A = [[1,2],[3,4]], B = [[5,6],[7,8]]; A x B = [[19,22],[43,50]]."""
    return Matrix([[1, 2], [3, 4]]), Matrix([[5, 6], [7, 8]])


@pytest.fixture
def random_grids(rng):
    """Two random 3x4 integer grids with small entries."""
    a = rng.integers(-20, 20, size=(3, 4))
    b = rng.integers(-20, 20, size=(3, 4))
    return a, b
