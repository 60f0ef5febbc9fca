"""Memoized matrix inversion on top of numpy/scipy."""

from cachematrix.cache_matrix import (
    CacheableMatrix,
    LockedCacheableMatrix,
    cached_solve,
    make_cache_matrix,
)
from cachematrix.errors import DimensionError, MatrixError, NotInvertibleError
from cachematrix.math.matrix_inversion import invert_matrix, solve

__version__ = "0.1.0"

__all__ = [
    "CacheableMatrix",
    "LockedCacheableMatrix",
    "make_cache_matrix",
    "cached_solve",
    "MatrixError",
    "DimensionError",
    "NotInvertibleError",
    "invert_matrix",
    "solve",
]
