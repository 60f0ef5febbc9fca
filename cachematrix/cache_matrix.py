# cachematrix/cache_matrix.py
"""
Cacheable matrix: compute the inverse once and reuse it until the matrix changes.

Example
-------
    m = make_cache_matrix([[1, 2, 3], [0, 1, 4], [5, 6, 0]])
    cached_solve(m)              # computed: [[-24, 18, 5], [20, -15, -4], [-5, 4, 1]]
    cached_solve(m)              # logs "getting cached data", same array object
    m.set_matrix(cached_solve(m))
    m.get_cached_inverse()       # None
    cached_solve(m)              # recomputed: [[1, 2, 3], [0, 1, 4], [5, 6, 0]]
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext

from cachematrix.math.matrix_inversion import apply_inverse, solve

__all__ = [
    "CacheableMatrix",
    "LockedCacheableMatrix",
    "make_cache_matrix",
    "cached_solve",
]

logger = logging.getLogger(__name__)


class CacheableMatrix:
    """Holds a matrix and, once computed, its inverse.

    Replacing the matrix drops the cached inverse in the same call, so the two
    fields always describe the same logical matrix.
    """

    def __init__(self, value):
        self._value = value
        self._inverse = None

    def set_matrix(self, new_value) -> None:
        self._value = new_value
        self._inverse = None

    def get_matrix(self):
        return self._value

    def set_cached_inverse(self, inverse) -> None:
        # No shape check: only cached_solve writes here.
        self._inverse = inverse

    def get_cached_inverse(self):
        return self._inverse

    def has_cached_inverse(self) -> bool:
        return self.get_cached_inverse() is not None

    def __repr__(self) -> str:
        state = "cached" if self._inverse is not None else "empty"
        shape = getattr(self._value, "shape", None)
        return f"{type(self).__name__}(shape={shape}, inverse={state})"


class LockedCacheableMatrix(CacheableMatrix):
    """CacheableMatrix safe to share between threads.

    ``cached_solve`` holds ``lock`` across check, compute and store.
    """

    def __init__(self, value):
        self.lock = threading.RLock()
        super().__init__(value)

    def set_matrix(self, new_value) -> None:
        with self.lock:
            super().set_matrix(new_value)

    def get_matrix(self):
        with self.lock:
            return super().get_matrix()

    def set_cached_inverse(self, inverse) -> None:
        with self.lock:
            super().set_cached_inverse(inverse)

    def get_cached_inverse(self):
        with self.lock:
            return super().get_cached_inverse()


def make_cache_matrix(x) -> CacheableMatrix:
    """Create a CacheableMatrix holding ``x`` with an empty cache."""
    return CacheableMatrix(x)


def cached_solve(container: CacheableMatrix, b=None, **kwargs):
    """
    Return the inverse of the matrix held by ``container``, or ``inverse @ b``.

    On a hit the cached inverse is used as-is and ``kwargs`` are ignored. On a
    miss they are forwarded to :func:`cachematrix.math.matrix_inversion.solve`
    (e.g. ``method=``, ``tol=``) and the inverse is cached. The right-hand side
    ``b`` is applied after the cache step, so the cache only ever holds the
    inverse. Errors from the solver propagate and leave the cache empty.
    """
    lock = getattr(container, "lock", None)
    with lock if lock is not None else nullcontext():
        inverse = container.get_cached_inverse()
        if inverse is not None:
            logger.info("getting cached data")
        else:
            data = container.get_matrix()
            logger.debug("cache miss: solving %s matrix", getattr(data, "shape", type(data).__name__))
            inverse = solve(data, **kwargs)
            container.set_cached_inverse(inverse)

    if b is None:
        return inverse
    return apply_inverse(inverse, b)
