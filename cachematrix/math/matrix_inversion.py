# cachematrix/math/matrix_inversion.py

import logging

import numpy as np

from cachematrix.errors import DimensionError, NotInvertibleError

__all__ = [
    "DEFAULT_METHOD",
    "DEFAULT_TOL",
    "check_square",
    "solve",
    "apply_inverse",
    "invert_matrix",
    "invert_gauss_jordan",
    "invert_lu",
    "invert_qr",
    "invert_svd"
]

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "auto"
DEFAULT_TOL = 1e-12


def check_square(A):
    """Return ``A`` as a float64 ndarray, raising DimensionError unless it is n x n.

    Non-finite entries raise NotInvertibleError.
    """
    try:
        A = np.array(A, dtype=float)
    except ValueError as e:
        raise DimensionError(f"Matrix rows must all have the same length: {e}") from e
    if A.ndim != 2:
        raise DimensionError(f"Matrix must be two-dimensional, got ndim={A.ndim}")
    if A.shape[0] != A.shape[1]:
        raise DimensionError(f"Matrix must be square (n x n), got {A.shape[0]}x{A.shape[1]}")
    if A.shape[0] == 0:
        raise DimensionError("Matrix must not be empty")
    if not np.isfinite(A).all():
        raise NotInvertibleError("Matrix contains NaN or infinite entries")
    return A


def _scale(A):
    # Pivots and singular values are compared against tol * largest magnitude.
    return float(np.max(np.abs(A)))


def _singular(what, value, A, tol):
    return NotInvertibleError(
        f"Matrix is singular (non-invertible): {what} {value:.3e} "
        f"within tol={tol:g} of zero for {A.shape[0]}x{A.shape[1]} input"
    )


def solve(A, b=None, method=DEFAULT_METHOD, tol=DEFAULT_TOL):
    """
    Solve ``A @ X = b`` for X, or return the inverse of A when b is None.

    Parameters:
        A (array_like): Square matrix.
        b (array_like): Optional right-hand side, shape (n,) or (n, k).
        method (str): 'auto', 'gauss', 'lu', 'qr', 'svd'
        tol (float): Relative singularity tolerance.

    Returns:
        X (ndarray): ``inv(A)`` or ``inv(A) @ b``
    """
    A_inv = invert_matrix(A, method=method, tol=tol)
    if b is None:
        return A_inv
    return apply_inverse(A_inv, b)


def apply_inverse(A_inv, b):
    """Return ``A_inv @ b``, raising DimensionError when b does not fit A_inv."""
    b = np.array(b, dtype=float)
    if b.ndim not in (1, 2) or b.shape[0] != A_inv.shape[0]:
        raise DimensionError(
            f"Right-hand side of shape {b.shape} does not match {A_inv.shape[0]}x{A_inv.shape[0]} matrix"
        )
    return A_inv @ b


def invert_matrix(A, method=DEFAULT_METHOD, tol=DEFAULT_TOL):
    """
    Invert a square matrix using the specified method.

    Parameters:
        A (array_like): Square matrix to invert.
        method (str): 'auto', 'gauss', 'lu', 'qr', 'svd'
        tol (float): Relative singularity tolerance.

    Returns:
        A_inv (ndarray): Inverse of matrix A

    Raises:
        DimensionError: A is not a non-empty square matrix.
        NotInvertibleError: A is singular within tol.
        ValueError: method is unknown.
    """
    if method == "auto":
        method = "lu"
    logger.debug("invert_matrix: method=%s tol=%g", method, tol)

    if method == "gauss":
        return invert_gauss_jordan(A, tol=tol)
    elif method == "lu":
        return invert_lu(A, tol=tol)
    elif method == "qr":
        return invert_qr(A, tol=tol)
    elif method == "svd":
        return invert_svd(A, tol=tol)
    else:
        raise ValueError(f"Unknown method: {method}")


def invert_gauss_jordan(A, tol=DEFAULT_TOL):
    """Invert matrix using Gauss-Jordan elimination."""
    A = check_square(A)
    n = A.shape[0]
    limit = tol * _scale(A)
    I = np.identity(n)
    AI = np.hstack([A, I])

    for i in range(n):
        # Pivoting
        max_row = np.argmax(np.abs(AI[i:, i])) + i
        AI[[i, max_row]] = AI[[max_row, i]]

        if abs(AI[i, i]) <= limit:
            raise _singular("pivot", abs(AI[i, i]), A, tol)

        # Normalize row
        AI[i] /= AI[i, i]

        # Eliminate other rows
        for j in range(n):
            if i != j:
                AI[j] -= AI[i] * AI[j, i]

    return AI[:, n:]


def invert_lu(A, tol=DEFAULT_TOL):
    """Invert matrix using LU decomposition."""
    from scipy.linalg import lu_factor, lu_solve
    A = check_square(A)
    try:
        # scipy may also warn on an exactly zero pivot; the check below raises.
        lu, piv = lu_factor(A)
    except np.linalg.LinAlgError as e:
        raise NotInvertibleError(f"LU factorization failed: {e}") from e

    pivots = np.abs(np.diag(lu))
    if pivots.min() <= tol * _scale(A):
        raise _singular("pivot", pivots.min(), A, tol)

    I = np.identity(A.shape[0])
    return lu_solve((lu, piv), I)


def invert_qr(A, tol=DEFAULT_TOL):
    """Invert matrix using QR decomposition."""
    from scipy.linalg import solve_triangular
    A = check_square(A)
    Q, R = np.linalg.qr(A)

    diag = np.abs(np.diag(R))
    if diag.min() <= tol * _scale(A):
        raise _singular("R diagonal", diag.min(), A, tol)

    return solve_triangular(R, Q.T)


def invert_svd(A, tol=DEFAULT_TOL):
    """Invert matrix using SVD. Refuses to fall back to a pseudo-inverse."""
    A = check_square(A)
    try:
        U, S, Vt = np.linalg.svd(A)
    except np.linalg.LinAlgError as e:
        raise NotInvertibleError(f"SVD did not converge: {e}") from e

    if S[-1] <= tol * S[0]:
        raise _singular("singular value", S[-1], A, tol)

    return Vt.T @ np.diag(1.0 / S) @ U.T
