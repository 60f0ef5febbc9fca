from cachematrix.math.matrix_inversion import (
    DEFAULT_METHOD,
    DEFAULT_TOL,
    apply_inverse,
    check_square,
    invert_gauss_jordan,
    invert_lu,
    invert_matrix,
    invert_qr,
    invert_svd,
    solve,
)

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
    "invert_svd",
]
