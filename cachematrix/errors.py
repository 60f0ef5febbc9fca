# cachematrix/errors.py

class MatrixError(ValueError):
    pass

class DimensionError(MatrixError):
    """Input is not a non-empty square matrix."""

class NotInvertibleError(MatrixError):
    """Input is singular or too ill-conditioned for the requested tolerance."""
