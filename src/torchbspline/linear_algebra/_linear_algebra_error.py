class LinearAlgebraError(Exception):
    """Base exception for linear algebra operations."""

    pass
