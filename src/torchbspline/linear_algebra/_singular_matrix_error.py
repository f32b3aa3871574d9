from torchbspline.linear_algebra._linear_algebra_error import (
    LinearAlgebraError,
)


class SingularMatrixError(LinearAlgebraError):
    """Raised when a factorization meets an exactly zero pivot.

    The factorization is abandoned; no partial factors are returned.
    """

    pass
