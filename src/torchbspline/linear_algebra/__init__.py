"""Linear algebra operations with full PyTorch integration.

Submodules
----------
decomposition
    Matrix decompositions (banded LU factorization and solve).

Exceptions
----------
LinearAlgebraError
    Base exception for linear algebra operations.
SingularMatrixError
    Factorization met an exactly zero pivot.
"""

from torchbspline.linear_algebra import decomposition
from torchbspline.linear_algebra._linear_algebra_error import (
    LinearAlgebraError,
)
from torchbspline.linear_algebra._singular_matrix_error import (
    SingularMatrixError,
)

__all__ = [
    "LinearAlgebraError",
    "SingularMatrixError",
    "decomposition",
]
