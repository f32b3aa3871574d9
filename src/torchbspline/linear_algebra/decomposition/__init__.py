"""Matrix decompositions with full PyTorch integration.

Functions
---------
banded_lu_factor
    Computes the LU factorization of a banded matrix with partial pivoting,
    restricting the pivot search and the elimination to the band.

banded_lu_solve
    Solves A x = b for one or more right-hand sides from the factors
    computed by banded_lu_factor.

Result Types
------------
BandedLUResult
    Named tuple with LU, pivots, bands.
"""

from torchbspline.linear_algebra.decomposition._banded_lu_factor import (
    banded_lu_factor,
)
from torchbspline.linear_algebra.decomposition._banded_lu_solve import (
    banded_lu_solve,
)
from torchbspline.linear_algebra.decomposition._result_types import (
    BandedLUResult,
)

__all__ = [
    "BandedLUResult",
    "banded_lu_factor",
    "banded_lu_solve",
]
