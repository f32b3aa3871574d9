from typing import NamedTuple

from torch import Tensor


class BandedLUResult(NamedTuple):
    """Result of banded LU factorization with partial pivoting.

    The strictly lower part of ``LU`` holds the Gauss multipliers of each
    elimination step in the row order they had at that step; the upper part
    holds U, whose upper bandwidth is at most ``2 * bands``.
    """

    LU: Tensor  # (n, n) - multipliers and U, in place
    pivots: Tensor  # (n,) - int64, row swapped with row i at step i
    bands: int  # sub- and super-diagonals of the factored matrix
