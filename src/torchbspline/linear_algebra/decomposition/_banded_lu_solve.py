"""Solve a linear system from a banded LU factorization."""

from torch import Tensor

from torchbspline.linear_algebra.decomposition._result_types import (
    BandedLUResult,
)


def banded_lu_solve(factorization: BandedLUResult, b: Tensor) -> Tensor:
    """
    Solve ``A x = b`` given the output of :func:`banded_lu_factor`.

    Parameters
    ----------
    factorization : BandedLUResult
        Factors of ``A`` from :func:`banded_lu_factor`. Not modified.
    b : Tensor
        Right-hand side, shape (n,) or (n, k).

    Returns
    -------
    x : Tensor
        Solution with the same shape as ``b``.

    Raises
    ------
    ValueError
        If ``b`` does not have n rows.

    Notes
    -----
    Forward elimination replays, for each column in turn, the recorded row
    exchange followed by the Gauss transform; back substitution then uses
    the upper factor, whose bandwidth is at most ``2 * bands``. Any number
    of right-hand sides may be solved against one factorization.
    """
    lu, pivots, bands = factorization

    n = lu.shape[0]

    if b.dim() not in (1, 2) or b.shape[0] != n:
        raise ValueError(
            f"banded_lu_solve: b must have shape ({n},) or ({n}, k), got {tuple(b.shape)}"
        )

    is_vector = b.dim() == 1

    x = b.unsqueeze(-1) if is_vector else b
    x = x.to(dtype=lu.dtype).clone()

    # Forward elimination
    for j in range(n):
        jp = int(pivots[j])

        if jp != j:
            row = x[j].clone()
            x[j] = x[jp]
            x[jp] = row

        row_stop = min(j + bands + 1, n)

        if j + 1 < row_stop:
            x[j + 1 : row_stop] -= lu[j + 1 : row_stop, j].unsqueeze(-1) * x[j]

    # Back substitution
    for j in range(n - 1, -1, -1):
        col_stop = min(j + 2 * bands + 1, n)

        if j + 1 < col_stop:
            x[j] -= lu[j, j + 1 : col_stop] @ x[j + 1 : col_stop]

        x[j] /= lu[j, j]

    if is_vector:
        x = x.squeeze(-1)

    return x
