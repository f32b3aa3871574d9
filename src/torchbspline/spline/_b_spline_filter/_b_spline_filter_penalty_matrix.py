"""Smoothness penalty matrix of the B-spline filter."""

from typing import List, Optional, Sequence, Tuple

import torch
from torch import Tensor

from ._constants import BANDS, BOUNDARY_CONDITIONS, QPARTS


def b_spline_filter_penalty_matrix(
    intervals: int,
    spacing: float,
    alpha: float,
    derivative_order: int = 1,
    boundary_condition: int = 1,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Assemble the smoothness penalty matrix Q.

    Parameters
    ----------
    intervals : int
        Number of node intervals M.
    spacing : float
        Node spacing :math:`\Delta x`.
    alpha : float
        Dimensionless filter strength.
    derivative_order : int
        Order k of the penalised derivative (1, 2 or 3). Default is 1.
    boundary_condition : int
        Row of the boundary condition table (0, 1 or 2). Default is 1.
    dtype : torch.dtype, optional
        Result dtype. Default is the global default dtype.
    device : torch.device, optional
        Result device.

    Returns
    -------
    Q : Tensor
        Symmetric matrix of shape (M + 1, M + 1), zero outside three
        diagonals on each side of the main diagonal.

    Raises
    ------
    ValueError
        If derivative_order or boundary_condition is unsupported, or
        intervals < 1.

    Notes
    -----
    Entry :math:`Q_{ij}` is

    .. math::

        \Delta x \, \alpha \int_0^M \phi_i^{(k)}(u) \, \phi_j^{(k)}(u) \, du

    in node units, where :math:`\phi_m` is the boundary-adjusted basis.
    Integrals of plain kernels are sums of tabulated unit-interval integrals
    over the intervals inside :math:`[0, M]`, which shortens the sums for
    node pairs near either edge. The interior band is filled first; entries
    touching nodes 0, 1, M-1 and M then receive the cross terms with the
    virtual nodes -1 and M+1 weighted by the boundary coefficients.
    """
    if derivative_order not in QPARTS:
        raise ValueError(
            f"Derivative order must be 1, 2 or 3, got {derivative_order}"
        )

    if boundary_condition not in (0, 1, 2):
        raise ValueError(
            f"Boundary condition must be 0, 1 or 2, got {boundary_condition}"
        )

    if intervals < 1:
        raise ValueError(f"Need at least 1 node interval, got {intervals}")

    parts = QPARTS[derivative_order]
    row = BOUNDARY_CONDITIONS[boundary_condition]
    scale = spacing * alpha

    n = intervals + 1

    Q = torch.zeros(n, n, dtype=dtype, device=device)

    # Band without boundary terms
    for d in range(min(BANDS, intervals) + 1):
        values = torch.tensor(
            [_integral(i, i + d, intervals, parts) for i in range(n - d)],
            dtype=Q.dtype,
            device=device,
        )
        values = values * scale

        Q.diagonal(d).copy_(values)
        Q.diagonal(-d).copy_(values)

    # Boundary terms
    edge = sorted({0, 1, intervals - 1, intervals} & set(range(n)))

    pairs = sorted(
        {
            (min(e, j), max(e, j))
            for e in edge
            for j in range(max(e - BANDS, 0), min(e + BANDS, intervals) + 1)
        }
    )

    for i, j in pairs:
        q = 0.0

        for a, weight_a in _adjusted_terms(i, intervals, row):
            for b, weight_b in _adjusted_terms(j, intervals, row):
                if a == i and b == j:
                    continue

                q += weight_a * weight_b * _integral(a, b, intervals, parts)

        if q != 0.0:
            value = float(Q[i, j]) + scale * q

            Q[i, j] = value
            Q[j, i] = value

    return Q


def _integral(
    m1: int,
    m2: int,
    intervals: int,
    parts: Sequence[Sequence[float]],
) -> float:
    """Integral over [0, M] of the product of kernel derivatives at two nodes."""
    if m1 > m2:
        m1, m2 = m2, m1

    if m2 - m1 > BANDS:
        return 0.0

    q = 0.0

    for m in range(max(m1 - 2, 0), min(m1 + 2, intervals)):
        q += parts[m2 - m1][m - m1 + 2]

    return q


def _adjusted_terms(
    m: int,
    intervals: int,
    row: Sequence[float],
) -> List[Tuple[int, float]]:
    """Kernel nodes and weights making up the adjusted basis at node ``m``."""
    terms = [(m, 1.0)]

    if 0 <= m <= 1 and row[m] != 0.0:
        terms.append((-1, row[m]))

    if intervals - 1 <= m <= intervals and row[m - intervals + 3] != 0.0:
        terms.append((intervals + 1, row[m - intervals + 3]))

    return terms
