"""Data-fit matrix of the B-spline filter."""

import torch
from torch import Tensor

from ._b_spline_filter_basis import _basis, _support_window
from ._constants import BANDS


def b_spline_filter_data_matrix(
    x: Tensor,
    xmin: float,
    intervals: int,
    spacing: float,
    boundary_condition: int = 1,
) -> Tensor:
    r"""
    Assemble the data-fit matrix P.

    Parameters
    ----------
    x : Tensor
        Sample abscissas, shape (n_samples,).
    xmin : float
        Position of node 0.
    intervals : int
        Number of node intervals M.
    spacing : float
        Node spacing :math:`\Delta x`.
    boundary_condition : int
        Row of the boundary condition table (0, 1 or 2). Default is 1.

    Returns
    -------
    P : Tensor
        Symmetric matrix of shape (M + 1, M + 1), zero outside three
        diagonals on each side of the main diagonal.

    Notes
    -----
    .. math::

        P_{pq} = \Delta x \sum_j \phi_p(x_j) \, \phi_q(x_j)

    Only the basis functions in the window ``[m - 2, m + 2]`` around the
    home node :math:`m = \lfloor (x_j - x_{min}) / \Delta x \rfloor` can be
    nonzero at :math:`x_j`, so each sample touches at most a 5x5 block.
    """
    u = (x - xmin) / spacing

    nodes, valid = _support_window(u, intervals)

    values = _basis(u.unsqueeze(-1), nodes, intervals, boundary_condition)

    n = intervals + 1

    upper = torch.zeros(n, n, dtype=x.dtype, device=x.device)

    width = nodes.shape[-1]

    for p in range(width):
        for q in range(p, min(p + BANDS, width - 1) + 1):
            mask = valid[:, p] & valid[:, q]

            upper.index_put_(
                (nodes[mask, p], nodes[mask, q]),
                values[mask, p] * values[mask, q] * spacing,
                accumulate=True,
            )

    return upper + torch.triu(upper, diagonal=1).T
