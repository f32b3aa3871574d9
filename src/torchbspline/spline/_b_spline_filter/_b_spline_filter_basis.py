"""Boundary-adjusted cubic B-spline basis."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from ._constants import BOUNDARY_CONDITIONS

if TYPE_CHECKING:
    from ._b_spline_filter_domain import BSplineFilterDomain


def b_spline_filter_basis(
    domain: BSplineFilterDomain,
    m: Union[int, Tensor],
    t: Tensor,
    order: int = 0,
) -> Tensor:
    r"""
    Evaluate the basis function anchored at node ``m``.

    Parameters
    ----------
    domain : BSplineFilterDomain
        Domain defining the node grid and boundary condition.
    m : int or Tensor
        Node index (or integer tensor of indices, broadcast against ``t``).
        Indices outside ``[0, M]`` give the plain kernel without boundary
        terms.
    t : Tensor
        Evaluation points, shape (*query_shape).
    order : int
        Derivative order with respect to x (0, 1 or 2). Default is 0.

    Returns
    -------
    basis : Tensor
        Basis values, shape of ``t`` broadcast with ``m``.

    Raises
    ------
    ValueError
        If order is not 0, 1 or 2.

    Notes
    -----
    With :math:`z = |x - x_m| / \Delta x` the kernel is

    .. math::

        B(z) = \begin{cases}
            \frac{1}{4}(2 - z)^3 - (1 - z)^3 & z < 1 \\
            \frac{1}{4}(2 - z)^3 & 1 \le z < 2 \\
            0 & z \ge 2
        \end{cases}

    Nodes 0 and 1 gain :math:`\beta_m B` of the virtual node -1, and nodes
    M-1 and M gain :math:`\beta_m B` of the virtual node M+1, with
    :math:`\beta_m` taken from the boundary condition table.
    """
    if order not in (0, 1, 2):
        raise ValueError(f"Derivative order must be 0, 1 or 2, got {order}")

    t = torch.as_tensor(
        t,
        dtype=domain.samples.dtype,
        device=domain.samples.device,
    )

    u = (t - domain.xmin) / domain.spacing

    m = torch.as_tensor(m, dtype=torch.int64, device=u.device)

    result = _basis(
        u,
        m,
        domain.intervals,
        domain.boundary_condition,
        order=order,
    )

    if order > 0:
        result = result / domain.spacing**order

    return result


def _kernel(z: Tensor, order: int = 0) -> Tensor:
    """Unit cubic kernel, or its derivative, at node offset ``z``."""
    t = z.abs()

    outer = torch.clamp(2.0 - t, min=0.0)
    inner = torch.clamp(1.0 - t, min=0.0)

    if order == 0:
        return 0.25 * outer**3 - inner**3

    if order == 1:
        return torch.sign(z) * (-0.75 * outer**2 + 3.0 * inner**2)

    return 1.5 * outer - 6.0 * inner


def _basis(
    u: Tensor,
    m: Tensor,
    intervals: int,
    boundary_condition: int,
    order: int = 0,
) -> Tensor:
    """Basis at node ``m`` for node-unit positions ``u`` (derivatives in u)."""
    table = torch.tensor(
        BOUNDARY_CONDITIONS[boundary_condition],
        dtype=u.dtype,
        device=u.device,
    )
    zero = table.new_zeros(())

    result = _kernel(u - m, order)

    # Low edge: nodes 0 and 1 borrow from virtual node -1
    low = (m >= 0) & (m <= 1)
    beta_low = torch.where(low, table[torch.clamp(m, 0, 1)], zero)

    # High edge: nodes M-1 and M borrow from virtual node M+1
    high = (m >= intervals - 1) & (m <= intervals)
    beta_high = torch.where(
        high,
        table[torch.clamp(m - intervals + 3, 2, 3)],
        zero,
    )

    if bool(low.any()):
        result = result + beta_low * _kernel(u + 1.0, order)

    if bool(high.any()):
        result = result + beta_high * _kernel(u - (intervals + 1), order)

    return result


def _support_window(u: Tensor, intervals: int) -> Tuple[Tensor, Tensor]:
    """Nodes whose basis can be nonzero at ``u``.

    Returns node indices of shape (*u.shape, 5), the window
    ``[m - 2, m + 2]`` around the home node ``m = floor(u)`` clamped to
    ``[0, M]``, and a mask of the indices that lie inside ``[0, M]``.
    """
    home = torch.clamp(torch.floor(u), 0, intervals).to(torch.int64)

    offsets = torch.arange(-2, 3, dtype=torch.int64, device=u.device)

    nodes = home.unsqueeze(-1) + offsets

    valid = (nodes >= 0) & (nodes <= intervals)

    return nodes, valid
