"""B-spline filter evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ._b_spline_filter_basis import _basis, _support_window

if TYPE_CHECKING:
    from ._b_spline_filter import BSplineFilter


def b_spline_filter_evaluate(
    spline: BSplineFilter,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a fitted B-spline filter curve at query points.

    Parameters
    ----------
    spline : BSplineFilter
        Fitted curve.
    t : Tensor
        Query points, shape (*query_shape). A scalar gives a result of
        shape value_shape.

    Returns
    -------
    y : Tensor
        Curve values, shape (*query_shape, *value_shape).

    Notes
    -----
    Points outside ``[xmin, xmax]`` are evaluated from the basis functions
    that reach them and vanish from three node spacings beyond the ends.
    """
    domain = spline.domain

    t = torch.as_tensor(
        t,
        dtype=domain.samples.dtype,
        device=domain.samples.device,
    )

    return _evaluate(spline, (t - domain.xmin) / domain.spacing)


def _evaluate(spline: BSplineFilter, u: Tensor, order: int = 0) -> Tensor:
    """Curve, or its order-th derivative in x, at node-unit positions."""
    domain = spline.domain
    coefficients = spline.coefficients

    n = domain.intervals + 1

    query_shape = u.shape
    value_shape = coefficients.shape[1:]

    coef_2d = coefficients.reshape(n, -1)

    nodes, valid = _support_window(u.reshape(-1), domain.intervals)

    values = _basis(
        u.reshape(-1, 1),
        nodes,
        domain.intervals,
        domain.boundary_condition,
        order=order,
    )
    values = torch.where(valid, values, torch.zeros_like(values))

    # (n_query, 5, n_values)
    gathered = coef_2d[torch.clamp(nodes, 0, domain.intervals)]

    result = (values.unsqueeze(-1) * gathered).sum(dim=1)

    if order > 0:
        result = result / domain.spacing**order

    return result.reshape((*query_shape, *value_shape))
