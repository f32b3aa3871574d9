"""B-spline filter derivative evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ._b_spline_filter_evaluate import _evaluate

if TYPE_CHECKING:
    from ._b_spline_filter import BSplineFilter


def b_spline_filter_derivative(
    spline: BSplineFilter,
    t: Tensor,
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a fitted B-spline filter curve.

    Parameters
    ----------
    spline : BSplineFilter
        Fitted curve.
    t : Tensor
        Query points, shape (*query_shape).
    order : int, optional
        Derivative order, 1 or 2. Default is 1.

    Returns
    -------
    derivative : Tensor
        Derivative with respect to x, shape (*query_shape, *value_shape).

    Raises
    ------
    ValueError
        If order is not 1 or 2.

    Notes
    -----
    The curve is piecewise cubic with continuous second derivative, so the
    second derivative is piecewise linear and the third is not offered.
    """
    if order not in (1, 2):
        raise ValueError(f"Derivative order must be 1 or 2, got {order}")

    domain = spline.domain

    t = torch.as_tensor(
        t,
        dtype=domain.samples.dtype,
        device=domain.samples.device,
    )

    return _evaluate(spline, (t - domain.xmin) / domain.spacing, order=order)
