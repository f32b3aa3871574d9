"""Fitted B-spline filter curve at the nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ._b_spline_filter_evaluate import _evaluate

if TYPE_CHECKING:
    from ._b_spline_filter import BSplineFilter


def b_spline_filter_curve(spline: BSplineFilter) -> Tensor:
    """
    Values of a fitted curve at its M + 1 nodes.

    The values are computed on the first call and cached on ``spline``;
    later calls return the same tensor.

    Parameters
    ----------
    spline : BSplineFilter
        Fitted curve.

    Returns
    -------
    curve : Tensor
        Shape (M + 1, *value_shape). Pair with
        :func:`b_spline_filter_nodes` for the positions.
    """
    if spline._curve is None:
        coefficients = spline.coefficients

        # Exact integer node positions
        u = torch.arange(
            spline.domain.intervals + 1,
            dtype=coefficients.dtype,
            device=coefficients.device,
        )

        spline._curve = _evaluate(spline, u)

    return spline._curve
