"""B-spline filter coefficient lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

if TYPE_CHECKING:
    from ._b_spline_filter import BSplineFilter


def b_spline_filter_coefficient(spline: BSplineFilter, n: int) -> Tensor:
    """
    Coefficient of the basis function at node ``n``.

    Parameters
    ----------
    spline : BSplineFilter
        Fitted curve.
    n : int
        Node index.

    Returns
    -------
    coefficient : Tensor
        ``spline.coefficients[n]``, shape value_shape, or zeros of that
        shape when ``n`` is outside ``[0, M]``.
    """
    coefficients = spline.coefficients

    if 0 <= n <= spline.domain.intervals:
        return coefficients[n]

    return coefficients.new_zeros(coefficients.shape[1:])
