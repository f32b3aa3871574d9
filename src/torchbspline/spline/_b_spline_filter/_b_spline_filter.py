"""B-spline filter representation and convenience function."""

from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._b_spline_filter_domain import (
    BSplineFilterDomain,
    b_spline_filter_domain,
)
from ._constants import BOUNDARY_ZERO_SLOPE


@tensorclass
class BSplineFilter:
    """Fitted B-spline filter curve.

    The curve is ``f(x) = sum_m a_m phi_m(x)`` over the boundary-adjusted
    cubic basis of its domain.

    Attributes
    ----------
    coefficients : Tensor
        Basis coefficients, shape (M + 1, *value_shape).
    domain : BSplineFilterDomain
        Domain the coefficients were solved on. Shared between fits.
    _curve : Tensor, optional
        Values at the nodes, filled by :func:`b_spline_filter_curve`.
    """

    coefficients: Tensor
    domain: BSplineFilterDomain
    _curve: Optional[Tensor]

    @property
    def curve(self) -> Tensor:
        from ._b_spline_filter_curve import b_spline_filter_curve

        return b_spline_filter_curve(self)

    def __call__(self, t: Tensor) -> Tensor:
        from ._b_spline_filter_evaluate import b_spline_filter_evaluate

        return b_spline_filter_evaluate(self, t)


def b_spline_filter(
    x: torch.Tensor,
    y: torch.Tensor,
    wavelength: float,
    derivative_order: int = 1,
    boundary_condition: int = BOUNDARY_ZERO_SLOPE,
) -> BSplineFilter:
    """Low-pass filter data with a B-spline.

    This is a convenience function that sets up a domain, fits ``y`` and
    returns the fitted curve, which can be called to evaluate it.

    Parameters
    ----------
    x : Tensor
        Sample abscissas, shape (n_samples,).
    y : Tensor
        Sample values, shape (n_samples, *value_shape).
    wavelength : float
        Cutoff wavelength, in the units of ``x``.
    derivative_order : int, optional
        Order of the penalised derivative (1, 2 or 3). Default is 1.
    boundary_condition : int, optional
        0 for zero value, 1 for zero slope, 2 for zero curvature at both
        ends. Default is 1.

    Returns
    -------
    spline : BSplineFilter
        Fitted curve. ``spline(t)`` evaluates it at ``t``.

    Examples
    --------
    >>> import torch
    >>> x = torch.arange(100, dtype=torch.float64)
    >>> y = torch.sin(2 * torch.pi * x / 50) + 0.3 * torch.sin(2 * torch.pi * x / 5)
    >>> f = b_spline_filter(x, y, wavelength=20.0)
    >>> f(torch.tensor([10.5, 20.5], dtype=torch.float64))
    """
    domain = b_spline_filter_domain(
        x,
        wavelength,
        derivative_order=derivative_order,
        boundary_condition=boundary_condition,
    )

    return domain(y)
