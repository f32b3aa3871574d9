"""Fit a B-spline filter to sample values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from torchbspline.linear_algebra.decomposition import banded_lu_solve

from ._b_spline_filter_basis import _basis, _support_window

if TYPE_CHECKING:
    from ._b_spline_filter import BSplineFilter
    from ._b_spline_filter_domain import BSplineFilterDomain


def b_spline_filter_fit(
    domain: BSplineFilterDomain,
    y: Tensor,
) -> BSplineFilter:
    r"""
    Fit the B-spline filter curve to sample values.

    Solves

    .. math::

        (Q + P) \, a = b, \qquad
        b_m = \Delta x \sum_j y_j \, \phi_m(x_j)

    against the factorization held by ``domain``.

    Parameters
    ----------
    domain : BSplineFilterDomain
        Filter domain from :func:`b_spline_filter_domain`. Not modified.
    y : Tensor
        Sample values aligned with ``domain.samples``, shape
        (n_samples, *value_shape). Each trailing column is filtered
        independently.

    Returns
    -------
    spline : BSplineFilter
        Fitted curve with coefficients of shape (M + 1, *value_shape).

    Raises
    ------
    ValueError
        If y does not have one value per sample.
    """
    from ._b_spline_filter import BSplineFilter

    samples = domain.samples

    y = torch.as_tensor(y, dtype=samples.dtype, device=samples.device)

    if y.dim() == 0 or y.shape[0] != domain.sample_count:
        raise ValueError(
            f"y must have shape ({domain.sample_count}, *value_shape), "
            f"got {tuple(y.shape)}"
        )

    value_shape = y.shape[1:]

    y_2d = y.reshape(domain.sample_count, -1)

    u = (samples - domain.xmin) / domain.spacing

    nodes, valid = _support_window(u, domain.intervals)

    values = _basis(
        u.unsqueeze(-1),
        nodes,
        domain.intervals,
        domain.boundary_condition,
    )

    # (n_samples, 5, n_values)
    contributions = values.unsqueeze(-1) * y_2d.unsqueeze(1)

    b = y_2d.new_zeros(domain.intervals + 1, y_2d.shape[1])
    b = b.index_add(0, nodes[valid], contributions[valid])
    b = b * domain.spacing

    coefficients = banded_lu_solve(domain.factorization, b)

    coefficients = coefficients.reshape(domain.intervals + 1, *value_shape)

    return BSplineFilter(
        coefficients=coefficients,
        domain=domain,
        _curve=None,
        batch_size=[],
    )
