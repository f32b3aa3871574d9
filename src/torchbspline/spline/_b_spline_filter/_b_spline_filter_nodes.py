"""Node positions of a B-spline filter domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._b_spline_filter_domain import BSplineFilterDomain


def b_spline_filter_nodes(domain: BSplineFilterDomain) -> Tensor:
    """
    Node positions ``xmin + i * spacing`` for ``i = 0, ..., M``.

    Computed on first use and cached on ``domain``.

    Parameters
    ----------
    domain : BSplineFilterDomain
        Filter domain.

    Returns
    -------
    nodes : Tensor
        Shape (M + 1,), dtype and device of ``domain.samples``.
    """
    if domain._nodes is None:
        i = torch.arange(
            domain.intervals + 1,
            dtype=domain.samples.dtype,
            device=domain.samples.device,
        )

        domain._nodes = domain.xmin + i * domain.spacing

    return domain._nodes
