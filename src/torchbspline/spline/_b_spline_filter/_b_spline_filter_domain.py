"""Sample domain of the B-spline filter."""

import math
from typing import TYPE_CHECKING, Optional

import torch
from torch import Tensor

from torchbspline.linear_algebra.decomposition import (
    BandedLUResult,
    banded_lu_factor,
)

from .._domain_error import DomainError
from ._b_spline_filter_data_matrix import b_spline_filter_data_matrix
from ._b_spline_filter_penalty_matrix import b_spline_filter_penalty_matrix
from ._constants import BANDS, BOUNDARY_ZERO_SLOPE, QPARTS
from ._node_intervals import node_intervals

if TYPE_CHECKING:
    from ._b_spline_filter import BSplineFilter


class BSplineFilterDomain:
    """Node grid and factored system for one set of sample abscissas.

    A domain is built once per (abscissas, cutoff wavelength, derivative
    order, boundary condition) and can then filter any number of sample
    value arrays. Fitting never modifies it.

    Attributes
    ----------
    samples : Tensor
        Sample abscissas, shape (n_samples,).
    xmin, xmax : float
        Extent of the samples; node 0 sits at ``xmin`` and node M at
        ``xmax``.
    intervals : int
        Number of node intervals M.
    spacing : float
        Node spacing ``(xmax - xmin) / M``.
    wavelength : float
        Cutoff wavelength.
    alpha : float
        Filter strength ``(wavelength / (2 pi spacing)) ** (2 k)``.
    derivative_order : int
        Order k of the penalised derivative.
    boundary_condition : int
        Row of the boundary condition table.
    penalty_matrix : Tensor
        Smoothness penalty Q, shape (M + 1, M + 1).
    data_matrix : Tensor
        Data-fit matrix P, shape (M + 1, M + 1).
    matrix : Tensor
        ``Q + P``.
    factorization : BandedLUResult
        Banded LU factors of ``matrix``.
    """

    def __init__(
        self,
        samples: Tensor,
        xmin: float,
        xmax: float,
        intervals: int,
        spacing: float,
        wavelength: float,
        alpha: float,
        derivative_order: int,
        boundary_condition: int,
        penalty_matrix: Tensor,
        data_matrix: Tensor,
        factorization: BandedLUResult,
    ):
        self.samples = samples
        self.xmin = xmin
        self.xmax = xmax
        self.intervals = intervals
        self.spacing = spacing
        self.wavelength = wavelength
        self.alpha = alpha
        self.derivative_order = derivative_order
        self.boundary_condition = boundary_condition
        self.penalty_matrix = penalty_matrix
        self.data_matrix = data_matrix
        self.matrix = penalty_matrix + data_matrix
        self.factorization = factorization

        self._nodes: Optional[Tensor] = None

    @property
    def sample_count(self) -> int:
        return self.samples.shape[0]

    @property
    def nodes(self) -> Tensor:
        from ._b_spline_filter_nodes import b_spline_filter_nodes

        return b_spline_filter_nodes(self)

    def __call__(self, y: Tensor) -> "BSplineFilter":
        from ._b_spline_filter_fit import b_spline_filter_fit

        return b_spline_filter_fit(self, y)

    def __repr__(self) -> str:
        return (
            f"BSplineFilterDomain(samples={self.sample_count}, "
            f"xmin={self.xmin}, xmax={self.xmax}, "
            f"intervals={self.intervals}, spacing={self.spacing}, "
            f"wavelength={self.wavelength}, "
            f"derivative_order={self.derivative_order}, "
            f"boundary_condition={self.boundary_condition})"
        )


def b_spline_filter_domain(
    x: Tensor,
    wavelength: float,
    derivative_order: int = 1,
    boundary_condition: int = BOUNDARY_ZERO_SLOPE,
) -> BSplineFilterDomain:
    """
    Set up a B-spline filter for a set of sample abscissas.

    Chooses the node grid, assembles the penalty and data matrices, and
    factors their sum.

    Parameters
    ----------
    x : Tensor
        Sample abscissas, shape (n_samples,). Need not be sorted. Integer
        input is converted to the default floating dtype.
    wavelength : float
        Cutoff wavelength, in the units of ``x``. Variation on scales
        shorter than this is suppressed.
    derivative_order : int, optional
        Order k of the penalised derivative (1, 2 or 3). Default is 1.
    boundary_condition : int, optional
        Constraint at both ends of the node grid: 0 for zero value, 1 for
        zero slope, 2 for zero curvature. Default is 1.

    Returns
    -------
    domain : BSplineFilterDomain
        Reusable filter domain. Call it with sample values to fit.

    Raises
    ------
    ValueError
        If x is not 1D, or derivative_order or boundary_condition is
        unsupported.
    DomainError
        If there are fewer than 2 samples, any abscissa is not finite, or
        the wavelength is not in ``(0, xmax - xmin]``, or the samples are
        too sparse for two nodes per cutoff wavelength.
    SingularMatrixError
        If ``Q + P`` cannot be factored.

    Warns
    -----
    NodeSpacingWarning
        If the samples only allow fewer than four nodes per cutoff
        wavelength.

    Examples
    --------
    >>> import torch
    >>> x = torch.arange(100, dtype=torch.float64)
    >>> domain = b_spline_filter_domain(x, 20.0)
    >>> domain.intervals
    49
    >>> spline = domain(torch.sin(2 * torch.pi * x / 50))
    """
    x = torch.as_tensor(x)

    if not x.is_floating_point():
        x = x.to(torch.get_default_dtype())

    if x.dim() != 1:
        raise ValueError(f"x must be 1D, got shape {tuple(x.shape)}")

    if derivative_order not in QPARTS:
        raise ValueError(
            f"Derivative order must be 1, 2 or 3, got {derivative_order}"
        )

    if boundary_condition not in (0, 1, 2):
        raise ValueError(
            f"Boundary condition must be 0, 1 or 2, got {boundary_condition}"
        )

    if x.shape[0] < 2:
        raise DomainError(f"Need at least 2 samples, got {x.shape[0]}")

    if not bool(torch.isfinite(x).all()):
        raise DomainError("Sample abscissas must be finite")

    xmin = float(x.min())
    xmax = float(x.max())

    wavelength = float(wavelength)

    intervals, spacing = node_intervals(x.shape[0], xmax - xmin, wavelength)

    alpha = (wavelength / (2.0 * math.pi * spacing)) ** (2 * derivative_order)

    penalty_matrix = b_spline_filter_penalty_matrix(
        intervals,
        spacing,
        alpha,
        derivative_order,
        boundary_condition,
        dtype=x.dtype,
        device=x.device,
    )

    data_matrix = b_spline_filter_data_matrix(
        x,
        xmin,
        intervals,
        spacing,
        boundary_condition,
    )

    factorization = banded_lu_factor(penalty_matrix + data_matrix, BANDS)

    return BSplineFilterDomain(
        samples=x,
        xmin=xmin,
        xmax=xmax,
        intervals=intervals,
        spacing=spacing,
        wavelength=wavelength,
        alpha=alpha,
        derivative_order=derivative_order,
        boundary_condition=boundary_condition,
        penalty_matrix=penalty_matrix,
        data_matrix=data_matrix,
        factorization=factorization,
    )
