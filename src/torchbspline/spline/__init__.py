"""Low-pass filtering of sampled data with cubic B-splines.

The filter fits a cubic B-spline on a regular node grid by minimising the
data misfit plus a derivative penalty scaled to a cutoff wavelength, so
variation shorter than the cutoff is suppressed.

Convenience Functions
---------------------
b_spline_filter
    Set up, fit and return a callable curve in one step.

Setup
-----
b_spline_filter_domain
    Choose the node grid and factor the filter system for sample abscissas.
b_spline_filter_nodes
    Node positions of a domain.
node_intervals
    Number of node intervals and node spacing for a sample domain.

Fitting and Evaluation
----------------------
b_spline_filter_fit
    Fit the curve to sample values.
b_spline_filter_evaluate
    Evaluate a fitted curve at query points.
b_spline_filter_derivative
    First or second derivative of a fitted curve.
b_spline_filter_coefficient
    Coefficient of one basis function.
b_spline_filter_curve
    Fitted curve at the nodes (cached).

Building Blocks
---------------
b_spline_filter_basis
    Boundary-adjusted cubic basis functions.
b_spline_filter_penalty_matrix
    Smoothness penalty matrix Q.
b_spline_filter_data_matrix
    Data-fit matrix P.

Data Types
----------
BSplineFilterDomain
    Node grid and factored system for a set of sample abscissas.
BSplineFilter
    Fitted curve.

Boundary Conditions
-------------------
BOUNDARY_ZERO_VALUE, BOUNDARY_ZERO_SLOPE, BOUNDARY_ZERO_CURVATURE
    Constraint applied at both ends of the node grid.

Exceptions
----------
SplineError
    Base exception for spline operations.
DomainError
    Sample domain and cutoff wavelength admit no node grid.

Warnings
--------
NodeSpacingWarning
    Node grid coarser than the target resolution of the cutoff wavelength.
"""

from ._b_spline_filter import (
    BOUNDARY_ZERO_CURVATURE,
    BOUNDARY_ZERO_SLOPE,
    BOUNDARY_ZERO_VALUE,
    BSplineFilter,
    BSplineFilterDomain,
    b_spline_filter,
    b_spline_filter_basis,
    b_spline_filter_coefficient,
    b_spline_filter_curve,
    b_spline_filter_data_matrix,
    b_spline_filter_derivative,
    b_spline_filter_domain,
    b_spline_filter_evaluate,
    b_spline_filter_fit,
    b_spline_filter_nodes,
    b_spline_filter_penalty_matrix,
    node_intervals,
)

# Import exception subclasses
from ._domain_error import DomainError
from ._node_spacing_warning import NodeSpacingWarning
from ._spline_error import SplineError

__all__ = [
    "BOUNDARY_ZERO_CURVATURE",
    "BOUNDARY_ZERO_SLOPE",
    "BOUNDARY_ZERO_VALUE",
    "BSplineFilter",
    "BSplineFilterDomain",
    "DomainError",
    "NodeSpacingWarning",
    "SplineError",
    "b_spline_filter",
    "b_spline_filter_basis",
    "b_spline_filter_coefficient",
    "b_spline_filter_curve",
    "b_spline_filter_data_matrix",
    "b_spline_filter_derivative",
    "b_spline_filter_domain",
    "b_spline_filter_evaluate",
    "b_spline_filter_fit",
    "b_spline_filter_nodes",
    "b_spline_filter_penalty_matrix",
    "node_intervals",
]
