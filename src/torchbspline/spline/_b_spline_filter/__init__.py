from ._b_spline_filter import BSplineFilter, b_spline_filter
from ._b_spline_filter_basis import b_spline_filter_basis
from ._b_spline_filter_coefficient import b_spline_filter_coefficient
from ._b_spline_filter_curve import b_spline_filter_curve
from ._b_spline_filter_data_matrix import b_spline_filter_data_matrix
from ._b_spline_filter_derivative import b_spline_filter_derivative
from ._b_spline_filter_domain import (
    BSplineFilterDomain,
    b_spline_filter_domain,
)
from ._b_spline_filter_evaluate import b_spline_filter_evaluate
from ._b_spline_filter_fit import b_spline_filter_fit
from ._b_spline_filter_nodes import b_spline_filter_nodes
from ._b_spline_filter_penalty_matrix import b_spline_filter_penalty_matrix
from ._constants import (
    BOUNDARY_ZERO_CURVATURE,
    BOUNDARY_ZERO_SLOPE,
    BOUNDARY_ZERO_VALUE,
)
from ._node_intervals import node_intervals

__all__ = [
    "BOUNDARY_ZERO_CURVATURE",
    "BOUNDARY_ZERO_SLOPE",
    "BOUNDARY_ZERO_VALUE",
    "BSplineFilter",
    "BSplineFilterDomain",
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
