"""Hypothesis strategies for B-spline filter testing."""

from ._boundary_conditions import boundary_conditions
from ._cutoff_wavelengths import cutoff_wavelengths
from ._derivative_orders import derivative_orders
from ._sample_abscissas import sample_abscissas

__all__ = [
    # Configuration strategies
    "boundary_conditions",
    "derivative_orders",
    # Domain strategies
    "cutoff_wavelengths",
    "sample_abscissas",
]
