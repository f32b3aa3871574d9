"""Testing utilities for torchbspline."""

from .strategies import (
    boundary_conditions,
    cutoff_wavelengths,
    derivative_orders,
    sample_abscissas,
)

__all__ = [
    "boundary_conditions",
    "cutoff_wavelengths",
    "derivative_orders",
    "sample_abscissas",
]
