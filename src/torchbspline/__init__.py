"""torchbspline: low-pass B-spline filtering of sampled data for PyTorch."""

from . import (
    linear_algebra,
    spline,
)

__all__ = [
    "linear_algebra",
    "spline",
]

__version__ = "0.1.0"
