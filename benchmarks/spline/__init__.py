"""Benchmarks for B-spline filter functions.

This module provides benchmark classes for timing B-spline filter setup,
fitting and evaluation, and the banded solver against a scipy baseline.
"""

from .bench_b_spline_filter import BenchBSplineFilter

__all__ = [
    "BenchBSplineFilter",
]
