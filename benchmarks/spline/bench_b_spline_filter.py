"""Benchmarks for B-spline filter functions.

This module times torchbspline filter setup, fitting, evaluation and the
banded LU solver, comparing the solver against scipy.linalg.solve_banded.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy.linalg import solve_banded

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

# torchbspline imports
from torchbspline.linear_algebra.decomposition import (
    banded_lu_factor,
    banded_lu_solve,
)
from torchbspline.spline import (
    b_spline_filter_curve,
    b_spline_filter_domain,
    b_spline_filter_evaluate,
    b_spline_filter_fit,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Time repeated calls of a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of untimed calls. Default is 3.
    iterations : int, optional
        Number of timed calls. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        'mean', 'std', 'min' and 'max' time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(
    name: str,
    bspline_time: dict[str, float],
    scipy_time: dict[str, float] | None = None,
) -> None:
    """Print benchmark results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchbspline: {format_time(bspline_time['mean'])} "
        f"+/- {format_time(bspline_time['std'])}"
    )
    if scipy_time is not None:
        print(
            f"  scipy:        {format_time(scipy_time['mean'])} "
            f"+/- {format_time(scipy_time['std'])}"
        )


def samples(sample_count: int) -> tuple[torch.Tensor, torch.Tensor]:
    """Irregular abscissas on [0, sample_count] and a noisy two-tone signal."""
    generator = torch.Generator().manual_seed(0)

    x = torch.sort(
        torch.rand(sample_count, dtype=torch.float64, generator=generator)
    ).values
    x = x * sample_count

    y = (
        torch.sin(2 * torch.pi * x / (sample_count / 4))
        + 0.3 * torch.sin(2 * torch.pi * x / 3)
        + 0.1 * torch.randn(sample_count, dtype=torch.float64, generator=generator)
    )

    return x, y


class BenchBSplineFilter:
    """Benchmarks for B-spline filter functions."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_domain(self, sample_count: int = 1000) -> None:
        """Benchmark node search, matrix assembly and factorization."""
        x, _ = samples(sample_count)

        print_result(
            f"b_spline_filter_domain (samples={sample_count})",
            self._bench(b_spline_filter_domain, x, 20.0),
        )

    def bench_fit(self, sample_count: int = 1000, columns: int = 1) -> None:
        """Benchmark fitting against a prepared domain."""
        x, y = samples(sample_count)

        domain = b_spline_filter_domain(x, 20.0)

        if columns > 1:
            y = y.unsqueeze(-1).expand(sample_count, columns).contiguous()

        print_result(
            f"b_spline_filter_fit (samples={sample_count}, columns={columns})",
            self._bench(b_spline_filter_fit, domain, y),
        )

    def bench_evaluate(
        self, sample_count: int = 1000, query_count: int = 100000
    ) -> None:
        """Benchmark point evaluation."""
        x, y = samples(sample_count)

        spline = b_spline_filter_domain(x, 20.0)(y)

        t = torch.linspace(0, sample_count, query_count, dtype=torch.float64)

        print_result(
            f"b_spline_filter_evaluate (queries={query_count})",
            self._bench(b_spline_filter_evaluate, spline, t),
        )

    def bench_curve(self, sample_count: int = 1000) -> None:
        """Benchmark curve materialization on fresh fits."""
        x, y = samples(sample_count)

        domain = b_spline_filter_domain(x, 20.0)

        print_result(
            f"b_spline_filter_curve (samples={sample_count})",
            self._bench(lambda: b_spline_filter_curve(domain(y))),
        )

    def bench_banded_solve(self, n: int = 1000, bands: int = 3) -> None:
        """Benchmark banded LU factor and solve vs scipy.linalg.solve_banded."""
        i = torch.arange(n)
        mask = (i.unsqueeze(0) - i.unsqueeze(1)).abs() <= bands

        a = torch.where(
            mask,
            torch.randn(n, n, dtype=torch.float64),
            torch.zeros(n, n, dtype=torch.float64),
        )
        a = a + 4 * bands * torch.eye(n, dtype=torch.float64)
        b = torch.randn(n, dtype=torch.float64)

        bspline_time = self._bench(
            lambda: banded_lu_solve(banded_lu_factor(a, bands), b)
        )

        scipy_time = None
        if SCIPY_AVAILABLE:
            ab = np.zeros((2 * bands + 1, n))
            a_np = a.numpy()
            for offset in range(-bands, bands + 1):
                diagonal = np.diagonal(a_np, offset)
                if offset >= 0:
                    ab[bands - offset, offset:] = diagonal
                else:
                    ab[bands - offset, : n + offset] = diagonal
            scipy_time = self._bench(
                solve_banded, (bands, bands), ab, b.numpy()
            )

        print_result(
            f"banded LU solve (n={n}, bands={bands})",
            bspline_time,
            scipy_time,
        )

    def run_all(self) -> None:
        """Run all B-spline filter benchmarks."""
        print("=" * 60)
        print("B-SPLINE FILTER BENCHMARKS")
        print("=" * 60)

        print("\n--- Setup ---")
        self.bench_domain()

        print("\n--- Fitting ---")
        self.bench_fit()
        self.bench_fit(columns=16)

        print("\n--- Evaluation ---")
        self.bench_evaluate()
        self.bench_curve()

        print("\n--- Banded Solver ---")
        self.bench_banded_solve()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying sample counts."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Sample Count Scaling (setup) ---")
        for sample_count in [100, 1000, 10000]:
            self.bench_domain(sample_count=sample_count)

        print("\n--- System Size Scaling (banded solve) ---")
        for n in [100, 1000, 5000]:
            self.bench_banded_solve(n=n)


if __name__ == "__main__":
    bench = BenchBSplineFilter(warmup=2, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
