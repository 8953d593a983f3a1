"""Benchmarks for basis evaluation and spline algebra.

Compares the direct coefficient transforms against their matrix forms and
times evaluation, fitting and the refit-based operations across orders and
problem sizes.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchsplines.basis import (
    basis_derivative,
    basis_derivative_coefficients,
    basis_evaluate,
    basis_from_breakpoints,
)
from torchsplines.interpolate import interpolate_fit
from torchsplines.spline import (
    spline,
    spline_add,
    spline_insert_knots,
    spline_multiply,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(name: str, timing: dict[str, float]) -> None:
    """Print one benchmark result."""
    print(
        f"  {name:<40} {format_time(timing['mean'])} "
        f"+/- {format_time(timing['std'])}"
    )


def uniform_basis(order: int, n_segments: int):
    """Clamped basis with uniform simple interior breakpoints."""
    breakpoints = torch.linspace(0.0, 1.0, n_segments + 1, dtype=torch.float64)
    continuities = [0] + [order - 1] * (n_segments - 1) + [0]

    return basis_from_breakpoints(breakpoints, continuities, order)


class BenchSpline:
    """Benchmarks for basis and spline operations."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(self, name: str, func: Callable, *args: Any) -> None:
        print_result(
            name,
            benchmark(
                func, *args, warmup=self.warmup, iterations=self.iterations
            ),
        )

    def bench_evaluate(
        self, order: int = 4, n_segments: int = 32, n_points: int = 10000
    ) -> None:
        """Benchmark the Cox-de Boor evaluation."""
        b = uniform_basis(order, n_segments)
        points = torch.rand(n_points, dtype=torch.float64)

        self._bench(
            f"evaluate o={order} seg={n_segments} n={n_points}",
            basis_evaluate,
            b,
            points,
        )

    def bench_fit(self, order: int = 4, n_segments: int = 32) -> None:
        """Benchmark a least-squares fit."""
        b = uniform_basis(order, n_segments)
        points = torch.linspace(0.0, 1.0, 4 * n_segments, dtype=torch.float64)

        self._bench(
            f"fit o={order} seg={n_segments}",
            interpolate_fit,
            b,
            torch.sin(4.0 * points),
            points,
        )

    def bench_derivative(self, order: int = 4, n_segments: int = 32) -> None:
        """Compare the direct derivative against the matrix form."""
        b = uniform_basis(order, n_segments)
        dim = b.knots.shape[0] - order
        coefficients = torch.randn(dim, 3, dtype=torch.float64)

        def matrix():
            _, transform = basis_derivative(b, order - 1)
            return transform @ coefficients

        self._bench(
            f"derivative (direct) o={order} seg={n_segments}",
            basis_derivative_coefficients,
            b,
            coefficients,
            order - 1,
        )
        self._bench(
            f"derivative (matrix) o={order} seg={n_segments}", matrix
        )

    def bench_algebra(self, order: int = 3, n_segments: int = 16) -> None:
        """Benchmark the refit-based spline operations."""
        left = uniform_basis(order, n_segments)
        right = uniform_basis(order, n_segments + 1)

        s = spline(
            left,
            torch.randn(left.knots.shape[0] - order, dtype=torch.float64),
        )
        t = spline(
            right,
            torch.randn(right.knots.shape[0] - order, dtype=torch.float64),
        )

        self._bench(f"add o={order} seg={n_segments}", spline_add, s, t)
        self._bench(
            f"multiply o={order} seg={n_segments}", spline_multiply, s, t
        )
        self._bench(
            f"insert_knots o={order} seg={n_segments}",
            spline_insert_knots,
            s,
            torch.rand(n_segments, dtype=torch.float64),
        )

    def run_all(self) -> None:
        """Run all benchmarks with default parameters."""
        print("=" * 60)
        print("SPLINE BENCHMARKS")
        print("=" * 60)

        print("\n--- Evaluation ---")
        self.bench_evaluate()

        print("\n--- Fitting ---")
        self.bench_fit()

        print("\n--- Derivatives ---")
        self.bench_derivative()

        print("\n--- Algebra ---")
        self.bench_algebra()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Order Scaling (evaluate) ---")
        for order in [1, 2, 4, 6, 8]:
            self.bench_evaluate(order=order)

        print("\n--- Segment Scaling (fit) ---")
        for n_segments in [8, 32, 128, 512]:
            self.bench_fit(n_segments=n_segments)

        print("\n--- Segment Scaling (multiply) ---")
        for n_segments in [4, 16, 64]:
            self.bench_algebra(n_segments=n_segments)


if __name__ == "__main__":
    bench = BenchSpline(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
