"""Benchmarks for curve evaluation functions.

Compares the Bernstein and De Casteljau forms of Bezier evaluation and
shows how Cox-de Boor basis evaluation scales with degree.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from splineface.spline import (
    b_spline_basis_evaluate,
    bezier,
    bezier_spline,
    bezier_spline_evaluate,
    knot_span,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Returns
    -------
    dict
        Timing statistics in seconds: 'mean', 'std', 'min', 'max'.
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
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(ts_time['mean'])} +/- "
            f"{format_time(ts_time['std'])}{suffix}"
        )


def clamped_uniform_knots(degree: int, n_spans: int) -> torch.Tensor:
    interior = torch.linspace(0, 1, n_spans + 1, dtype=torch.float64)
    return torch.cat(
        [
            torch.zeros(degree, dtype=torch.float64),
            interior,
            torch.ones(degree, dtype=torch.float64),
        ]
    )


class BenchCurveEvaluation:
    """Benchmarks for Bezier and B-spline evaluation."""

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

    def bench_bezier_forms(
        self, order: int = 8, n_points: int = 10000
    ) -> None:
        """Bernstein-weighted sum against De Casteljau."""
        torch.manual_seed(0)
        points = torch.randn(order, 3, dtype=torch.float64)
        u = torch.rand(n_points, dtype=torch.float64)

        curve = bezier(points)
        spline = bezier_spline(points)

        print_comparison(
            f"Bezier order={order}, n_points={n_points}",
            {
                "bernstein": self._bench(curve, u),
                "de_casteljau": self._bench(bezier_spline_evaluate, spline, u),
            },
        )

    def bench_basis_degree(
        self, degree: int = 3, n_points: int = 10000
    ) -> None:
        """All p + 1 active basis functions at each parameter."""
        knots = clamped_uniform_knots(degree, 8)
        u = torch.rand(n_points, dtype=torch.float64)

        def active_basis() -> None:
            span = knot_span(knots, u)
            for s in torch.unique(span).tolist():
                u_s = u[span == s]
                for i in range(s - degree, s + 1):
                    b_spline_basis_evaluate(knots, degree, i, u_s)

        print_comparison(
            f"Cox-de Boor degree={degree}, n_points={n_points}",
            {"active_basis": self._bench(active_basis)},
        )

    def run_all(self) -> None:
        print("=" * 60)
        print("CURVE EVALUATION BENCHMARKS")
        print("=" * 60)

        print("\n--- Bezier Order Scaling ---")
        for order in [2, 4, 8, 16]:
            self.bench_bezier_forms(order=order)

        print("\n--- B-spline Degree Scaling ---")
        for degree in [1, 2, 3, 5, 7]:
            self.bench_basis_degree(degree=degree)


if __name__ == "__main__":
    bench = BenchCurveEvaluation(warmup=3, iterations=10)
    bench.run_all()
