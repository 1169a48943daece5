"""Benchmarks for Akima spline fitting and evaluation.

Fitting is a handful of vectorized passes over the knots, evaluation is a
binary search per query followed by a cubic Horner step.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchakima.spline import akima_evaluate, akima_fit


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
    # Warmup
    for _ in range(warmup):
        func(*args, **kwargs)

    # Timed runs
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


def print_result(name: str, ts_time: dict[str, float]) -> None:
    """Print benchmark result."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  Time: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}"
    )


def generate_data(
    num_knots: int,
    seed: int | None = None,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Generate irregularly spaced knots with noisy smooth values."""
    generator = torch.Generator()
    if seed is not None:
        generator.manual_seed(seed)
    steps = 0.5 + torch.rand(num_knots, generator=generator, dtype=torch.float64)
    x = torch.cumsum(steps, dim=0)
    y = torch.sin(x / 3) + 0.05 * torch.randn(
        num_knots, generator=generator, dtype=torch.float64
    )
    return x, y


class BenchAkima:
    """Benchmark suite for Akima splines."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def bench_fit(self, num_knots: int = 1000) -> None:
        x, y = generate_data(num_knots, seed=0)
        result = benchmark(
            akima_fit,
            x,
            y,
            warmup=self.warmup,
            iterations=self.iterations,
        )
        print_result(f"akima_fit (knots={num_knots})", result)

    def bench_evaluate(
        self, num_knots: int = 1000, num_queries: int = 100000
    ) -> None:
        x, y = generate_data(num_knots, seed=0)
        spline = akima_fit(x, y)
        t = x[0] + (x[-1] - x[0]) * torch.rand(num_queries, dtype=torch.float64)
        result = benchmark(
            akima_evaluate,
            spline,
            t,
            warmup=self.warmup,
            iterations=self.iterations,
        )
        print_result(
            f"akima_evaluate (knots={num_knots}, queries={num_queries})",
            result,
        )

    def run_all(self) -> None:
        print("=" * 60)
        print("AKIMA SPLINE BENCHMARKS")
        print("=" * 60)

        self.bench_fit()
        self.bench_evaluate()

    def run_scaling(self) -> None:
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        # Fit is linear in the number of knots
        print("\n--- Knot Count Scaling (fit) ---")
        for num_knots in [100, 1000, 10000, 100000]:
            self.bench_fit(num_knots=num_knots)

        # Evaluation grows with log(knots) per query
        print("\n--- Knot Count Scaling (evaluate) ---")
        for num_knots in [100, 1000, 10000, 100000]:
            self.bench_evaluate(num_knots=num_knots, num_queries=10000)


if __name__ == "__main__":
    bench = BenchAkima(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
