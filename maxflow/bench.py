"""Repeated timed runs of the engine over one topology."""

import time
from dataclasses import dataclass

import numpy as np

from .engine import edmonds_karp

DEFAULT_BENCHMARK_RUNS = 10


@dataclass
class BenchmarkResult:
    max_flow: int
    times_ms: list
    mean_ms: float
    std_ms: float
    min_ms: float
    max_ms: float

    def as_dict(self):
        return {
            "runs": len(self.times_ms),
            "max_flow": self.max_flow,
            "times_ms": [round(t, 3) for t in self.times_ms],
            "mean_ms": round(self.mean_ms, 3),
            "std_ms": round(self.std_ms, 3),
            "min_ms": round(self.min_ms, 3),
            "max_ms": round(self.max_ms, 3)
        }


def run_benchmark(graph, source, sink, iterations=DEFAULT_BENCHMARK_RUNS,
                  timer=time.perf_counter):
    """
    Resets the flows and reruns the engine `iterations` times. The
    graph is left holding the flow of the last run.
    """
    if iterations < 1:
        raise ValueError(f"Benchmark needs at least 1 run, got {iterations}")

    values = set()
    times = np.zeros(iterations)
    for i in range(iterations):
        graph.reset()
        start = timer()
        result = edmonds_karp(graph, source, sink)
        times[i] = (timer() - start) * 1000.0
        values.add(result.value)

    if len(values) != 1:
        raise RuntimeError(f"Runs disagree on the max flow: {sorted(values)}")

    return BenchmarkResult(
        max_flow=values.pop(),
        times_ms=times.tolist(),
        mean_ms=float(np.mean(times)),
        std_ms=float(np.std(times)),
        min_ms=float(np.min(times)),
        max_ms=float(np.max(times))
    )
