"""Performance analysis helpers."""

from .benchmark import BenchmarkResult, run_composition_benchmark

__all__ = ["BenchmarkResult", "run_composition_benchmark"]
