"""Benchmark utilities and runners.

This package provides:
- random integer datasets,
- sortedness validation,
- the repeated-trial benchmark runner.
"""

from .dataset import generate_dataset
from .runner import BenchmarkRunner, run_all_benchmarks
from .validation import is_sorted

__all__ = ["BenchmarkRunner", "generate_dataset", "is_sorted", "run_all_benchmarks"]
