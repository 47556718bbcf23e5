"""
Benchmarking module for the component sorts and the name search.

This module provides a Triton-inspired benchmarking framework for comparing
comparison counts and timings of the algorithms across collection sizes.
"""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    SortBenchmarkHelper,
    create_sort_benchmark,
    perf_report,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "SortBenchmarkHelper",
    "create_sort_benchmark",
    "perf_report",
]
