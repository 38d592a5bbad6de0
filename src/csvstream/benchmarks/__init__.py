"""Benchmark utilities and runners.

This package provides:
- the sequential file read benchmark,
- repeatable in-memory datasets,
- report generation (JSON/Markdown).
"""

from .file_read import (
    DEFAULT_PATH,
    BenchmarkError,
    BenchmarkState,
    DecodeError,
    OpenError,
    ReadBenchmarkResult,
    RecordCountError,
    run_read_benchmark,
)
from .runner import BenchmarkReport, run_all_benchmarks

__all__ = [
    "DEFAULT_PATH",
    "BenchmarkError",
    "BenchmarkReport",
    "BenchmarkState",
    "DecodeError",
    "OpenError",
    "ReadBenchmarkResult",
    "RecordCountError",
    "run_all_benchmarks",
    "run_read_benchmark",
]
