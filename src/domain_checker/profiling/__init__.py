"""Benchmark harness and workload generation for domain-checker."""

from domain_checker.profiling.harness import (
    BenchmarkResult,
    run_benchmark,
    run_naive,
)
from domain_checker.profiling.report import format_comparison, format_report
from domain_checker.profiling.workload import WorkloadGenerator

__all__ = [
    "BenchmarkResult",
    "WorkloadGenerator",
    "format_comparison",
    "format_report",
    "run_benchmark",
    "run_naive",
]
