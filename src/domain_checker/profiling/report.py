"""Report generation for benchmark results.

Formats BenchmarkResult data into human-readable tables for terminal
output.
"""
from __future__ import annotations

from domain_checker.profiling.harness import BenchmarkResult


def format_report(result: BenchmarkResult) -> str:
    """Format a BenchmarkResult as a readable report string."""
    lines = [
        f"=== {result.label} ===",
        f"Blocklist:         {result.blocklist_size:,} domains",
        f"After compaction:  {result.entries_after_compaction:,} entries",
        f"Queries:           {result.total_queries:,}",
        f"Forbidden:         {result.forbidden_count:,}",
        f"Build time:        {result.build_time_ms:.1f} ms",
        f"Query time:        {result.query_time_ms:.1f} ms",
        f"Throughput:        {result.queries_per_sec:,.0f} queries/sec",
    ]
    return "\n".join(lines)


def format_comparison(
    before: BenchmarkResult,
    after: BenchmarkResult,
) -> str:
    """Format a before/after comparison table."""

    def _speedup(old: float, new: float) -> str:
        if new <= 0:
            return "inf"
        ratio = old / new
        return f"{ratio:.1f}x"

    lines = [
        f"{'Metric':<30} {before.label:>14} {after.label:>14} {'Speedup':>10}",
        "-" * 70,
        f"{'Query time (ms)':<30} {before.query_time_ms:>14.1f} "
        f"{after.query_time_ms:>14.1f} "
        f"{_speedup(before.query_time_ms, after.query_time_ms):>10}",
        f"{'Total time (ms)':<30} {before.total_time_ms:>14.1f} "
        f"{after.total_time_ms:>14.1f} "
        f"{_speedup(before.total_time_ms, after.total_time_ms):>10}",
        f"{'Throughput (queries/sec)':<30} {before.queries_per_sec:>14,.0f} "
        f"{after.queries_per_sec:>14,.0f} "
        f"{_speedup(after.queries_per_sec, before.queries_per_sec):>10}",
        f"{'Entries searched':<30} {before.entries_after_compaction:>14,} "
        f"{after.entries_after_compaction:>14,} {'':>10}",
    ]
    if before.forbidden_count != after.forbidden_count:
        lines.append(
            f"WARNING: forbidden counts differ "
            f"({before.forbidden_count} vs {after.forbidden_count})"
        )
    return "\n".join(lines)
