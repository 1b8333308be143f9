"""Benchmark harness: bisect index versus linear scan.

Both runs see the same WorkloadGenerator output. run_benchmark() builds
a BlocklistIndex once and answers every query with a bisect;
run_naive() skips the build and tests each query against every raw
blocklist entry. The forbidden counts must match; the timings show
what the sort-once design buys.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from domain_checker.index.blocklist import BlocklistIndex, naive_is_forbidden
from domain_checker.profiling.workload import WorkloadGenerator

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkResult:
    """Timing results from a single benchmark run."""
    label: str
    blocklist_size: int
    entries_after_compaction: int
    total_queries: int
    forbidden_count: int
    build_time_ms: float
    query_time_ms: float
    queries_per_sec: float
    cprofile_stats: str | None = None

    @property
    def total_time_ms(self) -> float:
        return self.build_time_ms + self.query_time_ms


def _profiled(fn, profile: bool) -> str | None:
    """Run fn, optionally under cProfile; return the formatted stats."""
    if not profile:
        fn()
        return None
    pr = cProfile.Profile()
    pr.enable()
    fn()
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(20)
    return s.getvalue()


def run_benchmark(
    blocklist_size: int = 10_000,
    query_count: int = 10_000,
    seed: int = 42,
    profile: bool = False,
) -> BenchmarkResult:
    """Build a BlocklistIndex and time every query against it."""
    gen = WorkloadGenerator(
        blocklist_size=blocklist_size,
        query_count=query_count,
        seed=seed,
    )
    blocklist = gen.blocklist
    queries = gen.queries

    t0 = time.perf_counter()
    index = BlocklistIndex(blocklist)
    build_ms = (time.perf_counter() - t0) * 1000

    forbidden = 0

    def _run():
        nonlocal forbidden
        for q in queries:
            if index.is_forbidden(q):
                forbidden += 1

    t0 = time.perf_counter()
    stats = _profiled(_run, profile)
    query_ms = (time.perf_counter() - t0) * 1000

    qps = len(queries) / (query_ms / 1000) if query_ms > 0 else 0
    log.info(
        "bisect run: %d queries in %.1f ms against %d entries",
        len(queries), query_ms, len(index),
    )

    return BenchmarkResult(
        label="bisect index",
        blocklist_size=len(blocklist),
        entries_after_compaction=len(index),
        total_queries=len(queries),
        forbidden_count=forbidden,
        build_time_ms=build_ms,
        query_time_ms=query_ms,
        queries_per_sec=qps,
        cprofile_stats=stats,
    )


def run_naive(
    blocklist_size: int = 10_000,
    query_count: int = 10_000,
    seed: int = 42,
    profile: bool = False,
) -> BenchmarkResult:
    """Answer every query with a linear scan of the raw blocklist."""
    gen = WorkloadGenerator(
        blocklist_size=blocklist_size,
        query_count=query_count,
        seed=seed,
    )
    blocklist = gen.blocklist
    queries = gen.queries

    forbidden = 0

    def _run():
        nonlocal forbidden
        for q in queries:
            if naive_is_forbidden(blocklist, q):
                forbidden += 1

    t0 = time.perf_counter()
    stats = _profiled(_run, profile)
    query_ms = (time.perf_counter() - t0) * 1000

    qps = len(queries) / (query_ms / 1000) if query_ms > 0 else 0
    log.info(
        "naive run: %d queries in %.1f ms against %d domains",
        len(queries), query_ms, len(blocklist),
    )

    return BenchmarkResult(
        label="linear scan",
        blocklist_size=len(blocklist),
        entries_after_compaction=len(blocklist),
        total_queries=len(queries),
        forbidden_count=forbidden,
        build_time_ms=0.0,
        query_time_ms=query_ms,
        queries_per_sec=qps,
        cprofile_stats=stats,
    )
