"""domain-checker CLI entry point.

Usage: uv run domain-checker [--log-level LEVEL] [command]
"""
from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import TextIO

log = logging.getLogger(__name__)

EXIT_FILE_ERROR = 1
EXIT_INPUT_ERROR = 2


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Read a blocklist and queries, print Bad/Good per query.",
    )
    p.add_argument(
        "--input", metavar="PATH", default=None,
        help="Read from PATH instead of stdin.",
    )
    p.add_argument(
        "--output", metavar="PATH", default=None,
        help="Write verdicts to PATH instead of stdout.",
    )
    p.add_argument(
        "--naive", action="store_true",
        help="Answer with a linear scan instead of the bisect index.",
    )


def _add_bench_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "bench",
        help="Benchmark the bisect index on a synthetic workload.",
    )
    p.add_argument(
        "--blocklist", type=int, default=10_000,
        help="Blocked domains to generate (default: 10000)",
    )
    p.add_argument(
        "--queries", type=int, default=10_000,
        help="Queries to generate (default: 10000)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )
    p.add_argument(
        "--compare", action="store_true",
        help="Also run the linear scan and print a comparison.",
    )


def _check(source: TextIO, sink: TextIO, naive: bool) -> int:
    from domain_checker.index.blocklist import BlocklistIndex, naive_is_forbidden
    from domain_checker.stream.reader import read_blocklist_and_queries
    from domain_checker.stream.writer import write_verdicts

    blocked, queries = read_blocklist_and_queries(source)
    log.info("read %d blocked domains and %d queries", len(blocked), len(queries))
    if naive:
        verdicts = (naive_is_forbidden(blocked, q) for q in queries)
    else:
        index = BlocklistIndex(blocked)
        verdicts = (index.is_forbidden(q) for q in queries)
    return write_verdicts(sink, verdicts)


def _run_check(args: argparse.Namespace) -> None:
    from domain_checker.stream.reader import InputFormatError

    try:
        with ExitStack() as stack:
            source = sys.stdin
            sink = sys.stdout
            if args.input:
                source = stack.enter_context(open(args.input, encoding="utf-8"))
            if args.output:
                sink = stack.enter_context(open(args.output, "w", encoding="utf-8"))
            _check(source, sink, args.naive)
    except InputFormatError as exc:
        log.error("malformed input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)
    except OSError as exc:
        log.error("cannot open file: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(EXIT_FILE_ERROR)


def _run_bench(args: argparse.Namespace) -> None:
    from domain_checker.profiling.harness import run_benchmark, run_naive
    from domain_checker.profiling.report import format_comparison, format_report

    common = dict(
        blocklist_size=args.blocklist,
        query_count=args.queries,
        seed=args.seed,
    )

    if args.compare:
        before = run_naive(**common)
        after = run_benchmark(**common)
        print(format_report(before))
        print()
        print(format_report(after))
        print()
        print(format_comparison(before, after))
    else:
        result = run_benchmark(**common, profile=args.cprofile)
        print(format_report(result))
        if result.cprofile_stats:
            print()
            print("--- cProfile top functions ---")
            print(result.cprofile_stats)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="domain-checker",
        description="Blocklist checks with subdomain coverage -- sort once, bisect per query.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr diagnostics (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_check_parser(subparsers)
    _add_bench_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        _run_check(args)
    elif args.command == "bench":
        _run_bench(args)
