"""Reading blocklists and queries from text streams, writing verdicts."""

from domain_checker.stream.reader import (
    InputFormatError,
    LineReader,
    read_blocklist_and_queries,
    read_count,
    read_domains,
)
from domain_checker.stream.writer import (
    FORBIDDEN,
    PERMITTED,
    format_verdict,
    write_verdicts,
)

__all__ = [
    "FORBIDDEN",
    "PERMITTED",
    "InputFormatError",
    "LineReader",
    "format_verdict",
    "read_blocklist_and_queries",
    "read_count",
    "read_domains",
    "write_verdicts",
]
