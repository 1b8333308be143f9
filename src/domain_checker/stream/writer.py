"""Verdict output: one token per query, in query order."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

FORBIDDEN = "Bad"
PERMITTED = "Good"


def format_verdict(forbidden: bool) -> str:
    return FORBIDDEN if forbidden else PERMITTED


def write_verdicts(stream: TextIO, verdicts: Iterable[bool]) -> int:
    """Write one verdict per line. Returns the number of lines written."""
    written = 0
    for forbidden in verdicts:
        stream.write(format_verdict(forbidden))
        stream.write("\n")
        written += 1
    return written
