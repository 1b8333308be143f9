"""Line-oriented input format for blocklist checks.

The format is two blocks, each a count line followed by that many
domain lines:

    4           <- number of blocked domains
    gdz.ru
    maps.me
    m.gdz.ru
    com
    2           <- number of queries
    gdz.com
    maps.ru

Domain lines are taken verbatim apart from the line terminator. No
trimming, no lowercasing: whatever is on the line is the domain.
"""
from __future__ import annotations

from typing import TextIO

from domain_checker.domain.name import Domain


class InputFormatError(ValueError):
    """Raised when the input stream does not follow the count/lines format."""


class LineReader:
    """Wrap a text stream and count the lines read from it.

    line_number is the 1-based number of the last line returned, so
    error messages can point at it.
    """

    __slots__ = ("_stream", "_line_number")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line_number = 0

    @property
    def line_number(self) -> int:
        return self._line_number

    def read_line(self) -> str:
        """Return the next line without its terminator.

        Raises InputFormatError at end of input.
        """
        line = self._stream.readline()
        if line == "":
            raise InputFormatError(
                f"line {self._line_number + 1}: unexpected end of input"
            )
        self._line_number += 1
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line


def read_count(reader: LineReader) -> int:
    """Read a line holding a non-negative integer."""
    line = reader.read_line()
    try:
        count = int(line.strip())
    except ValueError:
        raise InputFormatError(
            f"line {reader.line_number}: expected a count, got {line!r}"
        ) from None
    if count < 0:
        raise InputFormatError(
            f"line {reader.line_number}: count must be >= 0, got {count}"
        )
    return count


def read_domains(reader: LineReader, count: int) -> list[Domain]:
    """Read exactly count lines as domains."""
    domains: list[Domain] = []
    for _ in range(count):
        domains.append(Domain(reader.read_line()))
    return domains


def read_blocklist_and_queries(stream: TextIO) -> tuple[list[Domain], list[Domain]]:
    """Read both blocks: (blocked domains, queries)."""
    reader = LineReader(stream)
    blocked = read_domains(reader, read_count(reader))
    queries = read_domains(reader, read_count(reader))
    return blocked, queries
