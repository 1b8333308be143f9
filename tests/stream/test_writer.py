"""Tests for verdict output."""

import io

from domain_checker.stream import FORBIDDEN, PERMITTED, format_verdict, write_verdicts


def test_format_verdict():
    assert format_verdict(True) == "Bad"
    assert format_verdict(False) == "Good"
    assert (FORBIDDEN, PERMITTED) == ("Bad", "Good")


def test_write_verdicts_in_order():
    out = io.StringIO()
    written = write_verdicts(out, [True, True, False, True])
    assert written == 4
    assert out.getvalue() == "Bad\nBad\nGood\nBad\n"


def test_write_verdicts_empty():
    out = io.StringIO()
    assert write_verdicts(out, []) == 0
    assert out.getvalue() == ""


def test_write_verdicts_from_generator():
    out = io.StringIO()
    write_verdicts(out, (i % 2 == 0 for i in range(3)))
    assert out.getvalue() == "Bad\nGood\nBad\n"
