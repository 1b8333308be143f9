"""End-to-end tests for the domain-checker command line."""
from __future__ import annotations

import io

import pytest

from domain_checker import cli

SAMPLE = (
    "4\ngdz.ru\nmaps.me\nm.gdz.ru\ncom\n"
    "7\ngdz.ru\ngdz.com\nm.maps.me\nalg.m.gdz.ru\nmaps.com\nmaps.ru\ngdz.ua\n"
)
SAMPLE_OUTPUT = "Bad\nBad\nBad\nBad\nBad\nGood\nGood\n"


class TestCheck:

    def test_stdin_to_stdout(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
        cli.main(["check"])
        assert capsys.readouterr().out == SAMPLE_OUTPUT

    def test_naive_matches(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
        cli.main(["check", "--naive"])
        assert capsys.readouterr().out == SAMPLE_OUTPUT

    def test_empty_blocklist(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("0\n2\na.com\nb.ru\n"))
        cli.main(["check"])
        assert capsys.readouterr().out == "Good\nGood\n"

    def test_files(self, tmp_path):
        src = tmp_path / "in.txt"
        dst = tmp_path / "out.txt"
        src.write_text(SAMPLE, encoding="utf-8")
        cli.main(["check", "--input", str(src), "--output", str(dst)])
        assert dst.read_text(encoding="utf-8") == SAMPLE_OUTPUT

    def test_malformed_count_exits_2(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("four\n"))
        with pytest.raises(SystemExit) as exc:
            cli.main(["check"])
        assert exc.value.code == cli.EXIT_INPUT_ERROR
        assert "error: line 1: expected a count" in capsys.readouterr().err

    def test_short_input_exits_2(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2\ncom\n"))
        with pytest.raises(SystemExit) as exc:
            cli.main(["check"])
        assert exc.value.code == cli.EXIT_INPUT_ERROR
        assert "unexpected end of input" in capsys.readouterr().err

    def test_missing_file_exits_1(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["check", "--input", str(tmp_path / "nope.txt")])
        assert exc.value.code == cli.EXIT_FILE_ERROR
        assert "error:" in capsys.readouterr().err


class TestBench:

    def test_report(self, capsys):
        cli.main(["bench", "--blocklist", "200", "--queries", "100"])
        out = capsys.readouterr().out
        assert "=== bisect index ===" in out
        assert "Queries:           100" in out

    def test_compare(self, capsys):
        cli.main(["bench", "--blocklist", "200", "--queries", "50", "--compare"])
        out = capsys.readouterr().out
        assert "=== linear scan ===" in out
        assert "Speedup" in out

    def test_cprofile(self, capsys):
        cli.main(["bench", "--blocklist", "100", "--queries", "50", "--cprofile"])
        assert "--- cProfile top functions ---" in capsys.readouterr().out


class TestMain:

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 0
        assert "domain-checker" in capsys.readouterr().out

    def test_bad_log_level_rejected(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--log-level", "LOUD", "check"])
        assert exc.value.code == 2
