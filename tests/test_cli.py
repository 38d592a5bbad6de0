"""Tests for the csvstream-bench command line."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from csvstream.cli import _build_parser, main


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


def test_parser_accepts_no_arguments() -> None:
    args = _build_parser().parse_args([])
    assert vars(args) == {}


def test_parser_rejects_input_path() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["other.csv"])


def test_main_logs_duration_and_exits_zero(write_players, info_logs) -> None:
    write_players("name,age\nAlice,30\n")

    assert main([]) == 0

    lines = [r.getMessage() for r in info_logs.records if "took" in r.getMessage()]
    assert len(lines) == 1
    assert "Read players_20.csv took " in lines[0]
    assert "records=2" in lines[0]


def test_main_missing_file_exits_nonzero_without_timing(bench_dir, info_logs) -> None:
    assert main([]) == 1
    assert "open-failed" in info_logs.text
    assert "took" not in info_logs.text


def test_main_malformed_file_exits_nonzero_without_timing(write_players, info_logs) -> None:
    write_players('a,b\n"c,d\n')
    assert main([]) == 1
    assert "decode-failed" in info_logs.text
    assert "took" not in info_logs.text


def test_main_writes_error_report_on_unexpected_failure(write_players, bench_dir, info_logs) -> None:
    write_players("a,b\n")
    with patch("csvstream.cli.run_read_benchmark", side_effect=MemoryError("boom")):
        assert main([]) == 1

    reports = list((bench_dir.parent / "error_reports").glob("error_*.txt"))
    assert len(reports) == 1
    assert "boom" in reports[0].read_text(encoding="utf-8")
    assert "benchmark-crashed" in info_logs.text


def test_main_honours_log_level_from_environment(write_players, monkeypatch) -> None:
    write_players("a\n")
    monkeypatch.setenv("CSVSTREAM_LOG_LEVEL", "debug")
    with patch("csvstream.cli.configure_logging") as configure:
        assert main([]) == 0
    configure.assert_called_once_with(level=logging.DEBUG)
