from __future__ import annotations

from pathlib import Path

import pytest

from csvstream.benchmarks.cli import _build_parser, main


def test_parser_defaults() -> None:
    args = _build_parser().parse_args([])
    assert args.output_dir == Path("benchmark_reports")
    assert args.stem == "benchmark_report"
    assert args.formats is None
    assert args.iterations == 1000


def test_parser_has_no_input_path_option() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["--path", "x.csv"])


def test_main_writes_requested_reports(bench_dir, capsys) -> None:
    out_dir = bench_dir.parent / "reports"
    code = main(["--output-dir", str(out_dir), "--format", "json", "--iterations", "2"])

    assert code == 0
    assert (out_dir / "benchmark_report.json").is_file()
    assert not (out_dir / "benchmark_report.md").exists()
    assert str(out_dir / "benchmark_report.json") in capsys.readouterr().out


def test_main_rejects_zero_iterations() -> None:
    with pytest.raises(SystemExit):
        main(["--iterations", "0"])
