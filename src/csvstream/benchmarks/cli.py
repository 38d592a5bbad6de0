"""CLI entrypoint for running the benchmark suite and writing a report."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from csvstream.shared import configure_logging, load_config

from .runner import run_all_benchmarks, write_report


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="csvstream-benchmark",
        description="Run csvstream benchmarks and generate a timing report.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("benchmark_reports"),
        help="Directory for generated reports (default: benchmark_reports)",
    )
    parser.add_argument(
        "--stem",
        type=str,
        default="benchmark_report",
        help="Output filename stem (default: benchmark_report)",
    )
    parser.add_argument(
        "--format",
        action="append",
        dest="formats",
        choices=["json", "md"],
        help="Report format (can be provided multiple times). Default: json+md",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Iterations per in-memory benchmark (default: 1000)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.iterations < 1:
        parser.error("--iterations must be at least 1")

    config = load_config()
    configure_logging(level=logging.DEBUG if args.verbose else config.log_level)

    formats = tuple(args.formats) if args.formats else ("json", "md")

    report = run_all_benchmarks(iterations=args.iterations, config=config)
    written = write_report(report, output_dir=args.output_dir, stem=args.stem, formats=formats)

    for path in written:
        print(path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
