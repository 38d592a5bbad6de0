"""Command line entry point: time one full read of the players file."""

from __future__ import annotations

import sys
from argparse import ArgumentParser

import structlog

from csvstream.benchmarks.file_read import DEFAULT_PATH, DecodeError, OpenError, run_read_benchmark
from csvstream.shared import AppConfig, configure_logging, install_crash_reporting, load_config, write_error_report


def _build_parser() -> ArgumentParser:
    return ArgumentParser(
        prog="csvstream-bench",
        description=f"Time a full sequential read of {DEFAULT_PATH} (relative to the working directory).",
    )


def _run_benchmark(config: AppConfig) -> int:
    logger = structlog.get_logger(__name__)

    try:
        result = run_read_benchmark(DEFAULT_PATH, config=config)
    except OpenError as exc:
        logger.error("open-failed", path=str(exc.path), error=str(exc))
        return 1
    except DecodeError as exc:
        logger.error("decode-failed", path=str(exc.path), error=str(exc))
        return 1
    except Exception as exc:
        report = write_error_report(exc, where="csvstream.cli", context={"path": str(DEFAULT_PATH)})
        logger.exception("benchmark-crashed", error=str(exc), report=str(report.path))
        return 1

    logger.info(result.describe(), records=result.records)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    parser.parse_args(argv)
    config = load_config()
    configure_logging(level=config.log_level)
    install_crash_reporting()
    return _run_benchmark(config)


if __name__ == "__main__":
    sys.exit(main())
