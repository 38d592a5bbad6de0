"""Benchmark runner and report generation."""

from __future__ import annotations

import csv
import io
import json
import statistics
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import structlog

from csvstream.reader import Reader
from csvstream.shared.config import AppConfig

from .file_read import DEFAULT_PATH, BenchmarkError, run_read_benchmark
from .synthetic import BENCHMARK_CSV_DATA, LARGE_FIELDS_CSV_DATA
from .timing import format_duration, time_call

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    created_at: str
    benchmarks: list[dict]

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append("# Benchmark Report")
        lines.append("")
        lines.append(f"Generated: {self.created_at}")
        lines.append("")

        for bench in self.benchmarks:
            name = bench.get("name", "unknown")
            status = bench.get("status", "ok")
            lines.append(f"## {name}")
            lines.append("")

            if status != "ok":
                lines.append(f"Status: {status}")
                reason = bench.get("reason")
                if reason:
                    lines.append(f"Reason: {reason}")
                lines.append("")

            metrics = bench.get("metrics", {}) or {}
            if metrics:
                lines.append("### Metrics")
                for k in sorted(metrics):
                    v = metrics[k]
                    if k.endswith("_seconds"):
                        lines.append(f"- {k}: {format_duration(v)}")
                    elif isinstance(v, float):
                        lines.append(f"- {k}: {v:.4f}")
                    else:
                        lines.append(f"- {k}: {v}")
                lines.append("")

        return "\n".join(lines).rstrip() + "\n"


def _ok(payload: dict) -> dict:
    payload.setdefault("status", "ok")
    return payload


def _skipped(name: str, reason: str) -> dict:
    return {"name": name, "status": "skipped", "reason": reason, "metrics": {}}


def _error(name: str, error: Exception) -> dict:
    return {"name": name, "status": "error", "reason": str(error), "metrics": {}}


def _drain_csvstream(data: str) -> int:
    return sum(1 for _ in Reader(data))


def _drain_stdlib(data: str) -> int:
    return sum(1 for _ in csv.reader(io.StringIO(data, newline="")))


def run_in_memory_benchmark(name: str, drain: Callable[[str], int], data: str, *, iterations: int) -> dict:
    """Times `drain(data)` over several iterations and summarises the timings."""

    records = drain(data)
    timings = time_call(lambda: drain(data), iterations=iterations)
    total = sum(timings)
    return {
        "name": name,
        "iterations": len(timings),
        "metrics": {
            "records": records,
            "total_seconds": total,
            "mean_seconds": statistics.fmean(timings),
            "min_seconds": min(timings),
            "records_per_second": (records * len(timings)) / total if total > 0 else 0.0,
        },
    }


def run_all_benchmarks(
    *,
    iterations: int = 1000,
    path: Path = DEFAULT_PATH,
    config: AppConfig | None = None,
) -> BenchmarkReport:
    results: list[dict] = []

    suites = (
        ("reader", _drain_csvstream, BENCHMARK_CSV_DATA),
        ("reader_large_fields", _drain_csvstream, LARGE_FIELDS_CSV_DATA),
        ("stdlib_csv", _drain_stdlib, BENCHMARK_CSV_DATA),
        ("stdlib_csv_large_fields", _drain_stdlib, LARGE_FIELDS_CSV_DATA),
    )
    for name, drain, data in suites:
        logger.debug("benchmark-start", name=name, iterations=iterations)
        try:
            results.append(_ok(run_in_memory_benchmark(name, drain, data, iterations=iterations)))
        except Exception as exc:  # pragma: no cover
            logger.warning("benchmark-failed", name=name, error=str(exc))
            results.append(_error(name, exc))

    # The players file is optional; it is generated by scripts/generate_players_csv.py.
    path = Path(path)
    if not path.exists():
        results.append(_skipped("players_file", f"missing input: {path}"))
    else:
        try:
            result = run_read_benchmark(path, config=config)
            logger.info(result.describe(), records=result.records)
            results.append(_ok(result.to_dict()))
        except BenchmarkError as exc:
            logger.warning("benchmark-failed", name="players_file", error=str(exc))
            results.append(_error("players_file", exc))

    created_at = datetime.now(timezone.utc).isoformat()
    return BenchmarkReport(created_at=created_at, benchmarks=results)


def write_report(
    report: BenchmarkReport,
    *,
    output_dir: Path,
    stem: str = "benchmark_report",
    formats: tuple[str, ...] = ("json", "md"),
) -> list[Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    if "json" in formats:
        path = output_dir / f"{stem}.json"
        path.write_text(report.to_json(), encoding="utf-8")
        written.append(path)

    if "md" in formats:
        path = output_dir / f"{stem}.md"
        path.write_text(report.to_markdown(), encoding="utf-8")
        written.append(path)

    return written
