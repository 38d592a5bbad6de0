"""Sequential CSV read benchmark.

Opens a CSV file, drains it through `csvstream.Reader` one record at a time and
measures the wall-clock time of the read loop. Records are discarded.

The default input is `benchmark/players_20.csv`, resolved against the current
working directory.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

import structlog

from csvstream.errors import ReaderError
from csvstream.reader import Reader
from csvstream.shared.config import AppConfig

from .timing import format_duration

logger = structlog.get_logger(__name__)

DEFAULT_PATH = Path("benchmark") / "players_20.csv"


class BenchmarkState(str, Enum):
    """Lifecycle of a single benchmark run."""

    OPENING = "opening"
    READING = "reading"
    DONE = "done"
    FAILED = "failed"


class BenchmarkError(RuntimeError):
    """Base error of the read benchmark; carries the state it failed in."""

    def __init__(self, message: str, *, path: Path, state: BenchmarkState) -> None:
        super().__init__(message)
        self.path = path
        self.state = state


class OpenError(BenchmarkError):
    """The input file could not be opened."""


class DecodeError(BenchmarkError):
    """A record in the input could not be decoded."""


class RecordCountError(BenchmarkError):
    """The input decoded cleanly but had an unexpected number of records."""


@dataclass(frozen=True, slots=True)
class ReadBenchmarkResult:
    name: str
    path: str
    records: int
    elapsed_seconds: float
    state: BenchmarkState = BenchmarkState.DONE

    def describe(self) -> str:
        return f"Read {Path(self.path).name} took {format_duration(self.elapsed_seconds)}"

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["state"] = self.state.value
        payload["metrics"] = {
            "records": self.records,
            "elapsed_seconds": self.elapsed_seconds,
            "records_per_second": self.records / self.elapsed_seconds if self.elapsed_seconds > 0 else 0.0,
        }
        return payload


def _transition(path: Path, state: BenchmarkState) -> BenchmarkState:
    logger.debug("benchmark-state", path=str(path), state=state.value)
    return state


def run_read_benchmark(
    path: Path = DEFAULT_PATH,
    *,
    expected_records: int | None = None,
    config: AppConfig | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> ReadBenchmarkResult:
    """Times one full pass over `path`.

    Raises `OpenError` when the file cannot be opened and `DecodeError` when a
    record is malformed; in both cases no timing is produced. The file handle
    is closed on every exit path.
    """

    config = config or AppConfig.default()
    path = Path(path)

    state = _transition(path, BenchmarkState.OPENING)
    try:
        handle = open(path, "r", encoding=config.encoding, newline="")
    except OSError as exc:
        _transition(path, BenchmarkState.FAILED)
        raise OpenError(f"open {path}: {exc.strerror or exc}", path=path, state=state) from exc

    with handle:
        state = _transition(path, BenchmarkState.READING)
        reader = Reader(handle, chunk_size=config.chunk_size)
        records = 0
        start = clock()
        try:
            while reader.read() is not None:
                records += 1
        except (ReaderError, UnicodeDecodeError) as exc:
            _transition(path, BenchmarkState.FAILED)
            raise DecodeError(str(exc), path=path, state=state) from exc
        elapsed = max(clock() - start, 0.0)

    if expected_records is not None and records != expected_records:
        _transition(path, BenchmarkState.FAILED)
        raise RecordCountError(
            f"unexpected number of rows {records} (expected {expected_records})",
            path=path,
            state=state,
        )

    state = _transition(path, BenchmarkState.DONE)
    return ReadBenchmarkResult(
        name="players_file",
        path=str(path),
        records=records,
        elapsed_seconds=elapsed,
        state=state,
    )
