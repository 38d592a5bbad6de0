"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def bench_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory containing an empty `benchmark/` folder."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CSVSTREAM_ERROR_DIR", str(tmp_path / "error_reports"))
    for key in ("CSVSTREAM_LOG_LEVEL", "CSVSTREAM_ENCODING", "CSVSTREAM_CHUNK_SIZE"):
        monkeypatch.delenv(key, raising=False)
    folder = tmp_path / "benchmark"
    folder.mkdir()
    return folder


@pytest.fixture
def write_players(bench_dir: Path):
    """Writes `benchmark/players_20.csv` with the given text and returns its path."""

    def _write(text: str | bytes) -> Path:
        path = bench_dir / "players_20.csv"
        if isinstance(text, bytes):
            path.write_bytes(text)
        else:
            path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write
