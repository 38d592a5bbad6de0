from __future__ import annotations

import csv
import io

from csvstream import Reader
from csvstream.benchmarks.synthetic import (
    BENCHMARK_CSV_DATA,
    LARGE_FIELDS_CSV_DATA,
    PLAYERS_HEADER,
    generate_players_csv,
    players_csv_text,
)


def test_players_csv_text_is_deterministic() -> None:
    assert players_csv_text(25, seed=7) == players_csv_text(25, seed=7)
    assert players_csv_text(25, seed=7) != players_csv_text(25, seed=8)


def test_players_csv_has_header_and_rows() -> None:
    records = Reader(players_csv_text(40)).read_all()
    assert len(records) == 41
    assert tuple(records[0]) == PLAYERS_HEADER
    assert all(len(r) == len(PLAYERS_HEADER) for r in records)


def test_players_csv_agrees_with_stdlib_csv() -> None:
    text = players_csv_text(100, seed=3)
    expected = list(csv.reader(io.StringIO(text, newline="")))
    assert Reader(text).read_all() == expected


def test_generate_players_csv_creates_parent_dirs(tmp_path) -> None:
    path = generate_players_csv(tmp_path / "benchmark" / "players_20.csv", 5, seed=1)
    assert path.is_file()
    assert path.read_text(encoding="utf-8") == players_csv_text(5, seed=1)


def test_fixed_datasets_shape() -> None:
    assert len(Reader(BENCHMARK_CSV_DATA).read_all()) == 10
    large = Reader(LARGE_FIELDS_CSV_DATA).read_all()
    assert len(large) == 12
    assert all(len(r) == 5 for r in large)
