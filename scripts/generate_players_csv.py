"""Writes a synthetic `benchmark/players_20.csv` for `csvstream-bench`.

The real dataset has 18278 players plus a header row; the generated file has
the same record count so timings stay comparable.

Run from the repository root:
- `python scripts/generate_players_csv.py`
"""

from __future__ import annotations

from argparse import ArgumentParser

from csvstream.benchmarks.file_read import DEFAULT_PATH
from csvstream.benchmarks.synthetic import generate_players_csv

PLAYERS_ROWS = 18278


def main() -> int:
    parser = ArgumentParser(description=f"Generate {DEFAULT_PATH} with deterministic player rows.")
    parser.add_argument("--rows", type=int, default=PLAYERS_ROWS, help=f"Data rows (default: {PLAYERS_ROWS})")
    parser.add_argument("--seed", type=int, default=2020, help="Random seed (default: 2020)")
    args = parser.parse_args()

    path = generate_players_csv(DEFAULT_PATH, args.rows, seed=args.seed)
    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
