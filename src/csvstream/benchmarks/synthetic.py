"""Deterministic CSV datasets for benchmarks.

Kept inside `src/` so benchmarking/reporting does not depend on the test package.
"""

from __future__ import annotations

import csv
import io
import random
from pathlib import Path

BENCHMARK_CSV_DATA = """x,y,z,w
x,y,z,
x,y,,
x,,,
,,,
"x","y","z","w"
"x","y","z",""
"x","y","",""
"x","","",""
"","","",""
"""

LARGE_FIELDS_CSV_DATA = (
    "x" * 16 + "," + "y" * 16 + "," + "z" * 32 + "," + "w" * 64 + "," + "v" * 128 + "\n"
    + "x" * 24 + "," + "y" * 32 + "," + "z" * 32 + "," + "w" * 64 + "," + "v" * 4 + "\n"
    + ",," + "z" * 4 + "," + "w" * 64 + "," + "v" * 256 + "\n"
    + "x" * 32 + "," + "y" * 32 + "," + "z" * 32 + "," + "w" * 64 + "," + "v" * 64 + "\n"
) * 3

PLAYERS_HEADER = (
    "sofifa_id",
    "short_name",
    "long_name",
    "age",
    "height_cm",
    "weight_kg",
    "nationality",
    "club",
    "overall",
    "potential",
    "value_eur",
    "player_positions",
    "preferred_foot",
    "player_traits",
)

_FIRST = ("Lionel", "João", "Kevin", "Virgil", "Heung-min", "Mohamed", "Sadio", "Jan", "N'Golo", "Marc-André")
_LAST = ("Messi", "Félix", "De Bruyne", "van Dijk", "Son", "Salah", "Mané", "Oblak", "Kanté", "ter Stegen")
_NATIONS = ("Argentina", "Portugal", "Belgium", "Netherlands", "Korea Republic", "Egypt", "Senegal", "Slovenia", "France", "Germany")
_CLUBS = ("FC Barcelona", "Atlético Madrid", "Manchester City", "Liverpool", "Tottenham Hotspur", "Chelsea", "Paris Saint-Germain")
_POSITIONS = ("ST", "CF", "LW", "RW", "CAM", "CM", "CDM", "CB", "LB", "RB", "GK")
_TRAITS = ("Finesse Shot", "Playmaker (AI)", "Speed Dribbler (AI)", "Leadership", "Long Passer (AI)", "Injury Prone")


def _player_row(rng: random.Random, index: int) -> list[str]:
    first = rng.choice(_FIRST)
    last = rng.choice(_LAST)
    overall = rng.randint(48, 94)
    positions = ", ".join(rng.sample(_POSITIONS, rng.randint(1, 3)))
    traits = ", ".join(rng.sample(_TRAITS, rng.randint(0, 3)))
    return [
        str(100000 + index),
        f"{first[0]}. {last}",
        f"{first} {last}",
        str(rng.randint(16, 42)),
        str(rng.randint(156, 205)),
        str(rng.randint(50, 110)),
        rng.choice(_NATIONS),
        rng.choice(_CLUBS),
        str(overall),
        str(max(overall, rng.randint(48, 95))),
        str(rng.randint(0, 1050) * 100000),
        positions,
        rng.choice(("Left", "Right")),
        traits,
    ]


def players_csv_text(rows: int, *, seed: int = 2020) -> str:
    """Returns a players-like CSV document with a header and `rows` data rows."""

    rng = random.Random(seed)
    out = io.StringIO(newline="")
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(PLAYERS_HEADER)
    for index in range(int(rows)):
        writer.writerow(_player_row(rng, index))
    return out.getvalue()


def generate_players_csv(path: Path, rows: int, *, seed: int = 2020) -> Path:
    """Writes `players_csv_text(rows, seed=seed)` to `path`, creating parent dirs."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(players_csv_text(rows, seed=seed), encoding="utf-8", newline="")
    return path
