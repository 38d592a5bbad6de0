"""Timing helpers shared by the benchmarks."""

from __future__ import annotations

import time
from typing import Any, Callable

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000
_NS_PER_MIN = 60 * _NS_PER_S
_NS_PER_H = 60 * _NS_PER_MIN


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(seconds: float) -> str:
    """Formats a duration the way Go prints `time.Duration`.

    Examples: `0s`, `850ns`, `12.5µs`, `3.000001ms`, `1.5s`, `2m3s`, `1h0m0s`.
    """

    ns = round(seconds * _NS_PER_S)
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _NS_PER_US:
        return f"{sign}{ns}ns"
    if ns < _NS_PER_MS:
        return f"{sign}{_with_fraction(ns, _NS_PER_US)}µs"
    if ns < _NS_PER_S:
        return f"{sign}{_with_fraction(ns, _NS_PER_MS)}ms"

    hours, rem = divmod(ns, _NS_PER_H)
    minutes, rem = divmod(rem, _NS_PER_MIN)
    secs = f"{_with_fraction(rem, _NS_PER_S)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}"
    if minutes:
        return f"{sign}{minutes}m{secs}"
    return f"{sign}{secs}"


def time_call(
    fn: Callable[[], Any],
    *,
    iterations: int = 1,
    clock: Callable[[], float] = time.perf_counter,
) -> list[float]:
    """Calls `fn` `iterations` times and returns each elapsed time in seconds."""

    timings: list[float] = []
    for _ in range(max(int(iterations), 1)):
        start = clock()
        fn()
        timings.append(max(clock() - start, 0.0))
    return timings
