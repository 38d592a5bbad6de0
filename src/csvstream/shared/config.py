"""Environment-based application configuration."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

from csvstream.source import DEFAULT_CHUNK_SIZE, MIN_CHUNK_SIZE


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Runtime settings shared by the CLI entry points."""

    log_level: int = logging.INFO
    encoding: str = "utf-8"
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def default(cls) -> "AppConfig":
        """Creates the default configuration."""

        return cls()


def _env(key: str) -> str:
    return (os.getenv(key) or "").strip()


def _parse_level(raw: str) -> int | None:
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else None


def _parse_encoding(raw: str) -> str | None:
    if not raw:
        return None
    try:
        return codecs.lookup(raw).name
    except LookupError:
        return None


def _parse_chunk_size(raw: str) -> int | None:
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= MIN_CHUNK_SIZE else None


def load_config() -> AppConfig:
    """Loads configuration from the environment.

    Recognised variables:
    - `CSVSTREAM_LOG_LEVEL`: level name (`DEBUG`, `info`, ...) or number
    - `CSVSTREAM_ENCODING`: text encoding of the benchmark input
    - `CSVSTREAM_CHUNK_SIZE`: read size in characters/bytes (>= 16)

    Unset or invalid values fall back to the defaults. The benchmark input path
    is not configurable.
    """

    defaults = AppConfig.default()
    level = _parse_level(_env("CSVSTREAM_LOG_LEVEL"))
    encoding = _parse_encoding(_env("CSVSTREAM_ENCODING"))
    chunk_size = _parse_chunk_size(_env("CSVSTREAM_CHUNK_SIZE"))

    return AppConfig(
        log_level=defaults.log_level if level is None else level,
        encoding=encoding or defaults.encoding,
        chunk_size=defaults.chunk_size if chunk_size is None else chunk_size,
    )
