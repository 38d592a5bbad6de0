from __future__ import annotations

import json
import os
import platform
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import metadata
from pathlib import Path
from typing import Any
from uuid import uuid4

_ENV_KEYS = (
    "CSVSTREAM_LOG_LEVEL",
    "CSVSTREAM_ENCODING",
    "CSVSTREAM_CHUNK_SIZE",
)


@dataclass(frozen=True, slots=True)
class ErrorReport:
    path: Path
    created_at: datetime


_ORIGINAL_SYS_EXCEPTHOOK = None


def get_error_reports_dir() -> Path:
    """Returns a writable directory for error reports.

    Priority:
    1) `CSVSTREAM_ERROR_DIR` env var
    2) Project root: `./error_reports` (next to `pyproject.toml`)
    3) Fallback: `~/.csvstream/error_reports`
    """

    override = _env("CSVSTREAM_ERROR_DIR")
    if override:
        base = Path(override)
    else:
        project_root = _find_project_root()
        if project_root is not None:
            base = project_root / "error_reports"
        else:
            base = Path.home() / ".csvstream" / "error_reports"

    base.mkdir(parents=True, exist_ok=True)
    return base


def _env(key: str) -> str:
    return (os.getenv(key) or "").strip()


def _find_project_root() -> Path | None:
    """Returns the nearest directory containing `pyproject.toml` (best-effort)."""

    for start in (Path.cwd(), Path(__file__).resolve().parent):
        current = start
        for _ in range(25):
            if (current / "pyproject.toml").is_file():
                return current
            if current.parent == current:
                break
            current = current.parent
    return None


def _safe_app_version() -> str:
    try:
        return metadata.version("csvstream")
    except metadata.PackageNotFoundError:
        return "unknown"


def _with_environment(context: dict[str, Any]) -> dict[str, Any]:
    out = dict(context)
    out.setdefault("environment", {key: _env(key) or None for key in _ENV_KEYS})
    return out


def write_error_report(
    error: BaseException,
    *,
    where: str,
    context: dict[str, Any] | None = None,
) -> ErrorReport:
    """Writes a timestamped error report and returns its path."""

    reports_dir = get_error_reports_dir()
    created_at = datetime.now(timezone.utc)
    stamp = created_at.strftime("%Y%m%d_%H%M%S")
    path = reports_dir / f"error_{stamp}_{uuid4().hex[:8]}.txt"

    header = {
        "created_at": created_at.isoformat(),
        "where": where,
        "app_version": _safe_app_version(),
        "python": sys.version.replace("\n", " "),
        "platform": platform.platform(),
        "cwd": str(Path.cwd()),
        "context": _with_environment(context or {}),
        "error_type": type(error).__name__,
        "error_message": str(error),
    }

    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))

    content = (
        "csvstream Error Report\n"
        "======================\n\n"
        + json.dumps(header, ensure_ascii=False, indent=2, default=str)
        + "\n\nTraceback\n---------\n"
        + tb
    )

    path.write_text(content, encoding="utf-8", errors="replace")
    return ErrorReport(path=path, created_at=created_at)


def install_crash_reporting() -> None:
    """Hooks `sys.excepthook` so unhandled exceptions leave an error report.

    Never raises. Disabled with `CSVSTREAM_DISABLE_CRASH_HOOKS=1` and, unless
    `CSVSTREAM_ENABLE_CRASH_HOOKS=1` is set, inside pytest runs.
    """

    if _env("CSVSTREAM_DISABLE_CRASH_HOOKS").lower() in {"1", "true", "yes", "on"}:
        return

    if os.getenv("PYTEST_CURRENT_TEST") and _env("CSVSTREAM_ENABLE_CRASH_HOOKS") != "1":
        return

    global _ORIGINAL_SYS_EXCEPTHOOK
    if _ORIGINAL_SYS_EXCEPTHOOK is None:
        _ORIGINAL_SYS_EXCEPTHOOK = sys.excepthook

    def _sys_excepthook(exc_type, exc, tb):  # type: ignore[no-untyped-def]
        try:
            write_error_report(
                exc if isinstance(exc, BaseException) else RuntimeError(str(exc)),
                where="sys.excepthook",
                context={"exc_type": getattr(exc_type, "__name__", str(exc_type))},
            )
        except Exception:
            pass
        if _ORIGINAL_SYS_EXCEPTHOOK is not None:
            _ORIGINAL_SYS_EXCEPTHOOK(exc_type, exc, tb)

    sys.excepthook = _sys_excepthook
