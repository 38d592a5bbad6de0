from __future__ import annotations

import sys


def test_install_crash_reporting_respects_disable_flag(monkeypatch, tmp_path):
    monkeypatch.setenv("CSVSTREAM_ERROR_DIR", str(tmp_path))
    monkeypatch.setenv("CSVSTREAM_DISABLE_CRASH_HOOKS", "1")

    from csvstream.shared.error_reporting import install_crash_reporting

    before = sys.excepthook
    install_crash_reporting()
    assert sys.excepthook is before


def test_install_crash_reporting_hook_writes_report(monkeypatch, tmp_path):
    monkeypatch.setenv("CSVSTREAM_ERROR_DIR", str(tmp_path))
    monkeypatch.delenv("CSVSTREAM_DISABLE_CRASH_HOOKS", raising=False)
    monkeypatch.setenv("CSVSTREAM_ENABLE_CRASH_HOOKS", "1")
    monkeypatch.setattr(sys, "excepthook", lambda *_a: None)

    from csvstream.shared import error_reporting

    monkeypatch.setattr(error_reporting, "_ORIGINAL_SYS_EXCEPTHOOK", None)
    error_reporting.install_crash_reporting()

    try:
        raise RuntimeError("unhandled")
    except RuntimeError as exc:
        sys.excepthook(type(exc), exc, exc.__traceback__)

    reports = list(tmp_path.glob("error_*.txt"))
    assert len(reports) == 1
    assert "sys.excepthook" in reports[0].read_text(encoding="utf-8")
