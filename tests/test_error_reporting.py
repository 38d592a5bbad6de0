from __future__ import annotations

from pathlib import Path


def test_write_error_report_creates_file_with_context(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CSVSTREAM_ERROR_DIR", str(tmp_path))
    monkeypatch.setenv("CSVSTREAM_CHUNK_SIZE", "1024")

    from csvstream.shared.error_reporting import write_error_report

    try:
        raise ValueError("boom")
    except ValueError as exc:
        report = write_error_report(exc, where="test", context={"k": "v"})

    assert report.path.exists()
    assert report.path.parent == tmp_path
    text = report.path.read_text(encoding="utf-8", errors="replace")

    assert "boom" in text
    assert "ValueError" in text
    assert '"k": "v"' in text
    assert '"CSVSTREAM_CHUNK_SIZE": "1024"' in text


def test_get_error_reports_dir_prefers_env(monkeypatch, tmp_path: Path):
    target = tmp_path / "nested" / "reports"
    monkeypatch.setenv("CSVSTREAM_ERROR_DIR", str(target))

    from csvstream.shared.error_reporting import get_error_reports_dir

    assert get_error_reports_dir() == target
    assert target.is_dir()
