"""Tests for JSON log setup."""

from __future__ import annotations

import json
import logging
import subprocess
from unittest.mock import patch

import pytest

from dfmetrics import logging as df_logging
from dfmetrics.cli import main
from dfmetrics.collectors import DiskUsageCollector

DF_OUTPUT = (
    "Filesystem     Type  1024-blocks    Used Available Capacity Mounted on\n"
    "/dev/sda1      ext4     20000000 8000000  11000000      43% /\n"
    "/dev/sdb1 malformed\n"
)


@pytest.fixture(autouse=True)
def _fresh_logging(monkeypatch):
    root = logging.getLogger()
    saved_level = root.level
    monkeypatch.setattr(df_logging, "_CONFIGURED", False)
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, df_logging.JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(saved_level)


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


def test_collection_logs_json_to_stderr(capsys) -> None:
    df_logging.configure_logging(level="INFO")
    DiskUsageCollector("host.disk", runner=lambda command, timeout: DF_OUTPUT).collect()

    captured = capsys.readouterr()
    assert captured.out == ""

    events = {e["message"]: e for e in _json_lines(captured.err)}
    done = events["collection_complete"]
    assert done["level"] == "INFO"
    assert done["scheme"] == "host.disk"
    assert done["source"] == "df"
    assert done["status"] == "partial"
    assert done["metrics"] == 3
    assert done["failures"] == 1
    assert "ts" in done

    bad = events["malformed_line"]
    assert bad["level"] == "WARNING"
    assert bad["line"] == "/dev/sdb1 malformed"
    assert bad["line_number"] == 3
    assert bad["code"] == "parse_failure"


def test_configure_logging_is_idempotent() -> None:
    df_logging.configure_logging(level="INFO")
    handlers = logging.getLogger().handlers[:]
    df_logging.configure_logging(level="DEBUG")
    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.INFO


def test_cli_stdout_carries_only_metrics(capsys) -> None:
    completed = subprocess.CompletedProcess(
        args=["df", "-PT"], returncode=0, stdout=DF_OUTPUT, stderr=""
    )
    with patch("dfmetrics.command.subprocess.run", return_value=completed):
        with pytest.raises(SystemExit) as exc_info:
            main(["-s", "host.disk", "--command", "df -PT"])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    out_lines = captured.out.splitlines()
    assert len(out_lines) == 3
    assert all(line.startswith("host.disk.sda1.") for line in out_lines)
    assert "collection_complete" in [e["message"] for e in _json_lines(captured.err)]
