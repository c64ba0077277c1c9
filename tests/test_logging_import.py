"""
Pytest tests for assessor_logging: JSON keys, bound assessment ids, and settings reaching the renderer.
"""

from __future__ import annotations

import json

import pytest

from domain_assessor.assessor_logging import (
    bind_assessment,
    configure_from_settings,
    configure_structlog,
    get_logger,
)
from domain_assessor.config import Settings, get_settings


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_structlog()


def _json_lines(out: str) -> list[dict]:
    return [json.loads(line) for line in out.splitlines() if line.startswith("{")]


def test_json_event_keys(capsys):
    configure_from_settings(Settings(log_level="INFO", log_format="json"))
    get_logger("tests.logging").info("assessment_scored", domain="example.com")
    lines = _json_lines(capsys.readouterr().out)
    assert len(lines) == 1
    record = lines[0]
    assert record["event_type"] == "assessment_scored"
    assert record["message"] == "assessment_scored"
    assert record["logger"] == "tests.logging"
    assert record["level"] == "info"
    assert record["domain"] == "example.com"
    assert "timestamp" in record
    assert "event" not in record


def test_bind_assessment_adds_id(capsys):
    configure_from_settings(Settings(log_format="json"))
    bind_assessment("example.com-1-1").info("bound_message")
    record = _json_lines(capsys.readouterr().out)[0]
    assert record["event_type"] == "bound_message"
    assert record["assessment_id"] == "example.com-1-1"


def test_log_format_setting_reaches_renderer(capsys, monkeypatch):
    """LOG_FORMAT=console switches a logger created earlier to the console renderer."""
    logger = get_logger("tests.logging")
    monkeypatch.setenv("LOG_FORMAT", "console")
    configure_from_settings(get_settings())
    logger.info("console_message", key="value")
    out = capsys.readouterr().out
    assert "console_message" in out
    assert "key=value" in out
    assert _json_lines(out) == []


def test_log_level_setting_filters(capsys, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_from_settings(get_settings())
    logger = get_logger("tests.logging")
    logger.info("dropped_message")
    logger.warning("kept_message")
    events = [r["event_type"] for r in _json_lines(capsys.readouterr().out)]
    assert events == ["kept_message"]


def test_store_logs_assessment_id(capsys, store):
    configure_from_settings(Settings(log_format="json"))
    created = store.create("example.com")
    records = _json_lines(capsys.readouterr().out)
    assert {"event_type": "assessment_created", "assessment_id": created.id}.items() <= records[-1].items()
