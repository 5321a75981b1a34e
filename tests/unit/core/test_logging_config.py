"""Unit tests for structured logging configuration."""

from __future__ import annotations

from collections.abc import Iterator
import json

import pytest

from core.logging_config import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    configure_logging()


def test_logger_emits_json_events_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Events at or above the level should be JSON lines on stderr."""
    configure_logging("info")

    get_logger("tests.logging").info("document_saved", entry_count=3)
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip())

    assert captured.out == ""
    assert payload["event"] == "document_saved" and payload["entry_count"] == 3
    assert payload["level"] == "info"


def test_logger_filters_events_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("warning")

    get_logger("tests.logging").info("mapping_added", domain="a.test")

    assert capsys.readouterr().err == ""
