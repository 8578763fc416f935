# This test file validates the process-wide logging setup and the JSON formatter.
# The formatter output is parsed back so field names stay stable for log shippers.

from __future__ import annotations

import json
import logging

import pytest

from cheatsheets.common import logging as logging_module


def test_json_formatter_emits_one_object_per_record() -> None:
    record = logging.LogRecord(
        name="notes",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="check failed topic=%s",
        args=("heaps",),
        exc_info=None,
    )
    payload = json.loads(logging_module.JsonLogFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "notes"
    assert payload["msg"] == "check failed topic=heaps"
    assert "ts" in payload


def test_configure_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(logging_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_module.configure_logging()
    logging_module.configure_logging()

    assert len(calls) == 1
    assert calls[0]["format"] == logging_module.TEXT_FORMAT
    assert calls[0]["level"] == logging.INFO


def test_configure_logging_json_format(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(logging_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_module.configure_logging()

    handlers = calls[0]["handlers"]
    assert calls[0]["level"] == logging.DEBUG
    assert isinstance(handlers[0].formatter, logging_module.JsonLogFormatter)  # type: ignore[index]
