"""Structured logging: JSON fields, extras, and idempotent setup."""

import json
import logging
from datetime import datetime, timezone

import pytest

from nexuscore.infrastructure.observability import HANDLER_NAME, JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "nexuscore.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "nexuscore.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_known_extras_surfaced_and_none_skipped():
    log = json.loads(JSONFormatter().format(
        _record(video_id="65f0c0ffee", error_code=None, path="/api/videos"),
    ))
    assert log["video_id"] == "65f0c0ffee"
    assert log["path"] == "/api/videos"
    assert "error_code" not in log


def test_unknown_extras_ignored():
    log = json.loads(JSONFormatter().format(_record(secret="x")))
    assert "secret" not in log


def test_service_name_and_record_time():
    record = _record()
    log = json.loads(JSONFormatter().format(record))
    assert log["service"] == "nexuscore-api"
    assert log["timestamp"] == datetime.fromtimestamp(record.created, timezone.utc).isoformat()


@pytest.fixture
def clean_root():
    saved_handlers = list(logging.root.handlers)
    saved_level = logging.root.level
    yield
    for h in list(logging.root.handlers):
        if h not in saved_handlers:
            logging.root.removeHandler(h)
    logging.root.setLevel(saved_level)


def _ours():
    return [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]


def test_setup_logging_installs_one_handler_across_restarts(clean_root):
    first = setup_logging("INFO", "json")
    second = setup_logging("DEBUG", "text")
    assert first is second
    assert _ours() == [first]
    assert not isinstance(first.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG


def test_setup_logging_quiets_driver_loggers(clean_root):
    setup_logging("INFO", "json")
    assert logging.getLogger("pymongo.command").level == logging.WARNING
