"""Structured logging — JSONFormatter output and setup_logging wiring."""

import json
import sys
import logging

import pytest

from bazinga.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", exc_info=None, **extra):
    record = logging.LogRecord(
        "bazinga.test", logging.INFO, __file__, 1, msg, None, exc_info,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "bazinga.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extras():
    payload = json.loads(JSONFormatter().format(
        _record(word_length=4, vowel_runs=1, error_code="WORD_TOO_LONG"),
    ))
    assert payload["word_length"] == 4
    assert payload["vowel_runs"] == 1
    assert payload["error_code"] == "WORD_TOO_LONG"
    assert "batch_size" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        payload = json.loads(JSONFormatter().format(_record(exc_info=sys.exc_info())))
    assert "ValueError: boom" in payload["exception"]


def test_json_formatter_keeps_non_ascii():
    line = JSONFormatter().format(_record(msg="cbazingafé"))
    assert "cbazingafé" in line


@pytest.fixture
def restore_root_logger():
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


@pytest.mark.parametrize("fmt, formatter_type", [
    ("json", JSONFormatter),
    ("text", logging.Formatter),
])
def test_setup_logging_installs_handler(restore_root_logger, fmt, formatter_type):
    handler = setup_logging("debug", fmt)
    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, formatter_type)
    assert logging.root.level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty", "text")
    assert logging.root.level == logging.INFO
