"""Structured Logging: JSON formatter fields and idempotent setup."""

import json
import logging
import sys

import pytest

from movies_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "movies_api.api.routes.movies", logging.INFO, __file__, 1,
        "Movie %s", ("created",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "movies_api.api.routes.movies"
    assert payload["message"] == "Movie created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extra_fields():
    payload = json.loads(
        JSONFormatter().format(_record(movie_id=4, path="/api/movies", method="POST")),
    )
    assert payload["movie_id"] == 4
    assert payload["path"] == "/api/movies"
    assert payload["method"] == "POST"
    assert "error_code" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad year")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad year" in payload["exception"]


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def test_setup_logging_installs_single_handler(restore_root_logger):
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert logging.root.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)


def test_setup_logging_json_format(restore_root_logger):
    handler = setup_logging("info", "json")
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
