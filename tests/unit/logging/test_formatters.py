"""
Unit tests for logging formatters.

Tests JSON formatting, plain console formatting and the Rich console handler.
"""

import json
import logging
import sys

import pytest
from rich.logging import RichHandler

from tfslint.logging.formatters import (
    JsonFormatter,
    create_console_handler,
    create_formatter,
)


def make_record(msg="Test message", level=logging.INFO, exc_info=None):
    record = logging.LogRecord(
        name="tfslint.test",
        level=level,
        pathname="/path/to/discovery.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.created = 1642684800.0
    return record


@pytest.mark.unit
class TestJsonFormatter:
    """Test cases for JsonFormatter."""

    def test_format_basic_record(self):
        entry = json.loads(JsonFormatter().format(make_record()))

        assert entry == {
            "timestamp": "2022-01-20T13:20:00+00:00",
            "level": "INFO",
            "logger": "tfslint.test",
            "message": "Test message",
        }

    def test_context_is_nested(self):
        """Keyword context cannot overwrite the fixed fields."""
        record = make_record()
        record.correlation_id = "abc123"
        record.duration = 12.5
        record.context = {"src_root": "/r/src", "message": "shadow"}

        entry = json.loads(JsonFormatter().format(record))

        assert entry["correlation_id"] == "abc123"
        assert entry["duration_ms"] == 12.5
        assert entry["message"] == "Test message"
        assert entry["context"] == {"src_root": "/r/src", "message": "shadow"}

    def test_exception_info(self):
        try:
            raise ValueError("broken")
        except ValueError:
            record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

        entry = json.loads(JsonFormatter().format(record))

        assert entry["exception"].startswith("Traceback")
        assert "ValueError: broken" in entry["exception"]


@pytest.mark.unit
class TestFormatSelection:

    def test_json_format(self):
        assert isinstance(create_formatter("json"), JsonFormatter)

    @pytest.mark.parametrize("format_type", ["console", "rich"])
    def test_plain_line_format(self, format_type):
        output = create_formatter(format_type).format(make_record())

        assert "[    INFO] tfslint.test: Test message" in output

    def test_rich_handler_writes_to_stderr(self):
        handler = create_console_handler("rich")

        assert isinstance(handler, RichHandler)
        assert handler.console.stderr is True

    @pytest.mark.parametrize("format_type", ["console", "json"])
    def test_stream_handler_writes_to_stderr(self, format_type):
        handler = create_console_handler(format_type)

        assert type(handler) is logging.StreamHandler
        assert handler.stream is sys.stderr
