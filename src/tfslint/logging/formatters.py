"""
Formatters and console handlers for the three log formats.

``json`` writes one object per record, ``console`` a plain single line and
``rich`` goes through a RichHandler. Console output always goes to stderr.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    Keyword context given to a LinterLogger is nested under ``context`` so it
    never overwrites the fixed fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "correlation_id"):
            entry["correlation_id"] = record.correlation_id
        if hasattr(record, "duration"):
            entry["duration_ms"] = record.duration
        if getattr(record, "context", None):
            entry["context"] = record.context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def create_formatter(format_type: str) -> logging.Formatter:
    """Formatter for stream and file handlers; ``rich`` falls back to plain lines."""
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)


def create_console_handler(format_type: str) -> logging.Handler:
    if format_type == "rich":
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(create_formatter(format_type))
    return handler
