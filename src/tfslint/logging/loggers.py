"""
LinterLogger: stdlib logger wrapper with a correlation ID and keyword context.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional
from uuid import uuid4


class LinterLogger:
    """Logger that attaches a correlation ID to every record.

    Keyword arguments to the log methods become the record's ``context``.
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs):
        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        if kwargs:
            extra["context"] = kwargs
        self.logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log at error level with the current traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    @contextmanager
    def timed(self, operation: str, **context):
        """Log the duration of the wrapped block at debug level."""
        start = time.perf_counter()
        self.debug(f"Starting {operation}", operation=operation, **context)
        try:
            yield self
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.debug(
                "%s completed in %.2fms",
                operation,
                duration_ms,
                extra={
                    "correlation_id": self.correlation_id,
                    "duration": round(duration_ms, 2),
                    "context": {"operation": operation, **context},
                },
            )


def get_logger(name: str, correlation_id: Optional[str] = None) -> LinterLogger:
    return LinterLogger(name, correlation_id)
