"""
Base exception for tfslint.

Structure findings are data and are never raised. A LinterError stands for
something the linter could not do; each subclass declares the exit code and
the heading the CLI prints for it.
"""

import uuid
from typing import Any, Dict, Optional

from ..constants import EXIT_INTERNAL_ERROR


class LinterError(Exception):
    """Base exception for all tfslint errors.

    Attributes:
        message: What went wrong
        help_text: Optional next step for the user
        correlation_id: Short ID shown to the user and attached to the error log record
    """

    exit_code = EXIT_INTERNAL_ERROR
    title = "Error"
    error_code = "LINTER_ERROR"

    def __init__(self, message: str, help_text: Optional[str] = None):
        self.message = message
        self.help_text = help_text
        self.correlation_id = uuid.uuid4().hex[:8]
        super().__init__(message)

    def __str__(self) -> str:
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Fields for the structured error log record."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "exit_code": self.exit_code,
            "message": self.message,
            "help_text": self.help_text,
            "correlation_id": self.correlation_id,
        }
