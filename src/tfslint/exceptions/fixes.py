"""
Fix-related exceptions.

Raised when a finding cannot be fixed or when moving/renaming a test file fails.
"""

from pathlib import Path
from typing import Optional, Union

from ..constants import EXIT_FINDINGS, EXIT_FIX_ERROR
from .base import LinterError


class FixError(LinterError):
    exit_code = EXIT_FIX_ERROR
    title = "Fix Error"
    error_code = "FIX_FAILED"


class FileMoveError(FixError):
    """A test file could not be moved or renamed; the original is left in place."""

    error_code = "FILE_MOVE_FAILED"

    def __init__(
        self,
        source: Union[str, Path],
        target: Union[str, Path],
        details: Optional[str] = None,
    ):
        self.source = str(source)
        self.target = str(target)

        message = f"Failed to move {self.source} -> {self.target}"
        if details:
            message += f": {details}"
        super().__init__(message, f"Check {Path(self.target).parent} and move the file by hand")


class NotFixableError(FixError):
    """A fix was requested for a file without a fixable finding.

    Exits like an ordinary run with findings: the findings are still there.
    """

    exit_code = EXIT_FINDINGS
    title = "Cannot Fix"
    error_code = "NOT_FIXABLE"

    def __init__(self, test_file_path: Union[str, Path], reason: str):
        self.test_file_path = str(test_file_path)
        self.reason = reason
        super().__init__(
            f"Cannot fix {self.test_file_path}: {reason}",
            "Only misplaced or misnamed test files with a single matching source file can be fixed",
        )
