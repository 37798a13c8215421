"""
tfslint Exception Hierarchy

Structure findings are returned as data by the analyzer and never raised.
The exceptions below cover everything else and carry actionable messages.

Exception Hierarchy:
    LinterError (base, exit code 2)
    ├── ConfigurationError          exit 3
    │   ├── InvalidConfigurationError
    │   └── ConfigurationValidationError
    ├── FixError                    exit 5
    │   ├── FileMoveError
    │   └── NotFixableError         exit 1
    └── CLIError                    exit 4
        ├── InvalidCommandError
        └── UserAbortError          exit 130
"""

from .base import LinterError

# CLI exceptions
from .cli import CLIError, InvalidCommandError, UserAbortError

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Fix exceptions
from .fixes import FileMoveError, FixError, NotFixableError

__all__ = [
    # Base
    "LinterError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    # Fixes
    "FixError",
    "FileMoveError",
    "NotFixableError",
    # CLI
    "CLIError",
    "InvalidCommandError",
    "UserAbortError",
]
