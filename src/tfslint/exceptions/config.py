"""Errors in tfslint.toml, TFSLINT_* variables or configuration values from the command line."""

from typing import Any, List

from ..constants import EXIT_CONFIGURATION_ERROR
from .base import LinterError


class ConfigurationError(LinterError):
    exit_code = EXIT_CONFIGURATION_ERROR
    title = "Configuration Error"
    error_code = "CONFIG_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """A single setting holds a value the linter cannot use."""

    error_code = "CONFIG_INVALID"

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid configuration for '{field}': got {value!r}, expected {expected}",
            f"Check the '{field}' setting in tfslint.toml, the TFSLINT_* environment or the command line",
        )


class ConfigurationValidationError(ConfigurationError):
    """Pydantic rejected one or more settings; ``errors`` holds ``"loc: msg"`` lines."""

    error_code = "CONFIG_VALIDATION"

    def __init__(self, errors: List[str]):
        self.errors = errors
        lines = ["Configuration validation failed:"] + [f"  - {error}" for error in errors]
        super().__init__(
            "\n".join(lines),
            "Fix the settings listed above",
        )
