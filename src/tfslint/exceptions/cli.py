"""Command line misuse and interrupted interactive sessions."""

from ..constants import EXIT_CANCELLED, EXIT_USAGE_ERROR
from .base import LinterError


class CLIError(LinterError):
    exit_code = EXIT_USAGE_ERROR
    title = "Command Error"
    error_code = "CLI_ERROR"


class InvalidCommandError(CLIError):
    """Options that cannot be combined."""

    error_code = "INVALID_COMMAND"

    def __init__(self, command: str, reason: str):
        super().__init__(
            f"Invalid command usage: {reason}",
            f"Use 'tfslint {command} --help' for correct usage",
        )


class UserAbortError(CLIError):
    """The user interrupted an interactive fix session."""

    exit_code = EXIT_CANCELLED
    title = "Cancelled"
    error_code = "USER_ABORT"

    def __init__(self, reason: str):
        super().__init__(f"Operation aborted by user: {reason}")
