"""
Centralized error handling for the CLI.

Commands are wrapped with ``handle_cli_errors`` so that every exception is
printed consistently, logged with its correlation ID and mapped to an exit
code. Linter errors carry their own heading and exit code.
"""

import functools
import logging
import sys

import click
from rich.console import Console

from ..constants import EXIT_CANCELLED, EXIT_INTERNAL_ERROR
from ..exceptions import LinterError
from ..logging_integration import get_logger

console = Console(stderr=True)


def handle_cli_errors(func):
    """Decorator to handle all CLI errors with proper formatting and exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except (KeyboardInterrupt, EOFError):
            _handle_cancel()
        except LinterError as e:
            _handle_linter_error(e)
        except OSError as e:
            _handle_system_error(e)
        except Exception as e:
            _handle_unexpected_error(e)

    return wrapper


def _print_error(message: str, style: str = "red"):
    console.print(message, style=style, markup=False, highlight=False)


def _print_help(message: str):
    console.print(f"Help: {message}", style="blue", markup=False, highlight=False)


def _handle_cancel():
    _print_error("\nOperation cancelled by user", "yellow")
    sys.exit(EXIT_CANCELLED)


def _handle_linter_error(e: LinterError):
    _print_error(f"{e.title}: {e.message}", "yellow" if e.exit_code == EXIT_CANCELLED else "red")
    if e.help_text:
        _print_help(e.help_text)
    console.print(f"Error ID: {e.correlation_id}", style="dim", markup=False, highlight=False)

    logger = get_logger("tfslint.cli.error", e.correlation_id)
    logger.error(f"{type(e).__name__} ({e.error_code}): {e.message}", error=e.to_dict())
    sys.exit(e.exit_code)


def _handle_system_error(e: OSError):
    _print_error(f"System Error: {e}")
    _print_help("Check that the paths exist and that you have permission to read and write them")
    logging.getLogger("tfslint.cli.error").error("System error: %s", e)
    sys.exit(EXIT_INTERNAL_ERROR)


def _handle_unexpected_error(e: Exception):
    _print_error(f"Unexpected Error: {e}")
    console.print("This may be a bug, please report it with the output of -vv.", style="yellow")
    logging.getLogger("tfslint.cli.error").exception("Unexpected error occurred")
    sys.exit(EXIT_INTERNAL_ERROR)
