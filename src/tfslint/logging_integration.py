"""
Integration between the tfslint configuration and the logging system.

Translates the validated LoggingSettings into a runtime LoggingConfig and
hands out LinterLogger instances once logging is configured.
"""

import logging
from typing import Optional

from .core.config import LinterConfig
from .logging import (
    LinterLogger,
    LoggingConfig,
    configure_logging,
    create_default_config,
    level_for_verbosity,
)
from .logging import get_logger as _get_logger

_logging_configured = False


def configure_logging_from_config(config: LinterConfig, verbose: int = 0):
    """Configure logging from LinterConfig.

    ``-v`` on the command line can only make logging more verbose than the
    configured level, never quieter.
    """
    global _logging_configured

    settings = config.logging
    level = getattr(logging, settings.level.value)
    if verbose:
        level = min(level, level_for_verbosity(verbose))

    configure_logging(
        LoggingConfig(
            level=level,
            format_type=settings.format,
            output=list(settings.output),
            file_path=settings.file_path,
            max_file_size=settings.max_file_size,
            backup_count=settings.backup_count,
        )
    )
    _logging_configured = True


def ensure_logging_configured():
    """Configure default logging if nothing has been configured yet."""
    global _logging_configured

    if not _logging_configured:
        configure_logging(create_default_config())
        _logging_configured = True


def get_logger(name: str, correlation_id: Optional[str] = None) -> LinterLogger:
    """Get a LinterLogger, ensuring logging is configured."""
    ensure_logging_configured()
    return _get_logger(name, correlation_id)
