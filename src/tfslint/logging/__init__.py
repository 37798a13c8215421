"""
tfslint logging package.

- config: LoggingConfig runtime settings
- formatters: JSON, console and Rich output
- loggers: LinterLogger with correlation IDs and keyword context
- manager: LoggingManager that installs the handlers
"""

from .config import LoggingConfig, create_default_config, level_for_verbosity
from .formatters import JsonFormatter
from .loggers import LinterLogger, get_logger
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "JsonFormatter",
    "LinterLogger",
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "create_default_config",
    "get_logger",
    "level_for_verbosity",
    "logging_manager",
]
