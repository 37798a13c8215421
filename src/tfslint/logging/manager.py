"""
Installs tfslint's handlers on the root logger.

``configure`` swaps out only the handlers it installed itself, so logging can
be configured once from defaults and again from tfslint.toml without
duplicate output.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

from .config import LoggingConfig
from .formatters import create_console_handler, create_formatter

DEFAULT_LOG_FILE = Path("logs/tfslint.log")


class LoggingManager:
    """Tracks the active LoggingConfig and the handlers built from it."""

    def __init__(self):
        self.config: Optional[LoggingConfig] = None
        self.handlers: List[logging.Handler] = []

    def configure(self, config: LoggingConfig):
        handlers = [self._create_handler(output, config) for output in config.output]

        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()

        for handler in handlers:
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
        root_logger.setLevel(config.level)

        self.handlers = handlers
        self.config = config

    def _create_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "console":
            return create_console_handler(config.format_type)

        file_path = config.file_path or DEFAULT_LOG_FILE
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(create_formatter(config.format_type))
        return handler


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
