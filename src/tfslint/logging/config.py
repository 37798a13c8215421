"""
Logging configuration.

LoggingConfig is the plain runtime object the LoggingManager consumes; the
validated, file/env backed settings live in ``tfslint.core.config.models``.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES

FORMAT_TYPES = ("console", "json", "rich")
OUTPUT_TYPES = ("console", "file")


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.WARNING,
        format_type: str = "rich",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file" or both
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
    ):
        self.level = level if isinstance(level, int) else getattr(logging, level.upper())
        if format_type not in FORMAT_TYPES:
            raise ValueError(f"Unknown log format '{format_type}', expected one of {FORMAT_TYPES}")
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        unknown = [o for o in self.output if o not in OUTPUT_TYPES]
        if unknown:
            raise ValueError(f"Unknown log output {unknown}, expected any of {OUTPUT_TYPES}")
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count


def create_default_config() -> LoggingConfig:
    return LoggingConfig()


def level_for_verbosity(verbose: int) -> int:
    """Map the CLI's repeated ``-v`` flag to a log level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
