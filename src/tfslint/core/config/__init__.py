"""
Configuration management for tfslint.

Pydantic models for the ``tfslint.toml`` file plus the ConfigManager that
merges file, environment and command line values.
"""

from .manager import ConfigManager, split_list_option
from .models import (
    AnalyzerSettings,
    LinterConfig,
    LinterEnvironment,
    LoggingSettings,
    LogLevel,
    ReportFormat,
    ReportSettings,
)

__all__ = [
    "AnalyzerSettings",
    "ConfigManager",
    "LinterConfig",
    "LinterEnvironment",
    "LoggingSettings",
    "LogLevel",
    "ReportFormat",
    "ReportSettings",
    "split_list_option",
]
