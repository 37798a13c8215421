"""
Configuration models for tfslint.

Pydantic models validate the ``tfslint.toml`` file and environment overrides
before they are turned into the analyzer's immutable AnalyzerOptions.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...constants import (
    DEFAULT_FILE_EXTENSION,
    DEFAULT_IGNORE_DIRECTORIES,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_REPORT_DIRECTORY,
    DEFAULT_SRC_ROOT,
    DEFAULT_TEST_FILE_SUFFIX,
    DEFAULT_TEST_PROJECT_SUFFIX,
    DEFAULT_TEST_ROOT,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ReportFormat(str, Enum):
    """Console report layouts."""

    LIST = "list"
    TABLE = "table"
    JSON = "json"


class AnalyzerSettings(BaseModel):
    """Naming convention and validation toggles."""

    src_root: str = Field(DEFAULT_SRC_ROOT, description="Root directory of the source projects")
    test_root: str = Field(DEFAULT_TEST_ROOT, description="Root directory of the test projects")
    file_extension: str = Field(DEFAULT_FILE_EXTENSION, description="Extension of the files to analyse")
    test_file_suffix: str = Field(
        DEFAULT_TEST_FILE_SUFFIX, min_length=1, description="Suffix appended to a source base name"
    )
    test_project_suffix: str = Field(
        DEFAULT_TEST_PROJECT_SUFFIX, description="Suffix appended to a source project directory"
    )
    ignore_directories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_DIRECTORIES),
        description="Directory names excluded from discovery and results",
    )
    ignore_files: List[str] = Field(
        default_factory=list, description="File names excluded from results (case-insensitive)"
    )
    validate_file_name: bool = Field(True, description="Report test files with a wrong name")
    validate_directory_structure: bool = Field(True, description="Report test files in a wrong directory")
    validate_missing_tests: bool = Field(True, description="Report source files without a test")

    @field_validator("file_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("file_extension must not be empty")
        return v if v.startswith(".") else f".{v}"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("rich", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT, ge=1, le=20, description="Number of backup log files to keep"
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(f"output must contain only: {', '.join(sorted(valid_outputs))}")
        return v


class ReportSettings(BaseModel):
    """Report output configuration."""

    format: ReportFormat = Field(ReportFormat.LIST, description="Console report layout")
    output_directory: Path = Field(
        Path(DEFAULT_REPORT_DIRECTORY), description="Directory for timestamped JSON reports"
    )


class LinterConfig(BaseModel):
    """Root configuration model, one section per TOML table."""

    analyzer: AnalyzerSettings = Field(default_factory=AnalyzerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class LinterEnvironment(BaseSettings):
    """Settings that can be overridden by environment variables.

    List values are comma separated strings; ConfigManager splits them.
    """

    tfslint_src_root: Optional[str] = Field(None, alias="TFSLINT_SRC_ROOT")
    tfslint_test_root: Optional[str] = Field(None, alias="TFSLINT_TEST_ROOT")
    tfslint_file_extension: Optional[str] = Field(None, alias="TFSLINT_FILE_EXTENSION")
    tfslint_test_file_suffix: Optional[str] = Field(None, alias="TFSLINT_TEST_FILE_SUFFIX")
    tfslint_test_project_suffix: Optional[str] = Field(None, alias="TFSLINT_TEST_PROJECT_SUFFIX")
    tfslint_ignore_directories: Optional[str] = Field(None, alias="TFSLINT_IGNORE_DIRECTORIES")
    tfslint_ignore_files: Optional[str] = Field(None, alias="TFSLINT_IGNORE_FILES")

    tfslint_logging_level: Optional[str] = Field(None, alias="TFSLINT_LOGGING_LEVEL")
    tfslint_logging_format: Optional[str] = Field(None, alias="TFSLINT_LOGGING_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
