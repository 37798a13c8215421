"""
Configuration manager for tfslint.

Loads the optional ``tfslint.toml``, applies ``TFSLINT_*`` environment
overrides, validates the result and turns it into AnalyzerOptions. Command
line options are merged last, so precedence is CLI > env > file > defaults.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from ...constants import DEFAULT_CONFIG_FILENAME
from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from ..analyzer.models import AnalyzerOptions
from .models import AnalyzerSettings, LinterConfig, LinterEnvironment

logger = logging.getLogger(__name__)

# LinterEnvironment attribute -> analyzer setting
_ANALYZER_ENV_FIELDS = {
    "tfslint_src_root": "src_root",
    "tfslint_test_root": "test_root",
    "tfslint_file_extension": "file_extension",
    "tfslint_test_file_suffix": "test_file_suffix",
    "tfslint_test_project_suffix": "test_project_suffix",
}


def split_list_option(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated option, stripping whitespace and quotes.

    ``"bin, 'obj'"`` -> ``["bin", "obj"]``. ``None`` stays ``None``.
    """
    if value is None:
        return None
    items = [item.strip().strip("'\"").strip() for item in value.split(",")]
    return [item for item in items if item]


class ConfigManager:
    """Loads, validates and exports tfslint configuration."""

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Args:
            config_file: Explicit TOML file. It must exist. When omitted,
                ``tfslint.toml`` in the working directory is used if present.
        """
        if config_file is not None:
            self.config_file = Path(config_file)
            if not self.config_file.is_file():
                raise ConfigurationError(
                    f"Configuration file not found: {self.config_file}",
                    help_text="Check the --config path or run 'tfslint config --init'",
                )
        else:
            self.config_file = Path.cwd() / DEFAULT_CONFIG_FILENAME

        self._config: Optional[LinterConfig] = None

    def load_config(self) -> LinterConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.is_file():
            config_data = self._load_toml_file()
            logger.debug("Loaded configuration from %s", self.config_file)

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = LinterConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            )
        except TypeError as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"])

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            )
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}",
                help_text="Check file permissions and path",
            )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply TFSLINT_* environment variables on top of file values."""
        settings = LinterEnvironment()

        analyzer = config_data.setdefault("analyzer", {})
        for attribute, key in _ANALYZER_ENV_FIELDS.items():
            value = getattr(settings, attribute)
            if value:
                analyzer[key] = value

        for attribute, key in (
            ("tfslint_ignore_directories", "ignore_directories"),
            ("tfslint_ignore_files", "ignore_files"),
        ):
            items = split_list_option(getattr(settings, attribute))
            if items is not None:
                analyzer[key] = items

        logging_section = config_data.setdefault("logging", {})
        if settings.tfslint_logging_level:
            logging_section["level"] = settings.tfslint_logging_level.upper()
        if settings.tfslint_logging_format:
            logging_section["format"] = settings.tfslint_logging_format

        return config_data

    def to_analyzer_options(self, **overrides: Any) -> AnalyzerOptions:
        """Build AnalyzerOptions from the loaded config.

        Keyword overrides (typically command line options) win over the
        configuration; ``None`` values are ignored.
        """
        settings = self.load_config().analyzer.model_dump()
        settings.update({k: v for k, v in overrides.items() if v is not None})

        try:
            validated = AnalyzerSettings(**settings)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            )

        return AnalyzerOptions(
            src_root=validated.src_root,
            test_root=validated.test_root,
            file_extension=validated.file_extension,
            test_file_suffix=validated.test_file_suffix,
            test_project_suffix=validated.test_project_suffix,
            ignore_directories=validated.ignore_directories,
            ignore_files=validated.ignore_files,
            validate_file_name=validated.validate_file_name,
            validate_directory_structure=validated.validate_directory_structure,
            validate_missing_tests=validated.validate_missing_tests,
        )

    def export_config(self, file_path: Union[str, Path]) -> None:
        """Export the effective configuration to a TOML file."""
        self._write_toml(Path(file_path), self.load_config())

    def init_config(self, file_path: Optional[Union[str, Path]] = None, force: bool = False) -> Path:
        """Write a default configuration file and return its path."""
        target = Path(file_path) if file_path else Path.cwd() / DEFAULT_CONFIG_FILENAME
        if target.exists() and not force:
            raise ConfigurationError(
                f"Configuration file already exists: {target}",
                help_text="Remove it first or pass --force to overwrite",
            )
        self._write_toml(target, LinterConfig())
        return target

    def _write_toml(self, file_path: Path, config: LinterConfig) -> None:
        config_dict = self._remove_none_values(config.model_dump(mode="json"))
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "wb") as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file {file_path}: {e}",
                help_text="Check file permissions and path",
            )
        logger.info("Wrote configuration to %s", file_path)

    def _remove_none_values(self, data):
        """Recursively drop None values, which TOML cannot represent."""
        if isinstance(data, dict):
            return {k: self._remove_none_values(v) for k, v in data.items() if v is not None}
        if isinstance(data, list):
            return [self._remove_none_values(item) for item in data if item is not None]
        return data
