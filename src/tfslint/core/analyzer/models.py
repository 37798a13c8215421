"""
Data model shared by the analyzer, reporters and fixers.

Everything here is immutable input (FileRecord, AnalyzerOptions) or plain
result data (AnalysisError, AnalysisResult, AnalysisReport). A run never
mutates its inputs.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ...constants import (
    DEFAULT_FILE_EXTENSION,
    DEFAULT_IGNORE_DIRECTORIES,
    DEFAULT_SRC_ROOT,
    DEFAULT_TEST_FILE_SUFFIX,
    DEFAULT_TEST_PROJECT_SUFFIX,
    DEFAULT_TEST_ROOT,
)
from ...exceptions.config import InvalidConfigurationError

PathLike = Union[str, Path]


def strip_extension(name: str, extension: Optional[str] = None) -> str:
    """Remove *extension* from *name* when it is a literal trailing match.

    Without an explicit extension the last dotted suffix is removed.
    """
    if extension is None:
        return os.path.splitext(name)[0]
    if extension and name.endswith(extension) and len(name) > len(extension):
        return name[: -len(extension)]
    return name


@dataclass(frozen=True)
class FileRecord:
    """An absolute file path with its derived name parts."""

    path: str
    name: str
    base_name: str
    extension: str

    @classmethod
    def from_path(cls, path: PathLike, extension: Optional[str] = None) -> "FileRecord":
        path = str(path)
        name = os.path.basename(path)
        base_name = strip_extension(name, extension)
        return cls(
            path=path,
            name=name,
            base_name=base_name,
            extension=name[len(base_name):],
        )

    def __str__(self) -> str:
        return self.path


class AnalysisErrorType(str, Enum):
    """The three kinds of structure findings."""

    InvalidFileName = "Invalid File Name"
    InvalidDirectoryStructure = "Invalid Directory Structure"
    MissingTest = "Missing Test File"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AnalyzerOptions:
    """Options for one analysis run.

    ``test_project_suffix`` is appended to the top-level source project
    directory to get the test project directory; ``test_file_suffix`` is
    appended to the source base name to get the test base name.
    """

    src_root: str = DEFAULT_SRC_ROOT
    test_root: str = DEFAULT_TEST_ROOT
    file_extension: str = DEFAULT_FILE_EXTENSION
    test_file_suffix: str = DEFAULT_TEST_FILE_SUFFIX
    test_project_suffix: str = DEFAULT_TEST_PROJECT_SUFFIX
    ignore_directories: Tuple[str, ...] = DEFAULT_IGNORE_DIRECTORIES
    ignore_files: Tuple[str, ...] = ()
    validate_file_name: bool = True
    validate_directory_structure: bool = True
    validate_missing_tests: bool = True

    def __post_init__(self):
        if not self.test_file_suffix:
            raise InvalidConfigurationError(
                "test_file_suffix", self.test_file_suffix, "a non-empty suffix such as 'Tests'"
            )
        # Accept any iterable (lists from config/CLI) but store tuples
        object.__setattr__(self, "src_root", str(self.src_root))
        object.__setattr__(self, "test_root", str(self.test_root))
        object.__setattr__(self, "ignore_directories", tuple(self.ignore_directories))
        object.__setattr__(self, "ignore_files", tuple(self.ignore_files))

    @property
    def normalized_ignore_files(self) -> frozenset:
        return frozenset(name.lower() for name in self.ignore_files)

    def resolved(self) -> "AnalyzerOptions":
        """Return a copy with absolute, normalized roots."""
        return replace(
            self,
            src_root=os.path.abspath(self.src_root),
            test_root=os.path.abspath(self.test_root),
        )


@dataclass(frozen=True)
class AnalysisError:
    """A single finding.

    ``source_file_path`` holds one path, or several comma-joined paths when
    the source file could not be resolved unambiguously.
    """

    type: AnalysisErrorType
    message: str
    source_file_path: Optional[str] = None
    actual_test_path: Optional[str] = None
    expected_test_path: Optional[str] = None
    incorrect_segment: Optional[str] = None

    @property
    def source_file_paths(self) -> List[str]:
        if not self.source_file_path:
            return []
        return [p.strip() for p in self.source_file_path.split(",") if p.strip()]

    @property
    def is_fixable(self) -> bool:
        """A finding can be moved/renamed only with the full path triple."""
        return (
            self.type in (AnalysisErrorType.InvalidDirectoryStructure, AnalysisErrorType.InvalidFileName)
            and bool(self.actual_test_path)
            and bool(self.expected_test_path)
            and len(self.source_file_paths) == 1
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.type.value, "message": self.message}
        optional = {
            "sourceFilePath": self.source_file_path,
            "actualTestPath": self.actual_test_path,
            "expectedTestPath": self.expected_test_path,
            "incorrectSegment": self.incorrect_segment,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass
class AnalysisResult:
    """Findings for one test file, or for one source file missing its test."""

    test_file: str
    test_file_path: str
    errors: List[AnalysisError] = field(default_factory=list)

    @classmethod
    def for_path(cls, test_file_path: PathLike, errors: Iterable[AnalysisError] = ()) -> "AnalysisResult":
        test_file_path = str(test_file_path)
        return cls(
            test_file=os.path.basename(test_file_path),
            test_file_path=test_file_path,
            errors=list(errors),
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "testFile": self.test_file,
            "testFilePath": self.test_file_path,
            "errors": [error.to_dict() for error in self.errors],
        }


@dataclass
class AnalysisReport:
    """Results of a project analysis plus the number of files considered."""

    results: List[AnalysisResult]
    total_files: int

    @property
    def has_issues(self) -> bool:
        return bool(self.results)
