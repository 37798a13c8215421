"""
Automatic fixes for misplaced and misnamed test files.

Moving a test file also rewrites its ``namespace`` declaration when the
namespace follows the directory layout (``<Project>.Tests.<Sub>``).
"""

import os
import re
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..constants import DEFAULT_TEST_PROJECT_SUFFIX
from ..core.analyzer import AnalysisError, AnalysisErrorType, AnalysisResult
from ..core.analyzer.paths import split_segments
from ..exceptions import FileMoveError, NotFixableError
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FixOutcome:
    """A test file that was moved or renamed."""

    source: str
    target: str
    action: str = "moved"


@dataclass(frozen=True)
class FixableResult:
    is_fixable: bool
    error: Optional[AnalysisError] = None
    reason: Optional[str] = None


class Fixer:
    """Moves and renames test files to their expected location."""

    def __init__(self, test_project_suffix: str = DEFAULT_TEST_PROJECT_SUFFIX):
        self.test_project_suffix = test_project_suffix

    def is_fixable(self, test_file_path: str, results: Iterable[AnalysisResult]) -> FixableResult:
        """Find a fixable finding for ``test_file_path`` among ``results``."""
        wanted = os.path.abspath(test_file_path)
        result = next(
            (r for r in results if os.path.abspath(r.test_file_path) == wanted), None
        )
        if result is None:
            return FixableResult(False, reason="File not found in analysis results")

        error = next((e for e in result.errors if e.is_fixable), None)
        if error is None:
            return FixableResult(
                False, reason="File has no fixable directory structure or filename issues"
            )
        return FixableResult(True, error=error)

    def fix_file(self, test_file_path: str, results: Iterable[AnalysisResult]) -> FixOutcome:
        """Fix the single test file ``test_file_path``."""
        fixable = self.is_fixable(test_file_path, results)
        if not fixable.is_fixable:
            raise NotFixableError(test_file_path, fixable.reason)
        return self.fix(fixable.error)

    def fix(self, error: AnalysisError) -> FixOutcome:
        """Apply the fix matching the finding's kind."""
        if not error.is_fixable:
            raise NotFixableError(
                error.actual_test_path or "<unknown>",
                "finding lacks a single source file and an expected path",
            )
        if error.type is AnalysisErrorType.InvalidFileName:
            return self.rename_test_file(error)
        return self.move_test_file(error)

    def fix_directory_structure(self, results: Iterable[AnalysisResult]) -> List[FixOutcome]:
        """Move every test file with a fixable directory finding.

        Individual failures are logged and skipped.
        """
        outcomes = []
        for result in results:
            for error in result.errors:
                if error.type is not AnalysisErrorType.InvalidDirectoryStructure or not error.is_fixable:
                    continue
                try:
                    outcomes.append(self.move_test_file(error))
                except FileMoveError as e:
                    logger.error(f"Failed to fix {error.actual_test_path}: {e.message}")
        return outcomes

    def move_test_file(self, error: AnalysisError) -> FixOutcome:
        actual = error.actual_test_path
        expected = error.expected_test_path

        if os.path.exists(expected):
            raise FileMoveError(actual, expected, "target file already exists")

        try:
            with open(actual, encoding="utf-8") as f:
                content = f.read()
            content = self.update_namespace(content, actual, expected)

            os.makedirs(os.path.dirname(expected), exist_ok=True)
            with open(expected, "w", encoding="utf-8") as f:
                f.write(content)
            os.unlink(actual)
        except OSError as e:
            raise FileMoveError(actual, expected, str(e)) from e

        logger.info(f"Moved: {actual} -> {expected}", source=actual, target=expected)
        return FixOutcome(source=actual, target=expected)

    def rename_test_file(self, error: AnalysisError) -> FixOutcome:
        """Rename in place; case-only renames go through a temporary name."""
        actual = error.actual_test_path
        expected = error.expected_test_path

        try:
            if os.path.exists(expected) and not os.path.samefile(actual, expected):
                raise FileMoveError(actual, expected, "target file already exists")
            if actual.lower() == expected.lower():
                # case-only renames are a no-op on case-insensitive filesystems
                temp_path = os.path.join(
                    os.path.dirname(actual),
                    f"temp_{int(time.time() * 1000)}_{os.path.basename(expected)}",
                )
                os.rename(actual, temp_path)
                os.rename(temp_path, expected)
            else:
                os.rename(actual, expected)
        except OSError as e:
            raise FileMoveError(actual, expected, str(e)) from e

        logger.info(f"Renamed: {actual} -> {expected}", source=actual, target=expected)
        return FixOutcome(source=actual, target=expected, action="renamed")

    def update_namespace(self, content: str, actual_path: str, expected_path: str) -> str:
        """Rewrite ``namespace <old>`` to the namespace of the new location."""
        actual_namespace = self.extract_namespace(actual_path)
        expected_namespace = self.extract_namespace(expected_path)

        if actual_namespace and expected_namespace and actual_namespace != expected_namespace:
            pattern = re.compile(rf"namespace\s+{re.escape(actual_namespace)}\b")
            return pattern.sub(f"namespace {expected_namespace}", content)
        return content

    def extract_namespace(self, file_path: str) -> Optional[str]:
        """``/r/tests/Car.Tests/Engine/XTests.cs`` -> ``Car.Tests.Engine``."""
        parts = split_segments(os.path.dirname(file_path))
        for index, part in enumerate(parts):
            if part.endswith(self.test_project_suffix):
                return ".".join(parts[index:])
        return None
