"""
Structure validation: the analyzer's entry point.

For every test file the validator infers the source file it tests, works
out where the test file should live and reports any mismatch as an
AnalysisError. A second sweep reports source files without any test.

Mismatches are data. ``validate`` never raises for a structure problem and
returns the same output for the same input.
"""

import logging
import os
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ...constants import SRC_DISPLAY_ROOT
from .matcher import find_matching_source_files, strip_test_suffix
from .models import (
    AnalysisError,
    AnalysisErrorType,
    AnalysisResult,
    AnalyzerOptions,
    FileRecord,
    PathLike,
)
from .paths import (
    calculate_expected_test_path,
    display_path,
    find_first_incorrect_segment,
    is_in_ignored_directory,
    join_display_paths,
)
from .resolver import resolve_ambiguous_match

logger = logging.getLogger(__name__)

FileInput = Union[PathLike, FileRecord]


class StructureValidator:
    """Validates test file names and locations against the source tree."""

    def __init__(self, options: AnalyzerOptions):
        self.options = options

    def validate(
        self, source_files: Iterable[FileInput], test_files: Iterable[FileInput]
    ) -> List[AnalysisResult]:
        """Run every enabled validation and return results with findings only."""
        sources = self._records(source_files)
        tests = self._records(test_files)

        results: List[AnalysisResult] = []
        for test_file in tests:
            errors = [e for e in self.validate_test_file(test_file, sources) if self._is_enabled(e)]
            if errors:
                results.append(AnalysisResult.for_path(test_file.path, errors))

        if self.options.validate_missing_tests:
            results.extend(self.find_missing_tests(sources, tests))

        filtered = self.filter_ignored(results)
        logger.debug(
            "Validated %d test and %d source files: %d result(s)",
            len(tests), len(sources), len(filtered),
        )
        return filtered

    def validate_test_file(
        self, test_file: FileRecord, source_files: Sequence[FileRecord]
    ) -> List[AnalysisError]:
        """Return the findings for one test file (at most one)."""
        source_name = strip_test_suffix(test_file.base_name, self.options.test_file_suffix)
        candidates = find_matching_source_files(
            source_files, source_name, self.options.file_extension
        )

        if not candidates:
            return [
                AnalysisError(
                    type=AnalysisErrorType.InvalidDirectoryStructure,
                    message=f"Source file not found: {source_name}{self.options.file_extension}",
                    actual_test_path=test_file.path,
                )
            ]

        if len(candidates) == 1:
            source_file = candidates[0]
        else:
            source_file = resolve_ambiguous_match(test_file, candidates, self.options)
            if source_file is None:
                return [self._ambiguous_source_error(test_file, candidates)]

        error = self.check_location(test_file, source_file)
        return [error] if error else []

    def check_location(
        self, test_file: FileRecord, source_file: FileRecord
    ) -> Optional[AnalysisError]:
        """Compare a test file with the expected path of its resolved source file.

        Paths are compared as exact strings, so a case-only difference is a
        finding even on case-insensitive filesystems.
        """
        expected = calculate_expected_test_path(source_file.path, self.options)
        actual = test_file.path
        if actual == expected:
            return None

        expected_name = os.path.basename(expected)
        if os.path.normpath(os.path.dirname(actual)) != os.path.normpath(os.path.dirname(expected)):
            return AnalysisError(
                type=AnalysisErrorType.InvalidDirectoryStructure,
                message="Test file is in wrong directory",
                source_file_path=source_file.path,
                actual_test_path=actual,
                expected_test_path=expected,
                incorrect_segment=find_first_incorrect_segment(actual, expected, self.options),
            )

        return AnalysisError(
            type=AnalysisErrorType.InvalidFileName,
            message=f"Test file has incorrect name. Expected: {expected_name}",
            source_file_path=source_file.path,
            actual_test_path=actual,
            expected_test_path=expected,
        )

    def find_missing_tests(
        self, source_files: Sequence[FileRecord], test_files: Sequence[FileRecord]
    ) -> List[AnalysisResult]:
        """Report source files that no test file refers to by name."""
        tested: Dict[str, str] = {}
        for test_file in test_files:
            tested[strip_test_suffix(test_file.base_name, self.options.test_file_suffix)] = test_file.path

        results = []
        for source_file in source_files:
            if source_file.base_name in tested:
                continue
            expected = calculate_expected_test_path(source_file.path, self.options)
            error = AnalysisError(
                type=AnalysisErrorType.MissingTest,
                message=f"Missing test file for source file: {source_file.path}",
                source_file_path=source_file.path,
                expected_test_path=expected,
            )
            results.append(AnalysisResult.for_path(expected, [error]))
        return results

    def filter_ignored(self, results: Iterable[AnalysisResult]) -> List[AnalysisResult]:
        """Drop results located in ignored directories or named in ``ignore_files``.

        Applied to every result regardless of how it was produced.
        """
        ignored_files = self.options.normalized_ignore_files
        kept = []
        for result in results:
            if is_in_ignored_directory(
                result.test_file_path, self.options.test_root, self.options.ignore_directories
            ):
                continue
            if result.test_file.lower() in ignored_files:
                continue
            kept.append(result)
        return kept

    def _ambiguous_source_error(
        self, test_file: FileRecord, candidates: Sequence[FileRecord]
    ) -> AnalysisError:
        sources = join_display_paths(
            display_path(c.path, self.options.src_root, SRC_DISPLAY_ROOT) for c in candidates
        )
        return AnalysisError(
            type=AnalysisErrorType.InvalidDirectoryStructure,
            message=(
                f"Multiple matching source files found ({len(candidates)}). "
                "Unable to determine correct source file"
            ),
            source_file_path=sources,
            actual_test_path=test_file.path,
        )

    def _is_enabled(self, error: AnalysisError) -> bool:
        if error.type is AnalysisErrorType.InvalidDirectoryStructure:
            return self.options.validate_directory_structure
        if error.type is AnalysisErrorType.InvalidFileName:
            return self.options.validate_file_name
        return True

    def _records(self, files: Iterable[FileInput]) -> List[FileRecord]:
        return [
            f if isinstance(f, FileRecord) else FileRecord.from_path(f, self.options.file_extension)
            for f in files
        ]


def analyze_structure(
    source_files: Iterable[FileInput],
    test_files: Iterable[FileInput],
    options: AnalyzerOptions,
) -> List[AnalysisResult]:
    """Validate in-memory file lists; see StructureValidator.validate."""
    return StructureValidator(options).validate(source_files, test_files)
