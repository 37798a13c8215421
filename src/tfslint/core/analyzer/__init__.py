"""
Test structure analyzer.

Given flat lists of source and test file paths, infers which source file each
test file tests, computes the expected test path and reports every mismatch.
"""

from .matcher import find_matching_source_files, strip_test_suffix
from .models import (
    AnalysisError,
    AnalysisErrorType,
    AnalysisReport,
    AnalysisResult,
    AnalyzerOptions,
    FileRecord,
)
from .paths import calculate_expected_test_path, find_first_incorrect_segment
from .resolver import resolve_ambiguous_match
from .summary import AnalysisSummary, summarize
from .validator import StructureValidator, analyze_structure

__all__ = [
    "AnalysisError",
    "AnalysisErrorType",
    "AnalysisReport",
    "AnalysisResult",
    "AnalysisSummary",
    "AnalyzerOptions",
    "FileRecord",
    "StructureValidator",
    "analyze_structure",
    "calculate_expected_test_path",
    "find_first_incorrect_segment",
    "find_matching_source_files",
    "resolve_ambiguous_match",
    "strip_test_suffix",
    "summarize",
]
