"""JSON report generation for analysis results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...constants import (
    DEFAULT_REPORT_DIRECTORY,
    REPORT_FILE_PREFIX,
    REPORT_TIMESTAMP_FORMAT,
    SRC_DISPLAY_ROOT,
    TESTS_DISPLAY_ROOT,
)
from ...core.analyzer import AnalysisError, AnalysisReport, AnalyzerOptions, summarize
from ...core.analyzer.paths import display_path, join_display_paths


def build_json_report(report: AnalysisReport, options: AnalyzerOptions) -> Dict[str, Any]:
    """Build the report document: a summary plus one entry per finding."""
    summary = summarize(report.results)

    files_with_issues: List[Dict[str, str]] = []
    for result in report.results:
        for error in result.errors:
            files_with_issues.append(_issue_entry(result.test_file, error, options))

    return {
        "summary": {
            "totalFilesAnalyzed": report.total_files,
            "totalFilesWithIssues": summary.files_with_issues,
            "issueRate": summary.issue_rate(report.total_files),
            "errorCounts": summary.error_counts,
        },
        "filesWithIssues": files_with_issues,
    }


def _issue_entry(test_file: str, error: AnalysisError, options: AnalyzerOptions) -> Dict[str, str]:
    entry = {"testName": test_file, "issueType": error.type.value}
    if error.actual_test_path:
        entry["currentTestFile"] = display_path(
            error.actual_test_path, options.test_root, TESTS_DISPLAY_ROOT
        )
    if error.source_file_path:
        entry["sourceFiles"] = join_display_paths(
            display_path(p, options.src_root, SRC_DISPLAY_ROOT) for p in error.source_file_paths
        )
    if error.expected_test_path:
        entry["expectedTestFile"] = display_path(
            error.expected_test_path, options.test_root, TESTS_DISPLAY_ROOT
        )
    return entry


def default_report_path(
    directory: Union[str, Path] = DEFAULT_REPORT_DIRECTORY, now: Optional[datetime] = None
) -> Path:
    """``<directory>/results-YYYYMMDD-HHMMSS.json``"""
    timestamp = (now or datetime.now()).strftime(REPORT_TIMESTAMP_FORMAT)
    return Path(directory) / f"{REPORT_FILE_PREFIX}-{timestamp}.json"


def write_json_report(
    report: AnalysisReport, output_path: Union[str, Path], options: AnalyzerOptions
) -> Path:
    """Write the JSON report, creating parent directories. Returns the absolute path."""
    output_path = Path(output_path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(build_json_report(report, options), indent=2), encoding="utf-8"
    )
    return output_path
