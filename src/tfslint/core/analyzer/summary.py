"""Pure reduction of analysis results into counts for reporters."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable

from ...constants import ISSUE_RATE_PRECISION
from .models import AnalysisErrorType, AnalysisResult


@dataclass(frozen=True)
class AnalysisSummary:
    """Counts derived from a list of results."""

    by_type: Dict[AnalysisErrorType, int] = field(default_factory=dict)
    files_with_issues: int = 0
    total_errors: int = 0

    def count(self, error_type: AnalysisErrorType) -> int:
        return self.by_type.get(error_type, 0)

    def issue_rate(self, total_files: int) -> float:
        """Percentage of analysed files with at least one finding."""
        if total_files <= 0:
            return 0.0
        return round(self.files_with_issues / total_files * 100, ISSUE_RATE_PRECISION)

    @property
    def error_counts(self) -> Dict[str, int]:
        return {
            "directoryStructure": self.count(AnalysisErrorType.InvalidDirectoryStructure),
            "filename": self.count(AnalysisErrorType.InvalidFileName),
            "missingTests": self.count(AnalysisErrorType.MissingTest),
        }


def summarize(results: Iterable[AnalysisResult]) -> AnalysisSummary:
    results = list(results)
    counter = Counter(error.type for result in results for error in result.errors)
    by_type = {error_type: counter.get(error_type, 0) for error_type in AnalysisErrorType}
    return AnalysisSummary(
        by_type=by_type,
        files_with_issues=sum(1 for result in results if result.has_errors),
        total_errors=sum(counter.values()),
    )
