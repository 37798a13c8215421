"""Display functionality for analysis results."""

import json
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...constants import SRC_DISPLAY_ROOT, TESTS_DISPLAY_ROOT
from ...core.analyzer import (
    AnalysisError,
    AnalysisErrorType,
    AnalysisReport,
    AnalysisResult,
    AnalyzerOptions,
    summarize,
)
from ...core.analyzer.paths import display_path
from .analysis_report import build_json_report

console = Console()


def display_results(report: AnalysisReport, output_format: str, options: AnalyzerOptions) -> None:
    """Display analysis results in the requested format."""
    if output_format == "json":
        display_json_results(report, options)
        return

    if not report.has_issues:
        show_no_issues(report.total_files)
        return

    console.print(f"\n[yellow]! Found {len(report.results)} files with issues:[/yellow]\n")
    if output_format == "table":
        display_table_results(report.results, options)
    else:
        display_list_results(report.results, options)
    show_analysis_summary(report)


def display_list_results(results: List[AnalysisResult], options: AnalyzerOptions) -> None:
    """One block per file: the finding kind followed by source/current/expected paths."""
    for result in results:
        console.print(Text(result.test_file, style="bold"))
        for error in result.errors:
            console.print(Text(f"  {error.type.value}", style="red"))
            for line in _detail_lines(error, options):
                console.print(line)
        console.print()


def _detail_lines(error: AnalysisError, options: AnalyzerOptions) -> List[Text]:
    lines = []
    sources = error.source_file_paths

    if len(sources) > 1:
        lines.append(Text("  Source:   Multiple source files found:", style="dim"))
        lines.extend(
            Text(f"    - {display_path(p, options.src_root, SRC_DISPLAY_ROOT)}", style="dim")
            for p in sources
        )
    elif sources:
        lines.append(
            Text(f"  Source:   {display_path(sources[0], options.src_root, SRC_DISPLAY_ROOT)}", style="dim")
        )

    if error.actual_test_path:
        current = display_path(error.actual_test_path, options.test_root, TESTS_DISPLAY_ROOT)
        lines.append(Text("  Current:  ", style="dim") + highlight_segment(current, error.incorrect_segment))

    if error.expected_test_path:
        expected = display_path(error.expected_test_path, options.test_root, TESTS_DISPLAY_ROOT)
        label = "Missing:  " if error.type is AnalysisErrorType.MissingTest else "Expected: "
        lines.append(Text(f"  {label}{expected}", style="green"))

    if not sources or error.type is AnalysisErrorType.InvalidFileName:
        lines.append(Text(f"  {error.message}", style="dim italic"))

    return lines


def highlight_segment(path: str, segment: Optional[str]) -> Text:
    """Render ``path`` with the first occurrence of ``/segment/`` highlighted."""
    text = Text(path, style="dim")
    if not segment:
        return text
    marker = f"/{segment}/"
    start = path.find(marker)
    if start >= 0:
        text.stylize("bold red", start + 1, start + 1 + len(segment))
    return text


def display_table_results(results: List[AnalysisResult], options: AnalyzerOptions) -> None:
    table = Table(title="Test Structure Issues")
    table.add_column("Test File", style="cyan")
    table.add_column("Issue", style="red")
    table.add_column("Current")
    table.add_column("Expected", style="green")

    for result in results:
        for error in result.errors:
            current = (
                display_path(error.actual_test_path, options.test_root, TESTS_DISPLAY_ROOT)
                if error.actual_test_path
                else "-"
            )
            expected = (
                display_path(error.expected_test_path, options.test_root, TESTS_DISPLAY_ROOT)
                if error.expected_test_path
                else "-"
            )
            table.add_row(result.test_file, error.type.value, current, expected)

    console.print(table)


def display_json_results(report: AnalysisReport, options: AnalyzerOptions) -> None:
    console.print_json(json.dumps(build_json_report(report, options)))


def show_no_issues(total_files: int) -> None:
    console.print("\n[green]✓ No issues found[/green]")
    console.print(f"\n[dim]Total files analyzed:[/dim] {total_files}")


def show_analysis_summary(report: AnalysisReport) -> None:
    summary = summarize(report.results)

    console.print("\n[bold]Summary:[/bold]")
    labels = (
        (AnalysisErrorType.InvalidDirectoryStructure, "Directory structure issues"),
        (AnalysisErrorType.InvalidFileName, "Filename issues"),
        (AnalysisErrorType.MissingTest, "Missing tests"),
    )
    for error_type, label in labels:
        count = summary.count(error_type)
        if count:
            console.print(f"  {label}: [yellow]{count}[/yellow]")

    console.print(f"  Total files with issues: [yellow]{summary.files_with_issues}[/yellow]")
    console.print(f"  Total files analyzed: {report.total_files}")
    if report.total_files > 0:
        console.print(f"  Issue rate: [yellow]{summary.issue_rate(report.total_files):.1f}%[/yellow]")
