"""Test structure analysis command."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.prompt import Confirm
from rich.text import Text

from ...constants import EXIT_FINDINGS
from ...core.analyzer import AnalysisReport, AnalysisResult, AnalyzerOptions
from ...core.config import ConfigManager, split_list_option
from ...exceptions import FileMoveError, InvalidCommandError, UserAbortError
from ...infrastructure import Fixer, FixOutcome, analyze_project
from .analysis_display import display_results
from .analysis_report import default_report_path, write_json_report
from ..error_handlers import handle_cli_errors

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.option("--src-root", "-s", type=click.Path(file_okay=False), help="Source files root directory")
@click.option("--test-root", "-t", type=click.Path(file_okay=False), help="Test files root directory")
@click.option("--ext", "-e", help="File extension to analyze (default: .cs)")
@click.option("--name", "-n", is_flag=True, help="Enable filename validation")
@click.option("--dir", "-d", "directory", is_flag=True, help="Enable directory structure validation")
@click.option("--missing", "-m", is_flag=True, help="Enable validation of missing test files")
@click.option("--test-suffix", help="Test file suffix (default: Tests)")
@click.option("--test-project-suffix", help="Test project suffix (default: .Tests)")
@click.option("--ignore-directories", help="Comma-separated list of directories to ignore")
@click.option("--ignore-files", help="Comma-separated list of files to ignore")
@click.option(
    "--output", "-o",
    is_flag=False,
    flag_value="",
    default=None,
    help="Write a JSON report; without a value a timestamped file is created",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["list", "table", "json"]),
    help="Console output format",
)
@click.option("--all", "-a", "fix_all", is_flag=True, help="Fix all directory structure issues by moving files")
@click.option("--fix", "-f", "fix_path", type=click.Path(dir_okay=False), help="Fix a specific test file")
@click.option("--interactive", "-i", is_flag=True, help="Confirm each fixable file before fixing it")
@click.pass_context
@handle_cli_errors
def analyze(
    ctx: click.Context,
    src_root: Optional[str],
    test_root: Optional[str],
    ext: Optional[str],
    name: bool,
    directory: bool,
    missing: bool,
    test_suffix: Optional[str],
    test_project_suffix: Optional[str],
    ignore_directories: Optional[str],
    ignore_files: Optional[str],
    output: Optional[str],
    output_format: Optional[str],
    fix_all: bool,
    fix_path: Optional[str],
    interactive: bool,
) -> None:
    """Analyze test file names and locations against the source tree.

    When none of -n, -d and -m is given the validations enabled in the
    configuration run (all by default); otherwise only the given ones.

    \b
    Examples:
        tfslint analyze -s ./src -t ./tests
        tfslint analyze -s ./src -t ./tests -n -d --format table
        tfslint analyze -s ./src -t ./tests -o report.json
        tfslint analyze -s ./src -t ./tests -f tests/Car.Tests/Wrong/EngineTests.cs
    """
    if sum((fix_all, fix_path is not None, interactive)) > 1:
        raise InvalidCommandError("analyze", "--all, --fix and --interactive are mutually exclusive")

    config_manager = ConfigManager((ctx.obj or {}).get("config_file"))
    config = config_manager.load_config()

    selected = any((name, directory, missing))
    options = config_manager.to_analyzer_options(
        src_root=src_root,
        test_root=test_root,
        file_extension=ext,
        test_file_suffix=test_suffix,
        test_project_suffix=test_project_suffix,
        ignore_directories=split_list_option(ignore_directories),
        ignore_files=split_list_option(ignore_files),
        validate_file_name=name if selected else None,
        validate_directory_structure=directory if selected else None,
        validate_missing_tests=missing if selected else None,
    ).resolved()
    output_format = output_format or config.report.format.value

    if output_format != "json":
        console.print("\n[dim]Paths:[/dim]")
        console.print(Text(f"Source root: {options.src_root}", style="dim"))
        console.print(Text(f"Test root: {options.test_root}", style="dim"))
        console.print("\n[cyan]Analyzing test structure...[/cyan]")

    report = analyze_project(options)
    if not interactive or not report.has_issues:
        display_results(report, output_format, options)

    if output is not None:
        _write_report(
            report,
            output or default_report_path(config.report.output_directory),
            options,
            quiet=output_format == "json",
        )

    if not report.has_issues:
        return

    fixer = Fixer(options.test_project_suffix)
    if fix_path:
        _fix_single_file(fixer, fix_path, report.results)
    elif interactive:
        _fix_interactively(fixer, report.results, options)
    elif fix_all:
        _fix_all(fixer, report.results)
    else:
        sys.exit(EXIT_FINDINGS)


def _write_report(
    report: AnalysisReport, output_path, options: AnalyzerOptions, quiet: bool = False
) -> None:
    """A failed report write is reported but does not fail the analysis."""
    try:
        written = write_json_report(report, output_path, options)
    except OSError as e:
        console.print(Text(f"\nError writing JSON report: {e}", style="red"))
        logger.error("Error writing JSON report %s: %s", output_path, e)
        return
    if not quiet:
        console.print(Text(f"\nJSON report saved to: {written}", style="green"))


def _fix_single_file(fixer: Fixer, fix_path: str, results: List[AnalysisResult]) -> None:
    console.print("\n[cyan]Fixing file...[/cyan]")
    outcome = fixer.fix_file(os.path.abspath(fix_path), results)
    console.print("\n[green]✓ Fixed file:[/green]")
    console.print(_outcome_line(outcome))


def _fix_interactively(fixer: Fixer, results: List[AnalysisResult], options: AnalyzerOptions) -> None:
    fixable = [r for r in results if any(e.is_fixable for e in r.errors)]
    if not fixable:
        console.print("\n[yellow]No fixable files found.[/yellow]")
        sys.exit(EXIT_FINDINGS)

    fixed_count = 0
    for result in fixable:
        error = next(e for e in result.errors if e.is_fixable)
        console.print()
        console.print(Text(result.test_file, style="bold"))
        console.print(Text(f"  Current:  {os.path.relpath(error.actual_test_path, options.test_root)}", style="dim"))
        console.print(Text(f"  Expected: {os.path.relpath(error.expected_test_path, options.test_root)}", style="dim"))
        try:
            confirmed = Confirm.ask("Fix this file?", default=True, console=console)
        except (KeyboardInterrupt, EOFError):
            raise UserAbortError(f"stopped after fixing {fixed_count} file(s)") from None
        if not confirmed:
            continue
        try:
            outcome = fixer.fix(error)
        except FileMoveError as e:
            console.print(Text(f"✗ Failed to fix {result.test_file}: {e.message}", style="red"))
            continue
        console.print(Text(f"✓ Fixed: {Path(outcome.source).name}", style="green"))
        fixed_count += 1

    if fixed_count:
        console.print(f"\n[green]✓ Fixed {fixed_count} files[/green]")
    else:
        console.print("\n[yellow]No files selected for fixing.[/yellow]")


def _fix_all(fixer: Fixer, results: List[AnalysisResult]) -> None:
    console.print("\n[cyan]Fixing directory structure issues...[/cyan]")
    outcomes = fixer.fix_directory_structure(results)
    if outcomes:
        console.print(f"\n[green]✓ Fixed {len(outcomes)} files:[/green]")
        for outcome in outcomes:
            console.print(_outcome_line(outcome))
    else:
        console.print("\n[yellow]No fixable directory structure issues found.[/yellow]")


def _outcome_line(outcome: FixOutcome) -> Text:
    return Text(f"  {outcome.action.capitalize()}: {outcome.source} → {outcome.target}", style="dim")
