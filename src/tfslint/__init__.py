"""
tfslint: Test File Structure Linter

Checks that every test file in a test tree mirrors the source file it tests:
``src/<Project>/<Sub>/Foo.cs`` is expected to be tested by
``tests/<Project>.Tests/<Sub>/FooTests.cs``.

Architecture Overview:
- Core: the pure matching/validation engine and the configuration models
- Infrastructure: filesystem discovery and the fixer that moves/renames tests
- CLI: command-line interface and report rendering
- logging, exceptions: structured logging and the exception hierarchy
"""

__version__ = "0.1.0"

from .core.analyzer import (
    AnalysisError,
    AnalysisErrorType,
    AnalysisReport,
    AnalysisResult,
    AnalyzerOptions,
    StructureValidator,
    analyze_structure,
    summarize,
)
from .exceptions import LinterError

__all__ = [
    "AnalysisError",
    "AnalysisErrorType",
    "AnalysisReport",
    "AnalysisResult",
    "AnalyzerOptions",
    "StructureValidator",
    "analyze_structure",
    "summarize",
    "LinterError",
    "__version__",
]
