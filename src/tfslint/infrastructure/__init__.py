"""
Infrastructure layer: filesystem discovery and file fixes.
"""

from .discovery import analyze_project, find_source_files, find_test_files
from .fixer import Fixer, FixableResult, FixOutcome

__all__ = [
    "Fixer",
    "FixableResult",
    "FixOutcome",
    "analyze_project",
    "find_source_files",
    "find_test_files",
]
