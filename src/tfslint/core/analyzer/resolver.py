"""
Disambiguation of source files sharing a base name.

When several projects contain e.g. ``Handler.cs``, the test file's innermost
directory decides which one it tests: ``tests/Car.Tests/HandlerTests.cs``
belongs to ``src/Car/Handler.cs``. Only the leaf directory name is compared,
not the full path; when leaf names collide the first candidate in input
order wins.
"""

import logging
from typing import Optional, Sequence

from .matcher import strip_test_suffix
from .models import AnalyzerOptions, FileRecord
from .paths import directory_segments

logger = logging.getLogger(__name__)


def leaf_test_directory(test_file: FileRecord, options: AnalyzerOptions) -> Optional[str]:
    """Innermost directory of a test file below the test root.

    The test project directory itself is compared without its suffix, so
    ``Car.Tests`` is returned as ``Car``.
    """
    segments = directory_segments(test_file.path, options.test_root)
    if not segments:
        return None
    leaf = segments[-1]
    if len(segments) == 1:
        leaf = strip_test_suffix(leaf, options.test_project_suffix)
    return leaf or None


def leaf_source_directory(source_file: FileRecord, options: AnalyzerOptions) -> Optional[str]:
    """Innermost directory of a source file below the source root."""
    segments = directory_segments(source_file.path, options.src_root)
    return segments[-1] if segments else None


def resolve_ambiguous_match(
    test_file: FileRecord,
    candidates: Sequence[FileRecord],
    options: AnalyzerOptions,
) -> Optional[FileRecord]:
    """Pick the candidate whose leaf directory matches the test file's leaf directory.

    Returns ``None`` when no candidate matches.
    """
    test_leaf = leaf_test_directory(test_file, options)
    if test_leaf is None:
        return None

    wanted = test_leaf.lower()
    for candidate in candidates:
        source_leaf = leaf_source_directory(candidate, options)
        if source_leaf and source_leaf.lower() == wanted:
            logger.debug(
                "Resolved %s to %s by directory %r", test_file.name, candidate.path, test_leaf
            )
            return candidate

    logger.debug(
        "Could not resolve %s among %d candidates", test_file.name, len(candidates)
    )
    return None
