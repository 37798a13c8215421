"""
Filesystem discovery of source and test files.

Walks the source and test roots, prunes ignored directories and returns
sorted absolute paths. Enumeration problems are logged and degrade to an
empty or partial list; discovery never aborts an analysis.
"""

import os
from typing import Iterable, List, Optional

from ..constants import HELPER_PROJECT_PREFIX
from ..core.analyzer import AnalysisReport, AnalyzerOptions, StructureValidator
from ..core.analyzer.models import PathLike, strip_extension
from ..core.analyzer.paths import contains_ignored_directory, split_segments
from ..logging import get_logger

logger = get_logger(__name__)


def _walk_files(
    root: PathLike, extension: str, ignore_directories: Iterable[str], ignore_files: Iterable[str]
) -> List[str]:
    root = os.path.abspath(str(root))
    if not os.path.isdir(root):
        logger.warning(f"Directory not found: {root}", root=root)
        return []

    ignore_directories = tuple(ignore_directories)
    ignored_names = {name.lower() for name in ignore_files}

    def on_error(error: OSError):
        logger.error(f"Cannot read directory {error.filename}: {error.strerror}", root=root)

    found = set()
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        relative_dir = split_segments(os.path.relpath(dirpath, root))
        dirnames[:] = [
            d for d in dirnames
            if not contains_ignored_directory(relative_dir + [d], ignore_directories)
        ]
        for filename in filenames:
            if not filename.endswith(extension):
                continue
            if filename.lower() in ignored_names:
                continue
            found.add(os.path.join(dirpath, filename))

    return sorted(found)


def find_source_files(
    src_root: PathLike,
    extension: str,
    ignore_directories: Iterable[str] = (),
    ignore_files: Iterable[str] = (),
) -> List[str]:
    """Return every file with ``extension`` below ``src_root``."""
    files = _walk_files(src_root, extension, ignore_directories, ignore_files)
    logger.debug(f"Found {len(files)} source file(s)", src_root=str(src_root))
    return files


def find_test_files(
    test_root: PathLike,
    extension: str,
    test_file_suffix: str,
    ignore_directories: Iterable[str] = (),
    ignore_files: Iterable[str] = (),
    test_project_suffix: str = "",
) -> List[str]:
    """Return the test files below ``test_root``.

    A test file's base name ends with ``test_file_suffix`` and it lives in a
    test project: a first-level directory ending with ``test_project_suffix``
    that is not a ``Tests.*`` helper project.
    """
    root = os.path.abspath(str(test_root))
    files = []
    for path in _walk_files(root, extension, ignore_directories, ignore_files):
        if not strip_extension(os.path.basename(path), extension).endswith(test_file_suffix):
            continue
        segments = split_segments(os.path.relpath(path, root))
        if len(segments) < 2:
            continue
        project = segments[0]
        if not project.endswith(test_project_suffix) or project.startswith(HELPER_PROJECT_PREFIX):
            continue
        files.append(path)

    logger.debug(f"Found {len(files)} test file(s)", test_root=root)
    return files


def analyze_project(
    options: AnalyzerOptions, correlation_id: Optional[str] = None
) -> AnalysisReport:
    """Discover files below the configured roots and validate their structure."""
    options = options.resolved()
    run_logger = get_logger(__name__, correlation_id)

    with run_logger.timed("analysis", src_root=options.src_root, test_root=options.test_root):
        source_files = find_source_files(
            options.src_root,
            options.file_extension,
            options.ignore_directories,
            options.ignore_files,
        )
        test_files = find_test_files(
            options.test_root,
            options.file_extension,
            options.test_file_suffix,
            options.ignore_directories,
            options.ignore_files,
            options.test_project_suffix,
        )
        results = StructureValidator(options).validate(source_files, test_files)

    run_logger.info(
        f"Analysed {len(source_files)} source and {len(test_files)} test files, "
        f"{len(results)} with issues"
    )
    return AnalysisReport(results=results, total_files=len(source_files) + len(test_files))
