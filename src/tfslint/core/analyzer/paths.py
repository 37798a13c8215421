"""
Expected test path calculation and path segment helpers.

The naming convention is::

    <src_root>/<Project>/<Sub>/.../<Name><ext>
    <test_root>/<Project><test_project_suffix>/<Sub>/.../<Name><test_file_suffix><ext>

Everything in this module is a pure string transformation. No function here
touches the filesystem.
"""

import os
import re
from typing import Iterable, List, Optional

from ...constants import SOURCE_PATH_SEPARATOR
from .models import AnalyzerOptions, PathLike

_SEPARATORS = re.compile(r"[/\\]")


def split_segments(path: str) -> List[str]:
    """Split a path on both separator styles, dropping empty and ``.`` parts."""
    return [part for part in _SEPARATORS.split(path) if part not in ("", ".")]


def relative_segments(path: PathLike, root: PathLike) -> List[str]:
    """Return the segments of ``path`` relative to ``root``."""
    return split_segments(os.path.relpath(str(path), str(root)))


def directory_segments(path: PathLike, root: PathLike) -> List[str]:
    """Return the directory segments of ``path`` below ``root`` (file name excluded)."""
    return relative_segments(path, root)[:-1]


def calculate_expected_test_path(source_file_path: PathLike, options: AnalyzerOptions) -> str:
    """Compute the single correct test file path for a source file."""
    segments = relative_segments(source_file_path, options.src_root)

    project_name = segments[0]
    test_project_name = project_name + options.test_project_suffix
    remaining_path = segments[1:-1]

    stem, extension = os.path.splitext(os.path.basename(str(source_file_path)))
    test_file_name = stem + options.test_file_suffix + extension

    return os.path.join(options.test_root, test_project_name, *remaining_path, test_file_name)


def find_first_incorrect_segment(
    actual_path: PathLike, expected_path: PathLike, options: AnalyzerOptions
) -> Optional[str]:
    """Return the first segment of ``actual_path`` that has no place in ``expected_path``.

    Both paths are compared relative to the test root. When the actual path
    is deeper than the expected one, the first surplus segment is returned.
    """
    actual_segments = relative_segments(actual_path, options.test_root)
    expected_segments = relative_segments(expected_path, options.test_root)

    for actual, expected in zip(actual_segments, expected_segments):
        if actual != expected and actual not in expected_segments:
            return actual

    if len(actual_segments) > len(expected_segments):
        return actual_segments[len(expected_segments)]

    return None


def is_in_ignored_directory(
    path: PathLike, root: PathLike, ignore_directories: Iterable[str]
) -> bool:
    """Check whether an ignored directory appears between ``root`` and ``path``.

    Directories above ``root`` are not considered, so a checkout that itself
    lives below e.g. ``obj`` is still analysed.

    Matching is by whole path segments, so ``obj`` matches ``a/obj/b.cs`` but
    not ``a/object/b.cs``. Multi-segment entries such as ``bin/Debug`` must
    appear as a contiguous run.
    """
    return contains_ignored_directory(directory_segments(path, root), ignore_directories)


def contains_ignored_directory(directories: List[str], ignore_directories: Iterable[str]) -> bool:
    """Check a list of directory segments for an ignored segment run."""
    for ignored in ignore_directories:
        ignored_segments = split_segments(ignored)
        if not ignored_segments:
            continue
        width = len(ignored_segments)
        for start in range(len(directories) - width + 1):
            if directories[start:start + width] == ignored_segments:
                return True
    return False


def display_path(path: PathLike, root: PathLike, display_root: str) -> str:
    """Render ``path`` as ``<display_root>/<relative path>`` with forward slashes.

    Paths outside ``root`` and paths already in display form are returned
    unchanged.
    """
    path = str(path)
    if path.startswith(display_root + "/"):
        return path
    relative = os.path.relpath(path, str(root))
    if relative == ".." or relative.startswith(".." + os.sep) or os.path.isabs(relative):
        return path
    return "/".join([display_root, *split_segments(relative)])


def join_display_paths(paths: Iterable[str]) -> str:
    return SOURCE_PATH_SEPARATOR.join(paths)
