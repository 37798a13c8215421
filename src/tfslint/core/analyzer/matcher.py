"""Match test files to candidate source files by base name."""

import logging
from typing import List, Sequence

from .models import FileRecord, strip_extension

logger = logging.getLogger(__name__)


def strip_test_suffix(name: str, suffix: str) -> str:
    """Remove one literal trailing ``suffix`` from ``name``.

    ``UserMapperTests`` -> ``UserMapper``. Names that do not end with the
    suffix are returned unchanged.
    """
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def find_matching_source_files(
    source_files: Sequence[FileRecord], base_name: str, extension: str
) -> List[FileRecord]:
    """Return every source file whose base name equals ``base_name``.

    The comparison ignores case and uses the file name only, never the
    directory. Input order is preserved. Zero, one and many matches are all
    valid results; the caller decides what the count means.
    """
    wanted = base_name.lower()
    matches = [
        record
        for record in source_files
        if strip_extension(record.name, extension).lower() == wanted
    ]
    logger.debug("Base name %r matched %d source file(s)", base_name, len(matches))
    return matches
