"""Directory separator normalization."""

from __future__ import annotations

import logging
from typing import Optional

from ..utils.constants import DIRECTORY_SEPARATOR, VOLUME_SEPARATOR
from ..utils.types import LongPathResolver
from ..utils.validators import require_path
from .longpath import get_long_path_name
from .root import is_directory_separator, is_extended, is_valid_drive_char

logger = logging.getLogger(__name__)


def _path_start_skip(path: str) -> int:
    """
    Count leading spaces that may be dropped.

    Spaces are only skipped when a separator or a drive letter with colon
    follows them; relative names keep their leading spaces.
    """
    start = 0
    length = len(path)
    while start < length and path[start] == " ":
        start += 1

    if start == 0:
        return 0

    if start < length and is_directory_separator(path[start]):
        return start

    if (
        start + 1 < length
        and path[start + 1] == VOLUME_SEPARATOR
        and is_valid_drive_char(path[start])
    ):
        return start

    return 0


def _is_normalized(path: str) -> bool:
    length = len(path)
    for i, current in enumerate(path):
        if not is_directory_separator(current):
            continue
        if current != DIRECTORY_SEPARATOR:
            return False
        # A doubled separator at index 0 is a UNC/extended marker
        if i > 0 and i + 1 < length and is_directory_separator(path[i + 1]):
            return False
    return True


def normalize_separators(path: str) -> str:
    """
    Canonicalize the directory separators of a path.

    Alternate separators become the primary one and runs of separators
    collapse to one, except that two leading separators (UNC or extended
    root) are kept. Leading spaces before a rooted path are dropped.

    Args:
        path: Path to normalize

    Returns:
        The normalized path, or ``path`` itself when nothing needed changing

    Raises:
        InvalidArgumentError: If path is None
    """
    require_path(path)
    if not path:
        return path

    start = _path_start_skip(path)
    if start == 0 and _is_normalized(path):
        return path

    length = len(path)
    builder = []

    if is_directory_separator(path[start]):
        start += 1
        builder.append(DIRECTORY_SEPARATOR)

    for i in range(start, length):
        current = path[i]
        if is_directory_separator(current):
            if i + 1 < length and is_directory_separator(path[i + 1]):
                continue
            current = DIRECTORY_SEPARATOR
        builder.append(current)

    return "".join(builder)


def normalize_path(
    path: str,
    expand_short_paths: bool = False,
    resolver: Optional[LongPathResolver] = None,
) -> str:
    """
    Normalize a path, optionally expanding short (8.3) names.

    Extended paths are returned untouched. Short-name expansion is off by
    default: the filesystem may report different letter case, which breaks
    identity matching between sync passes. Any failure of the lookup is
    discarded and the un-expanded value is returned.

    Args:
        path: Path to normalize
        expand_short_paths: Ask the filesystem for long names when ``~`` is present
        resolver: Lookup to use instead of get_long_path_name

    Returns:
        Normalized path
    """
    require_path(path)
    if is_extended(path):
        return path

    normalized = normalize_separators(path)

    if expand_short_paths and "~" in normalized:
        lookup = resolver or get_long_path_name
        try:
            return lookup(normalized)
        except Exception as e:
            logger.debug(f"Short path expansion skipped for {normalized!r}: {e}")

    return normalized
