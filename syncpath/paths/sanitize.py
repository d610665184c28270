"""
Character and name sanitization for whole paths.

Remote backends accept names the local filesystem cannot store. The
functions here rewrite such names deterministically: the same input always
yields the same output, so files keep their identity across sync passes.
Sanitization is total and never raises for a string input.
"""

from __future__ import annotations

import logging

from ..utils.constants import (
    DEFAULT_ALLOW_DOTS_IN_NAMES,
    DEFAULT_CHECK_WILDCARDS,
    DEFAULT_SUBSTITUTE_CHAR,
    DIRECTORY_SEPARATOR,
    DIRECTORY_SEPARATORS,
    INVALID_PATH_CHARS,
    WILDCARD_CHARS,
)
from ..utils.validators import require_path, require_substitute
from .root import root_length
from .segments import sanitize_segment

logger = logging.getLogger(__name__)


def _replace_chars(text: str, substitute: str, check_wildcards: bool, extra: frozenset = frozenset()) -> str:
    def replace(ch: str) -> str:
        if ch in INVALID_PATH_CHARS or ch in extra:
            return substitute
        if check_wildcards and ch in WILDCARD_CHARS:
            return substitute
        return ch

    return "".join(replace(ch) for ch in text)


def sanitize_path(
    path: str,
    substitute: str = DEFAULT_SUBSTITUTE_CHAR,
    check_wildcards: bool = DEFAULT_CHECK_WILDCARDS,
    allow_dots_in_names: bool = DEFAULT_ALLOW_DOTS_IN_NAMES,
) -> str:
    """
    Replace everything the local filesystem cannot store.

    The root prefix is kept verbatim. In the remainder, invalid characters
    (and wildcards when ``check_wildcards`` is set) become ``substitute``;
    then every separator-delimited segment is passed through
    sanitize_segment. Empty segments are preserved, collapsing them is the
    separator normalizer's job.

    An empty path is returned unchanged, since it may stand for a missing
    component in a combine. A whitespace-only path becomes the same number
    of substitute characters.

    Args:
        path: Path to sanitize
        substitute: Replacement character
        check_wildcards: Also replace ``*`` and ``?``
        allow_dots_in_names: Keep ``.`` and ``..`` segments

    Returns:
        Sanitized path

    Raises:
        InvalidArgumentError: If path is None or substitute is invalid
    """
    require_path(path)
    require_substitute(substitute)

    if path == "":
        return path

    if path.isspace():
        return substitute * len(path)

    root = root_length(path)
    remainder = _replace_chars(path[root:], substitute, check_wildcards)

    segments = remainder.split(DIRECTORY_SEPARATOR)
    any_changed = False
    for index, segment in enumerate(segments):
        result = sanitize_segment(segment, substitute, allow_dots_in_names)
        if result.changed:
            segments[index] = result.value
            any_changed = True

    if any_changed:
        remainder = DIRECTORY_SEPARATOR.join(segments)

    sanitized = path[:root] + remainder
    if sanitized != path:
        logger.debug(f"Sanitized path {path!r} -> {sanitized!r}")
    return sanitized


# Spelling used by the sync tool's public API
replace_invalid_chars = sanitize_path


def sanitize_name(
    name: str,
    substitute: str = DEFAULT_SUBSTITUTE_CHAR,
    check_wildcards: bool = DEFAULT_CHECK_WILDCARDS,
    allow_dots_in_names: bool = DEFAULT_ALLOW_DOTS_IN_NAMES,
) -> str:
    """
    Sanitize a single file or directory name.

    Unlike sanitize_path no root is recognized and every directory
    separator is replaced, so the result is always one segment.
    """
    require_path(name, "name")
    require_substitute(substitute)

    if name == "":
        return name

    if name.isspace():
        return substitute * len(name)

    replaced = _replace_chars(name, substitute, check_wildcards, extra=DIRECTORY_SEPARATORS)
    return sanitize_segment(replaced, substitute, allow_dots_in_names).value
