"""Joining path fragments."""

from __future__ import annotations

from typing import Optional

from ..utils.constants import (
    ALT_DIRECTORY_SEPARATOR,
    DEFAULT_ALLOW_DOTS_IN_NAMES,
    DEFAULT_CHECK_WILDCARDS,
    DEFAULT_SUBSTITUTE_CHAR,
    DIRECTORY_SEPARATOR,
    VOLUME_SEPARATOR,
)
from ..utils.validators import require_path, require_substitute
from .names import is_path_rooted
from .sanitize import sanitize_path


def combine_two(path1: str, path2: str) -> str:
    """
    Join two validated fragments.

    A rooted right side replaces the left side. No separator is added when
    the left side already ends in a separator or volume separator.
    """
    if path2 == "":
        return path1

    if path1 == "":
        return path2

    if is_path_rooted(path2):
        return path2

    if path1[-1] in (DIRECTORY_SEPARATOR, ALT_DIRECTORY_SEPARATOR, VOLUME_SEPARATOR):
        return path1 + path2
    return path1 + DIRECTORY_SEPARATOR + path2


def combine(
    path1: str,
    path2: str,
    path3: Optional[str] = None,
    sanitize: bool = True,
    allow_dots_in_names: bool = DEFAULT_ALLOW_DOTS_IN_NAMES,
    substitute: str = DEFAULT_SUBSTITUTE_CHAR,
    check_wildcards: bool = DEFAULT_CHECK_WILDCARDS,
) -> str:
    """
    Combine two or three path fragments, left to right.

    Each fragment is sanitized first unless ``sanitize`` is False, so a
    name received from the remote backend can be appended to a local
    directory directly.

    Args:
        path1: Leftmost fragment
        path2: Second fragment
        path3: Optional third fragment
        sanitize: Run each fragment through sanitize_path first
        allow_dots_in_names: Keep ``.`` and ``..`` segments while sanitizing
        substitute: Replacement character used while sanitizing
        check_wildcards: Replace ``*`` and ``?`` while sanitizing

    Returns:
        Combined path

    Raises:
        InvalidArgumentError: If a fragment is None or substitute is invalid
    """
    parts = [require_path(path1, "path1"), require_path(path2, "path2")]
    if path3 is not None:
        parts.append(require_path(path3, "path3"))
    require_substitute(substitute)

    if sanitize:
        parts = [
            sanitize_path(
                part,
                substitute=substitute,
                check_wildcards=check_wildcards,
                allow_dots_in_names=allow_dots_in_names,
            )
            for part in parts
        ]

    result = parts[0]
    for part in parts[1:]:
        result = combine_two(result, part)
    return result
