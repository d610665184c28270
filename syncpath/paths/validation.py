"""
Strict path validation policy.

The sync engine is permissive by default: names from the remote backend
use foreign syntaxes and are sanitized rather than rejected. A caller that
wants classic Windows checks opts into ValidationPolicy.STRICT.
"""

from __future__ import annotations

import logging
from enum import Enum

from ..utils.constants import (
    DIRECTORY_SEPARATORS,
    INVALID_PATH_CHARS,
    MAX_COMPONENT_LENGTH,
    MAX_LONG_PATH,
    WILDCARD_CHARS,
)
from ..utils.exceptions import IllegalPathCharactersError, PathTooLongError
from .root import is_device, is_directory_separator, root_length

logger = logging.getLogger(__name__)


class ValidationPolicy(str, Enum):
    PERMISSIVE = "permissive"
    STRICT = "strict"


def has_illegal_characters(path: str, check_wildcards: bool = False) -> bool:
    """
    Check the non-root part of a path for invalid (and optionally wildcard) characters.

    Either directory separator is structural here and never counts as illegal.
    """
    if is_device(path):
        return False

    for ch in path[root_length(path):]:
        if ch in INVALID_PATH_CHARS and ch not in DIRECTORY_SEPARATORS:
            return True
        if check_wildcards and ch in WILDCARD_CHARS:
            return True
    return False


def is_path_too_long(path: str) -> bool:
    return len(path) >= MAX_LONG_PATH


def are_segments_too_long(path: str) -> bool:
    """True when any separator-delimited component exceeds MAX_COMPONENT_LENGTH."""
    segment_length = 0
    for ch in path:
        if is_directory_separator(ch):
            segment_length = 0
            continue
        segment_length += 1
        if segment_length > MAX_COMPONENT_LENGTH:
            return True
    return False


def check_path(
    path: str,
    policy: ValidationPolicy = ValidationPolicy.PERMISSIVE,
    check_wildcards: bool = False,
) -> str:
    """
    Apply a validation policy to a path.

    Args:
        path: Path that has already passed argument validation
        policy: PERMISSIVE performs no checks
        check_wildcards: Treat ``*`` and ``?`` as illegal under STRICT

    Returns:
        The path, unchanged

    Raises:
        IllegalPathCharactersError: If STRICT and the path has illegal characters
        PathTooLongError: If STRICT and the path or one of its segments is too long
    """
    if policy != ValidationPolicy.STRICT:
        return path

    if has_illegal_characters(path, check_wildcards):
        logger.debug(f"Rejected path with illegal characters: {path!r}")
        raise IllegalPathCharactersError(f"Illegal characters in path: {path!r}", argument="path")

    if is_path_too_long(path) or are_segments_too_long(path):
        logger.debug(f"Rejected path exceeding length limits ({len(path)} chars)")
        raise PathTooLongError(
            f"Path or path segment exceeds length limits ({len(path)} chars)", argument="path"
        )

    return path
