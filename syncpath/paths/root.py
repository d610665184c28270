"""
Root classification for Windows-syntax paths.

A root is the structural prefix of a path: a drive (``C:\\``), a UNC share
(``\\\\server\\share\\``), an extended-length prefix (``\\\\?\\C:\\``,
``\\\\?\\UNC\\server\\share\\``) or a single leading separator. The five
shapes are mutually exclusive and are resolved by a fixed priority chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..utils.constants import (
    DEVICE_PREFIX_LENGTH,
    DIRECTORY_SEPARATOR,
    DIRECTORY_SEPARATORS,
    EXTENDED_PATH_PREFIX,
    UNC_EXTENDED_PATH_PREFIX,
    UNC_EXTENDED_PREFIX_TO_INSERT,
    UNC_PATH_PREFIX,
    VOLUME_SEPARATOR,
)
from ..utils.validators import require_path


class RootKind(str, Enum):
    NONE = "none"
    SIMPLE = "simple"
    DRIVE_LETTER = "drive_letter"
    UNC = "unc"
    EXTENDED = "extended"
    EXTENDED_UNC = "extended_unc"


@dataclass(frozen=True)
class RootInfo:
    """Length and shape of a path's root prefix."""

    length: int
    kind: RootKind

    @property
    def is_rooted(self) -> bool:
        return self.length > 0


def is_directory_separator(ch: str) -> bool:
    return ch in DIRECTORY_SEPARATORS


def is_valid_drive_char(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def _starts_with_extended_unc(path: str) -> bool:
    prefix_length = len(UNC_EXTENDED_PATH_PREFIX)
    return (
        len(path) >= prefix_length
        and path[DEVICE_PREFIX_LENGTH:prefix_length - 1].upper() == "UNC"
        and is_directory_separator(path[prefix_length - 1])
    )


def classify_root(path: str) -> RootInfo:
    """
    Classify the root of a path.

    Only the prefix is inspected. For UNC forms the scan extends over at
    most two separator-delimited components (server and share); the
    separator ending the share, when present, belongs to the root.

    Args:
        path: Path to classify (may be empty)

    Returns:
        RootInfo with a length in ``[0, len(path)]``

    Raises:
        InvalidArgumentError: If path is None
    """
    require_path(path)
    return _classify(path)


def _classify(path: str) -> RootInfo:
    length = len(path)
    volume_separator_length = 2  # "C:"
    unc_root_length = 2  # "\\"

    extended = path.startswith(EXTENDED_PATH_PREFIX)
    extended_unc = extended and _starts_with_extended_unc(path)
    if extended:
        if extended_unc:
            unc_root_length = len(UNC_EXTENDED_PATH_PREFIX)
        else:
            volume_separator_length += len(EXTENDED_PATH_PREFIX)

    if (not extended or extended_unc) and length > 0 and is_directory_separator(path[0]):
        if not extended_unc and not (length > 1 and is_directory_separator(path[1])):
            return RootInfo(1, RootKind.SIMPLE)

        # Skip the server and share names, never a third component
        i = unc_root_length
        separators_seen = 0
        while i < length:
            if is_directory_separator(path[i]):
                separators_seen += 1
                if separators_seen == 2:
                    i += 1
                    break
            i += 1
        return RootInfo(i, RootKind.EXTENDED_UNC if extended_unc else RootKind.UNC)

    if length >= volume_separator_length and path[volume_separator_length - 1] == VOLUME_SEPARATOR:
        i = volume_separator_length
        if length > i and is_directory_separator(path[i]):
            i += 1
        return RootInfo(i, RootKind.EXTENDED if extended else RootKind.DRIVE_LETTER)

    return RootInfo(0, RootKind.NONE)


def get_root_length(path: str) -> int:
    """Return the number of leading characters that form the root of ``path``."""
    require_path(path)
    return _classify(path).length


def root_length(path: str) -> int:
    """Unchecked variant of get_root_length for already-validated input."""
    return _classify(path).length


def is_extended(path: str) -> bool:
    """True for ``\\\\?\\`` and ``\\??\\`` prefixed paths."""
    return (
        len(path) >= DEVICE_PREFIX_LENGTH
        and path[0] == "\\"
        and path[1] in ("\\", "?")
        and path[2] == "?"
        and path[3] == "\\"
    )


def is_extended_unc(path: str) -> bool:
    return (
        len(path) >= len(UNC_EXTENDED_PATH_PREFIX)
        and is_extended(path)
        and path[4:7].upper() == "UNC"
        and path[7] == "\\"
    )


def is_device(path: str) -> bool:
    """True for extended paths and ``\\\\.\\`` / ``\\\\?\\`` device paths with either separator."""
    return is_extended(path) or (
        len(path) >= DEVICE_PREFIX_LENGTH
        and is_directory_separator(path[0])
        and is_directory_separator(path[1])
        and path[2] in (".", "?")
        and is_directory_separator(path[3])
    )


def is_partially_qualified(path: str) -> bool:
    """
    Return True when the path is relative to a current drive or directory.

    ``C:foo`` and ``\\foo`` count as partially qualified; ``C:\\foo``,
    ``\\\\server\\share`` and device paths do not.
    """
    if len(path) < 2:
        return True

    if is_directory_separator(path[0]):
        return not (path[1] == "?" or is_directory_separator(path[1]))

    return not (
        len(path) >= 3
        and path[1] == VOLUME_SEPARATOR
        and is_directory_separator(path[2])
        and is_valid_drive_char(path[0])
    )


def remove_extended_prefix(path: str) -> str:
    """Strip an extended prefix: ``\\\\?\\UNC\\srv`` -> ``\\\\srv``, ``\\\\?\\C:\\x`` -> ``C:\\x``."""
    require_path(path)
    if not is_extended(path):
        return path

    if is_extended_unc(path):
        return path[:2] + path[len(UNC_EXTENDED_PATH_PREFIX):]

    return path[DEVICE_PREFIX_LENGTH:]


def ensure_extended_prefix(path: str) -> str:
    """
    Add the extended-length prefix to a fully qualified path.

    Partially qualified and device paths are returned unchanged, since the
    prefix would change their meaning.
    """
    require_path(path)
    if is_partially_qualified(path) or is_device(path):
        return path

    if path.startswith(UNC_PATH_PREFIX):
        return path[:2] + UNC_EXTENDED_PREFIX_TO_INSERT + path[2:]

    return EXTENDED_PATH_PREFIX + path


def ends_in_directory_separator(path: str) -> bool:
    return len(path) > 0 and path[-1] == DIRECTORY_SEPARATOR
