"""
Identity keys for matching files across sync passes.

Windows and macOS filesystems are usually case-insensitive, so two names
that differ only in case refer to the same file there. Identity keys fold
case on such filesystems and keep it elsewhere.
"""

from __future__ import annotations

import sys
from typing import Optional

from ..utils.constants import DIRECTORY_SEPARATOR
from ..utils.exceptions import InvalidArgumentError
from ..utils.validators import require_path
from .root import ends_in_directory_separator


def filenames_case_sensitive(case_sensitive: Optional[bool] = None) -> bool:
    """Resolve the case-sensitivity setting; None means "case-sensitive only on Linux"."""
    if case_sensitive is None:
        return sys.platform.startswith("linux")
    return case_sensitive


def to_identity_key(path: str, case_sensitive: Optional[bool] = None) -> str:
    require_path(path)
    if filenames_case_sensitive(case_sensitive):
        return path
    return path.upper()


def ensure_trailing_separator(path: str) -> str:
    """Append the directory separator unless the path is empty or already ends with one."""
    require_path(path)
    if path == "" or ends_in_directory_separator(path):
        return path
    return path + DIRECTORY_SEPARATOR


def get_relative_name(full_name: str, base_dir: str, case_sensitive: Optional[bool] = None) -> str:
    """
    Strip a sync root from a full path.

    The prefix comparison uses identity keys, so on case-insensitive
    filesystems ``C:\\Data\\x.txt`` is under ``c:\\data``. The returned name
    keeps the letter case of ``full_name``.

    Args:
        full_name: Full path of a file or directory
        base_dir: Sync root directory, with or without trailing separator
        case_sensitive: Override for the filesystem's case sensitivity

    Returns:
        Path of ``full_name`` relative to ``base_dir``; the sync root itself
        maps to an empty string

    Raises:
        InvalidArgumentError: If an argument is None or full_name is outside base_dir
    """
    require_path(full_name, "full_name")
    base = ensure_trailing_separator(require_path(base_dir, "base_dir"))

    base_key = to_identity_key(base, case_sensitive)

    if to_identity_key(ensure_trailing_separator(full_name), case_sensitive) == base_key:
        return ""

    if to_identity_key(full_name[: len(base)], case_sensitive) == base_key:
        return full_name[len(base):]

    raise InvalidArgumentError(
        f"Path {full_name!r} is not under {base_dir!r}", argument="full_name"
    )
