"""
syncpath: path parsing, normalization and sanitization for file synchronization.

Names from a remote storage backend are rewritten into names the local
filesystem accepts, deterministically, so repeated sync passes agree on
file identity.
"""

from __future__ import annotations

from .engine import PathEngine
from .paths import (
    RootInfo,
    RootKind,
    ValidationPolicy,
    classify_root,
    combine,
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    get_root_length,
    is_path_rooted,
    normalize_path,
    normalize_separators,
    replace_invalid_chars,
    sanitize_name,
    sanitize_path,
)
from .utils.exceptions import InvalidArgumentError, SyncPathError

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "PathEngine",
    "RootInfo",
    "RootKind",
    "SyncPathError",
    "ValidationPolicy",
    "classify_root",
    "combine",
    "get_directory_name",
    "get_extension",
    "get_file_name",
    "get_file_name_without_extension",
    "get_root_length",
    "is_path_rooted",
    "normalize_path",
    "normalize_separators",
    "replace_invalid_chars",
    "sanitize_name",
    "sanitize_path",
]
