"""
File name, extension and directory extraction.

These mirror the classic Windows path API: the file name is everything
after the last separator or volume separator, and the extension starts at
the last dot of the file name.
"""

from __future__ import annotations

from typing import Optional

from ..utils.constants import VOLUME_SEPARATOR
from ..utils.validators import require_path
from .normalize import normalize_path
from .root import is_directory_separator, root_length


def _is_name_boundary(ch: str) -> bool:
    return is_directory_separator(ch) or ch == VOLUME_SEPARATOR


def file_name_of(path: str) -> str:
    for i in range(len(path) - 1, -1, -1):
        if _is_name_boundary(path[i]):
            return path[i + 1:]
    return path


def extension_of(path: str) -> str:
    name = file_name_of(path)
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:]


def split_extension(name: str) -> tuple[str, str]:
    """Split a file name into (name without extension, extension)."""
    extension = extension_of(name)
    if extension:
        return name[: -len(extension)], extension
    return name, extension


def get_file_name(path: str) -> str:
    """Return the file name and extension of a path (``C:x.txt`` gives ``x.txt``)."""
    require_path(path)
    return file_name_of(path)


def get_extension(path: str) -> str:
    """Return the extension including its dot, or an empty string."""
    require_path(path)
    return extension_of(path)


def get_file_name_without_extension(path: str) -> str:
    require_path(path)
    return split_extension(file_name_of(path))[0]


def has_extension(path: str) -> bool:
    require_path(path)
    return extension_of(path) != ""


def change_extension(path: str, extension: Optional[str]) -> str:
    """
    Replace the extension of a path.

    Args:
        path: Path whose extension is replaced
        extension: New extension, with or without the leading dot.
            None removes the extension; an empty string leaves a trailing dot.

    Returns:
        Path with the new extension
    """
    require_path(path)
    stem = path
    for i in range(len(path) - 1, -1, -1):
        if path[i] == ".":
            stem = path[:i]
            break
        if _is_name_boundary(path[i]):
            break

    if extension is None or not path:
        return stem

    if not extension.startswith("."):
        stem += "."
    return stem + extension


def is_path_rooted(path: str) -> bool:
    """True when the path starts with a separator or has a volume separator at index 1."""
    require_path(path)
    return (len(path) >= 1 and is_directory_separator(path[0])) or (
        len(path) >= 2 and path[1] == VOLUME_SEPARATOR
    )


def get_directory_name(path: str) -> Optional[str]:
    """
    Return the directory portion of a path.

    The path is normalized first with short-name expansion disabled. The
    result keeps the root, so ``C:\\foo`` yields ``C:\\``.

    Args:
        path: Path to inspect

    Returns:
        Directory portion, or None when the path is a bare root

    Raises:
        InvalidArgumentError: If path is None
    """
    require_path(path)
    normalized = normalize_path(path, expand_short_paths=False)

    root = root_length(normalized)
    i = len(normalized)
    if i <= root:
        return None

    while i > root:
        i -= 1
        if is_directory_separator(normalized[i]):
            break
    return normalized[:i]
