"""
Short (8.3) name to long name expansion.

Safe to import on any host. Outside Windows every lookup fails with
ShortPathExpansionError, which callers treat as "no expansion available".
"""

from __future__ import annotations

import ctypes
import os

from ..utils.exceptions import ShortPathExpansionError


def _is_windows() -> bool:
    return os.name == "nt"


def get_long_path_name(path: str) -> str:
    """
    Resolve a short path such as ``C:\\PROGRA~1`` to its long form.

    The lookup touches the filesystem and may change the letter case of
    path segments. It is attempted once; there is no retry.

    Args:
        path: Normalized path containing at least one ``~``

    Returns:
        The long form reported by the filesystem

    Raises:
        ShortPathExpansionError: If the host is not Windows or the lookup fails
    """
    if not _is_windows():
        raise ShortPathExpansionError(f"Short path expansion is not available on {os.name}")

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    lookup = kernel32.GetLongPathNameW
    lookup.argtypes = [ctypes.c_wchar_p, ctypes.c_wchar_p, ctypes.c_uint32]
    lookup.restype = ctypes.c_uint32

    required = lookup(path, None, 0)
    if required == 0:
        raise ShortPathExpansionError(
            f"GetLongPathNameW failed for {path!r} (error {ctypes.get_last_error()})"
        )

    buffer = ctypes.create_unicode_buffer(required)
    written = lookup(path, buffer, required)
    if written == 0 or written >= required:
        raise ShortPathExpansionError(
            f"GetLongPathNameW failed for {path!r} (error {ctypes.get_last_error()})"
        )

    return buffer.value
