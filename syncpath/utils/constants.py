"""
Path syntax constants for syncpath.

This module contains the separators, prefixes, character sets, length limits
and default values shared by the path engine.
"""

from __future__ import annotations

# Separators (Windows path syntax)
DIRECTORY_SEPARATOR = "\\"
ALT_DIRECTORY_SEPARATOR = "/"
VOLUME_SEPARATOR = ":"
DIRECTORY_SEPARATORS = frozenset((DIRECTORY_SEPARATOR, ALT_DIRECTORY_SEPARATOR))

# Extended-length and device prefixes
EXTENDED_PATH_PREFIX = "\\\\?\\"
UNC_EXTENDED_PATH_PREFIX = "\\\\?\\UNC\\"
UNC_PATH_PREFIX = "\\\\"
UNC_EXTENDED_PREFIX_TO_INSERT = "?\\UNC\\"
DEVICE_PREFIX_LENGTH = 4

# Length limits
MAX_LONG_PATH = 32767
MAX_COMPONENT_LENGTH = 255

# Characters that may not appear in a stored segment. The primary directory
# separator is structural and stays out of this set.
INVALID_PATH_CHARS = frozenset(
    [ch for ch in '<>:"/\\|' if ch != DIRECTORY_SEPARATOR]
    + [chr(code) for code in range(32)]
)
WILDCARD_CHARS = frozenset("*?")

# Device names that a segment's base name must not equal (case-insensitive)
FORBIDDEN_FILE_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL", "CONIN$", "CONOUT$"]
    + [f"COM{n}" for n in range(1, 10)]
    + [f"LPT{n}" for n in range(1, 10)]
)

# Sanitization defaults
DEFAULT_SUBSTITUTE_CHAR = "_"
DEFAULT_CHECK_WILDCARDS = True
DEFAULT_ALLOW_DOTS_IN_NAMES = False

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment
ENV_PREFIX = "SYNCPATH_"
