"""
Utility modules for syncpath.

This package provides the constants, exceptions, type aliases, validators
and logging configuration used by the path engine.
"""

from __future__ import annotations

from .constants import (
    ALT_DIRECTORY_SEPARATOR,
    DEFAULT_ALLOW_DOTS_IN_NAMES,
    DEFAULT_CHECK_WILDCARDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SUBSTITUTE_CHAR,
    DIRECTORY_SEPARATOR,
    EXTENDED_PATH_PREFIX,
    FORBIDDEN_FILE_NAMES,
    INVALID_PATH_CHARS,
    MAX_COMPONENT_LENGTH,
    MAX_LONG_PATH,
    UNC_EXTENDED_PATH_PREFIX,
    VOLUME_SEPARATOR,
    WILDCARD_CHARS,
)
from .exceptions import (
    ConfigurationError,
    IllegalPathCharactersError,
    InvalidArgumentError,
    PathTooLongError,
    ShortPathExpansionError,
    SyncPathError,
)
from .logging_config import get_logger, setup_logging
from .types import LongPathResolver
from .validators import require_path, require_substitute, validate_substitute_char

__all__ = [
    # Constants
    "ALT_DIRECTORY_SEPARATOR",
    "DEFAULT_ALLOW_DOTS_IN_NAMES",
    "DEFAULT_CHECK_WILDCARDS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SUBSTITUTE_CHAR",
    "DIRECTORY_SEPARATOR",
    "EXTENDED_PATH_PREFIX",
    "FORBIDDEN_FILE_NAMES",
    "INVALID_PATH_CHARS",
    "MAX_COMPONENT_LENGTH",
    "MAX_LONG_PATH",
    "UNC_EXTENDED_PATH_PREFIX",
    "VOLUME_SEPARATOR",
    "WILDCARD_CHARS",
    # Exceptions
    "ConfigurationError",
    "IllegalPathCharactersError",
    "InvalidArgumentError",
    "PathTooLongError",
    "ShortPathExpansionError",
    "SyncPathError",
    # Logging
    "get_logger",
    "setup_logging",
    # Types
    "LongPathResolver",
    # Validators
    "require_path",
    "require_substitute",
    "validate_substitute_char",
]
