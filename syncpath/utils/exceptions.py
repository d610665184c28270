"""
Custom exception hierarchy for syncpath.

The path engine is total for sanitization; the only condition it signals
outward is an invalid argument. Everything else here either refines that
condition or stays internal.
"""

from __future__ import annotations

from typing import Optional


class SyncPathError(Exception):
    """Base exception for all syncpath errors."""

    pass


class ConfigurationError(SyncPathError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidArgumentError(SyncPathError, ValueError):
    """Raised when a mandatory argument is missing or has the wrong type."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class IllegalPathCharactersError(InvalidArgumentError):
    """Raised under the strict policy when a path holds illegal characters."""

    pass


class PathTooLongError(InvalidArgumentError):
    """Raised under the strict policy when a path or segment is too long."""

    pass


class ShortPathExpansionError(SyncPathError, OSError):
    """Raised when a short (8.3) name cannot be expanded to its long form."""

    pass
