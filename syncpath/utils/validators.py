"""
Argument validation for the public path operations.

Validation happens once, at the public boundary. Internal helpers assume
they receive a str.
"""

from __future__ import annotations

from typing import Any, Optional

from .constants import DIRECTORY_SEPARATORS, INVALID_PATH_CHARS, WILDCARD_CHARS
from .exceptions import ConfigurationError, InvalidArgumentError


def require_path(value: Any, name: str = "path") -> str:
    """
    Validate that a mandatory path argument is present.

    Args:
        value: Argument value to validate
        name: Argument name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If the value is None or not a string
    """
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' must not be None", argument=name)

    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Argument '{name}' must be a string, got {type(value).__name__}",
            argument=name,
        )

    return value


def _substitute_problem(value: Any) -> Optional[str]:
    if not isinstance(value, str) or len(value) != 1:
        return f"Substitute must be exactly one character: {value!r}"

    if value in INVALID_PATH_CHARS or value in WILDCARD_CHARS or value in DIRECTORY_SEPARATORS:
        return f"Substitute is not a storable character: {value!r}"

    if value in (".", " "):
        return f"Substitute would be stripped from names: {value!r}"

    return None


def require_substitute(value: Any, name: str = "substitute") -> str:
    """
    Validate a substitute character passed to a sanitizing function.

    Raises:
        InvalidArgumentError: If the value is not a single storable character
    """
    problem = _substitute_problem(value)
    if problem:
        raise InvalidArgumentError(problem, argument=name)
    return value


def validate_substitute_char(value: Any) -> str:
    """
    Validate a configured substitute character.

    The substitute replaces disallowed content, so it must be a single
    character that is itself storable.

    Args:
        value: Candidate substitute character

    Returns:
        The validated character

    Raises:
        ConfigurationError: If the value is not a single storable character
    """
    try:
        return require_substitute(value)
    except InvalidArgumentError as e:
        raise ConfigurationError(str(e)) from e
