"""
Configured path engine.

PathEngine binds one PathSettings instance to the path operations so the
substitute character and policy flags are passed explicitly to every call
instead of being read from process-wide state.
"""

from __future__ import annotations

import logging
from typing import Optional

from syncpath.config.settings import PathSettings, get_settings
from syncpath.paths.combine import combine as combine_paths
from syncpath.paths.identity import get_relative_name, to_identity_key
from syncpath.paths.names import (
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    is_path_rooted,
)
from syncpath.paths.normalize import normalize_path
from syncpath.paths.root import RootInfo, classify_root, get_root_length
from syncpath.paths.sanitize import sanitize_name, sanitize_path
from syncpath.paths.validation import check_path
from syncpath.utils.types import LongPathResolver
from syncpath.utils.validators import require_path

logger = logging.getLogger(__name__)


class PathEngine:
    """
    Path operations bound to a sanitization policy.

    Example:
        >>> engine = PathEngine(PathSettings(substitute_char="-"))
        >>> engine.replace_invalid_chars("dir\\\\a|b")
        'dir\\\\a-b'
    """

    def __init__(
        self,
        settings: Optional[PathSettings] = None,
        resolver: Optional[LongPathResolver] = None,
    ):
        """
        Initialize the engine.

        Args:
            settings: Path settings; defaults to get_settings().paths
            resolver: Short-name lookup used when expand_short_paths is enabled
        """
        self.settings = settings or get_settings().paths
        self.resolver = resolver
        logger.debug(
            f"PathEngine using substitute {self.settings.substitute_char!r}, "
            f"policy {self.settings.validation_policy.value}"
        )

    def _checked(self, path: str, name: str = "path") -> str:
        require_path(path, name)
        return check_path(path, self.settings.validation_policy, self.settings.check_wildcards)

    # Sanitization (always permissive)

    def replace_invalid_chars(self, path: str) -> str:
        return sanitize_path(
            path,
            substitute=self.settings.substitute_char,
            check_wildcards=self.settings.check_wildcards,
            allow_dots_in_names=self.settings.allow_dots_in_names,
        )

    def sanitize_name(self, name: str) -> str:
        return sanitize_name(
            name,
            substitute=self.settings.substitute_char,
            check_wildcards=self.settings.check_wildcards,
            allow_dots_in_names=self.settings.allow_dots_in_names,
        )

    def combine(
        self,
        path1: str,
        path2: str,
        path3: Optional[str] = None,
        sanitize: bool = True,
        allow_dots_in_names: Optional[bool] = None,
    ) -> str:
        if allow_dots_in_names is None:
            allow_dots_in_names = self.settings.allow_dots_in_names
        return combine_paths(
            path1,
            path2,
            path3,
            sanitize=sanitize,
            allow_dots_in_names=allow_dots_in_names,
            substitute=self.settings.substitute_char,
            check_wildcards=self.settings.check_wildcards,
        )

    # Normalization

    def normalize(self, path: str) -> str:
        return normalize_path(
            self._checked(path),
            expand_short_paths=self.settings.expand_short_paths,
            resolver=self.resolver,
        )

    # Root classification and name extraction

    def get_root_length(self, path: str) -> int:
        return get_root_length(self._checked(path))

    def classify_root(self, path: str) -> RootInfo:
        return classify_root(self._checked(path))

    def is_path_rooted(self, path: str) -> bool:
        return is_path_rooted(self._checked(path))

    def get_directory_name(self, path: str) -> Optional[str]:
        return get_directory_name(self._checked(path))

    def get_file_name(self, path: str) -> str:
        return get_file_name(self._checked(path))

    def get_extension(self, path: str) -> str:
        return get_extension(self._checked(path))

    def get_file_name_without_extension(self, path: str) -> str:
        return get_file_name_without_extension(self._checked(path))

    # Identity

    def identity_key(self, path: str) -> str:
        return to_identity_key(path, self.settings.case_sensitive_filenames)

    def relative_name(self, full_name: str, base_dir: str) -> str:
        return get_relative_name(
            full_name, base_dir, self.settings.case_sensitive_filenames
        )
