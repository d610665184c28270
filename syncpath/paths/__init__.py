"""
Path syntax engine.

Root classification, separator normalization, sanitization, combining and
name extraction for Windows-syntax paths. Every function here is pure
except the opt-in short-name expansion in normalize_path.
"""

from .combine import combine
from .identity import (
    ensure_trailing_separator,
    filenames_case_sensitive,
    get_relative_name,
    to_identity_key,
)
from .longpath import get_long_path_name
from .names import (
    change_extension,
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    has_extension,
    is_path_rooted,
)
from .normalize import normalize_path, normalize_separators
from .root import (
    RootInfo,
    RootKind,
    classify_root,
    ensure_extended_prefix,
    get_root_length,
    is_device,
    is_extended,
    is_extended_unc,
    is_partially_qualified,
    remove_extended_prefix,
)
from .sanitize import replace_invalid_chars, sanitize_name, sanitize_path
from .segments import SegmentResult, is_forbidden_name, sanitize_segment
from .validation import (
    ValidationPolicy,
    are_segments_too_long,
    check_path,
    has_illegal_characters,
    is_path_too_long,
)

__all__ = [
    # Root classification
    "RootInfo",
    "RootKind",
    "classify_root",
    "ensure_extended_prefix",
    "get_root_length",
    "is_device",
    "is_extended",
    "is_extended_unc",
    "is_partially_qualified",
    "remove_extended_prefix",
    # Normalization
    "get_long_path_name",
    "normalize_path",
    "normalize_separators",
    # Sanitization
    "SegmentResult",
    "is_forbidden_name",
    "replace_invalid_chars",
    "sanitize_name",
    "sanitize_path",
    "sanitize_segment",
    # Combining
    "combine",
    # Names
    "change_extension",
    "get_directory_name",
    "get_extension",
    "get_file_name",
    "get_file_name_without_extension",
    "has_extension",
    "is_path_rooted",
    # Validation policy
    "ValidationPolicy",
    "are_segments_too_long",
    "check_path",
    "has_illegal_characters",
    "is_path_too_long",
    # Identity
    "ensure_trailing_separator",
    "filenames_case_sensitive",
    "get_relative_name",
    "to_identity_key",
]
