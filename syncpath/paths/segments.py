"""Sanitization of a single path segment."""

from __future__ import annotations

from typing import NamedTuple

from ..utils.constants import FORBIDDEN_FILE_NAMES
from .names import split_extension


class SegmentResult(NamedTuple):
    value: str
    changed: bool


def is_forbidden_name(name: str) -> bool:
    """True when ``name`` is a reserved device name such as ``CON`` or ``lpt1``."""
    return name.upper() in FORBIDDEN_FILE_NAMES


def sanitize_segment(segment: str, substitute: str, allow_dots_in_names: bool = False) -> SegmentResult:
    """
    Rewrite one segment so the local filesystem can store it.

    Rules, in order:
    1. ``.`` and ``..`` pass through when ``allow_dots_in_names`` is set.
    2. ``.`` becomes one substitute, ``..`` becomes two.
    3. A trailing dot is replaced by the substitute. Extension parsing
       would otherwise ignore it and the filesystem would drop it.
    4. A reserved device base name gets the substitute prepended; the
       extension is kept as is (``CON.txt`` -> ``_CON.txt``).

    Args:
        segment: Segment without separators
        substitute: Replacement character
        allow_dots_in_names: Keep ``.`` and ``..`` navigation segments

    Returns:
        SegmentResult with the rewritten segment and whether any rule fired
    """
    if segment in (".", ".."):
        if allow_dots_in_names:
            return SegmentResult(segment, False)
        return SegmentResult(substitute * len(segment), True)

    changed = False
    if segment.endswith("."):
        segment = segment[:-1] + substitute
        changed = True

    name, extension = split_extension(segment)
    if is_forbidden_name(name):
        segment = substitute + name + extension
        changed = True

    return SegmentResult(segment, changed)
