"""
Type aliases for syncpath.
"""

from __future__ import annotations

from typing import Callable

# External short-name (8.3) to long-name lookup
LongPathResolver = Callable[[str], str]
