"""
Decomposition of the recursive glob dialect accepted by the loader.

Only one form is recognized: ``<base>/**/*.<ext>`` or
``<base>/**/*.{<ext>,<ext>,...}`` (backslash separators allowed). Anything
else is a literal path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from domains.file_ingest.errors import InvalidPattern

RECURSIVE_MARKERS = ("/**/*.", "\\**\\*.")
MARKER_LENGTH = 6


@dataclass(frozen=True)
class LiteralPath:
    """Path taken as-is, no extension filtering."""

    path: str

    @property
    def base_path(self) -> str:
        return self.path

    @property
    def extensions(self) -> list[str]:
        return []


@dataclass(frozen=True)
class RecursiveFilter:
    """Recursive walk below ``base`` restricted to ``extensions``."""

    base: str
    extensions: list[str] = field(default_factory=list)

    @property
    def base_path(self) -> str:
        return self.base


GlobPattern = Union[LiteralPath, RecursiveFilter]


def _find_marker(path: str) -> int:
    for marker in RECURSIVE_MARKERS:
        start = path.find(marker)
        if start != -1:
            return start
    return -1


def parse_glob(path: str) -> GlobPattern:
    """
    Parse ``path`` into a tagged pattern.

    Args:
        path: User supplied path string

    Returns:
        LiteralPath when no recursive marker is present, else RecursiveFilter

    Raises:
        InvalidPattern: a ``}`` follows the marker but the extension part is
            not wrapped in braces
    """
    start = _find_marker(path)
    if start == -1:
        return LiteralPath(path)

    base = path[:start]
    brace_end = path.find("}", start)

    # No closing brace: the remainder is one literal extension, even when it
    # opens a brace ("dir/**/*.{md,txt" -> ["{md,txt"]).
    if brace_end == -1:
        return RecursiveFilter(base, [path[start + MARKER_LENGTH:]])

    extensions_str = path[start + MARKER_LENGTH:brace_end + 1]
    if not (extensions_str.startswith("{") and extensions_str.endswith("}")):
        raise InvalidPattern(path)

    return RecursiveFilter(base, extensions_str[1:-1].split(","))


def decompose(path: str) -> tuple[str, list[str]]:
    """Split ``path`` into ``(base_path, extensions)``."""
    pattern = parse_glob(path)
    return pattern.base_path, list(pattern.extensions)
