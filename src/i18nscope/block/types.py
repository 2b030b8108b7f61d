"""Type aliases for translation block data.

Python 3.13+.
"""

from typing import Any, TypeAlias

__all__ = ["LeafPath", "LocaleCode", "MessageNode", "MessageTree"]

LocaleCode: TypeAlias = str

LeafPath: TypeAlias = str
"""Dot-joined key segments of one string leaf, e.g. 'menu.open'."""

MessageNode: TypeAlias = str | dict[str, Any]
"""Leaf message string, or mapping of key segment to nested node."""

MessageTree: TypeAlias = dict[LocaleCode, Any]
"""Locale code mapped to that locale's root MessageNode."""
