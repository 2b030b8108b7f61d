"""LeafPath extraction from message trees.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from i18nscope.constants import MAX_DEPTH
from i18nscope.core.depth_guard import DepthGuard

from .types import LeafPath, MessageTree

__all__ = ["extract_leaf_paths", "iter_leaf_paths"]


def _entries(node: Mapping[str, Any] | list[Any] | tuple[Any, ...]) -> Iterable[tuple[str, Any]]:
    if isinstance(node, Mapping):
        return ((str(key), value) for key, value in node.items())
    return ((str(index), value) for index, value in enumerate(node))


def iter_leaf_paths(
    node: Mapping[str, Any] | list[Any] | tuple[Any, ...],
    prefix: str = "",
    *,
    guard: DepthGuard | None = None,
) -> Iterator[LeafPath]:
    """Yield the dot-joined path of every string leaf below node.

    Mappings are descended into by key and lists by index, so
    {"list": ["one", "two"]} yields "list.0" and "list.1". Numbers,
    booleans and null are neither leaves nor descended into. Plural strings
    such as "{count} apple|{count} apples" are single leaves.

    Raises:
        DepthLimitExceededError: If nesting exceeds the guard's limit
    """
    guard = guard if guard is not None else DepthGuard(max_depth=MAX_DEPTH)
    with guard:
        for key, value in _entries(node):
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(value, str):
                yield path
            elif isinstance(value, (Mapping, list, tuple)):
                yield from iter_leaf_paths(value, path, guard=guard)


def extract_leaf_paths(messages: MessageTree, *, max_depth: int = MAX_DEPTH) -> tuple[LeafPath, ...]:
    """Collect LeafPaths across all locales of a MessageTree.

    The result is the union over locales, in first-discovery order, without
    duplicates. A locale whose messages are not a mapping contributes
    nothing.

    Example:
        >>> extract_leaf_paths({
        ...     "en": {"title": "Title", "menu": {"open": "Open"}},
        ...     "de": {"title": "Titel", "extra": "Nur Deutsch"},
        ... })
        ('title', 'menu.open', 'extra')
    """
    guard = DepthGuard(max_depth=max_depth)
    seen: dict[LeafPath, None] = {}
    for locale_messages in messages.values():
        if isinstance(locale_messages, Mapping):
            for path in iter_leaf_paths(locale_messages, guard=guard):
                seen.setdefault(path, None)
    return tuple(seen)
