"""Hypothesis strategies for i18nscope property-based testing.

Usage:
    from tests.strategies import message_trees, path_literals
"""

from .messages import (
    key_segments,
    locale_codes,
    message_nodes,
    message_texts,
    message_trees,
    path_literals,
    relative_component_paths,
)

__all__ = [
    "key_segments",
    "locale_codes",
    "message_nodes",
    "message_texts",
    "message_trees",
    "path_literals",
    "relative_component_paths",
]
