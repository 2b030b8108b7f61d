"""Installer module generation for translation blocks.

The generated module exports a function that appends the serialized message
tree to the component's `__i18n` list and drops the cached constructor, so
several blocks targeting one component accumulate instead of overwriting.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from i18nscope.constants import INSTALLER_TEMPLATE

from .types import MessageTree

__all__ = [
    "escape_payload",
    "prefix_messages",
    "render_installer",
    "serialize_payload",
]

# Applied in order: the separator escapes introduce backslashes that the
# backslash pass must double as well.
_PAYLOAD_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
    ("\\", "\\\\"),
    ("'", "\\u0027"),
)


def prefix_messages(messages: MessageTree, file_id: str) -> MessageTree:
    """Wrap each locale's messages one level deeper under file_id.

    Example:
        >>> prefix_messages({"en": {"title": "Title"}}, "a1b2c3d4")
        {'en': {'a1b2c3d4': {'title': 'Title'}}}
    """
    return {locale: {file_id: tree} for locale, tree in messages.items()}


def escape_payload(value: str) -> str:
    """Escape JSON text for embedding in a single-quoted JS string literal."""
    for char, replacement in _PAYLOAD_ESCAPES:
        value = value.replace(char, replacement)
    return value


def serialize_payload(messages: Mapping[str, Any]) -> str:
    """Serialize a message tree to compact, escaped JSON text.

    Decoders map non-finite numbers to null or reject them; one reaching
    this point would break JSON.parse at runtime.

    Raises:
        ValueError: If the tree holds NaN or an infinity

    Example:
        >>> serialize_payload({"en": {"q": "It's"}})
        '{"en":{"q":"It\\\\u0027s"}}'
    """
    value = json.dumps(messages, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    return escape_payload(value)


def render_installer(messages: Mapping[str, Any]) -> str:
    """Render the installer module source for a (possibly prefixed) tree."""
    return INSTALLER_TEMPLATE.format(payload=serialize_payload(messages))
