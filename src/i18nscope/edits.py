"""Offset edit application.

Applies replacement edits to a file's generated text. Every edit addresses
the ORIGINAL text through a half-open [start, end) range; offsets are never
shifted by earlier replacements. Overlapping ranges are a contract
violation and abort the file's rewrite.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, TypeVar

from i18nscope.diagnostics import EditOverlapError, EditRangeError, ErrorTemplate

__all__ = ["TextEdit", "apply_edits", "ordered_edits"]

logger = logging.getLogger(__name__)


class TextEdit(Protocol):
    """Anything with a half-open range and replacement text (e.g. ReferenceEdit)."""

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...

    @property
    def replacement(self) -> str: ...


E = TypeVar("E", bound=TextEdit)


def ordered_edits(edits: Iterable[E], length: int) -> list[E]:
    """Sort edits by start offset and validate them against the text length.

    Sorting is stable, so zero-width insertions at one offset keep their
    given order.

    Raises:
        EditRangeError: If a range is reversed or outside [0, length]
        EditOverlapError: If two ranges share a character
    """
    ordered = sorted(edits, key=lambda edit: edit.start)
    previous: E | None = None
    for edit in ordered:
        if not 0 <= edit.start <= edit.end <= length:
            raise EditRangeError(ErrorTemplate.edit_out_of_range((edit.start, edit.end), length))
        if previous is not None and edit.start < previous.end:
            raise EditOverlapError(
                ErrorTemplate.edit_overlap((previous.start, previous.end), (edit.start, edit.end))
            )
        previous = edit
    return ordered


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply edits to text and return the result.

    Example:
        >>> from i18nscope.rewrite import ReferenceEdit
        >>> apply_edits("_vm.$t('a')", [ReferenceEdit("x", "a", 7, 10, '"x.a"')])
        '_vm.$t("x.a")'

    Raises:
        EditRangeError: If an edit lies outside text
        EditOverlapError: If two edits overlap
    """
    ordered = ordered_edits(edits, len(text))
    if not ordered:
        return text

    parts: list[str] = []
    cursor = 0
    for edit in ordered:
        parts.append(text[cursor : edit.start])
        parts.append(edit.replacement)
        cursor = edit.end
    parts.append(text[cursor:])

    logger.debug("Applied %d edit(s)", len(ordered))
    return "".join(parts)
