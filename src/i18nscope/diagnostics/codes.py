"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Block errors (translation block decoding)
        2000-2999: Host errors (loader API, resource routing)
        3000-3999: Program errors (JavaScript parsing, traversal)
        4000-4999: Edit errors (rewrite contract violations)
    """

    # Block errors (1000-1999)
    BLOCK_DECODE_FAILED = 1001
    BLOCK_NOT_A_MAPPING = 1002
    BLOCK_ENCODING_INVALID = 1003
    BLOCK_DEPTH_EXCEEDED = 1004

    # Host errors (2000-2999)
    LOADER_VERSION_UNSUPPORTED = 2001

    # Program errors (3000-3999)
    PROGRAM_SYNTAX_ERROR = 3001
    PROGRAM_DEPTH_EXCEEDED = 3002

    # Edit errors (4000-4999)
    EDIT_OVERLAP = 4001
    EDIT_OUT_OF_RANGE = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open character range in a source text.

    Note:
        Offsets count Unicode code points (Python string indices), which is
        what the program parser reports in node ranges.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def overlaps(self, other: SourceSpan) -> bool:
        """Return True when both spans share at least one character."""
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when not tied to a range)
        hint: Suggestion for fixing the error
        resource: Resource path the error belongs to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    resource: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler.

        Example output:
            error[BLOCK_DECODE_FAILED]: Cannot decode yaml translation block: ...
              --> src/App.vue?vue&type=custom&index=0&blockType=i18n&lang=yaml
              = help: Check the block content against the declared lang

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
