"""Tests for diagnostics/: codes, templates, errors and formatting.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from i18nscope.diagnostics import (
    DecodeError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    EditContractError,
    EditOverlapError,
    EditRangeError,
    ErrorTemplate,
    OutputFormat,
    ScopeError,
    SourceSpan,
    UnsupportedVersionError,
)

# ============================================================================
# Spans and diagnostics
# ============================================================================


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid(self) -> None:
        """Empty and regular spans are accepted."""
        assert SourceSpan(3, 3).start == 3
        assert SourceSpan(0, 5).end == 5

    @pytest.mark.parametrize(("start", "end"), [(-1, 0), (5, 4)])
    def test_invalid(self, start: int, end: int) -> None:
        """Negative starts and reversed spans are rejected."""
        with pytest.raises(ValueError):
            SourceSpan(start, end)

    def test_overlaps(self) -> None:
        """Spans overlap only when they share a character."""
        assert SourceSpan(0, 3).overlaps(SourceSpan(2, 4))
        assert not SourceSpan(0, 2).overlaps(SourceSpan(2, 4))


class TestErrors:
    """Test the exception hierarchy."""

    def test_message_or_diagnostic(self) -> None:
        """Errors accept plain messages and diagnostics."""
        plain = ScopeError("boom")
        structured = ScopeError(ErrorTemplate.block_encoding_invalid("bad byte"))

        assert plain.diagnostic is None
        assert str(plain) == "boom"
        assert structured.diagnostic is not None
        assert str(structured) == "Translation block is not valid UTF-8: bad byte"

    def test_hierarchy(self) -> None:
        """Edit errors share a contract base; all derive from ScopeError."""
        assert issubclass(EditOverlapError, EditContractError)
        assert issubclass(EditRangeError, EditContractError)
        assert issubclass(EditContractError, ScopeError)
        assert issubclass(DecodeError, ScopeError)

    def test_unsupported_version_message(self) -> None:
        """The version error names the supported minimum."""
        error = UnsupportedVersionError(
            ErrorTemplate.loader_version_unsupported(1, 2), version=1, minimum=2
        )

        assert str(error) == (
            "Loader API version 1 is not supported; supports loader API version 2 and later"
        )
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.LOADER_VERSION_UNSUPPORTED

    def test_depth_codes(self) -> None:
        """Depth diagnostics are coded by the traversed structure."""
        assert ErrorTemplate.depth_exceeded(5, "program").code is (
            DiagnosticCode.PROGRAM_DEPTH_EXCEEDED
        )
        assert ErrorTemplate.depth_exceeded(5, "message tree").code is (
            DiagnosticCode.BLOCK_DEPTH_EXCEEDED
        )

    def test_overlap_span(self) -> None:
        """Overlap diagnostics point at the second edit."""
        diagnostic = ErrorTemplate.edit_overlap((0, 4), (2, 6))

        assert diagnostic.span == SourceSpan(2, 6)
        assert diagnostic.message == "Edit 2..6 overlaps edit 0..4"


# ============================================================================
# Formatting
# ============================================================================


class TestDiagnosticFormatter:
    """Test output formats."""

    DIAGNOSTIC = Diagnostic(
        code=DiagnosticCode.BLOCK_DECODE_FAILED,
        message="Cannot decode yaml translation block: bad",
        span=SourceSpan(1, 2),
        hint="Check the block",
        resource="src/App.vue",
    )

    def test_rust(self) -> None:
        """Compiler-style output lists location, range and hint."""
        assert self.DIAGNOSTIC.format_error() == (
            "error[BLOCK_DECODE_FAILED]: Cannot decode yaml translation block: bad\n"
            "  --> src/App.vue\n"
            "  = range: 1..2\n"
            "  = help: Check the block"
        )

    def test_rust_color(self) -> None:
        """Color output wraps the severity in ANSI codes."""
        text = DiagnosticFormatter(color=True).format(self.DIAGNOSTIC)

        assert text.startswith("\033[1;31merror\033[0m[BLOCK_DECODE_FAILED]")

    def test_simple(self) -> None:
        """Simple output is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self.DIAGNOSTIC) == (
            "BLOCK_DECODE_FAILED: Cannot decode yaml translation block: bad"
        )

    def test_json(self) -> None:
        """JSON output carries every populated field."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        assert json.loads(formatter.format(self.DIAGNOSTIC)) == {
            "code": "BLOCK_DECODE_FAILED",
            "message": "Cannot decode yaml translation block: bad",
            "severity": "error",
            "resource": "src/App.vue",
            "span": [1, 2],
            "hint": "Check the block",
        }

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        second = ErrorTemplate.edit_out_of_range((0, 9), 3)

        assert formatter.format_all([self.DIAGNOSTIC, second]) == (
            "BLOCK_DECODE_FAILED: Cannot decode yaml translation block: bad\n\n"
            "EDIT_OUT_OF_RANGE: Edit 0..9 is outside text of length 3"
        )
