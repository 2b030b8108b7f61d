"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def block_decode_failed(lang: str, reason: str, resource: str | None = None) -> Diagnostic:
        """Translation block content is invalid for its declared format.

        Args:
            lang: Format the content was decoded as
            reason: Decoder error message
            resource: Resource path of the block (optional)

        Returns:
            Diagnostic for BLOCK_DECODE_FAILED
        """
        msg = f"Cannot decode {lang} translation block: {reason}"
        return Diagnostic(
            code=DiagnosticCode.BLOCK_DECODE_FAILED,
            message=msg,
            hint="Check the block content against the declared lang attribute",
            resource=resource,
        )

    @staticmethod
    def block_not_a_mapping(lang: str, type_name: str) -> Diagnostic:
        """Decoded block content is not a locale mapping.

        Args:
            lang: Format the content was decoded as
            type_name: Python type name of the decoded value

        Returns:
            Diagnostic for BLOCK_NOT_A_MAPPING
        """
        msg = f"Translation block must decode to a mapping, got {type_name} ({lang})"
        return Diagnostic(
            code=DiagnosticCode.BLOCK_NOT_A_MAPPING,
            message=msg,
            hint="Use locale codes as top-level keys, or set the locale attribute",
        )

    @staticmethod
    def block_encoding_invalid(reason: str) -> Diagnostic:
        """Raw block bytes are not valid UTF-8."""
        msg = f"Translation block is not valid UTF-8: {reason}"
        return Diagnostic(
            code=DiagnosticCode.BLOCK_ENCODING_INVALID,
            message=msg,
        )

    @staticmethod
    def depth_exceeded(max_depth: int, what: str) -> Diagnostic:
        """Nesting depth limit exceeded.

        Args:
            max_depth: The configured limit
            what: What was being traversed ('message tree', 'program')

        Returns:
            Diagnostic for BLOCK_DEPTH_EXCEEDED or PROGRAM_DEPTH_EXCEEDED
        """
        code = (
            DiagnosticCode.PROGRAM_DEPTH_EXCEEDED
            if what == "program"
            else DiagnosticCode.BLOCK_DEPTH_EXCEEDED
        )
        msg = f"Maximum nesting depth ({max_depth}) exceeded in {what}"
        return Diagnostic(code=code, message=msg)

    @staticmethod
    def loader_version_unsupported(version: int | None, minimum: int) -> Diagnostic:
        """Host loader API version is too old.

        Args:
            version: Version reported by the host
            minimum: Minimum supported version

        Returns:
            Diagnostic for LOADER_VERSION_UNSUPPORTED
        """
        msg = (
            f"Loader API version {version} is not supported; "
            f"supports loader API version {minimum} and later"
        )
        return Diagnostic(
            code=DiagnosticCode.LOADER_VERSION_UNSUPPORTED,
            message=msg,
            hint="Upgrade the build host",
        )

    @staticmethod
    def program_syntax_error(reason: str, resource: str | None = None) -> Diagnostic:
        """Compiled component code could not be parsed."""
        msg = f"Cannot parse program: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PROGRAM_SYNTAX_ERROR,
            message=msg,
            resource=resource,
        )

    @staticmethod
    def edit_overlap(first: tuple[int, int], second: tuple[int, int]) -> Diagnostic:
        """Two rewrite edits overlap.

        Args:
            first: (start, end) of the earlier edit
            second: (start, end) of the overlapping edit

        Returns:
            Diagnostic for EDIT_OVERLAP
        """
        msg = (
            f"Edit {second[0]}..{second[1]} overlaps edit {first[0]}..{first[1]}"
        )
        return Diagnostic(
            code=DiagnosticCode.EDIT_OVERLAP,
            message=msg,
            span=SourceSpan(second[0], second[1]),
        )

    @staticmethod
    def edit_out_of_range(span: tuple[int, int], length: int) -> Diagnostic:
        """Rewrite edit outside the text bounds."""
        msg = f"Edit {span[0]}..{span[1]} is outside text of length {length}"
        return Diagnostic(
            code=DiagnosticCode.EDIT_OUT_OF_RANGE,
            message=msg,
        )
