"""i18nscope exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.

Hierarchy:
    ScopeError (base)
    ├─ DecodeError (translation block is invalid for its lang)
    ├─ UnsupportedVersionError (host loader API too old)
    ├─ ProgramSyntaxError (compiled component code cannot be parsed)
    ├─ DepthLimitExceededError (message tree or program nested too deeply)
    └─ EditContractError (rewrite edits cannot be applied)
       ├─ EditOverlapError
       └─ EditRangeError

Python 3.13+.
"""

from .codes import Diagnostic


class ScopeError(Exception):
    """Base exception for all i18nscope errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ScopeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class DecodeError(ScopeError):
    """Translation block content is not valid for the selected format.

    The block's transform produces no output; other files are unaffected.

    Attributes:
        lang: Format the content was decoded as ('json', 'json5', 'yaml', 'yml')
    """

    def __init__(self, message: str | Diagnostic, *, lang: str = "") -> None:
        """Initialize DecodeError.

        Args:
            message: Error message string OR Diagnostic object
            lang: Format the content was decoded as
        """
        super().__init__(message)
        self.lang = lang


class UnsupportedVersionError(ScopeError):
    """Host loader API version is below the supported minimum.

    Attributes:
        version: Version reported by the host (None when missing)
        minimum: Minimum supported version
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        version: int | None = None,
        minimum: int = 0,
    ) -> None:
        super().__init__(message)
        self.version = version
        self.minimum = minimum


class ProgramSyntaxError(ScopeError):
    """Compiled component code could not be parsed into a program."""


class DepthLimitExceededError(ScopeError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - A message tree nested far beyond any legitimate translation block
    - A programmatically constructed program tree with runaway nesting
    """


class EditContractError(ScopeError):
    """Base for edit application failures.

    These are programming-contract violations, not user errors: the rewriter
    produces at most one edit per literal, so they should be unreachable.
    They abort the file's rewrite instead of corrupting its output.
    """


class EditOverlapError(EditContractError):
    """Two edits target overlapping ranges."""


class EditRangeError(EditContractError):
    """An edit range lies outside the text it is applied to."""
