"""Diagnostic system for i18nscope errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DecodeError,
    DepthLimitExceededError,
    EditContractError,
    EditOverlapError,
    EditRangeError,
    ProgramSyntaxError,
    ScopeError,
    UnsupportedVersionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DecodeError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EditContractError",
    "EditOverlapError",
    "EditRangeError",
    "ErrorTemplate",
    "OutputFormat",
    "ProgramSyntaxError",
    "ScopeError",
    "SourceSpan",
    "UnsupportedVersionError",
]
