"""Diagnostic system for mf2validate.

Provides structured diagnostics with codes, message locations and hints,
the exception hierarchy for aborted runs, and output formatting.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CheckAbortedError,
    DataModelError,
    LocaleDataError,
    MessageLoadError,
    MessageParseError,
    MF2ValidateError,
    NonPluralSelectorsError,
    PartialWildcardError,
    PermutationCountError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import CheckResult

__all__ = [
    "CheckAbortedError",
    "CheckResult",
    "DataModelError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleDataError",
    "MF2ValidateError",
    "MessageLoadError",
    "MessageParseError",
    "NonPluralSelectorsError",
    "OutputFormat",
    "PartialWildcardError",
    "PermutationCountError",
]
