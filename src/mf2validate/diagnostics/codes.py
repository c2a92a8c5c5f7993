"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic record produced by every
check. Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

from mf2validate.constants import KEY_SEPARATOR
from mf2validate.enums import MessageRole, Severity

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1099: Exhaustiveness failures (message is invalid)
        1100-1199: Exhaustiveness notes (informational)
        2000-2099: Placeholder failures
        2100-2199: Placeholder notes
        3000-3999: Check aborted (question cannot be answered)
        4000-4999: Input errors (file, JSON, locale data)
        5000-5999: Data model errors (malformed message structure)
    """

    # Exhaustiveness failures (1000-1099)
    VARIANT_COUNT_MISMATCH = 1001
    VARIANT_OMITTED = 1002
    INVALID_PLURAL_CATEGORY = 1003

    # Exhaustiveness notes (1100-1199)
    VARIANT_KEY_COUNT_MISMATCH = 1101
    NO_MATCH_CONSTRUCT = 1102

    # Placeholder failures (2000-2099)
    PLACEHOLDER_MISSING = 2001

    # Placeholder notes (2100-2199)
    PLACEHOLDER_INCONSISTENT_IN_SOURCE = 2101

    # Check aborted (3000-3999)
    NON_PLURAL_SELECTORS = 3001
    PARTIAL_WILDCARD = 3002
    PERMUTATION_COUNT_MISMATCH = 3003

    # Input errors (4000-4999)
    MESSAGE_UNREADABLE = 4001
    MESSAGE_PARSE_FAILED = 4002
    LOCALE_UNKNOWN = 4003

    # Data model errors (5000-5999)
    DATA_MODEL_KEY_COUNT = 5001
    DATA_MODEL_MISSING_FALLBACK = 5002
    DATA_MODEL_MISSING_SELECTOR_ANNOTATION = 5003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries the offending locale,
    permutation, key or placeholder so tools do not have to parse text.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        severity: ERROR fails the check; WARNING/INFO never do
        locale: Locale of the message the diagnostic is about
        role: Source or target message
        permutation: Plural-category combination the diagnostic is about
        key: Variant key text the diagnostic is about
        placeholder: Placeholder variable name (without $)
        hint: Suggestion for fixing the problem
    """

    code: DiagnosticCode
    message: str
    severity: Severity = Severity.ERROR
    locale: str | None = None
    role: MessageRole | None = None
    permutation: tuple[str, ...] | None = None
    key: str | None = None
    placeholder: str | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    @property
    def is_error(self) -> bool:
        """True if this diagnostic represents a validity failure."""
        return self.severity is Severity.ERROR

    @property
    def location(self) -> str | None:
        """Describe which message the diagnostic points at, e.g. 'target message (ru)'."""
        if self.role is None and self.locale is None:
            return None
        role = f"{self.role} message" if self.role is not None else "message"
        if self.locale is not None:
            return f"{role} ({self.locale})"
        return role

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[VARIANT_OMITTED]: Omitted variant: few other
              --> target message (ru)
              = permutation: few other
              = help: Add a variant with keys 'few other'

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

    def rendered_permutation(self) -> str | None:
        """Permutation labels joined by spaces, or None."""
        if self.permutation is None:
            return None
        return KEY_SEPARATOR.join(self.permutation)
