"""mf2validate exception hierarchy with structured diagnostics.

Exceptions are reserved for conditions that end a run: unreadable input,
malformed data models, missing locale data, and checks that cannot be
answered for a message. Ordinary validity failures are returned as
diagnostics instead.

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from mf2validate.enums import ExitCode

from .codes import Diagnostic

__all__ = [
    "CheckAbortedError",
    "DataModelError",
    "LocaleDataError",
    "MF2ValidateError",
    "MessageLoadError",
    "MessageParseError",
    "NonPluralSelectorsError",
    "PartialWildcardError",
    "PermutationCountError",
]


class MF2ValidateError(Exception):
    """Base exception for all mf2validate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        exit_code: Process exit status the command reports for this error
    """

    exit_code: ClassVar[ExitCode] = ExitCode.ASSERTION_FAILED

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MF2ValidateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageLoadError(MF2ValidateError):
    """Message file could not be read."""

    exit_code = ExitCode.IO_ERROR


class MessageParseError(MF2ValidateError):
    """Message text is not a valid MF2 JSON data model.

    Attributes:
        path: Path of the offending file, if loaded from disk
    """

    exit_code = ExitCode.PARSE_ERROR

    def __init__(self, message: str | Diagnostic, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DataModelError(MF2ValidateError):
    """Data model is well-typed but structurally invalid.

    Examples:
    - A variant has a different number of keys than there are selectors
    - No catch-all (*) variant
    - A selector refers to an unannotated expression

    Attributes:
        diagnostics: Every data model problem found, the first being the
            one this exception reports
    """

    exit_code = ExitCode.DATA_MODEL_ERROR

    def __init__(
        self, message: str | Diagnostic, *, diagnostics: tuple[Diagnostic, ...] = ()
    ) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics


class LocaleDataError(MF2ValidateError):
    """Plural rules for a locale are unavailable."""

    exit_code = ExitCode.LOCALE_DATA_ERROR

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class CheckAbortedError(MF2ValidateError):
    """A check cannot produce a verdict for this message.

    Distinct from an invalid message: the algorithm cannot evaluate it.
    """


class NonPluralSelectorsError(CheckAbortedError):
    """One or more selectors are not plural-typed.

    Attributes:
        selectors: Names of the offending selectors (without $)
    """

    exit_code = ExitCode.NON_PLURAL_SELECTORS

    def __init__(self, message: str | Diagnostic, *, selectors: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.selectors = selectors


class PartialWildcardError(CheckAbortedError):
    """A variant mixes catch-all and literal keys.

    Attributes:
        keys: Rendered key set of the offending variant
    """

    exit_code = ExitCode.PARTIAL_WILDCARDS

    def __init__(self, message: str | Diagnostic, *, keys: str = "") -> None:
        super().__init__(message)
        self.keys = keys


class PermutationCountError(CheckAbortedError):
    """Internal consistency failure in permutation generation (a bug)."""

    exit_code = ExitCode.ASSERTION_FAILED
