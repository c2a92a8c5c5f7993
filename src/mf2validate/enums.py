"""Enumerations for mf2validate type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntEnum for
process exit statuses.

Python 3.13+.
"""

from enum import IntEnum, StrEnum

__all__ = [
    "CheckStage",
    "ExitCode",
    "KeySetShape",
    "MessageRole",
    "Severity",
]


class ExitCode(IntEnum):
    """Process exit statuses of the mf2validate command.

    Values are stable so that CI wrappers can branch on them. Code 3 is
    reserved and never returned.
    """

    OK = 0
    MISSING_PLURAL_CATEGORY = 1
    PARSE_ERROR = 2
    DATA_MODEL_ERROR = 4
    LOCALE_DATA_ERROR = 5
    NON_PLURAL_SELECTORS = 6
    ASSERTION_FAILED = 7
    IO_ERROR = 8
    PARTIAL_WILDCARDS = 9
    INCONSISTENT_PLACEHOLDERS = 10
    USAGE_ERROR = 64


class KeySetShape(StrEnum):
    """Shape of a variant's key set.

    StrEnum provides automatic string conversion: str(KeySetShape.PARTIAL) == "partial"
    """

    CONCRETE = "concrete"
    """No catch-all keys: [one] [few]"""

    CATCHALL = "catchall"
    """Only catch-all keys: [*] [*]"""

    PARTIAL = "partial"
    """Mix of both: [one] [*] (cannot be checked)"""


class MessageRole(StrEnum):
    """Which side of the translation pair a message belongs to."""

    SOURCE = "source"
    TARGET = "target"


class Severity(StrEnum):
    """Diagnostic severity.

    Only ERROR diagnostics reflect a validity failure; WARNING and INFO are
    informational and never change a check's verdict.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CheckStage(StrEnum):
    """One of the three checks run for a source/target pair, in run order."""

    SOURCE = "source"
    """Exhaustiveness of the source message"""

    TARGET = "target"
    """Exhaustiveness of the target message"""

    PLACEHOLDERS = "placeholders"
    """Placeholder consistency of target against source"""
