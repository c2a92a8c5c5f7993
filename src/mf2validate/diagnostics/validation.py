"""Result type shared by all checks.

Every check returns a verdict together with the diagnostics that explain it,
instead of printing as it goes. Display is left to the caller.

Python 3.13+.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["CheckResult"]


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Immutable outcome of one check.

    Attributes:
        ok: Verdict of the check
        diagnostics: Every diagnostic emitted, in emission order

    Example:
        >>> result = CheckResult.passed()
        >>> result.ok
        True
        >>> result.error_count
        0
    """

    ok: bool
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Diagnostics that represent validity failures."""
        return tuple(d for d in self.diagnostics if d.is_error)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Informational diagnostics (never affect `ok`)."""
        return tuple(d for d in self.diagnostics if not d.is_error)

    @property
    def error_count(self) -> int:
        """Number of validity failures."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of informational diagnostics."""
        return len(self.warnings)

    @staticmethod
    def passed(diagnostics: Iterable[Diagnostic] = ()) -> "CheckResult":
        """Create a passing result, optionally carrying informational diagnostics."""
        return CheckResult(ok=True, diagnostics=tuple(diagnostics))

    @staticmethod
    def failed(diagnostics: Iterable[Diagnostic]) -> "CheckResult":
        """Create a failing result."""
        return CheckResult(ok=False, diagnostics=tuple(diagnostics))
