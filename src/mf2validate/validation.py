"""Validation of one source/target message pair.

Runs, in order, the source exhaustiveness check, the target exhaustiveness
check and the placeholder consistency check, and maps the outcome to the
command's exit status.

Abort scope:
    A check that cannot be answered (non-plural selectors, partial wildcard
    variants) raises and ends the whole run; later checks are not attempted.
    Ordinary failures do not stop later checks.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mf2validate.checks import check_exhaustiveness, check_placeholder_consistency
from mf2validate.datamodel import load_message, validate_data_model
from mf2validate.enums import CheckStage, ExitCode, MessageRole

if TYPE_CHECKING:
    from mf2validate.datamodel import Message
    from mf2validate.diagnostics import CheckResult
    from mf2validate.plural_categories import PluralCategoryProvider

__all__ = [
    "PairReport",
    "prepare_message",
    "validate_pair",
]

logger = logging.getLogger(__name__)

type CheckObserver = Callable[[CheckStage, CheckResult], None]
type StageListener = Callable[[CheckStage], None]


@dataclass(frozen=True, slots=True)
class PairReport:
    """Immutable outcome of validating a source/target pair.

    Attributes:
        source_locale: Locale of the source message
        target_locale: Locale of the target message
        source: Exhaustiveness result of the source message
        target: Exhaustiveness result of the target message
        placeholders: Placeholder consistency result
    """

    source_locale: str
    target_locale: str
    source: CheckResult
    target: CheckResult
    placeholders: CheckResult

    @property
    def ok(self) -> bool:
        """True if all three checks passed."""
        return self.source.ok and self.target.ok and self.placeholders.ok

    @property
    def exit_code(self) -> ExitCode:
        """Exit status; placeholder failures take priority over plural failures."""
        if self.ok:
            return ExitCode.OK
        if not self.placeholders.ok:
            return ExitCode.INCONSISTENT_PLACEHOLDERS
        return ExitCode.MISSING_PLURAL_CATEGORY

    def summary_lines(self) -> list[str]:
        """Human-readable summary, one line per fact."""
        lines = [f"Source locale: {self.source_locale}"]
        if self.source.ok:
            lines.append("Source message covers all plural categories.")
        else:
            lines.append(
                "Source message does not cover all plural categories, "
                "or has extraneous categories."
            )

        lines.append(f"Target locale: {self.target_locale}")
        if self.target.ok:
            lines.append("Target message covers all plural categories.")
        else:
            lines.append(
                "Target message does not cover all plural categories, "
                "or has extraneous categories."
            )

        if self.placeholders.ok:
            lines.append("All variants in target message include placeholders from source message.")
        else:
            lines.append(
                "One or more variants in target message omit placeholders from source message."
            )
        return lines


def prepare_message(source: str, *, where: str = "<string>") -> Message:
    """Load an MF2 JSON data model and reject selection data model errors.

    Raises:
        MessageParseError: If the text is not an MF2 JSON data model
        DataModelError: If variants and selectors are inconsistent
    """
    message = load_message(source, where=where)
    validate_data_model(message)
    return message


def validate_pair(
    source_locale: str,
    source: Message,
    target_locale: str,
    target: Message,
    *,
    provider: PluralCategoryProvider | None = None,
    observer: CheckObserver | None = None,
    on_start: StageListener | None = None,
) -> PairReport:
    """Validate a translated message against its source.

    Args:
        source_locale: Locale of the source message
        source: Source message data model
        target_locale: Locale of the target message
        target: Target message data model
        provider: Plural category source (default: Babel CLDR data)
        observer: Called with each check's result as soon as it completes,
            so callers can report progress before a later check aborts
        on_start: Called with each stage just before its check runs, including
            a check that then aborts

    Returns:
        PairReport with the three results and the exit status

    Raises:
        NonPluralSelectorsError: If either message has non-plural selectors
        PartialWildcardError: If either message has a partial wildcard variant
        LocaleDataError: If plural rules for a locale are unavailable
    """

    def _run(stage: CheckStage, check: Callable[[], CheckResult]) -> CheckResult:
        if on_start is not None:
            on_start(stage)
        result = check()
        logger.debug("Check %s: ok=%s", stage, result.ok)
        if observer is not None:
            observer(stage, result)
        return result

    source_result = _run(
        CheckStage.SOURCE,
        lambda: check_exhaustiveness(
            source_locale, source, provider=provider, role=MessageRole.SOURCE
        ),
    )
    target_result = _run(
        CheckStage.TARGET,
        lambda: check_exhaustiveness(
            target_locale, target, provider=provider, role=MessageRole.TARGET
        ),
    )
    placeholder_result = _run(
        CheckStage.PLACEHOLDERS,
        lambda: check_placeholder_consistency(source, target),
    )

    return PairReport(
        source_locale=source_locale,
        target_locale=target_locale,
        source=source_result,
        target=target_result,
        placeholders=placeholder_result,
    )
