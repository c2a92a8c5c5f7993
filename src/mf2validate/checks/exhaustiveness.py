"""Plural exhaustiveness checking.

Verifies that a message's variants cover every combination of its locale's
plural categories across all selectors, exactly once, plus the catch-all
variant.

Architecture:
    - check_exhaustiveness(): entry point, orchestrates the passes below
    - Pass 1: abort conditions (non-plural selectors, partial wildcards)
    - Pass 2: variant count against permutation count
    - Pass 3: coverage of every permutation (all omissions reported)
    - Pass 4: every literal key is a plural category of the locale

Python 3.13+.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from mf2validate.datamodel.ast import Literal, Message, SelectMessage, Variant
from mf2validate.diagnostics import (
    CheckResult,
    Diagnostic,
    ErrorTemplate,
    NonPluralSelectorsError,
    PartialWildcardError,
    PermutationCountError,
)
from mf2validate.enums import KeySetShape, MessageRole
from mf2validate.plural_categories import BabelPluralCategories, PluralCategoryProvider

from .keys import is_all_other, key_set_shape, render_keys
from .matcher import variant_exists_for
from .permutations import expected_permutation_count, generate_permutations
from .selectors import non_plural_selectors

__all__ = ["check_exhaustiveness", "expected_variant_count"]

logger = logging.getLogger(__name__)

_DEFAULT_PROVIDER: PluralCategoryProvider = BabelPluralCategories()


def _has_all_other_variant(variants: Sequence[Variant]) -> bool:
    """True if some variant is keyed entirely by the literal 'other'."""
    return any(variant.keys and is_all_other(variant.keys) for variant in variants)


def expected_variant_count(permutation_count: int, variants: Sequence[Variant]) -> int:
    """Number of variants a complete message must have.

    One per permutation plus the catch-all variant. The all-'other'
    permutation may be left to the catch-all, so it is not counted when no
    variant spells it out.
    """
    expected = permutation_count + 1
    if not _has_all_other_variant(variants):
        expected -= 1
    return expected


def _check_abort_conditions(
    message: SelectMessage, locale: str, role: MessageRole
) -> None:
    """Raise if exhaustiveness cannot be decided for this message.

    Raises:
        NonPluralSelectorsError: A selector is not :number/:integer typed
        PartialWildcardError: A variant mixes '*' and literal keys
    """
    offending = non_plural_selectors(message)
    if offending:
        raise NonPluralSelectorsError(
            ErrorTemplate.non_plural_selectors(offending, role, locale), selectors=offending
        )

    for variant in message.variants:
        if key_set_shape(variant.keys) is KeySetShape.PARTIAL:
            rendered = render_keys(variant.keys)
            raise PartialWildcardError(
                ErrorTemplate.partial_wildcard(rendered, role, locale), keys=rendered
            )


def _check_valid_keys(
    variants: Sequence[Variant],
    categories: tuple[str, ...],
    locale: str,
    role: MessageRole,
) -> list[Diagnostic]:
    """Report every distinct literal key that is not a plural category."""
    diagnostics: list[Diagnostic] = []
    reported: set[str] = set()
    for variant in variants:
        for key in variant.keys:
            if not Literal.guard(key):
                continue
            if key.value in categories or key.value in reported:
                continue
            reported.add(key.value)
            diagnostics.append(
                ErrorTemplate.invalid_plural_category(key.value, locale, categories, role)
            )
    return diagnostics


def check_exhaustiveness(
    locale: str,
    message: Message,
    *,
    provider: PluralCategoryProvider | None = None,
    role: MessageRole = MessageRole.SOURCE,
) -> CheckResult:
    """Check that a message's variants exactly cover its locale's plural categories.

    Args:
        locale: Locale of the message (BCP-47 or POSIX)
        message: Message data model
        provider: Plural category source (default: Babel CLDR data)
        role: Whether this is the source or target message (for diagnostics)

    Returns:
        CheckResult; ok only if the variant count matches, every permutation
        is covered and every key is a valid category. A message without
        selectors passes with an informational diagnostic.

    Raises:
        NonPluralSelectorsError: If any selector is not plural-typed
        PartialWildcardError: If any variant mixes '*' and literal keys
        PermutationCountError: If permutation generation is inconsistent (bug)
        LocaleDataError: If the provider has no plural rules for `locale`

    Example:
        >>> result = check_exhaustiveness("en", message)
        >>> if not result.ok:
        ...     for diagnostic in result.errors:
        ...         print(diagnostic)
        Omitted variant: one
    """
    if not SelectMessage.guard(message) or not message.selectors:
        logger.debug("%s message has no selectors; skipping exhaustiveness", role)
        return CheckResult.passed([ErrorTemplate.no_match_construct(role, locale)])

    _check_abort_conditions(message, locale, role)

    selector_count = len(message.selectors)
    variants = message.variants
    categories = (provider or _DEFAULT_PROVIDER).categories_for(locale)

    permutations = generate_permutations(selector_count, categories)
    expected_permutations = expected_permutation_count(selector_count, categories)
    if len(permutations) != expected_permutations:
        raise PermutationCountError(
            ErrorTemplate.permutation_count_mismatch(len(permutations), expected_permutations)
        )

    ok = True
    diagnostics: list[Diagnostic] = []

    # Pass 2: variant count
    expected_size = expected_variant_count(len(permutations), variants)
    if len(variants) != expected_size:
        ok = False
        diagnostics.append(
            ErrorTemplate.variant_count_mismatch(len(variants), expected_size, role, locale)
        )

    # Pass 3: coverage, no short-circuit so every omission is reported
    for permutation in permutations:
        covered, match_diagnostics = variant_exists_for(permutation, variants)
        ok = ok and covered
        diagnostics.extend(match_diagnostics)

    # Pass 4: key validity
    key_diagnostics = _check_valid_keys(variants, categories, locale, role)
    if key_diagnostics:
        ok = False
        diagnostics.extend(key_diagnostics)

    # The matcher does not know which message it is looking at, and repeats
    # key-count warnings once per permutation.
    located = (
        replace(d, locale=d.locale or locale, role=d.role or role) for d in diagnostics
    )
    unique = tuple(dict.fromkeys(located))

    logger.debug(
        "Exhaustiveness of %s message (%s): ok=%s, %d permutation(s), %d diagnostic(s)",
        role,
        locale,
        ok,
        len(permutations),
        len(unique),
    )
    return CheckResult(ok=ok, diagnostics=unique)
