"""Placeholder consistency between a source and a target message.

A translation must keep every placeholder the source message uses, in every
variant. Placeholders are identified by variable name only; formatting
functions and options are not compared.

Python 3.13+.
"""

import logging
from collections.abc import Iterator

from mf2validate.datamodel.ast import Expression, Message, Variant, variants_of
from mf2validate.diagnostics import CheckResult, Diagnostic, ErrorTemplate

from .keys import render_keys

__all__ = [
    "check_placeholder_consistency",
    "collect_placeholders",
    "variant_placeholders",
]

logger = logging.getLogger(__name__)


def _iter_variable_names(variant: Variant) -> Iterator[str]:
    for element in variant.value.elements:
        if Expression.guard(element) and element.variable_name is not None:
            yield element.variable_name


def variant_placeholders(variant: Variant) -> tuple[str, ...]:
    """Variable names referenced as placeholder operands, first-seen order, no duplicates."""
    return tuple(dict.fromkeys(_iter_variable_names(variant)))


def collect_placeholders(message: Message) -> tuple[tuple[str, ...], tuple[Diagnostic, ...]]:
    """Collect the placeholder set of a source message.

    The set is taken from the first variant. Later variants that use a
    placeholder outside that set produce a warning; the set itself is not
    extended.

    Args:
        message: Source message

    Returns:
        Tuple of (placeholders, warnings)
    """
    variants = variants_of(message)
    if not variants:
        return ((), ())

    placeholders = variant_placeholders(variants[0])
    warnings: list[Diagnostic] = []
    for variant in variants[1:]:
        for name in variant_placeholders(variant):
            if name not in placeholders:
                warnings.append(
                    ErrorTemplate.placeholder_inconsistent_in_source(
                        name, render_keys(variant.keys)
                    )
                )
    return (placeholders, tuple(warnings))


def check_placeholder_consistency(source: Message, target: Message) -> CheckResult:
    """Check that every target variant references every source placeholder.

    Stops at the first missing (variant, placeholder) pair. Warnings about the
    source message's own consistency are included but never affect `ok`.

    Args:
        source: Source message data model
        target: Target message data model

    Returns:
        CheckResult with ok=False and a PLACEHOLDER_MISSING diagnostic naming
        the target variant keys and the placeholder, on the first miss

    Example:
        >>> result = check_placeholder_consistency(source, target)
        >>> result.ok
        False
        >>> print(result.errors[0])
        In target message, variant with keys «one» omits placeholder: $count
    """
    placeholders, warnings = collect_placeholders(source)
    logger.debug("Source placeholders: %s", placeholders)

    for variant in variants_of(target):
        present = variant_placeholders(variant)
        for name in placeholders:
            if name not in present:
                missing = ErrorTemplate.placeholder_missing(name, render_keys(variant.keys))
                return CheckResult.failed((*warnings, missing))

    return CheckResult.passed(warnings)
