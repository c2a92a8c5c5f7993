"""Data model well-formedness checks.

MF2 distinguishes a syntactically valid message from one with data model
errors. This module reports the data model errors that concern variant
selection, the ones the exhaustiveness check depends on:

- Variant key mismatch: a variant's key count differs from the selector count
- Missing fallback: no variant made only of catch-all keys
- Missing selector annotation: a selector resolves to no function annotation

Other data model errors (duplicate declarations, duplicate variants, ...)
are out of scope.

Python 3.13+.
"""

import logging

from mf2validate.diagnostics import DataModelError, Diagnostic, ErrorTemplate

from .ast import CatchallKey, Message, SelectMessage
from .bindings import resolve_annotation

__all__ = [
    "find_data_model_errors",
    "validate_data_model",
]

logger = logging.getLogger(__name__)


def find_data_model_errors(message: Message) -> tuple[Diagnostic, ...]:
    """Return the selection-related data model errors of a message.

    Pattern messages have no selection and never produce errors.
    """
    if not SelectMessage.guard(message):
        return ()

    errors: list[Diagnostic] = []
    selector_count = len(message.selectors)

    if any(len(variant.keys) != selector_count for variant in message.variants):
        errors.append(ErrorTemplate.data_model_key_count())

    if not any(
        all(CatchallKey.guard(key) for key in variant.keys)
        for variant in message.variants
    ):
        errors.append(ErrorTemplate.data_model_missing_fallback())

    for selector in message.selectors:
        if resolve_annotation(message, selector.name) is None:
            errors.append(ErrorTemplate.data_model_missing_selector_annotation(selector.name))

    return tuple(errors)


def validate_data_model(message: Message) -> None:
    """Raise if the message has selection-related data model errors.

    Raises:
        DataModelError: Reporting the first problem; all are in `.diagnostics`
    """
    errors = find_data_model_errors(message)
    if errors:
        logger.debug("Data model errors: %s", [d.code.name for d in errors])
        raise DataModelError(errors[0], diagnostics=errors)
