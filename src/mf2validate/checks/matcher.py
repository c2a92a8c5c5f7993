"""Variant-to-permutation matching.

Decides whether one plural-category combination is covered by an explicit
variant of a message.

Python 3.13+.
"""

import logging
from collections.abc import Sequence

from mf2validate.datamodel.ast import Literal, Variant
from mf2validate.diagnostics import Diagnostic, ErrorTemplate, PartialWildcardError
from mf2validate.enums import KeySetShape

from .keys import is_all_other, key_set_shape, render_keys

__all__ = ["variant_exists_for"]

logger = logging.getLogger(__name__)


def _keys_equal(keys: Sequence[Literal], permutation: Sequence[str]) -> bool:
    """Positional comparison; lengths are already known to agree."""
    return all(key.value == label for key, label in zip(keys, permutation, strict=True))


def variant_exists_for(
    permutation: tuple[str, ...],
    variants: Sequence[Variant],
) -> tuple[bool, tuple[Diagnostic, ...]]:
    """Check whether some variant explicitly covers `permutation`.

    Rules, in order:
    1. An all-"other" permutation is always covered: it may be left to the
       catch-all variant, whose presence is checked separately.
    2. Variants are scanned in order. A variant whose key count differs from
       the permutation length is reported and ignored. Catch-all variants
       are skipped (they are a fallback, not a per-permutation match). A
       partial key set cannot be reasoned about and aborts the check.
       Otherwise every key must equal the label at the same position.
    3. If nothing matched, an "omitted variant" diagnostic is produced.

    Args:
        permutation: One combination of plural-category labels
        variants: The message's variants

    Returns:
        Tuple of (covered, diagnostics)

    Raises:
        PartialWildcardError: If a variant mixes catch-all and literal keys
    """
    if is_all_other(permutation):
        return (True, ())

    diagnostics: list[Diagnostic] = []
    for variant in variants:
        keys = variant.keys
        if len(keys) != len(permutation):
            logger.debug(
                "Variant %r does not fit %d selector(s)", render_keys(keys), len(permutation)
            )
            diagnostics.append(
                ErrorTemplate.variant_key_count_mismatch(
                    render_keys(keys), len(keys), len(permutation)
                )
            )
            continue

        match key_set_shape(keys):
            case KeySetShape.CATCHALL:
                continue
            case KeySetShape.PARTIAL:
                rendered = render_keys(keys)
                raise PartialWildcardError(ErrorTemplate.partial_wildcard(rendered), keys=rendered)
            case KeySetShape.CONCRETE:
                literal_keys = [key for key in keys if Literal.guard(key)]
                if _keys_equal(literal_keys, permutation):
                    return (True, tuple(diagnostics))

    diagnostics.append(ErrorTemplate.variant_omitted(permutation))
    return (False, tuple(diagnostics))
