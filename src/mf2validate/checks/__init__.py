"""Message checks: plural exhaustiveness and placeholder consistency.

Python 3.13+.
"""

from .exhaustiveness import check_exhaustiveness, expected_variant_count
from .matcher import variant_exists_for
from .permutations import expected_permutation_count, generate_permutations
from .placeholders import check_placeholder_consistency, collect_placeholders
from .selectors import is_plural_selector, non_plural_selectors

__all__ = [
    "check_exhaustiveness",
    "check_placeholder_consistency",
    "collect_placeholders",
    "expected_permutation_count",
    "expected_variant_count",
    "generate_permutations",
    "is_plural_selector",
    "non_plural_selectors",
    "variant_exists_for",
]
