"""Hypothesis strategies for mf2validate property-based testing.

Usage:
    from tests.strategies import category_sets, complete_messages
    from tests.strategies.mf2 import PLURAL_TABLE

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - category_sets, complete_messages, incomplete_messages
"""

from .mf2 import (
    PLURAL_TABLE,
    category_sets,
    complete_messages,
    incomplete_messages,
    variable_names,
)

__all__ = [
    "PLURAL_TABLE",
    "category_sets",
    "complete_messages",
    "incomplete_messages",
    "variable_names",
]
