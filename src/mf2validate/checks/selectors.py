"""Selector annotation inspection.

Exhaustiveness is only meaningful when every selector picks a variant by
plural category, i.e. is annotated with a plural-selecting function.

Python 3.13+.
"""

from mf2validate.constants import PLURAL_FUNCTIONS
from mf2validate.datamodel.ast import Message, SelectMessage
from mf2validate.datamodel.bindings import resolve_annotation

__all__ = [
    "is_plural_selector",
    "non_plural_selectors",
]


def is_plural_selector(message: Message, name: str) -> bool:
    """True if variable `name` is bound, directly or via aliases, to :number or :integer."""
    annotation = resolve_annotation(message, name)
    return annotation is not None and annotation.name in PLURAL_FUNCTIONS


def non_plural_selectors(message: Message) -> tuple[str, ...]:
    """Names of the message's selectors that are not plural-typed, in selector order."""
    if not SelectMessage.guard(message):
        return ()
    return tuple(
        selector.name
        for selector in message.selectors
        if not is_plural_selector(message, selector.name)
    )
