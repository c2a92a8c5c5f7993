"""Variant key helpers.

Classifies key sets (concrete / catch-all / partial) and renders them for
diagnostics. Keys are a closed union (Literal | CatchallKey); every helper
matches on it exhaustively.

Python 3.13+.
"""

from collections.abc import Sequence
from typing import assert_never

from mf2validate.constants import KEY_SEPARATOR, OTHER_CATEGORY
from mf2validate.datamodel.ast import CatchallKey, Key, Literal
from mf2validate.enums import KeySetShape

__all__ = [
    "is_all_other",
    "key_set_shape",
    "key_text",
    "render_keys",
]


def key_text(key: Key) -> str:
    """Return the text of a key: the literal value, or '*' for a catch-all."""
    match key:
        case Literal(value=value):
            return value
        case CatchallKey():
            return str(key)
        case _ as unreachable:
            assert_never(unreachable)


def render_keys(keys: Sequence[Key]) -> str:
    """Render a key set as space-separated text, e.g. 'one *'."""
    return KEY_SEPARATOR.join(key_text(k) for k in keys)


def key_set_shape(keys: Sequence[Key]) -> KeySetShape:
    """Classify a key set.

    An empty key set counts as catch-all: it constrains nothing.

    Example:
        >>> key_set_shape((Literal("one"), CatchallKey()))
        <KeySetShape.PARTIAL: 'partial'>
    """
    wildcard_seen = False
    literal_seen = False
    for key in keys:
        match key:
            case CatchallKey():
                wildcard_seen = True
            case Literal():
                literal_seen = True
            case _ as unreachable:
                assert_never(unreachable)
    if wildcard_seen and literal_seen:
        return KeySetShape.PARTIAL
    if literal_seen:
        return KeySetShape.CONCRETE
    return KeySetShape.CATCHALL


def is_all_other(labels: Sequence[str | Key]) -> bool:
    """True if every label (or literal key) is exactly 'other'.

    Catch-all keys never count as 'other'. An empty sequence is vacuously
    all-'other'.
    """
    for label in labels:
        if CatchallKey.guard(label):
            return False
        text = label.value if Literal.guard(label) else label
        if text != OTHER_CATEGORY:
            return False
    return True
