"""Data model construction shortcuts for tests.

Builds messages from compact key/text tables so tests read close to MF2
source syntax:

    select_message(
        ["count"],
        [("one", "One item"), ("*", "{$count} items")],
    )

Pattern text uses ``{$name}`` for a placeholder; everything else is literal.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from mf2validate.datamodel import (
    CatchallKey,
    Expression,
    FunctionRef,
    InputDeclaration,
    Key,
    Literal,
    LocalDeclaration,
    Pattern,
    PatternElement,
    PatternMessage,
    SelectMessage,
    VariableRef,
    Variant,
)

_PLACEHOLDER = re.compile(r"\{\$([A-Za-z_][A-Za-z0-9_]*)\}")


def pattern(text: str) -> Pattern:
    """Split text into literal segments and ``{$name}`` placeholder expressions."""
    elements: list[PatternElement] = []
    position = 0
    for match in _PLACEHOLDER.finditer(text):
        if match.start() > position:
            elements.append(text[position : match.start()])
        elements.append(Expression(arg=VariableRef(match.group(1))))
        position = match.end()
    if position < len(text):
        elements.append(text[position:])
    return Pattern(tuple(elements))


def key(text: str) -> Key:
    """``*`` becomes a catch-all key, anything else a literal key."""
    return CatchallKey() if text == "*" else Literal(text)


def variant(keys: str, text: str = "") -> Variant:
    """Variant from space-separated key text, e.g. ``variant("one *", "...")``."""
    return Variant(keys=tuple(key(k) for k in keys.split()), value=pattern(text))


def input_declaration(name: str, function: str | None = "number") -> InputDeclaration:
    """``.input {$name :function}``"""
    return InputDeclaration(
        name,
        Expression(
            arg=VariableRef(name),
            function=FunctionRef(function) if function is not None else None,
        ),
    )


def local_alias(name: str, target: str) -> LocalDeclaration:
    """``.local $name = {$target}``"""
    return LocalDeclaration(name, Expression(arg=VariableRef(target)))


def select_message(
    selectors: Sequence[str],
    variants: Iterable[tuple[str, str]],
    *,
    function: str | None = "number",
    declarations: Sequence[InputDeclaration | LocalDeclaration] | None = None,
) -> SelectMessage:
    """Select message whose selectors are all declared with ``function``.

    Args:
        selectors: Selector variable names (without $)
        variants: (keys, text) pairs, keys space-separated
        function: Annotation for every selector's input declaration
        declarations: Explicit declarations, replacing the generated ones
    """
    if declarations is None:
        declarations = [input_declaration(name, function) for name in selectors]
    return SelectMessage(
        declarations=tuple(declarations),
        selectors=tuple(VariableRef(name) for name in selectors),
        variants=tuple(variant(keys, text) for keys, text in variants),
    )


def pattern_message(text: str) -> PatternMessage:
    """Message without a .match construct."""
    return PatternMessage(declarations=(), pattern=pattern(text))
