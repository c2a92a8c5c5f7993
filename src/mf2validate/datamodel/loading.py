"""Message loading from the MF2 JSON data model interchange format.

MessageFormat 2 defines a JSON representation of its data model alongside
the text syntax. This module deserializes that representation into the
immutable nodes of mf2validate.datamodel.ast. It does not parse MF2 syntax.

Example input:
    {
      "type": "select",
      "declarations": [
        {"type": "input", "name": "count",
         "value": {"type": "expression",
                   "arg": {"type": "variable", "name": "count"},
                   "function": {"type": "function", "name": "number"}}}
      ],
      "selectors": [{"type": "variable", "name": "count"}],
      "variants": [
        {"keys": [{"type": "literal", "value": "one"}], "value": ["One item"]},
        {"keys": [{"type": "*"}],
         "value": [{"type": "expression", "arg": {"type": "variable", "name": "count"}},
                   " items"]}
      ]
    }

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mf2validate.diagnostics import ErrorTemplate, MessageLoadError, MessageParseError

from .ast import (
    Attribute,
    CatchallKey,
    Declaration,
    Expression,
    FunctionRef,
    InputDeclaration,
    Key,
    Literal,
    LocalDeclaration,
    Markup,
    Message,
    Operand,
    Option,
    Pattern,
    PatternElement,
    PatternMessage,
    SelectMessage,
    VariableRef,
    Variant,
)

__all__ = [
    "load_message",
    "load_message_file",
    "read_message_source",
]

logger = logging.getLogger(__name__)

_MARKUP_KINDS = frozenset({"open", "standalone", "close"})


class _ShapeError(ValueError):
    """JSON is valid but does not describe an MF2 data model node."""

    def __init__(self, where: str, problem: str) -> None:
        super().__init__(f"{where}: {problem}")


# ============================================================================
# FIELD ACCESS
# ============================================================================


def _require(node: dict[str, Any], field: str, where: str) -> Any:
    if field not in node:
        raise _ShapeError(where, f"missing field '{field}'")
    return node[field]


def _as_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _ShapeError(where, f"expected an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise _ShapeError(where, f"expected an array, got {type(value).__name__}")
    return value


def _as_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise _ShapeError(where, f"expected a string, got {type(value).__name__}")
    return value


# ============================================================================
# NODE BUILDERS
# ============================================================================


def _build_operand(value: Any, where: str) -> Operand:
    node = _as_object(value, where)
    match node.get("type"):
        case "literal":
            return Literal(_as_str(_require(node, "value", where), f"{where}.value"))
        case "variable":
            return VariableRef(_as_str(_require(node, "name", where), f"{where}.name"))
        case other:
            raise _ShapeError(where, f"expected a literal or variable, got type {other!r}")


def _build_options(value: Any, where: str) -> tuple[Option, ...]:
    if value is None:
        return ()
    options = _as_object(value, where)
    return tuple(
        Option(name, _build_operand(operand, f"{where}.{name}"))
        for name, operand in options.items()
    )


def _build_attributes(value: Any, where: str) -> tuple[Attribute, ...]:
    if value is None:
        return ()
    attributes = _as_object(value, where)
    result: list[Attribute] = []
    for name, attr_value in attributes.items():
        if attr_value is True:
            result.append(Attribute(name))
            continue
        operand = _build_operand(attr_value, f"{where}.{name}")
        if not Literal.guard(operand):
            raise _ShapeError(f"{where}.{name}", "attribute values must be literals")
        result.append(Attribute(name, operand))
    return tuple(result)


def _build_function(value: Any, where: str) -> FunctionRef:
    node = _as_object(value, where)
    if node.get("type") != "function":
        raise _ShapeError(where, f"expected type 'function', got {node.get('type')!r}")
    return FunctionRef(
        name=_as_str(_require(node, "name", where), f"{where}.name"),
        options=_build_options(node.get("options"), f"{where}.options"),
    )


def _build_expression(value: Any, where: str) -> Expression:
    node = _as_object(value, where)
    if node.get("type") != "expression":
        raise _ShapeError(where, f"expected type 'expression', got {node.get('type')!r}")
    arg = node.get("arg")
    function = node.get("function")
    if arg is None and function is None:
        raise _ShapeError(where, "expression needs an 'arg' or a 'function'")
    return Expression(
        arg=_build_operand(arg, f"{where}.arg") if arg is not None else None,
        function=_build_function(function, f"{where}.function") if function is not None else None,
        attributes=_build_attributes(node.get("attributes"), f"{where}.attributes"),
    )


def _build_markup(node: dict[str, Any], where: str) -> Markup:
    kind = _as_str(_require(node, "kind", where), f"{where}.kind")
    if kind not in _MARKUP_KINDS:
        raise _ShapeError(f"{where}.kind", f"unknown markup kind {kind!r}")
    return Markup(
        kind=kind,  # type: ignore[arg-type]  # narrowed by _MARKUP_KINDS
        name=_as_str(_require(node, "name", where), f"{where}.name"),
        options=_build_options(node.get("options"), f"{where}.options"),
        attributes=_build_attributes(node.get("attributes"), f"{where}.attributes"),
    )


def _build_pattern(value: Any, where: str) -> Pattern:
    elements: list[PatternElement] = []
    for index, item in enumerate(_as_list(value, where)):
        item_where = f"{where}[{index}]"
        if isinstance(item, str):
            elements.append(item)
            continue
        node = _as_object(item, item_where)
        match node.get("type"):
            case "expression":
                elements.append(_build_expression(node, item_where))
            case "markup":
                elements.append(_build_markup(node, item_where))
            case other:
                raise _ShapeError(item_where, f"unknown pattern element type {other!r}")
    return Pattern(tuple(elements))


def _build_declaration(value: Any, where: str) -> Declaration:
    node = _as_object(value, where)
    name = _as_str(_require(node, "name", where), f"{where}.name")
    expression = _build_expression(_require(node, "value", where), f"{where}.value")
    match node.get("type"):
        case "input":
            if expression.variable_name != name:
                raise _ShapeError(where, f"input declaration must reference ${name} itself")
            return InputDeclaration(name, expression)
        case "local":
            return LocalDeclaration(name, expression)
        case other:
            raise _ShapeError(where, f"unknown declaration type {other!r}")


def _build_key(value: Any, where: str) -> Key:
    node = _as_object(value, where)
    match node.get("type"):
        case "*":
            raw = node.get("value")
            return CatchallKey(_as_str(raw, f"{where}.value") if raw is not None else None)
        case "literal":
            return Literal(_as_str(_require(node, "value", where), f"{where}.value"))
        case other:
            raise _ShapeError(where, f"expected a literal or '*' key, got type {other!r}")


def _build_variant(value: Any, where: str) -> Variant:
    node = _as_object(value, where)
    keys = _as_list(_require(node, "keys", where), f"{where}.keys")
    return Variant(
        keys=tuple(_build_key(key, f"{where}.keys[{i}]") for i, key in enumerate(keys)),
        value=_build_pattern(_require(node, "value", where), f"{where}.value"),
    )


def _build_message(data: Any) -> Message:
    node = _as_object(data, "message")
    declarations = tuple(
        _build_declaration(decl, f"declarations[{i}]")
        for i, decl in enumerate(_as_list(node.get("declarations", []), "declarations"))
    )
    match node.get("type"):
        case "message":
            return PatternMessage(
                declarations=declarations,
                pattern=_build_pattern(_require(node, "pattern", "message"), "pattern"),
            )
        case "select":
            selectors: list[VariableRef] = []
            for i, selector in enumerate(
                _as_list(_require(node, "selectors", "message"), "selectors")
            ):
                operand = _build_operand(selector, f"selectors[{i}]")
                if not VariableRef.guard(operand):
                    raise _ShapeError(f"selectors[{i}]", "selectors must be variables")
                selectors.append(operand)
            variants = _as_list(_require(node, "variants", "message"), "variants")
            return SelectMessage(
                declarations=declarations,
                selectors=tuple(selectors),
                variants=tuple(
                    _build_variant(variant, f"variants[{i}]") for i, variant in enumerate(variants)
                ),
            )
        case other:
            raise _ShapeError("message.type", f"expected 'message' or 'select', got {other!r}")


# ============================================================================
# PUBLIC API
# ============================================================================


def load_message(source: str, *, where: str = "<string>") -> Message:
    """Deserialize an MF2 JSON data model.

    Args:
        source: JSON text
        where: Description of the input for diagnostics (e.g. a file path)

    Returns:
        PatternMessage or SelectMessage

    Raises:
        MessageParseError: If the text is not JSON or not an MF2 data model
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        reason = f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
        diagnostic = ErrorTemplate.message_parse_failed(where, reason)
        raise MessageParseError(diagnostic, path=where) from e
    except RecursionError as e:
        diagnostic = ErrorTemplate.message_parse_failed(where, "JSON nesting is too deep")
        raise MessageParseError(diagnostic, path=where) from e

    try:
        message = _build_message(data)
    except _ShapeError as e:
        diagnostic = ErrorTemplate.message_parse_failed(where, str(e))
        raise MessageParseError(diagnostic, path=where) from e

    logger.debug("Loaded %s from %s", type(message).__name__, where)
    return message


def read_message_source(path: str | Path) -> str:
    """Read a message file as UTF-8 text.

    Raises:
        MessageLoadError: If the file cannot be read or decoded
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MessageLoadError(ErrorTemplate.message_unreadable(str(path), str(e))) from e


def load_message_file(path: str | Path) -> Message:
    """Read and deserialize an MF2 JSON data model file.

    Raises:
        MessageLoadError: If the file cannot be read
        MessageParseError: If its content is not an MF2 data model
    """
    return load_message(read_message_source(path), where=str(path))
