"""MessageFormat 2 data model: node types, JSON loading and well-formedness checks.

Python 3.13+.
"""

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
    variants_of,
)
from .loading import load_message, load_message_file, read_message_source
from .validator import find_data_model_errors, validate_data_model

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Nodes
    "Attribute",
    "CatchallKey",
    "Expression",
    "FunctionRef",
    "InputDeclaration",
    "Literal",
    "LocalDeclaration",
    "Markup",
    "Option",
    "Pattern",
    "PatternMessage",
    "SelectMessage",
    "VariableRef",
    "Variant",
    "variants_of",
    # Type aliases
    "Declaration",
    "Key",
    "Message",
    "Operand",
    "PatternElement",
    # Loading and validation
    "find_data_model_errors",
    "load_message",
    "load_message_file",
    "read_message_source",
    "validate_data_model",
]
