"""MessageFormat 2 data model node definitions.

Immutable mirror of the MF2 data model (the interchange structure defined by
the Unicode MessageFormat working group). Nodes that the checks narrow on
carry TypeIs guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Literal as TypingLiteral
from typing import TypeIs

from mf2validate.constants import WILDCARD

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Operands and keys
    "Literal",
    "CatchallKey",
    "VariableRef",
    # Annotations
    "Option",
    "FunctionRef",
    "Attribute",
    # Pattern elements
    "Expression",
    "Markup",
    "Pattern",
    # Declarations
    "InputDeclaration",
    "LocalDeclaration",
    # Messages
    "Variant",
    "PatternMessage",
    "SelectMessage",
    "variants_of",
    # Type aliases
    "Key",
    "Operand",
    "PatternElement",
    "Declaration",
    "Message",
]

# ============================================================================
# OPERANDS AND KEYS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal value: |quoted text| or an unquoted name/number.

    Used both as an expression operand and as a variant key. Quoting is a
    syntax concern; the data model only keeps the unquoted value.
    """

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["Literal"]:
        """Type guard for Literal (used in variant keys)."""
        return isinstance(node, Literal)


@dataclass(frozen=True, slots=True)
class CatchallKey:
    """Catch-all variant key: *

    Attributes:
        value: Optional source spelling, kept for tooling round trips.
    """

    value: str | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["CatchallKey"]:
        """Type guard for CatchallKey."""
        return isinstance(node, CatchallKey)

    def __str__(self) -> str:
        return WILDCARD


@dataclass(frozen=True, slots=True)
class VariableRef:
    """Variable reference: $name (name stored without the $ sigil)."""

    name: str

    @staticmethod
    def guard(node: object) -> TypeIs["VariableRef"]:
        """Type guard for VariableRef."""
        return isinstance(node, VariableRef)


# ============================================================================
# ANNOTATIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Option:
    """Function or markup option: name=value"""

    name: str
    value: "Operand"


@dataclass(frozen=True, slots=True)
class FunctionRef:
    """Function annotation: :number minimumFractionDigits=2"""

    name: str
    options: tuple[Option, ...] = ()


@dataclass(frozen=True, slots=True)
class Attribute:
    """Expression or markup attribute: @name or @name=|value|"""

    name: str
    value: Literal | None = None


# ============================================================================
# PATTERN ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Expression:
    """Placeholder expression: { $count :number }

    At least one of `arg` and `function` is present.

    Example:
        {$count :number}  -> Expression(VariableRef("count"), FunctionRef("number"))
        {|literal|}       -> Expression(Literal("literal"), None)
        {:datetime}       -> Expression(None, FunctionRef("datetime"))
    """

    arg: "Operand | None" = None
    function: FunctionRef | None = None
    attributes: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        """Validate that the expression has an operand or an annotation."""
        if self.arg is None and self.function is None:
            msg = "Expression requires an operand or a function annotation"
            raise ValueError(msg)

    @staticmethod
    def guard(node: object) -> TypeIs["Expression"]:
        """Type guard for Expression."""
        return isinstance(node, Expression)

    @property
    def variable_name(self) -> str | None:
        """Name of the variable operand, or None for literal/standalone expressions."""
        if isinstance(self.arg, VariableRef):
            return self.arg.name
        return None


@dataclass(frozen=True, slots=True)
class Markup:
    """Markup placeholder: {#b}, {/b}, {#img /}

    Markup never carries a placeholder variable as its operand.
    """

    kind: TypingLiteral["open", "standalone", "close"]
    name: str
    options: tuple[Option, ...] = ()
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class Pattern:
    """Sequence of text segments and placeholders."""

    elements: tuple["PatternElement", ...] = ()


# ============================================================================
# DECLARATIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class InputDeclaration:
    """Input declaration: .input {$count :number}

    The expression operand is always the declared variable itself.
    """

    name: str
    value: Expression


@dataclass(frozen=True, slots=True)
class LocalDeclaration:
    """Local declaration: .local $n = {$count :integer}"""

    name: str
    value: Expression


# ============================================================================
# MESSAGES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Variant:
    """One arm of a .match construct.

    Example:
        one * {{You have one item in {$cart}}}
        -> Variant(keys=(Literal("one"), CatchallKey()), value=Pattern(...))
    """

    keys: tuple["Key", ...]
    value: Pattern


@dataclass(frozen=True, slots=True)
class PatternMessage:
    """Message without a .match construct."""

    declarations: tuple["Declaration", ...]
    pattern: Pattern


@dataclass(frozen=True, slots=True)
class SelectMessage:
    """Message with a .match construct.

    Example:
        .input {$count :number}
        .match $count
        one {{One item}}
        *   {{{$count} items}}
    """

    declarations: tuple["Declaration", ...]
    selectors: tuple[VariableRef, ...]
    variants: tuple[Variant, ...]

    @staticmethod
    def guard(node: object) -> TypeIs["SelectMessage"]:
        """Type guard for SelectMessage."""
        return isinstance(node, SelectMessage)


def variants_of(message: "Message") -> tuple[Variant, ...]:
    """Return the variants of a message.

    A PatternMessage is viewed as a single variant with an empty key set,
    so per-variant analyses apply uniformly to both message kinds.
    """
    match message:
        case SelectMessage(variants=variants):
            return variants
        case PatternMessage(pattern=pattern):
            return (Variant(keys=(), value=pattern),)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Key = Literal | CatchallKey
type Operand = Literal | VariableRef
type PatternElement = str | Expression | Markup
type Declaration = InputDeclaration | LocalDeclaration
type Message = PatternMessage | SelectMessage
