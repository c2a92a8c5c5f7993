"""Variable binding lookups over a message's declarations.

Python 3.13+. Zero external dependencies.
"""

from .ast import Declaration, FunctionRef, Message, VariableRef

__all__ = [
    "find_declaration",
    "resolve_annotation",
]


def find_declaration(message: Message, name: str) -> Declaration | None:
    """Return the .input or .local declaration binding `name`, if any."""
    for declaration in message.declarations:
        if declaration.name == name:
            return declaration
    return None


def resolve_annotation(message: Message, name: str) -> FunctionRef | None:
    """Find the function annotation that variable `name` is bound to.

    Follows aliases: with `.local $x = {$y}` the annotation of `$x` is that
    of `$y`. A variable bound to an unannotated literal, an undeclared
    variable, or an alias cycle has no annotation.

    Example:
        .input {$count :number}
        .local $n = {$count}
        resolve_annotation(message, "n") -> FunctionRef(name="number")
    """
    seen: set[str] = set()
    current = name
    while current not in seen:
        seen.add(current)
        declaration = find_declaration(message, current)
        if declaration is None:
            return None
        expression = declaration.value
        if expression.function is not None:
            return expression.function
        if not VariableRef.guard(expression.arg):
            return None
        current = expression.arg.name
    return None
