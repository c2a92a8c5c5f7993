"""Tests for checks/keys.py, checks/selectors.py and the data model node guards.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from mf2validate.checks.keys import is_all_other, key_set_shape, key_text, render_keys
from mf2validate.checks.selectors import is_plural_selector, non_plural_selectors
from mf2validate.datamodel import CatchallKey, Expression, Literal, SelectMessage, VariableRef
from mf2validate.enums import KeySetShape
from tests.helpers.builders import input_declaration, pattern, pattern_message, select_message


class TestKeyText:
    """Rendering of keys."""

    def test_literal_and_catchall(self) -> None:
        """Literals render as their value, catch-alls as '*'."""
        assert key_text(Literal("few")) == "few"
        assert key_text(CatchallKey()) == "*"
        assert key_text(CatchallKey("other")) == "*"

    def test_render_keys(self) -> None:
        """Keys are joined by single spaces."""
        assert render_keys((Literal("one"), CatchallKey())) == "one *"
        assert render_keys(()) == ""


class TestNodeGuards:
    """TypeIs guards on data model nodes."""

    def test_key_guards_partition_keys(self) -> None:
        """Each key satisfies exactly one of the two key guards."""
        keys = (Literal("one"), CatchallKey(), Literal("*"), CatchallKey("other"))
        assert [Literal.guard(k) for k in keys] == [True, False, True, False]
        assert [CatchallKey.guard(k) for k in keys] == [False, True, False, True]

    def test_pattern_element_guards(self) -> None:
        """Text segments are not expressions; variable operands are VariableRefs."""
        elements = pattern("{$n} files").elements
        assert [Expression.guard(e) for e in elements] == [True, False]
        first = elements[0]
        assert Expression.guard(first)
        assert VariableRef.guard(first.arg)
        assert not VariableRef.guard(Literal("n"))

    def test_message_guard(self) -> None:
        """Only select messages pass the SelectMessage guard."""
        assert SelectMessage.guard(select_message(["n"], [("*", "x")]))
        assert not SelectMessage.guard(pattern_message("hi"))


class TestKeySetShape:
    """Classification of key sets."""

    @pytest.mark.parametrize(
        ("keys", "shape"),
        [
            ((Literal("one"), Literal("few")), KeySetShape.CONCRETE),
            ((CatchallKey(), CatchallKey()), KeySetShape.CATCHALL),
            ((Literal("one"), CatchallKey()), KeySetShape.PARTIAL),
            ((CatchallKey(), Literal("one")), KeySetShape.PARTIAL),
            ((), KeySetShape.CATCHALL),
        ],
    )
    def test_shapes(self, keys: tuple[Literal | CatchallKey, ...], shape: KeySetShape) -> None:
        """Each combination maps to exactly one shape."""
        assert key_set_shape(keys) is shape


class TestIsAllOther:
    """The all-'other' predicate."""

    def test_labels(self) -> None:
        """Plain string labels."""
        assert is_all_other(("other", "other"))
        assert not is_all_other(("other", "one"))

    def test_keys(self) -> None:
        """Literal keys count; catch-alls never do."""
        assert is_all_other((Literal("other"),))
        assert not is_all_other((CatchallKey(),))
        assert not is_all_other((Literal("other"), CatchallKey()))


class TestSelectors:
    """Plural-typed selector detection."""

    @pytest.mark.parametrize("function", ["number", "integer"])
    def test_plural_functions(self, function: str) -> None:
        """:number and :integer select by plural category."""
        message = select_message(["n"], [("*", "x")], function=function)
        assert is_plural_selector(message, "n")
        assert non_plural_selectors(message) == ()

    @pytest.mark.parametrize("function", ["string", "date", None])
    def test_other_functions(self, function: str | None) -> None:
        """Anything else, or no annotation, is not plural."""
        message = select_message(["n"], [("*", "x")], function=function)
        assert not is_plural_selector(message, "n")
        assert non_plural_selectors(message) == ("n",)

    def test_selector_order_kept(self) -> None:
        """Offending selectors are listed in selector order."""
        message = select_message(
            ["b", "n", "a"],
            [("* * *", "x")],
            declarations=[
                input_declaration("a", "string"),
                input_declaration("n"),
                input_declaration("b", "string"),
            ],
        )
        assert non_plural_selectors(message) == ("b", "a")

    def test_pattern_message(self) -> None:
        """Pattern messages have no selectors."""
        assert non_plural_selectors(pattern_message("hi")) == ()
