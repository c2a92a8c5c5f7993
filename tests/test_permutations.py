"""Tests for checks/permutations.py: plural-category permutation generation.

Python 3.13+.
"""

from __future__ import annotations

import itertools

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from mf2validate.checks.permutations import expected_permutation_count, generate_permutations
from tests.strategies import category_sets


class TestGeneratePermutations:
    """Content of generate_permutations() output."""

    def test_single_selector_yields_each_label(self) -> None:
        """N=1 gives one single-label permutation per category."""
        result = generate_permutations(1, ("one", "other"))
        assert set(result) == {("one",), ("other",)}

    def test_two_selectors_english(self) -> None:
        """N=2 over {one, other} gives all four ordered pairs."""
        result = generate_permutations(2, ("one", "other"))
        assert set(result) == {
            ("one", "one"),
            ("one", "other"),
            ("other", "one"),
            ("other", "other"),
        }
        assert len(result) == 4

    def test_zero_selectors_is_empty(self) -> None:
        """N=0 yields no permutations at all, not one empty permutation."""
        assert generate_permutations(0, ("one", "other")) == ()

    def test_single_category_locale(self) -> None:
        """Locales with only 'other' have exactly one permutation per N."""
        assert generate_permutations(3, ("other",)) == (("other", "other", "other"),)

    def test_duplicate_labels_ignored(self) -> None:
        """Repeated input labels do not produce extra permutations."""
        result = generate_permutations(2, ("one", "one", "other"))
        assert len(result) == 4

    def test_negative_count_rejected(self) -> None:
        """A negative selector count is a programming error."""
        with pytest.raises(ValueError, match="count must be >= 0"):
            generate_permutations(-1, ("other",))

    def test_deterministic_for_label_order(self) -> None:
        """Same label order produces the same sequence."""
        labels = ("one", "few", "many", "other")
        assert generate_permutations(2, labels) == generate_permutations(2, labels)

    @given(categories=category_sets(), count=st.integers(min_value=0, max_value=3))
    def test_matches_cartesian_product(self, categories: tuple[str, ...], count: int) -> None:
        """Output set equals the cartesian power L^N (for N > 0)."""
        result = generate_permutations(count, categories)
        if count == 0:
            assert result == ()
        else:
            assert set(result) == set(itertools.product(categories, repeat=count))
        event(f"count={count}")

    @given(categories=category_sets(), count=st.integers(min_value=1, max_value=3))
    def test_no_duplicates(self, categories: tuple[str, ...], count: int) -> None:
        """Every permutation appears once and has length N."""
        result = generate_permutations(count, categories)
        assert len(result) == len(set(result))
        assert all(len(p) == count for p in result)


class TestExpectedPermutationCount:
    """expected_permutation_count() agrees with the generator."""

    def test_zero_count(self) -> None:
        """N=0 expects zero permutations."""
        assert expected_permutation_count(0, ("one", "other")) == 0

    def test_arabic_two_selectors(self) -> None:
        """Six categories and two selectors give 36 permutations."""
        labels = ("zero", "one", "two", "few", "many", "other")
        assert expected_permutation_count(2, labels) == 36

    @given(categories=category_sets(), count=st.integers(min_value=0, max_value=3))
    def test_agrees_with_generator(self, categories: tuple[str, ...], count: int) -> None:
        """|generate_permutations(N, L)| == |L|^N, or 0 for N=0."""
        generated = generate_permutations(count, categories)
        assert len(generated) == expected_permutation_count(count, categories)
        event(f"categories={len(categories)}")
