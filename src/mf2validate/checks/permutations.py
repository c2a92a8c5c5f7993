"""Permutation generation over plural categories.

Produces every ordered combination of plural-category labels across a
message's selectors. Each combination is one unit of exhaustiveness
coverage.

The construction is recursive and not especially efficient: it inserts
each label into every position of every shorter permutation, then removes
duplicates. Selector counts and plural-category counts (at most six per
locale) are both small, so the output is bounded by 6 ** selectors.

Python 3.13+.
"""

from collections.abc import Iterable, Sequence

__all__ = [
    "expected_permutation_count",
    "generate_permutations",
]

type Permutation = tuple[str, ...]


def _insert_everywhere(label: str, permutations: Sequence[Permutation]) -> list[Permutation]:
    """Insert `label` at every position of every permutation."""
    if not permutations:
        return [(label,)]

    result: list[Permutation] = []
    for perm in permutations:
        for index in range(len(perm) + 1):
            result.append((*perm[:index], label, *perm[index:]))
    return result


def _generate(count: int, labels: tuple[str, ...]) -> list[Permutation]:
    if count == 0:
        return []
    shorter = _generate(count - 1, labels)
    result: list[Permutation] = []
    for label in labels:
        result.extend(_insert_everywhere(label, shorter))
    # dict.fromkeys keeps first-seen order
    return list(dict.fromkeys(result))


def generate_permutations(count: int, labels: Iterable[str]) -> tuple[Permutation, ...]:
    """Generate all `count`-length label sequences, repetition allowed.

    Args:
        count: Number of selectors (sequence length)
        labels: Plural-category labels; duplicates are ignored

    Returns:
        Every distinct ordered sequence, in deterministic order for a given
        label order. Empty when `count` is 0.

    Raises:
        ValueError: If count is negative

    Example:
        >>> sorted(generate_permutations(2, ["one", "other"]))
        [('one', 'one'), ('one', 'other'), ('other', 'one'), ('other', 'other')]
        >>> generate_permutations(0, ["one", "other"])
        ()
    """
    if count < 0:
        msg = f"count must be >= 0, got {count}"
        raise ValueError(msg)
    unique_labels = tuple(dict.fromkeys(labels))
    return tuple(_generate(count, unique_labels))


def expected_permutation_count(count: int, labels: Iterable[str]) -> int:
    """Number of distinct sequences generate_permutations() must produce."""
    if count == 0:
        return 0
    return len(set(labels)) ** count
