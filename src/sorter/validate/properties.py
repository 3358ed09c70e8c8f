"""
Property helpers for validating sorting results.

The sequence helpers take plain values; the `Sortable` helpers only use
`less`, so they check order exactly as the algorithm saw it.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_sorted_range(coll, begin, end) -> bool
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_unchanged_outside(before, after, begin, end) -> None

Notes
-----
- Stability is *not* checked here: equal values are indistinguishable. Tag
  items with tie-breaker ids, e.g. (key, id), and compare on the key only to
  test it.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Hashable, Sequence

from sorter.sortable import Sortable

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_sorted_range",
    "is_permutation",
    "permutation_counter_diff",
    "assert_unchanged_outside",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff not xs[i+1] < xs[i] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i+1] < xs[i], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i + 1] < xs[i]:
            return i
    return None


def is_sorted_range(coll: Sortable, begin: int, end: int) -> bool:
    """Return True iff not coll.less(k + 1, k) for every k in [begin, end - 1)."""
    return not any(coll.less(k + 1, k) for k in range(begin, end - 1))


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> Dict[Hashable, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Hashable, int] = {}
    for k in set(ca) | set(cb):
        d = ca[k] - cb[k]
        if d != 0:
            diff[k] = d
    return diff


def assert_unchanged_outside(
    before: Sequence[Any], after: Sequence[Any], begin: int, end: int
) -> None:
    """
    Assert that a range sort left every position outside [begin, end) alone.

    Raises AssertionError naming the first position that changed.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Length changed from {len(before)} to {len(after)}"
        )
    for i in list(range(0, begin)) + list(range(end, len(before))):
        if before[i] != after[i]:
            raise AssertionError(
                f"Position {i} outside [{begin}, {end}) changed: before={before[i]}, after={after[i]}"
            )
