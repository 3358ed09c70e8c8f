"""
Correctness tests for every registered algorithm against the oracle (Python's built-in sorted).

What we check:
- Output exactly matches the oracle (strongest guarantee)
- Nondecreasing order under `less` (diagnostic)
- Permutation preservation (no lost/duplicated elements)
- Positions outside the range are left alone
- Sorting again changes nothing
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from sorter import ALGORITHMS, SequenceSortable, shell
from sorter.validate import (
    assert_unchanged_outside,
    first_nondecreasing_violation_index,
    is_permutation,
    is_sorted_range,
    oracle_sort,
    permutation_counter_diff,
)


# ------------------------- helpers ------------------------- #

def _check_range(name: str, a: List[int], begin: int, end: int) -> None:
    """Common assertion bundle for one (input, range)."""
    algo = ALGORITHMS[name]
    work = list(a)
    coll = SequenceSortable(work)
    algo(coll, begin, end)

    # shell counts positions from 0, so its window is [0, end - begin)
    lo, hi = (0, end - begin) if algo is shell else (begin, end)

    assert work[lo:hi] == oracle_sort(a[lo:hi]), "Range must exactly match the oracle"
    assert is_sorted_range(coll, lo, hi), "Range is not nondecreasing"
    i = first_nondecreasing_violation_index(work[lo:hi])
    assert i is None, f"not nondecreasing at i={i}"
    assert is_permutation(a, work), f"not a permutation: {permutation_counter_diff(a, work)}"
    assert_unchanged_outside(a, work, lo, hi)

    again = list(work)
    algo(SequenceSortable(again), begin, end)
    assert again == work, "Sorting a sorted range must not change it"


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
@settings(deadline=None, max_examples=80)
@given(st.lists(small_ints, min_size=0, max_size=150))
def test_property_full_range(name: str, a: List[int]) -> None:
    _check_range(name, a, 0, len(a))


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
@settings(deadline=None, max_examples=80)
@given(st.data())
def test_property_sub_range(name: str, data) -> None:
    a = data.draw(st.lists(small_ints, min_size=0, max_size=80), label="a")
    begin = data.draw(st.integers(min_value=0, max_value=len(a)), label="begin")
    end = data.draw(st.integers(min_value=begin, max_value=len(a)), label="end")
    _check_range(name, a, begin, end)


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
@settings(deadline=None, max_examples=40)
@given(st.lists(st.integers(min_value=0, max_value=3), min_size=0, max_size=200))
def test_property_many_duplicates(name: str, a: List[int]) -> None:
    _check_range(name, a, 0, len(a))
