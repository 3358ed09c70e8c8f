from __future__ import annotations

import pytest

from sorter import SequenceSortable, gap_sequence, shell
from sorter.validate import CountingSortable


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, [1]),
        (1, [1]),
        (3, [1]),
        (5, [1]),
        (6, [4, 1]),
        (9, [4, 1]),
        (13, [4, 1]),
        (15, [13, 4, 1]),
        (100, [40, 13, 4, 1]),
        (1000, [364, 121, 40, 13, 4, 1]),
    ],
)
def test_gap_sequence(n, expected):
    assert gap_sequence(n) == expected


def test_gaps_follow_three_h_plus_one():
    gaps = gap_sequence(10_000)
    assert gaps[-1] == 1
    for bigger, smaller in zip(gaps, gaps[1:]):
        assert bigger == 3 * smaller + 1


def test_reversed_input_fewer_exchanges_than_insertion():
    # Insertion sort needs n(n-1)/2 exchanges on reversed input.
    n = 200
    counted = CountingSortable(SequenceSortable(list(range(n))[::-1]))
    shell(counted, 0, n)
    assert counted.inner.seq == list(range(n))
    assert counted.exchanges < n * (n - 1) // 2 // 4


def test_offset_range_sorts_positions_counted_from_zero():
    # shell(coll, begin, end) sorts the first end - begin positions.
    xs = [5, 4, 3, 2, 1]
    shell(SequenceSortable(xs), 2, 5)
    assert xs == [3, 4, 5, 2, 1]


def test_offset_range_touches_only_leading_positions():
    xs = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    counted = CountingSortable(SequenceSortable(xs), lo=0, hi=7)
    shell(counted, 3, 10)
    assert counted.out_of_bounds == []
    assert xs == [3, 4, 5, 6, 7, 8, 9, 2, 1, 0]
