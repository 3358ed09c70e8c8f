"""
Shell sort over a `Sortable` range, using Knuth's 3h+1 gap sequence.

The gaps for a range of length n are 1, 4, 13, 40, 121, ... up to the first
value not below n // 3, visited largest first. Each pass is an insertion
sort over elements h apart; the final pass (h == 1) is a plain insertion
sort over an almost ordered range.

Sub-range positions
-------------------
The gapped insertion works on positions 0 .. n-1 where n = end - begin; it
does not add `begin`. For begin == 0 that is exactly coll[0:end]. For
begin > 0 the call sorts coll[0:end-begin] instead of coll[begin:end]:

    >>> xs = SequenceSortable([5, 4, 3, 2, 1])
    >>> shell(xs, 2, 5)
    >>> xs.seq
    [3, 4, 5, 2, 1]

`By.sort` always passes begin == 0. Callers that need a true sub-range with
a non-zero start should use `insertion` or `selection`.
"""

from __future__ import annotations

from typing import List

from sorter.sortable import Sortable, check_range

__all__ = ["gap_sequence", "shell"]


def gap_sequence(n: int) -> List[int]:
    """
    Return the gaps `shell` uses for a range of length `n`, largest first.

    Always ends with 1. Examples: n=3 -> [1]; n=10 -> [4, 1]; n=100 -> [40, 13, 4, 1].
    """
    h = 1
    while h < n // 3:
        h = 3 * h + 1
    gaps: List[int] = []
    while h >= 1:
        gaps.append(h)
        h //= 3
    return gaps


def shell(coll: Sortable, begin: int, end: int) -> None:
    """
    Sort in place with decreasing-gap insertion passes.

    Positions are counted from 0, not from `begin`; see the module docstring.
    """
    check_range(coll, begin, end)
    n = end - begin
    for h in gap_sequence(n):
        for i in range(h, n):
            j = i
            while j >= h and coll.less(j, j - h):
                coll.exchange(j, j - h)
                j -= h
