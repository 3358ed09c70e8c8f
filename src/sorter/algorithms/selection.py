"""
Selection sort over a `Sortable` range.

Theta(n^2) comparisons and exactly `end - begin` exchanges whatever the input
order. Not stable: the exchange into position i is unconditional and can
jump an element over its equals.
"""

from __future__ import annotations

from sorter.sortable import Sortable, check_range

__all__ = ["selection"]


def selection(coll: Sortable, begin: int, end: int) -> None:
    """Sort coll[begin:end] in place by repeatedly selecting the minimum."""
    check_range(coll, begin, end)
    for i in range(begin, end):
        lo = i
        for j in range(i + 1, end):
            # Ties keep the earliest minimum found.
            if coll.less(j, lo):
                lo = j
        coll.exchange(i, lo)
