"""
Insertion sort over a `Sortable` range ("sift left" formulation).

O(n^2) worst case, O(n) on already sorted input with zero exchanges. Stable:
equal neighbours never satisfy the strict `less` test, so they are never
swapped past one another.
"""

from __future__ import annotations

from sorter.sortable import Sortable, check_range

__all__ = ["insertion"]


def insertion(coll: Sortable, begin: int, end: int) -> None:
    """Sort coll[begin:end] in place by sifting each element left."""
    check_range(coll, begin, end)
    for i in range(begin, end):
        j = i
        while j > begin and coll.less(j, j - 1):
            coll.exchange(j, j - 1)
            j -= 1
