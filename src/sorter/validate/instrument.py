"""
Instrumented `Sortable` wrapper.

`CountingSortable` forwards every call to the wrapped collection and keeps
score: how many comparisons and exchanges happened, and which positions
fell outside an allowed window. The window defaults to [0, length).

    counted = CountingSortable(SequenceSortable(xs))
    insertion(counted, 0, counted.length())
    assert counted.exchanges == 0          # xs was already sorted
    assert not counted.out_of_bounds
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sorter.sortable import Sortable

__all__ = ["CountingSortable"]


class CountingSortable:
    def __init__(
        self,
        inner: Sortable,
        lo: int = 0,
        hi: Optional[int] = None,
    ) -> None:
        self.inner = inner
        self.lo = lo
        self.hi = inner.length() if hi is None else hi
        self.comparisons = 0
        self.exchanges = 0
        # (operation, position) pairs that fell outside [lo, hi)
        self.out_of_bounds: List[Tuple[str, int]] = []

    def _track(self, op: str, *positions: int) -> None:
        for p in positions:
            if not (self.lo <= p < self.hi):
                self.out_of_bounds.append((op, p))

    def length(self) -> int:
        return self.inner.length()

    def less(self, i: int, j: int) -> bool:
        self.comparisons += 1
        self._track("less", i, j)
        return self.inner.less(i, j)

    def exchange(self, i: int, j: int) -> None:
        self.exchanges += 1
        self._track("exchange", i, j)
        self.inner.exchange(i, j)

    def reset(self) -> None:
        self.comparisons = 0
        self.exchanges = 0
        self.out_of_bounds.clear()
