"""
The orderable collection abstraction every algorithm sorts through.

A `Sortable` is anything exposing three position-based operations:

    length() -> int          number of elements, fixed for one sort call
    less(i, j) -> bool       strict "element i orders before element j"
    exchange(i, j) -> None   swap elements i and j in place

Algorithms never read or copy elements; they only compare and swap by
position. That keeps them independent of the storage and the element type.

Concrete variants shipped here:
    SequenceSortable   direct-index view ordered by the elements' own `<`

The comparator-backed variant lives in `sorter.by`.

Accepted backing storage is any `collections.abc.MutableSequence` (e.g. a
list) or a one-dimensional `numpy.ndarray`. Anything else fails fast with
`PreconditionError` when the view is built.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Protocol, runtime_checkable

import numpy as np

from sorter.errors import PreconditionError

__all__ = [
    "Sortable",
    "SequenceSortable",
    "check_sequence",
    "check_range",
]


@runtime_checkable
class Sortable(Protocol):
    """Capability set required by `selection`, `insertion` and `shell`."""

    def length(self) -> int:
        ...

    def less(self, i: int, j: int) -> bool:
        ...

    def exchange(self, i: int, j: int) -> None:
        ...


def check_sequence(seq: Any) -> None:
    """
    Raise `PreconditionError` unless `seq` is a mutable, randomly-indexable sequence.

    `str`, `bytes` and `tuple` are sequences but immutable, so they are rejected
    along with mappings, sets, iterators and multi-dimensional or read-only arrays.
    """
    if isinstance(seq, np.ndarray):
        if seq.ndim != 1:
            raise PreconditionError(
                f"expected a one-dimensional array; got shape {seq.shape}"
            )
        if not seq.flags.writeable:
            raise PreconditionError("expected a writeable array; got a read-only one")
        return
    if not isinstance(seq, MutableSequence):
        raise PreconditionError(
            f"expected a mutable sequence; got {type(seq).__name__}"
        )


def _is_index(x: Any) -> bool:
    # Python ints and NumPy integer types; bool is excluded.
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def check_range(coll: Sortable, begin: int, end: int) -> None:
    """
    Raise `PreconditionError` unless 0 <= begin <= end <= coll.length().

    Negative positions are rejected rather than left to wrap around the way
    Python indexing would.
    """
    if not _is_index(begin) or not _is_index(end):
        raise PreconditionError(
            f"range bounds must be integers; got begin={begin!r}, end={end!r}"
        )
    n = coll.length()
    if not (0 <= begin <= end <= n):
        raise PreconditionError(
            f"invalid range [{begin}, {end}) for a collection of length {n}"
        )


class SequenceSortable:
    """
    Direct-index view over a mutable sequence, ordered by the elements' `<`.

    The view borrows `seq`; exchanges are applied to it directly.
    """

    __slots__ = ("seq",)

    def __init__(self, seq: Any) -> None:
        check_sequence(seq)
        self.seq = seq

    def length(self) -> int:
        return len(self.seq)

    def less(self, i: int, j: int) -> bool:
        return bool(self.seq[i] < self.seq[j])

    def exchange(self, i: int, j: int) -> None:
        seq = self.seq
        seq[i], seq[j] = seq[j], seq[i]

    def __repr__(self) -> str:
        return f"SequenceSortable({self.seq!r})"
