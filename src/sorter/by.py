"""
Multi-key sorting with a caller-supplied "less" predicate.

Write one predicate per ordering you need and sort with it:

    by_age = By(lambda p, q: p["age"] < q["age"])
    by_age.sort(people)

`By.sort` wraps the sequence in a `MultiKeySorter` (a `Sortable` view that
borrows the sequence) and runs shell sort over the whole of it.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, MutableSequence, TypeVar

from sorter.algorithms.shell import shell
from sorter.sortable import check_sequence

__all__ = ["By", "MultiKeySorter", "Lesser"]

T = TypeVar("T")

Lesser = Callable[[T, T], bool]


class MultiKeySorter(Generic[T]):
    """
    `Sortable` view over `seq` ordered by `lesser(seq[i], seq[j])`.

    Owns no data: `exchange` mutates `seq` directly. Construct it right before
    a sort call and drop it afterwards.
    """

    __slots__ = ("seq", "lesser")

    def __init__(self, seq: MutableSequence[T], lesser: Lesser) -> None:
        check_sequence(seq)
        self.seq = seq
        self.lesser = lesser

    def length(self) -> int:
        return len(self.seq)

    def less(self, i: int, j: int) -> bool:
        return bool(self.lesser(self.seq[i], self.seq[j]))

    def exchange(self, i: int, j: int) -> None:
        seq = self.seq
        seq[i], seq[j] = seq[j], seq[i]


class By(Generic[T]):
    """A "less" predicate that knows how to sort a sequence with itself."""

    __slots__ = ("lesser",)

    def __init__(self, lesser: Lesser) -> None:
        if not callable(lesser):
            raise TypeError(f"lesser must be callable; got {type(lesser).__name__}")
        self.lesser = lesser

    def __call__(self, a: T, b: T) -> bool:
        return bool(self.lesser(a, b))

    def reverse(self) -> "By[T]":
        """Return the opposite ordering (arguments swapped)."""
        lesser = self.lesser
        return By(lambda a, b: lesser(b, a))

    def sort(self, seq: Any) -> None:
        """
        Sort `seq` in place.

        Raises
        ------
        PreconditionError
            If `seq` is not a mutable, randomly-indexable sequence.
        """
        mks = MultiKeySorter(seq, self.lesser)
        shell(mks, 0, mks.length())

    def __repr__(self) -> str:
        return f"By({self.lesser!r})"
