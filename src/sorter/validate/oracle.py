"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth. With a "less" predicate it
is driven through `functools.cmp_to_key`, so the oracle and `By` agree on
what "ordered" means.

Public API (stable):
    oracle_sort(a, lesser=None) -> list
    equals_oracle(a, out, lesser=None) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- `sorted()` is stable while selection and shell sort are not, so with a
  predicate that ties on distinguishable elements compare *keys*, not
  elements; `equals_oracle` is exact only for total orders.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, List, Optional, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def _cmp_from_lesser(lesser: Callable[[Any, Any], bool]) -> Callable[[Any, Any], int]:
    def cmp(a: Any, b: Any) -> int:
        if lesser(a, b):
            return -1
        if lesser(b, a):
            return 1
        return 0

    return cmp


def oracle_sort(
    a: Sequence[Any], lesser: Optional[Callable[[Any, Any], bool]] = None
) -> List[Any]:
    """
    Return the ground-truth sorted output for `a`.

    Parameters
    ----------
    a : sequence
        Input elements. The oracle does not mutate `a`.
    lesser : callable, optional
        Strict "less" predicate. Defaults to the elements' natural `<`.

    Returns
    -------
    list
        A new list with the same elements as `a`, in nondecreasing order.
    """
    if lesser is None:
        return sorted(a)
    return sorted(a, key=cmp_to_key(_cmp_from_lesser(lesser)))


def equals_oracle(
    a: Sequence[Any],
    out: Sequence[Any],
    lesser: Optional[Callable[[Any, Any], bool]] = None,
) -> bool:
    """Return True iff `out` is element-wise equal to `oracle_sort(a, lesser)`."""
    return list(out) == oracle_sort(a, lesser)
