"""
Sorting algorithms public API.

Every algorithm has the same signature:

    algo(coll: Sortable, begin: int, end: int) -> None

and sorts the half-open range in place through `coll.less` / `coll.exchange`.

`ALGORITHMS` maps the names used in benchmark configs to the functions:
    from sorter.algorithms import get_algorithm
    get_algorithm("shell")(coll, 0, coll.length())
"""

from typing import Callable, Dict

from ..sortable import Sortable
from .insertion import insertion
from .selection import selection
from .shell import gap_sequence, shell

SortFn = Callable[[Sortable, int, int], None]

ALGORITHMS: Dict[str, SortFn] = {
    "selection": selection,
    "insertion": insertion,
    "shell": shell,
}

__all__ = [
    "ALGORITHMS",
    "SortFn",
    "gap_sequence",
    "get_algorithm",
    "insertion",
    "selection",
    "shell",
]


def get_algorithm(name: str) -> SortFn:
    """Look up an algorithm by name; raises KeyError listing the known names."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise KeyError(
            f"Unknown algorithm: {name!r}. Known: {sorted(ALGORITHMS)}"
        ) from None
