"""
In-place comparison sorts over an orderable collection.

Public API:
    Sortable, SequenceSortable            the collection abstraction
    selection, insertion, shell           algorithms over coll[begin:end]
    By                                    sort any sequence with a "less" predicate
    PreconditionError                     raised on contract violations
"""

from .algorithms import ALGORITHMS, gap_sequence, get_algorithm, insertion, selection, shell
from .by import By, MultiKeySorter
from .errors import PreconditionError
from .sortable import SequenceSortable, Sortable

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "By",
    "MultiKeySorter",
    "PreconditionError",
    "SequenceSortable",
    "Sortable",
    "gap_sequence",
    "get_algorithm",
    "insertion",
    "selection",
    "shell",
]
