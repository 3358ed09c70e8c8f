"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_sorted_range
        is_permutation
        permutation_counter_diff
        assert_unchanged_outside

    - Instrumentation:
        CountingSortable
"""

from .instrument import CountingSortable
from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_unchanged_outside,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_sorted_range,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_sorted_range",
    "is_permutation",
    "permutation_counter_diff",
    "assert_unchanged_outside",
    "CountingSortable",
]
