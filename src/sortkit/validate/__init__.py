"""
Validation utilities public API.

Re-exports:
    - Oracle:
        oracle_sort
        equals_oracle

    - Property checks:
        is_ordered
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation
        index_order
"""

from .oracle import equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_order_violation_index,
    index_order,
    is_ordered,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "oracle_sort",
    "equals_oracle",
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "index_order",
]
