"""
Property helpers for validating sorting results.

Public API (stable):
    is_ordered(xs, cmp=ascending) -> bool
    first_order_violation_index(xs, cmp=ascending) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    index_order(items) -> list[int]

Notes
-----
- Ordering is judged by the comparator, not by `<`: the output is ordered iff
  cmp(xs[i], xs[i + 1]) <= 0 for every adjacent pair.
- Permutation checks count elements with `collections.Counter`, so elements
  must be hashable (ints, strings, `sortkit.stability.Item`, tuples, ...).
- Stability needs tie-breaker ids; `index_order` pulls the `.index` field out
  of tagged records so two runs can be compared directly.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from sortkit.comparators import Comparator, ascending

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "index_order",
]


def is_ordered(xs: Sequence[Any], cmp: Comparator[Any] = ascending) -> bool:
    """Return True iff cmp(xs[i], xs[i+1]) <= 0 for all i."""
    return first_order_violation_index(xs, cmp) is None


def first_order_violation_index(
    xs: Sequence[Any], cmp: Comparator[Any] = ascending
) -> Optional[int]:
    """
    Return the first index i where cmp(xs[i], xs[i+1]) > 0, or None.

    Useful for precise error messages:
        i = first_order_violation_index(out, cmp)
        assert i is None, f"out of order at i={i}: {out[i]} then {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if cmp(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of elements."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return element -> (count in a - count in b), omitting zero entries.

    Empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Raise AssertionError naming the first differing index if `after` is not
    element-wise equal to `before`.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Sequence mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Sequence mutated at index {i}: before={x!r}, after={y!r}")


def index_order(items: Sequence[Any]) -> List[int]:
    """Original-position tags of `items`, in their current order."""
    return [item.index for item in items]
