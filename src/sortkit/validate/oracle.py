"""
Reference ordering for any comparator.

Python's built-in `sorted()` is stable and deterministic, so driving it with
`functools.cmp_to_key(cmp)` gives the expected output for every stable
algorithm in this package.

Public API (stable):
    oracle_sort(a, cmp=ascending) -> list
    equals_oracle(a, out, cmp=ascending) -> bool

The oracle never mutates its input and always returns a **new** list.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence, TypeVar

from sortkit.comparators import Comparator, ascending

T = TypeVar("T")

__all__ = ["oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[T], cmp: Comparator[T] = ascending) -> List[T]:
    """Return a new list holding `a` stably sorted by `cmp`."""
    return sorted(a, key=cmp_to_key(cmp))


def equals_oracle(a: Sequence[T], out: Sequence[T], cmp: Comparator[T] = ascending) -> bool:
    """
    True iff `out` is exactly the stable sort of `a` under `cmp`.

    For unstable algorithms compare with `is_ordered` and `is_permutation`
    instead; ties may legitimately come out in a different order.
    """
    return list(out) == oracle_sort(a, cmp)
