"""
Adapter that drives the interpreter's built-in sort with a comparator.

Lists are sorted in place with `list.sort`; any other mutable sequence is
rewritten element-wise from `sorted(...)`. Either way the same object is
returned, matching the other algorithms.

Public API (stable):
    native_sort(a, cmp=ascending, *, config=None) -> a
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import MutableSequence, TypeVar

from sortkit.comparators import Comparator, ascending
from sortkit.config import ConfigLike

T = TypeVar("T")

__all__ = ["native_sort"]


def native_sort(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    *,
    config: ConfigLike = None,
) -> MutableSequence[T]:
    """Sort `a` in place with the built-in sort and return it."""
    key = cmp_to_key(cmp)
    if isinstance(a, list):
        a.sort(key=key)
        return a
    ordered = sorted(a, key=key)
    for i, x in enumerate(ordered):
        a[i] = x
    return a
