"""
Insertion sort.

Stable, O(k^2) for a range of length k. Used on whole (small) sequences and as
the base case of merge sort, the run-based sort and quicksort.

Public API (stable):
    insertion_sort(a, cmp=ascending, *, config=None) -> a
    insertion_range_sort(a, lo, hi, cmp) -> None     # inclusive [lo, hi]
"""

from __future__ import annotations

from typing import MutableSequence, TypeVar

from sortkit.comparators import Comparator, ascending
from sortkit.config import ConfigLike

T = TypeVar("T")

__all__ = ["insertion_sort", "insertion_range_sort"]


def insertion_sort(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    *,
    config: ConfigLike = None,
) -> MutableSequence[T]:
    """
    Sort `a` in place and return it.

    `config` is accepted for signature parity with the other algorithms;
    insertion sort has no tunables.
    """
    if len(a) <= 1:
        return a
    insertion_range_sort(a, 0, len(a) - 1, cmp)
    return a


def insertion_range_sort(a: MutableSequence[T], lo: int, hi: int, cmp: Comparator[T]) -> None:
    """
    Sort the inclusive range a[lo..hi] in place.

    Each element is swapped left while it compares strictly less than its left
    neighbour, so equal elements never pass each other. lo >= hi is a no-op.
    """
    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and cmp(a[j], a[j - 1]) < 0:
            a[j - 1], a[j] = a[j], a[j - 1]
            j -= 1
