"""
Three-way quicksort.

- Median-of-three pivot selection (first/middle/last, ordered in place).
- Dutch national flag partitioning into <, == and > zones; the == zone is
  final and never revisited, which keeps duplicate-heavy inputs cheap.
- Ranges with hi - lo below the insertion threshold (default 12) are
  insertion sorted.

Not stable. Usually the fastest choice on random and duplicate-heavy data;
fully reversed inputs tend to favour the merge-family sorts.

Public API (stable):
    quick_sort(a, cmp=ascending, insertion_threshold=None, *, config=None) -> a
    median_of_three(a, lo, hi, cmp) -> int
    partition3(a, lo, hi, cmp) -> (lt, gt)
"""

from __future__ import annotations

from typing import MutableSequence, Optional, Tuple, TypeVar

from sortkit.algorithms.insertion import insertion_range_sort
from sortkit.comparators import Comparator, ascending
from sortkit.config import ConfigLike, resolve_config

T = TypeVar("T")

__all__ = ["quick_sort", "median_of_three", "partition3"]


def quick_sort(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    insertion_threshold: Optional[int] = None,
    *,
    config: ConfigLike = None,
) -> MutableSequence[T]:
    """
    Sort `a` in place (unstable) and return it.

    `insertion_threshold` overrides `config.quick_threshold` when given.
    """
    if len(a) <= 1:
        return a
    if insertion_threshold is None:
        insertion_threshold = resolve_config(config).quick_threshold
    elif insertion_threshold < 1:
        raise ValueError(f"insertion_threshold must be >= 1; got {insertion_threshold!r}")
    _quick_sort(a, 0, len(a) - 1, cmp, insertion_threshold)
    return a


def _quick_sort(a: MutableSequence[T], lo: int, hi: int, cmp: Comparator[T], threshold: int) -> None:
    # Recurse into the smaller zone and loop on the larger one: depth stays O(log n).
    while lo < hi:
        if hi - lo < threshold:
            insertion_range_sort(a, lo, hi, cmp)
            return
        lt, gt = partition3(a, lo, hi, cmp)
        if lt - lo < hi - gt:
            _quick_sort(a, lo, lt - 1, cmp, threshold)
            lo = gt + 1
        else:
            _quick_sort(a, gt + 1, hi, cmp, threshold)
            hi = lt - 1


def partition3(a: MutableSequence[T], lo: int, hi: int, cmp: Comparator[T]) -> Tuple[int, int]:
    """
    Partition a[lo..hi] around a median-of-three pivot.

    Returns (lt, gt) such that afterwards:
        a[lo..lt-1]  < pivot
        a[lt..gt]   == pivot
        a[gt+1..hi]  > pivot

    An empty or inverted range is left untouched and returned as (lo, hi).
    """
    if lo >= hi:
        return lo, hi
    p = median_of_three(a, lo, hi, cmp)
    a[lo], a[p] = a[p], a[lo]
    pivot = a[lo]

    lt = lo
    gt = hi
    i = lo + 1
    while i <= gt:
        c = cmp(a[i], pivot)
        if c < 0:
            a[lt], a[i] = a[i], a[lt]
            lt += 1
            i += 1
        elif c > 0:
            a[i], a[gt] = a[gt], a[i]
            gt -= 1
        else:
            i += 1
    return lt, gt


def median_of_three(a: MutableSequence[T], lo: int, hi: int, cmp: Comparator[T]) -> int:
    """
    Order a[lo], a[mid], a[hi] in place and return mid, now holding their median.
    """
    if lo >= hi:
        return lo
    mid = (lo + hi) // 2
    if cmp(a[mid], a[lo]) < 0:
        a[lo], a[mid] = a[mid], a[lo]
    if cmp(a[hi], a[lo]) < 0:
        a[lo], a[hi] = a[hi], a[lo]
    if cmp(a[hi], a[mid]) < 0:
        a[mid], a[hi] = a[hi], a[mid]
    return mid
