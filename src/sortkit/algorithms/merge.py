"""
Stable in-place merge sort.

Recursively halves the half-open range [lo, hi). Ranges shorter than the
insertion threshold (default 12) are insertion sorted. Larger ranges are merged
without an auxiliary array: the longer half is split at its midpoint, the
matching split point in the other half is found by binary search, the block
between the two cuts is rotated into place, and the two smaller merges recurse.

This is the guaranteed-stable fallback used by `sortkit.sort` when the native
sort cannot be shown to be stable.

Public API (stable):
    merge_sort(a, cmp=ascending, *, config=None) -> a
    merge_in_place(a, cmp, lo, pivot, hi) -> None
    rotate(a, lo, mid, hi) -> None
    gcd(m, n) -> int
    lower_bound(a, cmp, lo, hi, val) -> int
    upper_bound(a, cmp, lo, hi, val) -> int
"""

from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

from sortkit.algorithms.insertion import insertion_range_sort
from sortkit.comparators import Comparator, ascending
from sortkit.config import ConfigLike, resolve_config

T = TypeVar("T")

__all__ = [
    "merge_sort",
    "merge_in_place",
    "rotate",
    "gcd",
    "lower_bound",
    "upper_bound",
]


def merge_sort(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    *,
    config: ConfigLike = None,
) -> MutableSequence[T]:
    """
    Sort `a` in place (stable) and return it.

    Parameters
    ----------
    a : mutable sequence
        Sequence to sort; reordered in place.
    cmp : Comparator
        Two-argument ordering function (defaults to `ascending`).
    config : SortConfig | dict | None
        Only `insertion_threshold` is consulted.

    Returns
    -------
    The same sequence object, sorted.
    """
    cfg = resolve_config(config)
    # a threshold below 2 would keep splitting singleton ranges forever
    _sort_range(a, cmp, 0, len(a), max(cfg.insertion_threshold, 2))
    return a


def _sort_range(a: MutableSequence[T], cmp: Comparator[T], lo: int, hi: int, threshold: int) -> None:
    if hi - lo < threshold:
        # [lo, hi) -> inclusive [lo, hi - 1]; empty ranges fall through as no-ops
        insertion_range_sort(a, lo, hi - 1, cmp)
        return
    middle = (lo + hi) >> 1
    _sort_range(a, cmp, lo, middle, threshold)
    _sort_range(a, cmp, middle, hi, threshold)
    merge_in_place(a, cmp, lo, middle, hi)


def merge_in_place(a: MutableSequence[T], cmp: Comparator[T], lo: int, pivot: int, hi: int) -> None:
    """
    Stably merge the sorted runs a[lo:pivot] and a[pivot:hi] in place.
    """
    _merge(a, cmp, lo, pivot, hi, pivot - lo, hi - pivot)


def _merge(
    a: MutableSequence[T],
    cmp: Comparator[T],
    lo: int,
    pivot: int,
    hi: int,
    len1: int,
    len2: int,
) -> None:
    if len1 <= 0 or len2 <= 0:
        return
    if len1 + len2 == 2:
        if cmp(a[pivot], a[lo]) < 0:
            a[pivot], a[lo] = a[lo], a[pivot]
        return

    if len1 > len2:
        len11 = len1 >> 1
        first_cut = lo + len11
        second_cut = lower_bound(a, cmp, pivot, hi, first_cut)
        len22 = second_cut - pivot
    else:
        len22 = len2 >> 1
        second_cut = pivot + len22
        first_cut = upper_bound(a, cmp, lo, pivot, second_cut)
        len11 = first_cut - lo

    rotate(a, first_cut, pivot, second_cut)
    new_mid = first_cut + len22
    _merge(a, cmp, lo, first_cut, new_mid, len11, len22)
    _merge(a, cmp, new_mid, second_cut, hi, len1 - len11, len2 - len22)


def rotate(a: MutableSequence[T], lo: int, mid: int, hi: int) -> None:
    """
    Rotate a[lo:hi] left so that a[mid] lands at a[lo], in place.

    Uses the juggling (cycle-leader) algorithm: gcd(hi - lo, mid - lo) cycles,
    each element moved exactly once.
    """
    if lo >= mid or mid >= hi:
        return
    shift = mid - lo
    for start in range(lo + gcd(hi - lo, shift) - 1, lo - 1, -1):
        val = a[start]
        p1 = start
        p2 = start + shift
        while p2 != start:
            a[p1] = a[p2]
            p1 = p2
            if hi - p2 > shift:
                p2 += shift
            else:
                p2 = lo + (shift - (hi - p2))
        a[p1] = val


def gcd(m: int, n: int) -> int:
    while n != 0:
        m, n = n, m % n
    return m


def lower_bound(a: Sequence[T], cmp: Comparator[T], lo: int, hi: int, val: int) -> int:
    """First index i in [lo, hi) with cmp(a[i], a[val]) >= 0 (hi if none)."""
    length = hi - lo
    while length > 0:
        half = length >> 1
        mid = lo + half
        if cmp(a[mid], a[val]) < 0:
            lo = mid + 1
            length = length - half - 1
        else:
            length = half
    return lo


def upper_bound(a: Sequence[T], cmp: Comparator[T], lo: int, hi: int, val: int) -> int:
    """First index i in [lo, hi) with cmp(a[val], a[i]) < 0 (hi if none)."""
    length = hi - lo
    while length > 0:
        half = length >> 1
        mid = lo + half
        if cmp(a[val], a[mid]) < 0:
            length = half
        else:
            lo = mid + 1
            length = length - half - 1
    return lo
