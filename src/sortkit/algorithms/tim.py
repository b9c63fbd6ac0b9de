"""
Adaptive run-based ("tim-style") stable sort.

The sequence is cut into chunks of `minimum_run_length(n)` elements, each chunk
is insertion sorted, and adjacent blocks are merged pairwise with the block
width doubling on every pass until one block spans the whole sequence.

Two merge strategies share that driver:
    - `merge`: plain two-pointer merge through scratch buffers.
    - `gallop_merge`: same, but once one side wins `min_gallop` comparisons in
      a row, a gallop search finds how many elements that side can contribute
      and they are copied in one step.

Both skip the merge entirely when the last element of the left run already
orders at or before the first element of the right run.

Scratch space lives in a `MergeBuffers` object. Pass one in to reuse it across
calls from the same thread; otherwise each sort call allocates its own.

Public API (stable):
    MIN_MERGE, MIN_GALLOP
    MergeBuffers
    tim_sort(a, cmp=ascending, *, config=None, buffers=None) -> a
    tim_sort_galloping(a, cmp=ascending, *, config=None, buffers=None) -> a
    minimum_run_length(n, min_merge=MIN_MERGE) -> int
    merge(a, left, mid, right, cmp, buffers=None) -> None
    gallop_merge(a, left, mid, right, cmp, buffers=None, min_gallop=MIN_GALLOP) -> None
    gallop_left(key, a, base, length, hint, cmp) -> int
    gallop_right(key, a, base, length, hint, cmp) -> int

Index conventions: runs are inclusive, [left, mid] and [mid + 1, right].
Gallop searches work on a[base:base + length] and return an offset from base.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, List, MutableSequence, Optional, Sequence, TypeVar

from sortkit.algorithms.insertion import insertion_range_sort
from sortkit.comparators import Comparator, ascending
from sortkit.config import ConfigLike, resolve_config

T = TypeVar("T")

MIN_MERGE = 32
MIN_GALLOP = 7

__all__ = [
    "MIN_MERGE",
    "MIN_GALLOP",
    "MergeBuffers",
    "tim_sort",
    "tim_sort_galloping",
    "minimum_run_length",
    "merge",
    "gallop_merge",
    "gallop_left",
    "gallop_right",
]


class MergeBuffers:
    """
    Growable scratch arrays for the left and right run of a merge.

    A sort driven with caller-owned buffers releases the element references
    when it returns; the lists keep their length so the next sort can reuse
    them without growing.
    """

    def __init__(self) -> None:
        self.left: List[Any] = []
        self.right: List[Any] = []

    def load(self, a: Sequence[T], left: int, mid: int, right: int) -> None:
        """Copy a[left..mid] into `self.left` and a[mid+1..right] into `self.right`."""
        len1 = mid - left + 1
        len2 = right - mid
        _ensure_capacity(self.left, len1)
        _ensure_capacity(self.right, len2)
        for t in range(len1):
            self.left[t] = a[left + t]
        for t in range(len2):
            self.right[t] = a[mid + 1 + t]

    def release(self) -> None:
        """Drop element references but keep the allocated capacity."""
        for buf in (self.left, self.right):
            for t in range(len(buf)):
                buf[t] = None

    def clear(self) -> None:
        """Drop element references held from the last merge."""
        self.left.clear()
        self.right.clear()


def _ensure_capacity(buf: List[Any], size: int) -> None:
    if len(buf) < size:
        buf.extend([None] * (size - len(buf)))


# ------------------------- drivers ------------------------- #


def tim_sort(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    *,
    config: ConfigLike = None,
    buffers: Optional[MergeBuffers] = None,
) -> MutableSequence[T]:
    """
    Sort `a` in place (stable) with the baseline merge and return it.

    Parameters
    ----------
    a : mutable sequence
        Sequence to sort; reordered in place.
    cmp : Comparator
        Two-argument ordering function (defaults to `ascending`).
    config : SortConfig | dict | None
        `min_merge` is consulted.
    buffers : MergeBuffers | None
        Caller-owned scratch space. When omitted a fresh one is used.
    """
    cfg = resolve_config(config)
    return _run_sort(a, cmp, cfg.min_merge, buffers, merge)


def tim_sort_galloping(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    *,
    config: ConfigLike = None,
    buffers: Optional[MergeBuffers] = None,
) -> MutableSequence[T]:
    """
    Sort `a` in place (stable) with the galloping merge and return it.

    `config.min_merge` drives run sizing; `config.min_gallop` is the number of
    consecutive wins from one run before a gallop search kicks in.
    """
    cfg = resolve_config(config)
    merge_fn = functools.partial(gallop_merge, min_gallop=cfg.min_gallop)
    return _run_sort(a, cmp, cfg.min_merge, buffers, merge_fn)


def _run_sort(
    a: MutableSequence[T],
    cmp: Comparator[T],
    min_merge: int,
    buffers: Optional[MergeBuffers],
    merge_fn: Callable[..., None],
) -> MutableSequence[T]:
    n = len(a)
    if n <= 1:
        return a

    min_run = minimum_run_length(n, min_merge)

    for lo in range(0, n, min_run):
        hi = min(lo + min_run - 1, n - 1)
        insertion_range_sort(a, lo, hi, cmp)

    own_buffers = buffers is None
    if own_buffers:
        buffers = MergeBuffers()

    try:
        size = min_run
        while size < n:
            for left in range(0, n, 2 * size):
                mid = min(n - 1, left + size - 1)
                right = min(n - 1, left + 2 * size - 1)
                if mid < right:
                    merge_fn(a, left, mid, right, cmp, buffers)
            size *= 2
    finally:
        if own_buffers:
            buffers.clear()
        else:
            buffers.release()

    return a


def minimum_run_length(n: int, min_merge: int = MIN_MERGE) -> int:
    """
    Run length for a sequence of `n` elements.

    Returns `n` itself below `min_merge`; otherwise a value in
    [min_merge // 2, min_merge] chosen so that n / run is close to, but not
    more than, a power of two.
    """
    r = 0
    while n >= min_merge:
        r |= n & 1
        n >>= 1
    return n + r


# ------------------------- merges ------------------------- #


def merge(
    a: MutableSequence[T],
    left: int,
    mid: int,
    right: int,
    cmp: Comparator[T],
    buffers: Optional[MergeBuffers] = None,
) -> None:
    """
    Stably merge inclusive runs a[left..mid] and a[mid+1..right] in place.
    """
    if mid < left or right <= mid:
        return
    if cmp(a[mid + 1], a[mid]) >= 0:
        return

    if buffers is None:
        buffers = MergeBuffers()
    buffers.load(a, left, mid, right)
    left_run, right_run = buffers.left, buffers.right
    len1 = mid - left + 1
    len2 = right - mid

    i = j = 0
    k = left
    try:
        while i < len1 and j < len2:
            # right wins only on strict "less than"; ties keep the left element first
            if cmp(right_run[j], left_run[i]) < 0:
                a[k] = right_run[j]
                j += 1
            else:
                a[k] = left_run[i]
                i += 1
            k += 1
    finally:
        # also runs if cmp raised, so no element is lost or duplicated
        _drain(a, k, left_run, i, len1, right_run, j, len2)


def gallop_merge(
    a: MutableSequence[T],
    left: int,
    mid: int,
    right: int,
    cmp: Comparator[T],
    buffers: Optional[MergeBuffers] = None,
    min_gallop: int = MIN_GALLOP,
) -> None:
    """
    Stably merge inclusive runs a[left..mid] and a[mid+1..right] in place,
    switching to gallop searches after `min_gallop` consecutive wins.
    """
    if mid < left or right <= mid:
        return
    if cmp(a[mid + 1], a[mid]) >= 0:
        return

    if buffers is None:
        buffers = MergeBuffers()
    buffers.load(a, left, mid, right)
    left_run, right_run = buffers.left, buffers.right
    len1 = mid - left + 1
    len2 = right - mid

    i = j = 0
    k = left
    left_wins = right_wins = 0
    try:
        while i < len1 and j < len2:
            if cmp(right_run[j], left_run[i]) < 0:
                a[k] = right_run[j]
                j += 1
                k += 1
                right_wins += 1
                left_wins = 0
                if right_wins >= min_gallop and j < len2:
                    # every right element strictly below the current left head
                    count = gallop_left(left_run[i], right_run, j, len2 - j, 0, cmp)
                    for t in range(count):
                        a[k + t] = right_run[j + t]
                    j += count
                    k += count
                    right_wins = 0
            else:
                a[k] = left_run[i]
                i += 1
                k += 1
                left_wins += 1
                right_wins = 0
                if left_wins >= min_gallop and i < len1:
                    # every left element at or below the current right head
                    count = gallop_right(right_run[j], left_run, i, len1 - i, 0, cmp)
                    for t in range(count):
                        a[k + t] = left_run[i + t]
                    i += count
                    k += count
                    left_wins = 0
    finally:
        _drain(a, k, left_run, i, len1, right_run, j, len2)


def _drain(
    a: MutableSequence[T],
    k: int,
    left_run: List[Any],
    i: int,
    len1: int,
    right_run: List[Any],
    j: int,
    len2: int,
) -> None:
    for t in range(i, len1):
        a[k] = left_run[t]
        k += 1
    for t in range(j, len2):
        a[k] = right_run[t]
        k += 1


# ------------------------- gallop searches ------------------------- #


def gallop_left(
    key: T,
    a: Sequence[T],
    base: int,
    length: int,
    hint: int,
    cmp: Comparator[T],
) -> int:
    """
    Locate where `key` goes in the sorted slice a[base:base + length],
    to the left of any elements equal to it.

    Returns k in [0, length] such that cmp(a[base + k - 1], key) < 0 and
    cmp(a[base + k], key) >= 0 (treating out-of-range ends as satisfied).
    The search gallops outward from `hint` (0 <= hint < length) with offsets
    1, 3, 7, ... and then binary searches the bracketed interval.
    """
    if length <= 0:
        return 0

    last_ofs = 0
    ofs = 1
    if cmp(a[base + hint], key) < 0:
        # a[hint] < key: gallop right until a[hint + last_ofs] < key <= a[hint + ofs]
        max_ofs = length - hint
        while ofs < max_ofs and cmp(a[base + hint + ofs], key) < 0:
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        if ofs > max_ofs:
            ofs = max_ofs
        last_ofs += hint
        ofs += hint
    else:
        # key <= a[hint]: gallop left until a[hint - ofs] < key <= a[hint - last_ofs]
        max_ofs = hint + 1
        while ofs < max_ofs and cmp(a[base + hint - ofs], key) >= 0:
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        if ofs > max_ofs:
            ofs = max_ofs
        last_ofs, ofs = hint - ofs, hint - last_ofs

    # a[base + last_ofs] < key <= a[base + ofs]; the answer lies in (last_ofs, ofs]
    last_ofs += 1
    while last_ofs < ofs:
        m = last_ofs + ((ofs - last_ofs) >> 1)
        if cmp(a[base + m], key) < 0:
            last_ofs = m + 1
        else:
            ofs = m
    return ofs


def gallop_right(
    key: T,
    a: Sequence[T],
    base: int,
    length: int,
    hint: int,
    cmp: Comparator[T],
) -> int:
    """
    Like `gallop_left`, but lands to the right of any elements equal to `key`:
    returns k with cmp(key, a[base + k - 1]) >= 0 and cmp(key, a[base + k]) < 0.
    """
    if length <= 0:
        return 0

    last_ofs = 0
    ofs = 1
    if cmp(key, a[base + hint]) < 0:
        # key < a[hint]: gallop left until a[hint - ofs] <= key < a[hint - last_ofs]
        max_ofs = hint + 1
        while ofs < max_ofs and cmp(key, a[base + hint - ofs]) < 0:
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        if ofs > max_ofs:
            ofs = max_ofs
        last_ofs, ofs = hint - ofs, hint - last_ofs
    else:
        # a[hint] <= key: gallop right until a[hint + last_ofs] <= key < a[hint + ofs]
        max_ofs = length - hint
        while ofs < max_ofs and cmp(key, a[base + hint + ofs]) >= 0:
            last_ofs = ofs
            ofs = (ofs << 1) + 1
        if ofs > max_ofs:
            ofs = max_ofs
        last_ofs += hint
        ofs += hint

    last_ofs += 1
    while last_ofs < ofs:
        m = last_ofs + ((ofs - last_ofs) >> 1)
        if cmp(key, a[base + m]) < 0:
            ofs = m
        else:
            last_ofs = m + 1
    return ofs
