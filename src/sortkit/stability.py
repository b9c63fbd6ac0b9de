"""
Stability probe.

A sorter is judged stable if, on a duplicate-heavy sample of tagged records,
it produces exactly the same order of tags as a known-stable reference under
each probe comparator:

    - ascending by value
    - descending by value
    - `preserve` (always 0: keep input order)
    - `reverse`  (always -1: always swap)

The native sort's verdict is computed once per sample size and memoized for
the rest of the process; the dispatcher in `sortkit.dispatch` reads it.

Public API (stable):
    Item
    PROBE_SEED
    make_probe_items(sample_size) -> list[Item]
    probe_comparators() -> list[(name, Comparator)]
    is_stable(candidate, reference=merge_sort, sample_size=100) -> bool
    check_sort_stability(sorter) -> bool
    is_native_sort_stable(sample_size=None) -> bool
    reset_stability_cache() -> None
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from sortkit.algorithms.merge import merge_sort
from sortkit.algorithms.native import native_sort
from sortkit.comparators import Comparator, Sorter, preserve, reverse
from sortkit.config import DEFAULT_CONFIG
from sortkit.datasets import make_dataset
from sortkit.validate import index_order

logger = logging.getLogger(__name__)

PROBE_SEED = 20240229
# upper bound on distinct values in a probe sample; keeps duplicates plentiful
MAX_PROBE_VALUES = 10

__all__ = [
    "Item",
    "PROBE_SEED",
    "make_probe_items",
    "probe_comparators",
    "is_stable",
    "check_sort_stability",
    "is_native_sort_stable",
    "reset_stability_cache",
]


@dataclass(frozen=True)
class Item:
    """A value tagged with its position in the input."""

    value: Any
    index: int


def by_value(a: Item, b: Item) -> int:
    if a.value == b.value:
        return 0
    return -1 if a.value < b.value else 1


def by_value_desc(a: Item, b: Item) -> int:
    return by_value(b, a)


def probe_comparators() -> List[Tuple[str, Comparator[Item]]]:
    return [
        ("ascending", by_value),
        ("descending", by_value_desc),
        ("preserve", preserve),
        ("reverse", reverse),
    ]


def make_probe_items(sample_size: int) -> List[Item]:
    """
    Deterministic duplicate-heavy sample of `sample_size` tagged records.

    Values are drawn from [0, k) with k = max(1, min(sample_size // 2,
    MAX_PROBE_VALUES)), so every value repeats once the sample has more than
    a couple of elements.
    """
    if sample_size < 0:
        raise ValueError(f"sample_size must be nonnegative; got {sample_size!r}")
    k = max(1, min(sample_size // 2, MAX_PROBE_VALUES))
    rng = np.random.default_rng(PROBE_SEED)
    values = make_dataset(sample_size, {"dist": "duplicates", "params": {"k": k}}, rng)
    return [Item(v, i) for i, v in enumerate(values)]


def is_stable(
    candidate: Sorter,
    reference: Sorter = merge_sort,
    sample_size: int = DEFAULT_CONFIG.probe_sample_size,
) -> bool:
    """
    Return True iff `candidate` orders the probe sample exactly like `reference`
    under every probe comparator.

    Both sorters are called as sorter(items, cmp) on private copies; their
    return values are ignored.
    """
    items = make_probe_items(sample_size)
    for name, cmp in probe_comparators():
        expected = list(items)
        reference(expected, cmp)
        actual = list(items)
        candidate(actual, cmp)
        if index_order(actual) != index_order(expected):
            logger.debug(
                "%s is unstable: %s ordering differs from %s (n=%d)",
                _name_of(candidate), name, _name_of(reference), sample_size,
            )
            return False
    logger.debug(
        "%s matches %s on every probe comparator (n=%d)",
        _name_of(candidate), _name_of(reference), sample_size,
    )
    return True


def check_sort_stability(sorter: Callable[..., Any]) -> bool:
    """
    Minimal fixed check: [2, 1, 2, 3] tagged 0..3, sorted ascending by value,
    must come out as tags [1, 0, 2, 3].
    """
    items = [Item(2, 0), Item(1, 1), Item(2, 2), Item(3, 3)]
    sorter(items, by_value)
    return index_order(items) == [1, 0, 2, 3]


def is_native_sort_stable(sample_size: Optional[int] = None) -> bool:
    """
    Whether the built-in sort is stable, probed against merge sort.

    Computed on first use for each sample size and cached for the process.
    """
    if sample_size is None:
        sample_size = DEFAULT_CONFIG.probe_sample_size
    return _native_sort_stable(sample_size)


@functools.lru_cache(maxsize=None)
def _native_sort_stable(sample_size: int) -> bool:
    stable = check_sort_stability(native_sort) and is_stable(
        native_sort, merge_sort, sample_size
    )
    logger.debug("native sort stability probe (n=%d): stable=%s", sample_size, stable)
    return stable


def reset_stability_cache() -> None:
    """Forget memoized probe results (tests use this)."""
    _native_sort_stable.cache_clear()


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", repr(fn))
