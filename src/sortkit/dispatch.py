"""
General-purpose stable `sort` and the algorithm registry.

`sort` hands the work to the built-in sort when the stability probe has shown
it to be stable, and to a guaranteed-stable fallback otherwise (merge sort by
default, or the run-based sort with `config={"fallback": "tim"}`). Either
route sorts in place and returns the same object.

Public API (stable):
    ALGORITHMS
    STABLE_ALGORITHMS
    get_sorter(name) -> callable
    sort(a, cmp=ascending, *, config=None) -> a
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, MutableSequence, TypeVar

from sortkit.algorithms import (
    insertion_sort,
    merge_sort,
    native_sort,
    quick_sort,
    tim_sort,
    tim_sort_galloping,
)
from sortkit.comparators import Comparator, ascending
from sortkit.config import ConfigLike, resolve_config
from sortkit.stability import is_native_sort_stable

logger = logging.getLogger(__name__)

T = TypeVar("T")

ALGORITHMS: Dict[str, Callable[..., MutableSequence]] = {
    "insertion": insertion_sort,
    "merge": merge_sort,
    "tim": tim_sort,
    "tim_galloping": tim_sort_galloping,
    "quick": quick_sort,
    "native": native_sort,
}

STABLE_ALGORITHMS = frozenset({"insertion", "merge", "tim", "tim_galloping", "native"})

__all__ = ["ALGORITHMS", "STABLE_ALGORITHMS", "get_sorter", "sort"]


def get_sorter(name: str) -> Callable[..., MutableSequence]:
    """Look up a whole-sequence sort by registry name."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: {name!r}. Supported: {sorted(ALGORITHMS)}"
        ) from None


def sort(
    a: MutableSequence[T],
    cmp: Comparator[T] = ascending,
    *,
    config: ConfigLike = None,
) -> MutableSequence[T]:
    """
    Stable in-place sort of `a` by `cmp`; returns `a`.

    Parameters
    ----------
    a : mutable sequence
        Sequence to sort.
    cmp : Comparator
        Two-argument ordering function (defaults to `ascending`).
    config : SortConfig | dict | None
        `probe_sample_size` sizes the one-time native stability probe;
        `fallback` picks the route when the native sort is not stable. The
        rest is passed through to the fallback algorithm.
    """
    cfg = resolve_config(config)
    if is_native_sort_stable(cfg.probe_sample_size):
        logger.debug("sort: native route (n=%d)", len(a))
        return native_sort(a, cmp)
    logger.debug("sort: %s fallback route (n=%d)", cfg.fallback, len(a))
    return get_sorter(cfg.fallback)(a, cmp, config=cfg)
