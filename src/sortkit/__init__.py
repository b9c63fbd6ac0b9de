"""
sortkit: comparator-driven, in-place sorting.

    from sortkit import sort, descending
    data = [3, 1, 4, 2]
    sort(data, descending)        # -> [4, 3, 2, 1], same list object

Any two-argument function returning a negative, zero or positive number is a
comparator. Every algorithm sorts in place and returns the sequence it was
given.

Algorithms:
    insertion_sort      stable, O(n^2), small inputs
    merge_sort          stable, in-place rotation merges
    tim_sort            stable, run-based with buffered merges
    tim_sort_galloping  stable, run-based with galloping merges
    quick_sort          unstable, three-way partitioning
    native_sort         built-in sort driven by the comparator
    sort                stable; native when proven stable, else a fallback
"""

from .algorithms import (
    MergeBuffers,
    insertion_range_sort,
    insertion_sort,
    merge_sort,
    minimum_run_length,
    native_sort,
    quick_sort,
    tim_sort,
    tim_sort_galloping,
)
from .comparators import Comparator, Sorter, ascending, descending, preserve, reverse
from .config import DEFAULT_CONFIG, SortConfig, load_config, resolve_config
from .dispatch import ALGORITHMS, STABLE_ALGORITHMS, get_sorter, sort
from .stability import (
    Item,
    check_sort_stability,
    is_native_sort_stable,
    is_stable,
    reset_stability_cache,
)

__version__ = "0.1.0"

__all__ = [
    "Comparator",
    "Sorter",
    "ascending",
    "descending",
    "preserve",
    "reverse",
    "SortConfig",
    "DEFAULT_CONFIG",
    "resolve_config",
    "load_config",
    "insertion_sort",
    "insertion_range_sort",
    "merge_sort",
    "tim_sort",
    "tim_sort_galloping",
    "minimum_run_length",
    "MergeBuffers",
    "quick_sort",
    "native_sort",
    "sort",
    "ALGORITHMS",
    "STABLE_ALGORITHMS",
    "get_sorter",
    "Item",
    "is_stable",
    "check_sort_stability",
    "is_native_sort_stable",
    "reset_stability_cache",
]
