"""
Sorting algorithms public API.

Every whole-sequence entry point has the shape
    sort_fn(a, cmp=ascending, *, config=None) -> a
and sorts `a` in place, returning the same object.

Re-exports:
    insertion_sort, insertion_range_sort
    merge_sort
    tim_sort, tim_sort_galloping, minimum_run_length, MergeBuffers
    quick_sort
    native_sort
"""

from .insertion import insertion_range_sort, insertion_sort
from .merge import merge_sort
from .native import native_sort
from .quick import quick_sort
from .tim import MergeBuffers, minimum_run_length, tim_sort, tim_sort_galloping

__all__ = [
    "insertion_sort",
    "insertion_range_sort",
    "merge_sort",
    "tim_sort",
    "tim_sort_galloping",
    "minimum_run_length",
    "MergeBuffers",
    "quick_sort",
    "native_sort",
]
