"""
Tests for the in-place merge sort and its rotation/binary-search primitives.
"""

from __future__ import annotations

import math
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from sortkit.algorithms.merge import (
    gcd,
    lower_bound,
    merge_in_place,
    merge_sort,
    rotate,
    upper_bound,
)
from sortkit.comparators import ascending, descending


@pytest.mark.parametrize("n", [11, 12, 13])
def test_sizes_around_the_insertion_threshold(n: int) -> None:
    arr = list(range(n, 0, -1))
    merge_sort(arr)
    assert arr == list(range(1, n + 1))


def test_two_elements_are_swapped_when_out_of_order() -> None:
    arr = [2, 1]
    merge_sort(arr, config={"insertion_threshold": 2})
    assert arr == [1, 2]


def test_tiny_threshold_still_terminates_and_sorts() -> None:
    arr = [(i * 7919) % 101 for i in range(120)]
    expected = sorted(arr)
    merge_sort(arr, config={"insertion_threshold": 1})
    assert arr == expected


def test_large_descending() -> None:
    arr = [(i * 37) % 1009 for i in range(1000)]
    expected = sorted(arr, reverse=True)
    merge_sort(arr, descending)
    assert arr == expected


def test_merge_in_place_two_runs() -> None:
    arr = [1, 3, 5, 2, 4, 6]
    merge_in_place(arr, ascending, 0, 3, 6)
    assert arr == [1, 2, 3, 4, 5, 6]


def test_merge_in_place_uneven_runs() -> None:
    arr = [10, 0, 1, 2, 3, 4, 5, 6]
    merge_in_place(arr, ascending, 0, 1, 8)
    assert arr == [0, 1, 2, 3, 4, 5, 6, 10]


def test_merge_in_place_empty_side_is_a_no_op() -> None:
    arr = [3, 2, 1]
    merge_in_place(arr, ascending, 0, 3, 3)
    assert arr == [3, 2, 1]


def test_rotate_examples() -> None:
    arr = [1, 2, 3, 4, 5]
    rotate(arr, 0, 2, 5)
    assert arr == [3, 4, 5, 1, 2]

    arr = [0, 1, 2, 3, 4, 5]
    rotate(arr, 0, 2, 6)
    assert arr == [2, 3, 4, 5, 0, 1]

    arr = [9, 1, 2, 3, 4, 9]
    rotate(arr, 1, 3, 5)
    assert arr == [9, 3, 4, 1, 2, 9]


def test_rotate_degenerate_ranges() -> None:
    arr = [1, 2, 3]
    rotate(arr, 0, 0, 3)
    rotate(arr, 0, 3, 3)
    rotate(arr, 2, 1, 0)
    assert arr == [1, 2, 3]


@settings(deadline=None, max_examples=200)
@given(st.lists(st.integers(), min_size=1, max_size=60), st.data())
def test_rotate_matches_slicing(values: List[int], data) -> None:
    n = len(values)
    lo = data.draw(st.integers(min_value=0, max_value=n))
    hi = data.draw(st.integers(min_value=lo, max_value=n))
    mid = data.draw(st.integers(min_value=lo, max_value=hi))
    expected = values[:lo] + values[mid:hi] + values[lo:mid] + values[hi:]
    rotate(values, lo, mid, hi)
    assert values == expected


@pytest.mark.parametrize("m, n", [(12, 18), (7, 0), (0, 7), (17, 5), (6, 6)])
def test_gcd(m: int, n: int) -> None:
    assert gcd(m, n) == math.gcd(m, n)


def test_lower_and_upper_bound() -> None:
    # key is a[5] == 2, searched for in a[0:5]
    arr = [1, 2, 2, 2, 3, 2]
    assert lower_bound(arr, ascending, 0, 5, 5) == 1
    assert upper_bound(arr, ascending, 0, 5, 5) == 4


def test_bounds_on_empty_range() -> None:
    arr = [1, 2, 3]
    assert lower_bound(arr, ascending, 2, 2, 0) == 2
    assert upper_bound(arr, ascending, 2, 2, 0) == 2
