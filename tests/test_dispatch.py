"""
Tests for the stable `sort` entry point and the algorithm registry.
"""

from __future__ import annotations

from collections import UserList

import pytest

import sortkit
from sortkit import dispatch
from sortkit.comparators import descending
from sortkit.dispatch import ALGORITHMS, STABLE_ALGORITHMS, get_sorter, sort
from sortkit.stability import Item, by_value
from sortkit.validate import index_order


def test_sorts_numbers_in_place() -> None:
    nums = [3, 1, 4, 2]
    out = sort(nums)
    assert out is nums
    assert nums == [1, 2, 3, 4]


def test_sorts_with_custom_comparator() -> None:
    assert sort([3, 1, 4, 2], descending) == [4, 3, 2, 1]


def test_sorts_strings() -> None:
    assert sort(["foo", "bar", "baz"]) == ["bar", "baz", "foo"]


def test_empty_and_singleton() -> None:
    assert sort([]) == []
    assert sort([42]) == [42]


def test_is_stable() -> None:
    items = [Item(2, 0), Item(1, 1), Item(2, 2), Item(3, 3)]
    sort(items, by_value)
    assert index_order(items) == [1, 0, 2, 3]


def test_package_level_sort_is_the_dispatcher() -> None:
    assert sortkit.sort is sort


def test_uses_native_sort_when_stable(monkeypatch) -> None:
    calls = []

    def spy(a, cmp):
        calls.append(len(a))
        a.sort()
        return a

    monkeypatch.setattr(dispatch, "is_native_sort_stable", lambda n: True)
    monkeypatch.setattr(dispatch, "native_sort", spy)
    assert sort([2, 1]) == [1, 2]
    assert calls == [2]


@pytest.mark.parametrize("fallback", ["merge", "tim"])
def test_falls_back_when_native_is_unstable(monkeypatch, fallback: str) -> None:
    calls = []
    real = ALGORITHMS[fallback]

    def spy(a, cmp, *, config=None):
        calls.append(config.fallback)
        return real(a, cmp, config=config)

    monkeypatch.setattr(dispatch, "is_native_sort_stable", lambda n: False)
    monkeypatch.setitem(dispatch.ALGORITHMS, fallback, spy)

    items = [Item(v, i) for i, v in enumerate([3, 1, 3, 2, 1, 2, 3] * 10)]
    expected = sorted(items, key=lambda x: x.value)
    out = sort(items, by_value, config={"fallback": fallback})
    assert out is items
    assert items == expected
    assert calls == [fallback]


def test_probe_sample_size_is_forwarded(monkeypatch) -> None:
    seen = []

    def fake(n):
        seen.append(n)
        return True

    monkeypatch.setattr(dispatch, "is_native_sort_stable", fake)
    sort([1], config={"probe_sample_size": 40})
    assert seen == [40]


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ValueError):
        sort([2, 1], config={"fallback": "quick"})


def test_registry() -> None:
    assert set(ALGORITHMS) == {"insertion", "merge", "tim", "tim_galloping", "quick", "native"}
    assert STABLE_ALGORITHMS == set(ALGORITHMS) - {"quick"}
    assert get_sorter("merge") is ALGORITHMS["merge"]
    with pytest.raises(ValueError, match="Unknown algorithm"):
        get_sorter("bogo")


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_non_list_mutable_sequences(name: str) -> None:
    seq = UserList([5, 3, 9, 1, 1, 7] * 10)
    out = get_sorter(name)(seq)
    assert out is seq
    assert list(seq) == sorted([5, 3, 9, 1, 1, 7] * 10)
