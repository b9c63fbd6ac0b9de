"""
Tests for the numpy-backed input generators.
"""

from __future__ import annotations

import numpy as np
import pytest

from sortkit.datasets import SUPPORTED_DISTS, make_dataset


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
def test_lengths_and_types(dist: str, rng) -> None:
    spec = {"dist": dist, "params": {"range": [0, 99], "k": 5}}
    out = make_dataset(50, spec, rng)
    assert len(out) == 50
    assert all(type(x) is int for x in out)
    assert make_dataset(0, spec, rng) == []


def test_random_respects_inclusive_range(rng) -> None:
    out = make_dataset(500, {"dist": "random", "params": {"range": [-3, 3]}}, rng)
    assert min(out) >= -3 and max(out) <= 3


def test_nearly_sorted_is_a_permutation(rng) -> None:
    out = make_dataset(200, {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}, rng)
    assert sorted(out) == list(range(200))


def test_few_uniques(rng) -> None:
    out = make_dataset(300, {"dist": "few_uniques", "params": {"k": 4, "range": [10, 20]}}, rng)
    assert len(set(out)) <= 4
    assert all(10 <= x <= 20 for x in out)


def test_duplicates(rng) -> None:
    out = make_dataset(300, {"dist": "duplicates", "params": {"k": 3}}, rng)
    assert set(out) <= {0, 1, 2}


def test_reversed_and_equal(rng) -> None:
    assert make_dataset(4, {"dist": "reversed"}, rng) == [3, 2, 1, 0]
    assert make_dataset(3, {"dist": "equal"}, rng) == [42, 42, 42]
    assert make_dataset(2, {"dist": "equal", "params": {"value": 7}}, rng) == [7, 7]


def test_same_seed_same_data() -> None:
    spec = {"dist": "random", "params": {"range": [0, 10**6]}}
    a = make_dataset(100, spec, np.random.default_rng(7))
    b = make_dataset(100, spec, np.random.default_rng(7))
    assert a == b


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "reversed"}),
        (10, {"dist": "bogus"}),
        (10, "random"),
        (10, {"dist": "random"}),
        (10, {"dist": "random", "params": {"range": [5, 1]}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": 2.0}}),
        (10, {"dist": "few_uniques", "params": {}}),
        (10, {"dist": "duplicates", "params": {"k": 0}}),
        (10, {"dist": "equal", "params": {"value": "x"}}),
    ],
)
def test_invalid_specs(n, spec, rng) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, rng)
