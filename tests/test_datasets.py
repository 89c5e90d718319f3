from __future__ import annotations

import numpy as np
import pytest

from fordjohnson.datasets import DEFAULT_RANGE, SUPPORTED_DISTS, make_dataset


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
def test_lengths_and_domain(dist: str) -> None:
    params = {"k": 5} if dist == "few_uniques" else {}
    for n in (0, 1, 11, 200):
        a = make_dataset(n, {"dist": dist, "params": params}, _rng())
        assert len(a) == n
        assert all(type(x) is int for x in a)
        assert all(DEFAULT_RANGE[0] <= x <= DEFAULT_RANGE[1] for x in a)


def test_random_is_reproducible_and_in_range() -> None:
    spec = {"dist": "random", "params": {"range": [10, 20]}}
    a = make_dataset(500, spec, _rng(1))
    assert a == make_dataset(500, spec, _rng(1))
    assert min(a) >= 10 and max(a) <= 20


def test_reversed() -> None:
    assert make_dataset(5, {"dist": "reversed"}, _rng()) == [5, 4, 3, 2, 1]


def test_nearly_sorted() -> None:
    spec = {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}
    assert make_dataset(6, spec, _rng()) == [1, 2, 3, 4, 5, 6]
    a = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}, _rng())
    assert sorted(a) == list(range(1, 101))


def test_few_uniques() -> None:
    a = make_dataset(300, {"dist": "few_uniques", "params": {"k": 4, "range": [1, 50]}}, _rng())
    assert len(set(a)) <= 4
    b = make_dataset(300, {"dist": "few_uniques", "params": {"k": 4}}, _rng())
    assert len(set(b)) <= 4


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "gaussian"},
        {"dist": "random", "params": {"range": [5, 1]}},
        {"dist": "random", "params": {"range": [0, 10]}},
        {"dist": "random", "params": {"range": [1, 2**31]}},
        {"dist": "random", "params": {"range": [1]}},
        {"dist": "nearly_sorted", "params": {"swap_frac": 2}},
        {"dist": "few_uniques", "params": {}},
        {"dist": "few_uniques", "params": {"k": 0}},
    ],
)
def test_invalid_specs(spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(10, spec, _rng())


def test_invalid_n() -> None:
    with pytest.raises(ValueError):
        make_dataset(-1, {"dist": "reversed"}, _rng())
