from __future__ import annotations

from fordjohnson.validate import (
    describe_mismatch,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    oracle_sort,
    permutation_counter_diff,
)


def test_oracle() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert a == [3, 1, 2]
    assert equals_oracle(a, [1, 2, 3])
    assert not equals_oracle(a, [1, 3, 2])


def test_nondecreasing() -> None:
    assert is_nondecreasing([])
    assert is_nondecreasing([1, 1, 2])
    assert first_nondecreasing_violation_index([1, 3, 2, 4]) == 1
    assert first_nondecreasing_violation_index([1, 2]) is None


def test_permutation() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2, 2], [1, 1, 2])
    assert permutation_counter_diff([1, 2, 2], [1, 1, 2]) == {1: -1, 2: 1}
    assert permutation_counter_diff([5], [5]) == {}


def test_describe_mismatch() -> None:
    assert describe_mismatch([2, 1], [1, 2]) is None
    assert "nondecreasing at i=0" in describe_mismatch([2, 1], [2, 1])
    assert "not a permutation" in describe_mismatch([2, 1], [1, 1])
