from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from fordjohnson.algorithms.jacobsthal import jacobsthal, plan_insertion_order


def test_jacobsthal_values() -> None:
    assert [jacobsthal(n) for n in range(11)] == [0, 1, 1, 3, 5, 11, 21, 43, 85, 171, 341]


def test_jacobsthal_recurrence_large_index() -> None:
    # <https://oeis.org/A001045>: closed form (2^n - (-1)^n) / 3
    for n in (20, 40, 64, 100):
        assert jacobsthal(n) == (2**n - (-1) ** n) // 3


def test_jacobsthal_negative() -> None:
    with pytest.raises(ValueError):
        jacobsthal(-1)


@pytest.mark.parametrize(
    "pend_size, expected",
    [
        (0, []),
        (1, [0]),
        (2, [1, 0]),
        (3, [2, 1, 0]),
        (4, [3, 2, 1, 0]),
        (5, [3, 2, 1, 4, 0]),
        (6, [3, 2, 1, 5, 4, 0]),
        (10, [3, 2, 1, 5, 4, 9, 8, 7, 6, 0]),
        (11, [3, 2, 1, 5, 4, 10, 9, 8, 7, 6, 0]),
        (12, [3, 2, 1, 5, 4, 11, 10, 9, 8, 7, 6, 0]),
    ],
)
def test_plan_insertion_order_examples(pend_size: int, expected: list) -> None:
    assert plan_insertion_order(pend_size) == expected


def test_plan_insertion_order_blocks_descend() -> None:
    order = plan_insertion_order(43)
    # blocks: (3..1), (5..4), (11..6), (21..12), (42..22), then the leftover 0
    assert order[:5] == [3, 2, 1, 5, 4]
    assert order[5:11] == list(range(11, 5, -1))
    assert order[11:21] == list(range(21, 11, -1))
    assert order[21:42] == list(range(42, 21, -1))
    assert order[-1] == 0


def test_plan_insertion_order_negative() -> None:
    with pytest.raises(ValueError):
        plan_insertion_order(-1)


def test_plan_insertion_order_complete_exhaustive() -> None:
    for pend_size in range(1, 700):
        assert sorted(plan_insertion_order(pend_size)) == list(range(pend_size))


@given(st.integers(min_value=1, max_value=5000))
def test_plan_insertion_order_is_permutation(pend_size: int) -> None:
    order = plan_insertion_order(pend_size)
    assert len(order) == pend_size
    assert set(order) == set(range(pend_size))
