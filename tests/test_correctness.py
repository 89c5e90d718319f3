"""
Correctness tests for every algorithm module against the oracle (Python's built-in sorted).

What we check, for each algorithm and merge-insert configuration:
- Output exactly matches the oracle (strongest guarantee)
- Nondecreasing order (diagnostic)
- Permutation preservation (no lost/duplicated elements)
- No input mutation (API contract)
- Idempotence and determinism
"""

from __future__ import annotations

import importlib
import random
from typing import Any, Dict, List, Optional

import pytest
from hypothesis import given, settings, strategies as st

from fordjohnson.algorithms.merge_insert import sort as merge_insert
from fordjohnson.validate import describe_mismatch, is_nondecreasing, is_permutation, oracle_sort

MERGE_INSERT_CONFIGS = [
    {"container": "list", "search": "full"},
    {"container": "deque", "search": "full"},
    {"container": "list", "search": "bounded"},
    {"container": "deque", "search": "bounded"},
]
CASES = [("merge_insert", cfg) for cfg in MERGE_INSERT_CONFIGS] + [
    ("insertion_sort", None),
    ("builtin_timsort", None),
]


def _case_id(case) -> str:
    name, cfg = case
    return name if cfg is None else f"{name}-{cfg['container']}-{cfg['search']}"


@pytest.fixture(params=CASES, ids=_case_id)
def algo(request):
    name, cfg = request.param
    mod = importlib.import_module(f"fordjohnson.algorithms.{name}")
    return mod.sort, cfg


def _check_one(sort, a: List[int], config: Optional[Dict[str, Any]]) -> None:
    """Common assertion bundle for one input."""
    a_before = list(a)
    out = sort(a, config=config)

    assert a == a_before, "Algorithm must not mutate its input"
    assert type(out) is list

    assert out == oracle_sort(a), describe_mismatch(a, out)
    assert is_nondecreasing(out)
    assert is_permutation(a, out)

    assert sort(out, config=config) == out, "sorting a sorted list must not change it"
    assert sort(a, config=config) == out, "Algorithm must be deterministic for a given config"


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize(
    "a",
    [
        [],
        [1],
        [2, 1],
        [3, 5, 9, 7, 4],
        [4, 4, 2, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        list(range(1, 11)),
        list(range(10, 0, -1)),
        list(range(11, 0, -1)),
        [5, 1, 3, 9, 2, 2, 8, 4, 7, 6, 10, 11],
        list(range(1, 22))[::-1],
        [2147483647, 1, 2147483646, 2, 1073741824] * 5,
    ],
)
def test_unit_cases(algo, a: List[int]) -> None:
    sort, cfg = algo
    _check_one(sort, a, cfg)


def test_boundary_lengths(algo) -> None:
    sort, cfg = algo
    rng = random.Random(7)
    for n in (0, 1, 2, 9, 10, 11, 12, 21, 22, 23, 43, 44, 85, 86, 171):
        a = [rng.randint(1, 50) for _ in range(n)]
        _check_one(sort, a, cfg)


def test_twenty_one_random_elements(algo) -> None:
    sort, cfg = algo
    rng = random.Random(2024)
    a = [rng.randint(1, 2**31 - 1) for _ in range(21)]
    assert sort(a, config=cfg) == sorted(a)


# ------------------------- property-based tests (randomized) ------------------------- #

positive_ints = st.integers(min_value=1, max_value=2**31 - 1)
configs = st.sampled_from(MERGE_INSERT_CONFIGS)


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=-10_000, max_value=10_000), max_size=300), configs)
def test_property_random_small_range(a: List[int], cfg: Dict[str, Any]) -> None:
    _check_one(merge_insert, a, cfg)


@settings(deadline=None, max_examples=60)
@given(st.lists(positive_ints, max_size=200), configs)
def test_property_random_full_range(a: List[int], cfg: Dict[str, Any]) -> None:
    _check_one(merge_insert, a, dict(cfg, strict=True))


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=1, max_value=8), max_size=400), configs)
def test_property_many_duplicates(a: List[int], cfg: Dict[str, Any]) -> None:
    _check_one(merge_insert, a, cfg)
