"""
Sorting algorithms.

Every module here exposes the same benchmark entry point::

    sort(a: list[int], *, config: dict | None = None) -> list[int]

which returns a new list and never mutates `a`. The benchmark runner resolves
algorithms by module name (``fordjohnson.algorithms.<name>``).
"""

from .jacobsthal import jacobsthal, plan_insertion_order
from .merge_insert import INSERTION_SORT_THRESHOLD, merge_insert_sort
from .pairing import Chain, Pair, build_chain
from .stats import ComparisonStats

ALGORITHMS = ("merge_insert", "insertion_sort", "builtin_timsort")

__all__ = [
    "ALGORITHMS",
    "INSERTION_SORT_THRESHOLD",
    "Chain",
    "ComparisonStats",
    "Pair",
    "build_chain",
    "jacobsthal",
    "merge_insert_sort",
    "plan_insertion_order",
]
