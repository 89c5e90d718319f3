"""
Ford-Johnson merge-insertion sort for positive 32-bit integers, with a
benchmark harness comparing ``list`` and ``deque`` back-ends.

>>> from fordjohnson import sort
>>> sort([3, 5, 9, 7, 4])
[3, 4, 5, 7, 9]
"""

__version__ = "1.0.0"

from .algorithms import (
    INSERTION_SORT_THRESHOLD,
    ComparisonStats,
    jacobsthal,
    merge_insert_sort,
    plan_insertion_order,
)
from .algorithms.merge_insert import sort
from .config import SortConfig
from .errors import FordJohnsonError, InvalidInput

__all__ = [
    "INSERTION_SORT_THRESHOLD",
    "ComparisonStats",
    "FordJohnsonError",
    "InvalidInput",
    "SortConfig",
    "jacobsthal",
    "merge_insert_sort",
    "plan_insertion_order",
    "sort",
    "__version__",
]
