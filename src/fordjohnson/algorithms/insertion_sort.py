"""
Straight insertion sort (shift-and-insert).

Used as the terminal case of the merge-insert sort, and exposed with the
uniform benchmark signature so it can be timed on its own.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from .stats import ComparisonStats

__all__ = ["insertion_sort", "sort"]


def insertion_sort(
    arr: MutableSequence[int],
    left: int = 0,
    right: Optional[int] = None,
    *,
    stats: Optional[ComparisonStats] = None,
) -> MutableSequence[int]:
    """
    Sort ``arr[left..right]`` (inclusive) in place, ascending, and return `arr`.

    Works on any mutable sequence with item assignment (list, deque).
    """
    if right is None:
        right = len(arr) - 1
    for i in range(left + 1, right + 1):
        key = arr[i]
        j = i - 1
        while j >= left:
            if stats is not None:
                stats.base_case += 1
            if arr[j] <= key:
                break
            arr[j + 1] = arr[j]  # shift up one slot
            j -= 1
        arr[j + 1] = key
    return arr


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """Benchmark entry point: return a sorted copy of `a` (config is ignored)."""
    return list(insertion_sort(list(a)))
