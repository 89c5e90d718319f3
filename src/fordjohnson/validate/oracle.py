"""
Ground-truth oracle for sorting correctness.

Python's built-in `sorted()` is the reference: every algorithm in this package
must reproduce its output exactly for integer input.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Iterable[int]) -> List[int]:
    """Return a new ascending list of the elements of `a`."""
    return sorted(a)


def equals_oracle(a: Sequence[int], out: Sequence[int]) -> bool:
    """True iff `out` equals ``oracle_sort(a)`` element by element."""
    return list(out) == oracle_sort(a)
