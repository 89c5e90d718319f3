"""
Property checks for sorting results.

Used by the test-suite and by the benchmark runner, which rejects any timed
output that is not the oracle answer.

Stability is not checked: equal integers are indistinguishable, and the
merge-insert sort does not promise it anyway.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

__all__ = [
    "describe_mismatch",
    "first_nondecreasing_violation_index",
    "is_nondecreasing",
    "is_permutation",
    "permutation_counter_diff",
]


def first_nondecreasing_violation_index(xs: Sequence[int]) -> Optional[int]:
    """Return the first i with xs[i] > xs[i+1], or None if `xs` is ascending."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_nondecreasing(xs: Sequence[int]) -> bool:
    return first_nondecreasing_violation_index(xs) is None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """True iff `a` and `b` hold the same multiset of values."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Map value -> (count in `a`) - (count in `b`), omitting zero differences.

    Positive entries are values `b` dropped, negative ones values it duplicated.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: v for k, v in diff.items() if v}


def describe_mismatch(a: Sequence[int], out: Sequence[int]) -> Optional[str]:
    """
    Explain why `out` is not the sorted form of `a`, or return None if it is.
    """
    i = first_nondecreasing_violation_index(out)
    if i is not None:
        return f"not nondecreasing at i={i}: {out[i]} > {out[i + 1]}"
    diff = permutation_counter_diff(a, out)
    if diff:
        shown = dict(sorted(diff.items())[:5])
        return f"not a permutation of the input (count differences: {shown})"
    return None
