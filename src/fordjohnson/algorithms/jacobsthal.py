"""
Jacobsthal numbers and the insertion order they induce.

The merge-insert sort inserts its pending elements in blocks whose upper ends
are successive Jacobsthal numbers, largest index first within each block. That
way every binary search runs over a chain whose length stays just below a
power of two, which is what keeps the comparison count minimal.

Public API (stable):
    jacobsthal(n: int) -> int
    plan_insertion_order(pend_size: int) -> list[int]
"""

from __future__ import annotations

from typing import List

__all__ = ["FIRST_BLOCK_INDEX", "jacobsthal", "plan_insertion_order"]

# Blocks start at J(3) = 3.
FIRST_BLOCK_INDEX: int = 3


def jacobsthal(n: int) -> int:
    """
    Return J(n), where J(0) = 0, J(1) = 1 and J(n) = J(n-1) + 2*J(n-2).

    >>> [jacobsthal(i) for i in range(8)]
    [0, 1, 1, 3, 5, 11, 21, 43]
    """
    if n < 0:
        raise ValueError("n must be nonnegative")
    prev, cur = 0, 1
    if n == 0:
        return prev
    for _ in range(2, n + 1):
        prev, cur = cur, cur + 2 * prev
    return cur


def _block_tops(pend_size: int) -> List[int]:
    # Jacobsthal thresholds below pend_size, closed by pend_size - 1.
    tops: List[int] = []
    index = FIRST_BLOCK_INDEX
    while True:
        value = jacobsthal(index)
        if value >= pend_size:
            tops.append(pend_size - 1)
            return tops
        tops.append(value)
        index += 1


def plan_insertion_order(pend_size: int) -> List[int]:
    """
    Return the order in which pend indices ``0 .. pend_size-1`` get inserted.

    Parameters
    ----------
    pend_size : int
        Number of pending elements left after the first one was placed at the
        front of the main chain.

    Returns
    -------
    list[int]
        A permutation of ``range(pend_size)``. Indices are emitted block by
        block, from each Jacobsthal threshold down to one past the previous
        threshold; whatever was not covered (always index 0) follows in
        ascending order.

    >>> plan_insertion_order(10)
    [3, 2, 1, 5, 4, 9, 8, 7, 6, 0]
    """
    if pend_size < 0:
        raise ValueError("pend_size must be nonnegative")
    if pend_size == 0:
        return []

    inserted = [False] * pend_size
    order: List[int] = []
    prev_top = 0
    for top in _block_tops(pend_size):
        for j in range(top, prev_top, -1):
            if j < pend_size and not inserted[j]:
                order.append(j)
                inserted[j] = True
        prev_top = top

    order.extend(i for i, done in enumerate(inserted) if not done)
    assert len(order) == pend_size
    return order
