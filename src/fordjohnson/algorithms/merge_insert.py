"""
Ford-Johnson merge-insertion sort over positive 32-bit integers.

Pipeline for an input of n elements:

1. n <= INSERTION_SORT_THRESHOLD: plain insertion sort, done.
2. Pair adjacent elements, order the pairs by their high member (see
   `pairing.build_chain`). The highs form the main chain, the lows the pend
   list; an odd element out is held back as the straggler.
3. pend[0] goes to the front of the main chain without any comparison: it is
   no larger than the first high, which is no larger than everything after it.
4. The remaining pend elements are inserted in Jacobsthal order
   (`jacobsthal.plan_insertion_order`) with a lower-bound binary search.
5. The straggler, if any, is binary-search inserted into the final chain.

The pair list is ordered with an insertion sort rather than by recursing into
merge-insertion again.

Two search modes are available:

- ``"full"`` searches the whole current main chain for every element.
- ``"bounded"`` searches pend element k only in the prefix of the chain that
  ends just before its paired high, the window classic Ford-Johnson uses to
  bound its comparison count. The straggler always searches the whole chain.

Both modes place every element at the same position, so their outputs are
identical; only the number of probes differs.

Public API (stable):
    merge_insert_sort(seq, *, container="list", search="full", stats=None)
    sort(a: list[int], *, config: dict | None) -> list[int]
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, MutableSequence, Optional, Sequence

from ..config import SEARCH_MODES, SortConfig
from ..containers import make_container, push_front
from ..errors import InvalidInput
from .insertion_sort import insertion_sort
from .jacobsthal import plan_insertion_order
from .pairing import build_chain
from .stats import ComparisonStats

logger = logging.getLogger(__name__)

INSERTION_SORT_THRESHOLD: int = 10
MIN_VALUE: int = 1
MAX_VALUE: int = 2147483647

__all__ = [
    "INSERTION_SORT_THRESHOLD",
    "MAX_VALUE",
    "MIN_VALUE",
    "check_elements",
    "merge_insert_sort",
    "sort",
]


def check_elements(seq: Iterable[Any]) -> None:
    """Raise `InvalidInput` for the first element that is not an int in [1, 2**31-1]."""
    for x in seq:
        if isinstance(x, bool) or not isinstance(x, int):
            raise InvalidInput(x, "not an integer")
        if not MIN_VALUE <= x <= MAX_VALUE:
            raise InvalidInput(x, f"outside [{MIN_VALUE}, {MAX_VALUE}]")


def _lower_bound(
    chain: Sequence[int],
    value: int,
    hi: int,
    stats: Optional[ComparisonStats],
) -> int:
    # First index in chain[0:hi] whose element is >= value (hi if none).
    lo = 0
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if stats is not None:
            stats.insertion += 1
        if chain[mid] < value:
            lo = mid + 1
        else:
            hi = mid
    return lo


def merge_insert_sort(
    seq: Sequence[int],
    *,
    container: str = "list",
    search: str = "full",
    stats: Optional[ComparisonStats] = None,
) -> MutableSequence[int]:
    """
    Return a new container (``list`` or ``collections.deque``) with `seq` sorted ascending.

    Parameters
    ----------
    seq : Sequence[int]
        Input values; never mutated.
    container : str
        Back-end for the main chain and the result, see `containers.CONTAINERS`.
    search : str
        ``"full"`` or ``"bounded"`` (see module docstring).
    stats : ComparisonStats, optional
        If given, comparison counts are added to it.
    """
    if search not in SEARCH_MODES:
        raise ValueError(f"search must be one of {list(SEARCH_MODES)}; got {search!r}")

    n = len(seq)
    if n <= INSERTION_SORT_THRESHOLD:
        return insertion_sort(make_container(container, seq), stats=stats)

    chain = build_chain(seq, stats=stats)
    pend = chain.pend
    main = make_container(container, chain.main)
    push_front(main, pend[0])

    # bounds[k] is the current position of the high paired with pend[k].
    bounded = search == "bounded"
    bounds = list(range(1, len(pend) + 1))

    order = plan_insertion_order(len(pend) - 1) if len(pend) > 1 else []
    logger.debug(
        "n=%d pairs=%d straggler=%r order=%s container=%s search=%s",
        n, len(pend), chain.straggler, order, container, search,
    )

    for k in order:
        idx = k + 1  # pend[0] is already placed
        value = pend[idx]
        pos = _lower_bound(main, value, bounds[idx] if bounded else len(main), stats)
        main.insert(pos, value)
        if bounded:
            for q, b in enumerate(bounds):
                if b >= pos:
                    bounds[q] = b + 1

    if chain.straggler is not None:
        pos = _lower_bound(main, chain.straggler, len(main), stats)
        main.insert(pos, chain.straggler)

    assert len(main) == n
    return main


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """
    Benchmark entry point: return a sorted copy of `a` as a ``list``.

    `config` is parsed by `SortConfig.from_mapping` (keys ``container``,
    ``search``, ``strict``).
    """
    cfg = SortConfig.from_mapping(config)
    if cfg.strict:
        check_elements(a)
    return list(merge_insert_sort(a, container=cfg.container, search=cfg.search))
