"""
Pairwise chain construction for the merge-insert sort.

Adjacent elements are grouped into pairs ``(seq[2i], seq[2i+1])``, each pair
ordered so that ``low <= high``; an odd element out becomes the straggler.
Pairs are then ordered by their ``high`` member with an insertion sort, which
yields the initial main chain (the highs) and the pend list (the lows, in the
same order).

The order of pairs with equal ``high`` values is not significant: final
positions are decided by value during insertion into the main chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .stats import ComparisonStats

__all__ = ["Chain", "Pair", "build_chain", "make_pairs", "sort_pairs"]


@dataclass(frozen=True)
class Pair:
    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"pair out of order: low={self.low} > high={self.high}")


@dataclass(frozen=True)
class Chain:
    """Pairs sorted by ``high`` plus the optional unpaired element."""

    pairs: Tuple[Pair, ...]
    straggler: Optional[int] = None

    @property
    def main(self) -> Tuple[int, ...]:
        return tuple(p.high for p in self.pairs)

    @property
    def pend(self) -> Tuple[int, ...]:
        return tuple(p.low for p in self.pairs)


def make_pairs(
    seq: Sequence[int], *, stats: Optional[ComparisonStats] = None
) -> Tuple[List[Pair], Optional[int]]:
    """Group `seq` into ordered pairs; return ``(pairs, straggler)``."""
    n = len(seq)
    pairs: List[Pair] = []
    for i in range(0, n - 1, 2):
        a, b = seq[i], seq[i + 1]
        if stats is not None:
            stats.pairing += 1
        pairs.append(Pair(b, a) if a > b else Pair(a, b))
    straggler = seq[n - 1] if n % 2 else None
    return pairs, straggler


def sort_pairs(pairs: List[Pair], *, stats: Optional[ComparisonStats] = None) -> List[Pair]:
    """Insertion-sort `pairs` in place by their ``high`` member and return them."""
    for j in range(1, len(pairs)):
        key = pairs[j]
        k = j - 1
        while k >= 0:
            if stats is not None:
                stats.pair_sort += 1
            if pairs[k].high <= key.high:
                break
            pairs[k + 1] = pairs[k]
            k -= 1
        pairs[k + 1] = key
    return pairs


def build_chain(seq: Sequence[int], *, stats: Optional[ComparisonStats] = None) -> Chain:
    """Pair up `seq`, sort the pairs by ``high`` and return the resulting `Chain`."""
    pairs, straggler = make_pairs(seq, stats=stats)
    sort_pairs(pairs, stats=stats)
    return Chain(pairs=tuple(pairs), straggler=straggler)
