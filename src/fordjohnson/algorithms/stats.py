"""
Comparison accounting for the sorting algorithms.

Pass a `ComparisonStats` instance as ``stats=`` to count how many element
comparisons each phase performed. Counting is off (``stats=None``) by default.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

__all__ = ["ComparisonStats"]


@dataclass
class ComparisonStats:
    pairing: int = 0     # one per pair formed
    pair_sort: int = 0   # ordering pairs by their high member
    insertion: int = 0   # binary-search probes into the main chain
    base_case: int = 0   # plain insertion sort below the threshold

    @property
    def total(self) -> int:
        return self.pairing + self.pair_sort + self.insertion + self.base_case

    def as_dict(self) -> Dict[str, int]:
        d = asdict(self)
        d["total"] = self.total
        return d
