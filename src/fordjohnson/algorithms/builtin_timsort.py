"""Reference baseline: Python's built-in timsort."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sorted(a)
