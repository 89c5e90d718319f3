"""
Sequence back-ends the merge-insert algorithm can build its main chain in.

The algorithm only needs indexed reads, `insert(i, x)` and a cheap way to put
an element at the front, which both `list` and `collections.deque` provide.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Iterable, List, MutableSequence

__all__ = ["CONTAINERS", "container_names", "make_container", "push_front"]

CONTAINERS: Dict[str, Callable[[Iterable[int]], MutableSequence[int]]] = {
    "list": list,
    "deque": deque,
}


def container_names() -> List[str]:
    """Return the supported container names in a stable order."""
    return list(CONTAINERS)


def make_container(kind: str, items: Iterable[int] = ()) -> MutableSequence[int]:
    """Build a new container of the given kind holding `items`."""
    try:
        factory = CONTAINERS[kind]
    except KeyError:
        raise ValueError(
            f"Unsupported container: {kind!r}. Supported: {container_names()}"
        ) from None
    return factory(items)


def push_front(chain: MutableSequence[int], value: int) -> None:
    if isinstance(chain, deque):
        chain.appendleft(value)
    else:
        chain.insert(0, value)
