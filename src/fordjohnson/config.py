"""
Algorithm configuration.

Benchmark configs are plain dicts (usually straight out of YAML); this module
turns them into a validated, frozen `SortConfig`.

Recognised keys:
    container : "list" | "deque"     (default "list")
    search    : "full" | "bounded"   (default "full")
    strict    : bool                 (default False)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .containers import CONTAINERS

SEARCH_MODES = ("full", "bounded")

__all__ = ["SEARCH_MODES", "SortConfig"]


@dataclass(frozen=True)
class SortConfig:
    container: str = "list"
    search: str = "full"
    strict: bool = False

    def __post_init__(self) -> None:
        if self.container not in CONTAINERS:
            raise ValueError(
                f"config.container must be one of {sorted(CONTAINERS)}; got {self.container!r}"
            )
        if self.search not in SEARCH_MODES:
            raise ValueError(
                f"config.search must be one of {list(SEARCH_MODES)}; got {self.search!r}"
            )
        if not isinstance(self.strict, bool):
            raise ValueError(f"config.strict must be a bool; got {self.strict!r}")

    @classmethod
    def from_mapping(cls, config: Optional[Mapping[str, Any]]) -> "SortConfig":
        """Build a config from a dict, rejecting unknown keys."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if not isinstance(config, Mapping):
            raise ValueError("config must be a dict")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Supported: {sorted(known)}")
        return cls(**dict(config))
