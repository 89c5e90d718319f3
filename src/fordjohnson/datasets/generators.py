"""
Dataset generators for the merge-insert benchmarks.

All datasets hold positive 32-bit integers, the domain the CLI accepts.

- dist == "random":
    Uniform draws from an inclusive range (default [1, 2147483647]).

- dist == "nearly_sorted":
    [1, 2, ..., n] degraded by ceil(swap_frac * n) random index swaps.

- dist == "few_uniques":
    Up to k distinct values from an inclusive range, repeated to length n.
    Exercises pairs with equal members and equal highs.

- dist == "reversed":
    Deterministic [n, n-1, ..., 1]; the RNG is unused.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

The caller owns and seeds the RNG; results are plain Python ints so the
algorithms never see NumPy scalars.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

from ..algorithms.merge_insert import MAX_VALUE, MIN_VALUE

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
}
DEFAULT_RANGE: Tuple[int, int] = (MIN_VALUE, MAX_VALUE)

__all__ = ["DEFAULT_RANGE", "SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate a dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        ``{"dist": <name>, "params": {...}}``. Params by distribution:

        random:        {"range": [lo, hi]}              (optional, inclusive)
        nearly_sorted: {"swap_frac": 0.05}              (in [0.0, 1.0])
        few_uniques:   {"k": 10, "range": [lo, hi]}     (range optional)
        reversed:      {}
    rng : numpy.random.Generator

    Raises
    ------
    ValueError
        If `n`, the distribution or its params are invalid.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise ValueError("n must be a nonnegative int")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if n == 0:
        return []

    if dist == "random":
        lo, hi = _parse_range(params)
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(1, n + 1))
        num_swaps = int(np.ceil(swap_frac * n))
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i, j = int(idxs[2 * k]), int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = params.get("k")
        if not isinstance(k, int) or isinstance(k, bool) or k < 1:
            raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
        lo, hi = _parse_range(params)
        actual_k = min(k, n, hi - lo + 1)
        if hi - lo < 1_000_000:
            values = rng.choice(np.arange(lo, hi + 1, dtype=np.int64), size=actual_k, replace=False).tolist()
        else:
            values = _distinct_draws(rng, lo, hi, actual_k)
        picks = rng.integers(0, actual_k, size=n)
        return [int(values[int(t)]) for t in picks]

    # reversed
    return list(range(n, 0, -1))


# ------------------------- helpers ------------------------- #


def _distinct_draws(rng: np.random.Generator, lo: int, hi: int, k: int) -> List[int]:
    # Rejection sampling; only used for wide ranges where collisions are rare.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < k:
        for v in map(int, rng.integers(lo, hi + 1, size=2 * (k - len(chosen)))):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == k:
                    break
    return chosen


def _parse_range(params: Dict[str, Any]) -> Tuple[int, int]:
    """Parse the optional inclusive ``params["range"]``, clamped to positive int32."""
    if "range" not in params:
        return DEFAULT_RANGE
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    if not all(isinstance(x, (int, np.integer)) and not isinstance(x, bool) for x in spec):
        raise ValueError("params.range values must be integers")
    lo, hi = int(spec[0]), int(spec[1])
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    if lo < MIN_VALUE or hi > MAX_VALUE:
        raise ValueError(f"params.range must lie within [{MIN_VALUE}, {MAX_VALUE}]")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not 0.0 <= x <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x
