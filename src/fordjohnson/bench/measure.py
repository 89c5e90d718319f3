"""
Timing harness for sorting algorithms.

One sample is exactly one call to an algorithm's ``sort(a, config=...)``,
timed with `time.perf_counter_ns`. Copying the input, GC control, warmup and
output checking all happen outside the timed block.

Public API (stable):
    time_sort_call(...) -> TimingResult
    time_once(fn, *args, **kwargs) -> (result, elapsed_ns)
"""

from __future__ import annotations

import gc
import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = ["TimingResult", "time_once", "time_sort_call"]

#: Returns None when `out` is correct for `a`, otherwise a description of the problem.
OutputCheck = Callable[[List[int], List[int]], Optional[str]]


@dataclass
class TimingResult:
    algo: str
    repeats: int
    samples_ns: List[int] = field(default_factory=list)
    status: str = "ok"  # "ok" | "timeout" | "error" | "invalid"
    error: Optional[str] = None
    timed_out_on_repeat: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def time_once(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, int]:
    """Call ``fn(*args, **kwargs)`` once; return its result and the elapsed ns."""
    t0 = time.perf_counter_ns()
    out = fn(*args, **kwargs)
    t1 = time.perf_counter_ns()
    return out, t1 - t0


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[int]],
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool = True,
    check: Optional[OutputCheck] = None,
) -> TimingResult:
    """
    Time `repeats` calls to ``algo_fn(a, config=config)``.

    Parameters
    ----------
    algo_name : str
        Label recorded in the result.
    algo_fn : Callable[..., list[int]]
        ``sort(a, *, config=None)``-style callable.
    a : list[int]
        Input; the algorithm must not mutate it.
    config : dict | None
        Passed through unchanged.
    repeats : int
        Number of timed samples.
    warmup : bool
        Make one untimed call first.
    disable_gc : bool
        Collect, then disable the GC during the timed loop; restored afterward.
    timeout_seconds : float
        A sample slower than this marks the result ``"timeout"`` and stops sampling.
    defensive_copy : bool
        Pass a fresh copy of `a` to every call.
    check : callable, optional
        Applied to the first output; a non-None return marks the result
        ``"invalid"`` and stops sampling.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result = TimingResult(algo=algo_name, repeats=repeats)

    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, config=config)
        except Exception as e:
            logger.warning("%s: warmup failed: %r", algo_name, e)
            result.status = "error"
            result.error = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                out, elapsed = time_once(algo_fn, arg, config=config)
            except Exception as e:
                logger.warning("%s: run failed at repeat %d: %r", algo_name, r, e)
                result.status = "error"
                result.error = f"run failed at repeat {r}: {e!r}"
                break

            if r == 0 and check is not None:
                problem = check(a, out)
                if problem is not None:
                    result.status = "invalid"
                    result.error = problem
                    break

            result.samples_ns.append(int(elapsed))
            if elapsed > threshold_ns:
                result.status = "timeout"
                result.timed_out_on_repeat = r
                break
    finally:
        # Leave the GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
