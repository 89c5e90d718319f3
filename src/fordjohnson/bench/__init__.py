"""Benchmark harness: timing (`measure`) and YAML-driven experiments (`runner`)."""

from .measure import TimingResult, time_once, time_sort_call

__all__ = ["TimingResult", "time_once", "time_sort_call"]
