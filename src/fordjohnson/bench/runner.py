"""
Experiment runner: times every configured algorithm over a sweep of sizes.

Usage (from repo root):
    fordjohnson-bench experiments/configs/containers.yaml
    python -m fordjohnson.bench.runner experiments/configs/containers.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR per (label, n)

Design notes:
- For each size n, ONE dataset is generated and every algorithm gets the same input.
- The same algorithm may appear several times under different labels, e.g.
  merge_insert once with container "list" and once with "deque".
- Every first output is checked against the oracle; wrong outputs are
  recorded as "invalid".
- On timeout/error/invalid for a label at size n, larger sizes are skipped for it.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from .. import __version__
from ..datasets import make_dataset
from ..validate import describe_mismatch
from .measure import time_sort_call

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = [
    "experiment_name", "output_dir", "seed", "repeats", "warmup",
    "disable_gc", "timeout_seconds", "dataset", "sizes", "algorithms",
]
SUMMARY_COLUMNS = ["label", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    label: str
    name: str
    sort_fn: Callable[..., List[int]]
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "fordjohnson": __version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    """Import ``fordjohnson.algorithms.<name>`` for every entry and check labels are unique."""
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        label = entry.get("label", name)
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)

        try:
            mod = importlib.import_module(f"fordjohnson.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module 'fordjohnson.algorithms.{name}': {e!r}") from e
        sort_fn = getattr(mod, "sort", None)
        if not callable(sort_fn):
            raise AttributeError(f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`")

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{label}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(label=label, name=name, sort_fn=sort_fn, config=config))
    return specs


def _iqr_ns(times: pd.Series) -> int:
    return int(times.quantile(0.75) - times.quantile(0.25))


def aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    """Median, IQR, min and max of the successful samples per (label, n)."""
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["label", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr_ns),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["label", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in µs)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, int]] = []
    if sizes:
        for npick in dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]):
            picks.append((f"n={npick}", npick))
            table.add_column(f"n={npick}", justify="right")

    for label in summary["label"].unique():
        row = [str(label)]
        for _, npick in picks:
            s = summary[(summary["label"] == label) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                median_us = int(s["median_ns"].values[0]) / 1e3
                iqr_us = int(s["iqr_ns"].values[0]) / 1e3
                row.append(f"{median_us:.2f} ± {iqr_us:.2f}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, show_progress: bool = True) -> Path:
    """Run the experiment described by the YAML file at `config_path`; return the run directory."""
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    algos = resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    logger.info("Run directory: %s", run_dir)
    logger.info("Algorithms: %s", ", ".join(a.label for a in algos))

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.label: False for a in algos}

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not show_progress):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if skipped[a_spec.label]:
                continue

            res = time_sort_call(
                algo_name=a_spec.label,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                check=describe_mismatch,
            )

            for trial_idx, t_ns in enumerate(res.samples_ns):
                _append_jsonl(
                    {
                        "label": a_spec.label,
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "config": a_spec.config,
                    },
                    results_path,
                )

            if not res.ok:
                skipped[a_spec.label] = True
                logger.warning("%s stopped at n=%d: %s %s", a_spec.label, n, res.status, res.error or "")
                _append_jsonl(
                    {
                        "label": a_spec.label,
                        "algo": a_spec.name,
                        "n": n,
                        "status": res.status,
                        "error": res.error,
                        "timed_out_on_repeat": res.timed_out_on_repeat,
                        "config": a_spec.config,
                    },
                    results_path,
                )

    summary_df = aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    logger.info("Wrote %s, %s, %s, %s", results_path, summary_path, meta_path, cfg_resolved_path)
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=_console, show_path=False)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, show_progress=not args.no_progress)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
