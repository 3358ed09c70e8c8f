"""
Experiment runner: orchestrates a benchmarking sweep from a YAML config.

Usage (from repo root):
    python -m sorter.bench.runner experiments/configs/quadratic_vs_shell.yaml
    sorter-bench experiments/configs/quadratic_vs_shell.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit, oracle)
    - results.jsonl           # one JSON line per timing sample, plus timeout/error lines
    - summary.csv             # median + IQR time, comparisons, exchanges per (algo, n)
    - (console) rich/tqdm summaries

Design notes:
- For each size n, ONE dataset is generated and every algorithm sorts its own copy.
- The harness handles warmup/GC and the untimed counted run.
- With `validate: true` (default) the counted run's output must match the
  oracle; a mismatch is recorded as an error for that algorithm.
- On timeout/error for an algorithm at size n, larger sizes are skipped for it.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sorter.algorithms import SortFn, get_algorithm
from sorter.bench.measure import time_sort_call
from sorter.datasets import make_dataset
from sorter.validate import ORACLE_NAME, equals_oracle

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]

SUMMARY_COLUMNS = [
    "algo",
    "n",
    "samples_ok",
    "median_ns",
    "iqr_ns",
    "min_ns",
    "max_ns",
    "comparisons",
    "exchanges",
]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: SortFn


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        # Two runs inside the same second
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "oracle": ORACLE_NAME,
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


def _resolve_algorithms(cfg_algos: List[Any]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        # Accept both "- shell" and "- {name: shell}"
        name = entry.get("name") if isinstance(entry, dict) else entry
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)
        specs.append(AlgoSpec(name=name, sort_fn=get_algorithm(name)))
    return specs


def _validate_config(cfg: Dict[str, Any]) -> None:
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    sizes = cfg["sizes"]
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if any(not isinstance(n, int) or isinstance(n, bool) or n < 0 for n in sizes):
        raise ValueError(f"Config 'sizes' must contain nonnegative integers; got {sizes!r}")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    if not isinstance(cfg["dataset"], dict):
        raise ValueError("Config 'dataset' must be a mapping with 'dist' and 'params'")


# ------------------------- aggregation & display ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    # Only sample lines carry time_ns
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = df.groupby(["algo", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        q1_ns=("time_ns", lambda s: s.quantile(0.25)),
        q3_ns=("time_ns", lambda s: s.quantile(0.75)),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
        comparisons=("comparisons", "median"),
        exchanges=("exchanges", "median"),
    )
    out["iqr_ns"] = out["q3_ns"] - out["q1_ns"]
    out = out[SUMMARY_COLUMNS].copy()
    int_cols = ["n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]
    out[int_cols] = out[int_cols].astype("int64")
    return out.sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    median_ms = median_ns / 1e6
    if iqr_ns is None:
        return f"{median_ms:.2f}"
    return f"{median_ms:.2f} ± {iqr_ns / 1e6:.2f}"


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms; exchanges)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, int]] = []
    if sizes:
        first, mid, last = sizes[0], sizes[len(sizes) // 2], sizes[-1]
        picks = [(f"n={n}", n) for n in dict.fromkeys([first, mid, last])]
    for hdr, _ in picks:
        table.add_column(hdr, justify="right")

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
                continue
            cell = _format_cell(int(s["median_ns"].values[0]), int(s["iqr_ns"].values[0]))
            exch = s["exchanges"].values[0]
            if pd.notna(exch):
                cell += f" ({int(exch)} exch)"
            row.append(cell)
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)
    _validate_config(cfg)

    experiment_name: str = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats: int = int(cfg["repeats"])
    warmup: bool = bool(cfg["warmup"])
    disable_gc: bool = bool(cfg["disable_gc"])
    timeout_seconds: float = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    validate: bool = bool(cfg.get("validate", True))

    # Resolve before creating anything on disk so a typo fails cleanly
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))

    # Per-algorithm skip flags (set on timeout/error)
    per_algo_skip = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if per_algo_skip[a_spec.name]:
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )

            status = res["status"]
            if status != "error" and validate and not equals_oracle(base_a, res["output"]):
                status = "error"
                res["error"] = "output does not match the oracle"

            if status == "error":
                per_algo_skip[a_spec.name] = True
                _append_jsonl(
                    {"algo": a_spec.name, "n": n, "status": "error", "error": res["error"]},
                    results_path,
                )
                continue

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "comparisons": res["comparisons"],
                        "exchanges": res["exchanges"],
                    },
                    results_path,
                )

            if status == "timeout":
                per_algo_skip[a_spec.name] = True
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": "timeout",
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                    },
                    results_path,
                )
                _console.print(
                    f"[yellow]{a_spec.name} timed out at n={n}; skipping larger sizes[/yellow]"
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_rich_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {p}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Run a sorting benchmark experiment from a YAML config."
    )
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
