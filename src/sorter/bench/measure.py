"""
Timing harness for in-place sorting algorithms.

Each sample times exactly one call `algo_fn(coll, 0, n)` on a fresh
`SequenceSortable` over a copy of the input, using a monotonic
high-resolution clock. Copying, GC control and warmup stay outside the timed
block.

Operation counts come from one extra, untimed run through a
`CountingSortable`; the sorted output of that run is returned too so the
caller can check it against the oracle.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "comparisons": int | None,          # from the counted run
        "exchanges": int | None,
        "output": list | None,              # sorted copy from the counted run
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Dict, List

from sorter.algorithms import SortFn
from sorter.sortable import SequenceSortable
from sorter.validate.instrument import CountingSortable

__all__ = ["time_sort_call", "count_sort_call"]


def count_sort_call(algo_fn: SortFn, a: List[Any]) -> Dict[str, Any]:
    """
    Run `algo_fn` once on a copy of `a` and report comparisons and exchanges.

    Returns {"comparisons": int, "exchanges": int, "out_of_bounds": list, "output": list}.
    """
    work = list(a)
    counted = CountingSortable(SequenceSortable(work))
    algo_fn(counted, 0, counted.length())
    return {
        "comparisons": counted.comparisons,
        "exchanges": counted.exchanges,
        "out_of_bounds": list(counted.out_of_bounds),
        "output": work,
    }


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: SortFn,
    a: List[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    count_ops: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(coll, 0, len(a))`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : callable
        An algorithm with the signature algo(coll, begin, end) -> None.
    a : list
        Input values. Never mutated: every call sorts its own copy.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample over it marks status="timeout" and
        stops further sampling.
    count_ops : bool
        If True, add one untimed instrumented run for comparison/exchange counts.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],  # type: List[int]
        "comparisons": None,
        "exchanges": None,
        "output": None,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Counted run (untimed) ----
    if count_ops:
        try:
            counts = count_sort_call(algo_fn, a)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"counted run failed: {e!r}"
            return result
        result["comparisons"] = counts["comparisons"]
        result["exchanges"] = counts["exchanges"]
        result["output"] = counts["output"]

    # ---- Warmup ----
    if warmup and repeats > 0:
        try:
            warm = SequenceSortable(list(a))
            algo_fn(warm, 0, warm.length())
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        # ---- Timed loop ----
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            try:
                # Prepare input OUTSIDE the timed block
                coll = SequenceSortable(list(a))
                n = coll.length()

                t0 = time.perf_counter_ns()
                algo_fn(coll, 0, n)
                t1 = time.perf_counter_ns()

                elapsed = t1 - t0
                result["samples_ns"].append(int(elapsed))

                if elapsed > threshold_ns:
                    result["status"] = "timeout"
                    result["timed_out_on_repeat"] = r
                    break

            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
