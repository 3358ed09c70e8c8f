"""
Seeded input generators for sorting tests and benchmarks.

Distributions:
- "random":        integers drawn uniformly from params["range"] (inclusive).
- "sorted":        [0, 1, ..., n-1]; the best case for insertion and shell sort.
- "reversed":      [n-1, ..., 0]; the worst case for insertion sort.
- "nearly_sorted": [0..n-1] then ceil(swap_frac * n) random index swaps.
- "few_uniques":   n samples over at most k distinct values from an optional
                   inclusive params["range"] (default [0, 2**32 - 1]).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Returns a Python `list[int]`, so results feed straight into
  `SequenceSortable` or `By.sort`.
- The caller owns and seeds the RNG; "sorted" and "reversed" ignore it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "sorted",
    "reversed",
    "nearly_sorted",
    "few_uniques",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}

        random:        {"range": [min_int, max_int]}   # required, inclusive
        nearly_sorted: {"swap_frac": 0.05}             # optional, in [0, 1]
        few_uniques:   {"k": 8, "range": [lo, hi]}     # k required, range optional
        sorted / reversed: params unused
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError("spec.params must be a dict if provided")

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "random":
        lo, hi = _parse_range(params, required=True, default=(0, 0))
        if n == 0:
            return []
        # Generator.integers is half-open; +1 makes hi inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps == 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i, j = int(idxs[2 * k]), int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    # few_uniques
    k = _parse_k(params)
    lo, hi = _parse_range(params, required=False, default=(0, 2**32 - 1))
    if n == 0:
        return []
    actual_k = int(min(k, n, hi - lo + 1))
    if hi - lo < 1_000_000:
        values = rng.choice(
            np.arange(lo, hi + 1, dtype=np.int64), size=actual_k, replace=False
        ).tolist()
    else:
        values = _distinct_draws(rng, lo, hi, actual_k)
    picks = rng.integers(0, actual_k, size=n)
    return [int(values[int(t)]) for t in picks]


# ------------------------- helpers ------------------------- #


def _distinct_draws(rng: np.random.Generator, lo: int, hi: int, k: int) -> List[int]:
    # Rejection sampling for wide ranges where materialising arange is wasteful.
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


def _validate_n(n: int) -> None:
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(
    params: Dict[str, Any], *, required: bool, default: Tuple[int, int]
) -> Tuple[int, int]:
    """Parse params["range"] == [min_int, max_int] (both inclusive)."""
    if "range" not in params:
        if required:
            raise ValueError("params.range must be provided as [min, max] (inclusive)")
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer types; bool is excluded.
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
