"""
Input generators for exercising the sorting algorithms.

Supported distributions:

- dist == "random":
    Integers drawn uniformly from an inclusive range (params["range"]).

- dist == "nearly_sorted":
    [0, 1, ..., n-1] followed by ceil(swap_frac * n) random index swaps.

- dist == "few_uniques":
    Up to k distinct values (uniform over an optional inclusive range), then the
    array is filled by sampling from that value list.

- dist == "duplicates":
    Values drawn uniformly from [0, k); duplicate-heavy by construction. This
    is what the stability probe uses.

- dist == "reversed":
    [n-1, n-2, ..., 0]; ignores params and RNG.

- dist == "equal":
    n copies of params["value"] (default 42); ignores RNG.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Ranges are **inclusive** on both ends.
- Always returns a plain Python `list[int]`; algorithms stay NumPy-agnostic.
- The caller owns and seeds the RNG.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "duplicates",
    "reversed",
    "equal",
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
        {"dist": <name>, "params": {...}}, for example:

            {"dist": "random", "params": {"range": [0, 999]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 8, "range": [0, 100]}}
            {"dist": "duplicates", "params": {"k": 10}}
            {"dist": "reversed"}
            {"dist": "equal", "params": {"value": 7}}

    rng : numpy.random.Generator
        Random number generator owned by the caller.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If `n` or `spec` is invalid, or the distribution is unsupported.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
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
        lo, hi = _parse_range(params, required=True)
        # Generator.integers is half-open; +1 makes hi inclusive
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for s in range(num_swaps):
            i, j = int(idxs[2 * s]), int(idxs[2 * s + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_range(params, required=False, default=(0, 4294967295))
        actual_k = int(min(k, n, hi - lo + 1))
        # without-replacement draw keeps the value pool tied to `rng`
        if hi - lo + 1 <= 1_000_000:
            pool = (rng.choice(hi - lo + 1, size=actual_k, replace=False) + lo).tolist()
        else:
            pool = _draw_distinct(rng, lo, hi, actual_k)
        picks = rng.integers(0, actual_k, size=n)
        return [int(pool[int(t)]) for t in picks]

    if dist == "duplicates":
        k = _parse_k(params)
        return rng.integers(0, k, size=n, dtype=np.int64).tolist()

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "equal":
        value = params.get("value", 42)
        if not _is_int_like(value):
            raise ValueError(f"equal.params.value must be an integer; got {value!r}")
        return [int(value)] * n

    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _draw_distinct(rng: np.random.Generator, lo: int, hi: int, k: int) -> List[int]:
    chosen: List[int] = []
    seen = set()
    while len(chosen) < k:
        batch = rng.integers(lo, hi + 1, size=(k - len(chosen)) * 2)
        for v in map(int, batch):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == k:
                    break
    return chosen


def _parse_range(
    params: Dict[str, Any], *, required: bool, default: Tuple[int, int] = (0, 0)
) -> Tuple[int, int]:
    """Parse params["range"] == [min_int, max_int] (inclusive)."""
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
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    k = params.get("k", None)
    if isinstance(k, bool) or not _is_int_like(k) or k < 1:
        raise ValueError(f"params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars
    return isinstance(x, (int, np.integer))
