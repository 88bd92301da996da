"""Diagnostic functions for bucket distribution and remapping analysis."""

import logging
from typing import Dict, Union

import numpy as np

from jumphash.hashing.jump import Slots
from jumphash.hashing.vectorized import jump_hash_array

logger = logging.getLogger(__name__)


def sample_keys(n: int, seed: int = 42) -> np.ndarray:
    """
    Draw reproducible uniform 64-bit keys.

    Args:
        n: Number of keys
        seed: Seed for numpy Generator

    Returns:
        uint64 array of shape [n]
    """
    rng = np.random.default_rng(seed)
    return rng.integers(0, np.iinfo(np.uint64).max, size=n, dtype=np.uint64, endpoint=True)


def bucket_loads(buckets: np.ndarray, slots: Union[Slots, int]) -> np.ndarray:
    """
    Compute bucket loads (counts per bucket).

    Args:
        buckets: Flat array of bucket indices [N]
        slots: Number of buckets

    Returns:
        Array of counts per bucket, shape [slots]
    """
    n = Slots.coerce(slots).value
    return np.bincount(np.asarray(buckets, dtype=np.int64).ravel(), minlength=n)[:n]


def gini_of_load(loads: np.ndarray) -> float:
    """
    Compute Gini coefficient from load array.

    Unlike sparse-occupancy diagnostics, empty buckets count here: a bucket
    that receives nothing is part of the imbalance.

    Args:
        loads: Array of non-negative load values

    Returns:
        Gini coefficient (0 = uniform, 1 = maximum inequality)
    """
    loads = np.asarray(loads, dtype=np.float64)
    if len(loads) == 0 or loads.sum() == 0:
        return 0.0

    sorted_loads = np.sort(loads)
    n = len(sorted_loads)
    cumsum = np.cumsum(sorted_loads)
    gini = (2 * np.sum((np.arange(1, n + 1)) * sorted_loads)) / (n * cumsum[-1]) - (
        n + 1
    ) / n

    return float(gini)


def load_summary(buckets: np.ndarray, slots: Union[Slots, int]) -> Dict:
    """
    Compute compact load summary for a bucket assignment.

    Args:
        buckets: Flat array of bucket indices [N]
        slots: Number of buckets

    Returns:
        Dictionary with:
        - total_keys: int
        - slots: int
        - mean_load: float
        - std_load: float
        - min_load: int
        - max_load: int
        - max_over_mean: float (1.0 = perfectly even)
        - gini: float
    """
    n = Slots.coerce(slots).value
    loads = bucket_loads(buckets, n)
    total = int(loads.sum())

    if total == 0:
        return {
            "total_keys": 0,
            "slots": n,
            "mean_load": 0.0,
            "std_load": 0.0,
            "min_load": 0,
            "max_load": 0,
            "max_over_mean": 0.0,
            "gini": 0.0,
        }

    mean_load = float(loads.mean())
    return {
        "total_keys": total,
        "slots": n,
        "mean_load": mean_load,
        "std_load": float(loads.std()),
        "min_load": int(loads.min()),
        "max_load": int(loads.max()),
        "max_over_mean": float(loads.max()) / mean_load,
        "gini": gini_of_load(loads),
    }


def expected_remap_fraction(n_from: Union[Slots, int], n_to: Union[Slots, int]) -> float:
    """
    Theoretical fraction of keys that move when resizing.

    Growing n -> m moves 1 - n/m of keys (1/(n+1) for m = n+1).
    Shrinking m -> n moves the same fraction in reverse.

    Args:
        n_from: Slot count before resize
        n_to: Slot count after resize

    Returns:
        Expected remap fraction in [0, 1)
    """
    a = Slots.coerce(n_from).value
    b = Slots.coerce(n_to).value
    small, large = min(a, b), max(a, b)
    return 1.0 - small / large


def remap_fraction(
    keys: np.ndarray, n_from: Union[Slots, int], n_to: Union[Slots, int]
) -> float:
    """
    Empirical fraction of keys whose bucket changes when resizing.

    Args:
        keys: Array of 64-bit keys
        n_from: Slot count before resize
        n_to: Slot count after resize

    Returns:
        Fraction of keys that moved (0 to 1)
    """
    before = jump_hash_array(keys, n_from)
    after = jump_hash_array(keys, n_to)
    if before.size == 0:
        return 0.0

    moved = float(np.mean(before != after))
    logger.debug(
        "remap %s -> %s: moved=%.6f expected=%.6f",
        int(n_from),
        int(n_to),
        moved,
        expected_remap_fraction(n_from, n_to),
    )
    return moved


def moved_only_to_new_buckets(
    keys: np.ndarray, n_from: Union[Slots, int], n_to: Union[Slots, int]
) -> bool:
    """
    Check that growing n_from -> n_to only moves keys into new buckets.

    Args:
        keys: Array of 64-bit keys
        n_from: Slot count before growth
        n_to: Slot count after growth (>= n_from)

    Returns:
        True if every key that moved landed in a bucket >= n_from
    """
    a = Slots.coerce(n_from).value
    b = Slots.coerce(n_to).value
    if b < a:
        raise ValueError(f"n_to ({b}) must be >= n_from ({a})")

    before = jump_hash_array(keys, a)
    after = jump_hash_array(keys, b)
    moved = before != after
    return bool(np.all(after[moved] >= a))
