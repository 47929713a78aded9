"""Uniformity checks for sampled output.

Used by the test suite and ``scripts/check_uniformity.py``. The acceptance
limit is the Wilson-Hilferty cube-root approximation to the chi-squared
quantile ``z`` standard deviations above the mean.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

import numpy as np


def sample(draw: Callable[[], float], n: int) -> np.ndarray:
    """Collect ``n`` results of ``draw()`` into an array."""
    return np.fromiter((draw() for _ in range(n)), dtype=np.float64, count=n)


def bucket_counts(values: Iterable[int], num_buckets: int) -> np.ndarray:
    """Occurrences of each integer in [0, num_buckets)."""
    arr = np.asarray(list(values), dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= num_buckets):
        raise ValueError(f"Values fall outside [0, {num_buckets})")
    return np.bincount(arr, minlength=num_buckets)


def float_bucket_counts(
    values: np.ndarray, start: float, stop: float, num_buckets: int
) -> np.ndarray:
    """Histogram of floats in [start, stop) over equal-width buckets."""
    counts, _ = np.histogram(values, bins=num_buckets, range=(start, stop))
    return counts


def chi_squared(counts: np.ndarray) -> float:
    """Pearson statistic against equal expected frequency per bucket."""
    counts = np.asarray(counts, dtype=np.float64)
    expected = counts.sum() / counts.size
    return float(((counts - expected) ** 2 / expected).sum())


def chi_squared_limit(dof: int, z: float = 4.0) -> float:
    """Approximate chi-squared quantile ``z`` standard deviations out.

    z=4 leaves roughly a 3e-5 false-alarm rate, which keeps statistical
    tests from flaking.
    """
    k = 2.0 / (9.0 * dof)
    return dof * (1.0 - k + z * math.sqrt(k)) ** 3


def looks_uniform(counts: np.ndarray, z: float = 4.0) -> bool:
    return chi_squared(counts) <= chi_squared_limit(len(counts) - 1, z)
