"""geostats.core.statistics.descriptive

Core descriptive statistics over a numeric sample.

A sample is any 1-D sequence of finite reals (list, tuple, numpy array).
Inputs are never modified.

Degenerate input (an empty sample, or a single observation with Bessel's
correction) is a caller error. These functions do not raise for it; they
return NaN or inf so the caller can see the contract was violated. NaN or
inf inside a sample propagates to the result.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

Sample = Union[Sequence[float], np.ndarray]


def as_sample(values: Union[Sample, Iterable[float]]) -> np.ndarray:
    """Return ``values`` as a new 1-D float array.

    Raises:
        ValueError: if the input is not one-dimensional
    """
    if not isinstance(values, (np.ndarray, Sequence)):
        values = list(values)
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Sample must be one-dimensional, got shape {arr.shape}")
    return arr


def sum_values(values: Sample) -> float:
    """Total of all elements. An empty sample sums to 0.0."""
    return float(np.sum(as_sample(values)))


def mean(values: Sample) -> float:
    """Arithmetic mean, ``sum / n``.

    Returns NaN for an empty sample.
    """
    arr = as_sample(values)
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.float64(arr.sum()) / np.float64(arr.size))


def deviations(values: Sample, center: Optional[float] = None) -> np.ndarray:
    """Deviation of each element from ``center`` (the sample mean by default)."""
    arr = as_sample(values)
    if center is None:
        center = mean(arr)
    return arr - center


def variance(values: Sample, sample: bool = False) -> float:
    """Average squared deviation from the mean.

    Args:
        values: numeric sample
        sample: if True apply Bessel's correction and divide by ``n - 1``
            instead of ``n``. Requires at least two observations; with one
            the result is NaN.

    Returns:
        variance
    """
    arr = as_sample(values)
    denom = arr.size - (1 if sample else 0)
    with np.errstate(invalid="ignore", divide="ignore"):
        ss = np.sum(np.square(deviations(arr)))
        return float(np.float64(ss) / np.float64(denom))


def standard_deviation(values: Sample, sample: bool = False) -> float:
    """Square root of :func:`variance`, with the same correction flag."""
    return float(np.sqrt(variance(values, sample=sample)))


def median(values: Sample) -> float:
    """Middle value of the sorted sample.

    For an even number of values this is the mean of the two middle values,
    the same as ``quantile(values, 0.5)``.

    Raises:
        ValueError: for an empty sample
    """
    nums = np.sort(as_sample(values))
    n = nums.size
    if n == 0:
        raise ValueError("median() of an empty sample")
    mid = n // 2
    if n % 2:
        return float(nums[mid])
    return float((nums[mid - 1] + nums[mid]) / 2.0)


def mode(values: Sample) -> float:
    """Most frequent value. Ties go to the value that appears first.

    Raises:
        ValueError: for an empty sample
    """
    arr = as_sample(values)
    if arr.size == 0:
        raise ValueError("mode() of an empty sample")
    value, _count = Counter(arr.tolist()).most_common(1)[0]
    return float(value)


def extent(values: Sample) -> Tuple[float, float]:
    """``(min, max)`` of the sample."""
    arr = as_sample(values)
    return float(np.min(arr)), float(np.max(arr))


def value_range(values: Sample) -> float:
    """Difference between the largest and smallest value."""
    lo, hi = extent(values)
    return hi - lo


def difference(values: Sample) -> float:
    """Absolute spread ``|max - min|``; never negative."""
    return abs(value_range(values))


def percentage(value: float, total: float) -> float:
    """``value`` as a percentage of ``total``. 0/0 is defined as 0."""
    if value == 0 and total == 0:
        return 0.0
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.float64(100.0 * value) / np.float64(total))


def weighted_average(values: Sample, weights: Sample) -> float:
    """Weighted mean ``sum(v * w) / sum(w)``.

    Raises:
        ValueError: if values and weights differ in length
    """
    v = as_sample(values)
    w = as_sample(weights)
    if v.size != w.size:
        raise ValueError(f"values and weights must have equal length, got {v.size} and {w.size}")
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.float64(np.dot(v, w)) / np.float64(np.sum(w)))


def relative_error(actual: float, expected: float) -> float:
    """``|(actual - expected) / expected|``; zero when both are zero."""
    if actual == 0 and expected == 0:
        return 0.0
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(abs(np.float64(actual - expected) / np.float64(expected)))
