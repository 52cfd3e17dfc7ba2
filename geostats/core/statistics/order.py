"""geostats.core.statistics.order

Order statistics: percentiles, quantiles and quartiles.

Conventions:
- ``percentile`` is the mid-rank percentile: values equal to the probe get
  half credit, so ties are split instead of rounded.
- ``quantile`` is linear interpolation between closest ranks (Hyndman-Fan
  type 7, numpy's default "linear" method).
Sorting always works on a copy; the caller's sequence is left untouched.
"""

from __future__ import annotations

import math

import numpy as np

from .descriptive import Sample, as_sample


def percentile(values: Sample, value: float) -> float:
    """Percentage of the sample that lies below ``value``.

    Each element equal to ``value`` counts as half an element below it.

    Example:
        percentile([1, 2, 3, 4, 5], 3) == 50.0   # (2 + 0.5) / 5 * 100

    Returns NaN for an empty sample.
    """
    arr = as_sample(values)
    count = np.count_nonzero(arr < value) + 0.5 * np.count_nonzero(arr == value)
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(100.0 * np.float64(count) / np.float64(arr.size))


def quantile(values: Sample, q: float) -> float:
    """Sample quantile at ``q`` by linear interpolation.

    The fractional position is ``(n - 1) * q`` in the ascending sort; when it
    falls between two ranks the result interpolates between them.

    Args:
        values: non-empty numeric sample
        q: quantile level in [0, 1]

    Raises:
        ValueError: if q is outside [0, 1] or the sample is empty
    """
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"q must be in [0, 1], got {q}")
    nums = np.sort(as_sample(values))
    if nums.size == 0:
        raise ValueError("quantile() of an empty sample")

    pos = (nums.size - 1) * q
    lo = int(math.floor(pos))
    frac = pos - lo
    if frac == 0.0 or lo + 1 >= nums.size:
        return float(nums[lo])
    return float(nums[lo] + (nums[lo + 1] - nums[lo]) * frac)


def quartile25(values: Sample) -> float:
    """First quartile (Q1)."""
    return quantile(values, 0.25)


def quartile50(values: Sample) -> float:
    """Second quartile, the median."""
    return quantile(values, 0.50)


def quartile75(values: Sample) -> float:
    """Third quartile (Q3)."""
    return quantile(values, 0.75)


def interquartile_range(values: Sample) -> float:
    """Spread of the middle half of the sample, Q3 - Q1."""
    return quartile75(values) - quartile25(values)
