"""geostats.core.statistics.relationship

Covariance, correlation and z-scores.

Covariance tells the direction two variables move in together; correlation
scales it by both standard deviations so the result is unit-free and bounded
in [-1, 1]. Both use Bessel's correction and need paired samples of equal
length n >= 2. With n < 2, or with a zero-variance sample in a correlation,
the result is NaN or inf.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .descriptive import Sample, as_sample, mean, standard_deviation


def _paired(a: Sample, b: Sample) -> Tuple[np.ndarray, np.ndarray]:
    x = as_sample(a)
    y = as_sample(b)
    if x.size != y.size:
        raise ValueError(f"Paired samples must have equal length, got {x.size} and {y.size}")
    return x, y


def sample_covariance(a: Sample, b: Sample) -> float:
    """Sample covariance of two paired samples.

    cov = sum((a_i - mean_a) * (b_i - mean_b)) / (n - 1)

    Raises:
        ValueError: if the samples differ in length
    """
    x, y = _paired(a, b)
    with np.errstate(invalid="ignore", divide="ignore"):
        s = np.dot(x - mean(x), y - mean(y))
        return float(np.float64(s) / np.float64(x.size - 1))


def sample_correlation(a: Sample, b: Sample) -> float:
    """Pearson correlation of two paired samples, in [-1, 1].

    corr = cov(a, b) / (sd_a * sd_b), all with Bessel's correction.

    Raises:
        ValueError: if the samples differ in length
    """
    x, y = _paired(a, b)
    cov = sample_covariance(x, y)
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.float64(cov) / standard_deviation(x, sample=True) / standard_deviation(y, sample=True))


def z_score(x: float, mean: float, std_dev: float) -> float:
    """Number of standard deviations ``x`` lies from ``mean``.

    A zero ``std_dev`` gives +/-inf (or NaN when ``x == mean``).
    """
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.float64(x - mean) / np.float64(std_dev))


def z_scores(values: Sample, sample: bool = False) -> np.ndarray:
    """z-score of every element against the sample's own mean and std dev."""
    arr = as_sample(values)
    m = mean(arr)
    sd = standard_deviation(arr, sample=sample)
    with np.errstate(invalid="ignore", divide="ignore"):
        return (arr - m) / sd
