"""Statistics utilities for geostats.

This package contains small, dependency-light statistical helpers:
- Descriptive statistics (sum, mean, variance, standard deviation, ...)
- Covariance, correlation and z-scores
- z-score <-> p-value conversion for the standard normal distribution
- Order statistics (percentile, quantile, quartiles)
- Random sampling helpers

No SciPy dependency is required.
"""

from .descriptive import (
    as_sample,
    sum_values,
    mean,
    deviations,
    variance,
    standard_deviation,
    median,
    mode,
    extent,
    value_range,
    difference,
    percentage,
    weighted_average,
    relative_error,
)
from .relationship import sample_covariance, sample_correlation, z_score, z_scores
from .distributions import z_score_to_p_value, p_value_to_z_score
from .order import (
    percentile,
    quantile,
    quartile25,
    quartile50,
    quartile75,
    interquartile_range,
)
from .sampling import shuffle, sample, randi, randf, randn

__all__ = [
    "as_sample",
    "sum_values",
    "mean",
    "deviations",
    "variance",
    "standard_deviation",
    "median",
    "mode",
    "extent",
    "value_range",
    "difference",
    "percentage",
    "weighted_average",
    "relative_error",
    "sample_covariance",
    "sample_correlation",
    "z_score",
    "z_scores",
    "z_score_to_p_value",
    "p_value_to_z_score",
    "percentile",
    "quantile",
    "quartile25",
    "quartile50",
    "quartile75",
    "interquartile_range",
    "shuffle",
    "sample",
    "randi",
    "randf",
    "randn",
]
