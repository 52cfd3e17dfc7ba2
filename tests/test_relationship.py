"""
Tests for covariance, correlation and z-scores.
"""

import math

import numpy as np
import pytest

from geostats.core.statistics.relationship import (
    sample_covariance,
    sample_correlation,
    z_score,
    z_scores,
)


class TestCovariance:
    """Tests for sample_covariance."""

    def test_positive_covariance(self):
        assert sample_covariance([1, 2, 3, 4, 5], [2, 4, 6, 8, 10]) == pytest.approx(5.0)

    def test_negative_covariance(self):
        assert sample_covariance([1, 2, 3, 4, 5], [10, 8, 6, 4, 2]) == pytest.approx(-5.0)

    def test_matches_numpy(self):
        a = [1.2, 3.4, 0.5, 7.7, 2.1]
        b = [0.3, 2.2, -1.0, 5.5, 1.9]
        assert sample_covariance(a, b) == pytest.approx(np.cov(a, b, ddof=1)[0, 1])

    def test_symmetric(self):
        a = [1.0, 5.0, 2.0, 8.0]
        b = [3.0, -1.0, 4.0, 0.5]
        assert sample_covariance(a, b) == pytest.approx(sample_covariance(b, a))

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="equal length"):
            sample_covariance([1, 2, 3], [1, 2])

    def test_single_pair_is_nan(self):
        assert math.isnan(sample_covariance([1.0], [2.0]))


class TestCorrelation:
    """Tests for sample_correlation."""

    def test_perfect_positive(self):
        assert sample_correlation([1, 2, 3, 4, 5], [2, 4, 6, 8, 10]) == pytest.approx(1.0)

    def test_perfect_negative(self):
        assert sample_correlation([1, 2, 3, 4, 5], [10, 8, 6, 4, 2]) == pytest.approx(-1.0)

    def test_matches_numpy(self):
        a = [1.2, 3.4, 0.5, 7.7, 2.1]
        b = [0.3, 2.2, -1.0, 5.5, 1.9]
        assert sample_correlation(a, b) == pytest.approx(np.corrcoef(a, b)[0, 1])

    def test_bounded(self):
        rng = np.random.default_rng(7)
        a = rng.normal(size=50)
        b = 0.3 * a + rng.normal(size=50)
        assert -1.0 <= sample_correlation(a, b) <= 1.0

    def test_scale_invariant(self):
        a = [1.0, 4.0, 2.0, 9.0]
        b = [2.0, 3.0, 1.0, 7.0]
        assert sample_correlation(a, b) == pytest.approx(sample_correlation([x * 1000 for x in a], b))

    def test_zero_variance_is_not_finite(self):
        assert not math.isfinite(sample_correlation([1, 1, 1], [1, 2, 3]))


class TestZScores:
    """Tests for z_score and z_scores."""

    def test_z_score(self):
        assert z_score(12.0, 10.0, 2.0) == 1.0
        assert z_score(7.0, 10.0, 2.0) == -1.5

    def test_zero_std_dev(self):
        assert z_score(12.0, 10.0, 0.0) == math.inf
        assert math.isnan(z_score(10.0, 10.0, 0.0))

    def test_z_scores_are_standardized(self):
        zs = z_scores([2, 4, 4, 4, 5, 5, 7, 9])
        np.testing.assert_allclose(zs, [-1.5, -0.5, -0.5, -0.5, 0.0, 0.0, 1.0, 2.0])
        assert np.mean(zs) == pytest.approx(0.0, abs=1e-12)
        assert np.std(zs) == pytest.approx(1.0)
