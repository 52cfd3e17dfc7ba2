"""geostats.core.statistics.distributions

Standard normal conversions between z-scores and p-values (no SciPy).

Implemented:
- z -> p: power series for the standard normal CDF
- p -> z: rational approximation of the normal quantile (Beasley-Springer
  style), with a separate tail fit for p > 0.92

z -> p series:
  Phi(z) = 1/2 + 1/sqrt(2*pi) * sum_k (-1)^k z^(2k+1) / ((2k+1) 2^k k!)

  Terms are added until one falls below exp(-23). Outside |z| <= 6.5 the
  alternating series loses too many significant digits, so the result is
  clamped to exactly 0.0 or 1.0.

p -> z:
  p < 0.5 uses the symmetry z(p) = -z(1 - p). In [0.5, 0.92] a rational
  polynomial in (p - 1/2)^2 is used, above 0.92 one in r = sqrt(-ln(1 - p)).
  The coefficients below must not be rounded or "tidied"; the error bounds of
  the approximation depend on them as published.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


Z_CLAMP = 6.5

# 1 / sqrt(2 * pi), truncated as in the reference tables
_INV_SQRT_2PI = 0.3989422804
_SERIES_STOP = math.exp(-23)

# Central region, p in [0.5, 0.92]
_A0 = 2.5066282
_A1 = -18.6150006
_A2 = 41.3911977
_A3 = -25.4410605
_B1 = -8.4735109
_B2 = 23.0833674
_B3 = -21.0622410
_B4 = 3.1308291

# Tail region, p > 0.92
_C0 = -2.7871893
_C1 = -2.2979648
_C2 = 4.8501413
_C3 = 2.3212128
_D1 = 3.5438892
_D2 = 1.6370678


def z_score_to_p_value(z: float) -> float:
    """Cumulative probability P(Z <= z) of the standard normal distribution.

    Args:
        z: number of standard deviations from the mean

    Returns:
        p-value in [0, 1]; exactly 0.0 for z < -6.5 and 1.0 for z > 6.5
    """
    if z < -Z_CLAMP:
        logger.debug("z=%s below -%s, clamping p-value to 0", z, Z_CLAMP)
        return 0.0
    if z > Z_CLAMP:
        logger.debug("z=%s above %s, clamping p-value to 1", z, Z_CLAMP)
        return 1.0

    fact_k = 1.0
    term = 1.0
    p_value = 0.0
    k = 0
    while abs(term) > _SERIES_STOP:
        term = (
            _INV_SQRT_2PI * (-1) ** k * z ** k / (2 * k + 1) / 2 ** k
            * z ** (k + 1) / fact_k
        )
        p_value += term
        k += 1
        fact_k *= k

    # cancellation near the clamp edge can leave the sum a hair outside [0, 1]
    return min(max(p_value + 0.5, 0.0), 1.0)


def p_value_to_z_score(p: float) -> float:
    """Standard normal quantile: the z with P(Z <= z) = p.

    Args:
        p: probability in [0, 1]

    Returns:
        z-score; +inf for p == 1 and -inf for p == 0

    Raises:
        ValueError: if p is outside [0, 1] or NaN
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")

    if p < 0.5:
        return -p_value_to_z_score(1.0 - p)

    if p > 0.92:
        if p == 1.0:
            return math.inf
        r = math.sqrt(-math.log(1.0 - p))
        return (((_C3 * r + _C2) * r + _C1) * r + _C0) / ((_D2 * r + _D1) * r + 1.0)

    q = p - 0.5
    r = q * q
    return q * (((_A3 * r + _A2) * r + _A1) * r + _A0) / ((((_B4 * r + _B3) * r + _B2) * r + _B1) * r + 1.0)
