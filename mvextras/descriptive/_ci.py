"""
Confidence interval and significance for a Pearson correlation.

CI: Fisher z-transform z = atanh(r) with standard error 1/sqrt(n - 3), a
symmetric interval in z-space, mapped back with tanh.

p-value: two-sided normal approximation to t = r * sqrt((n - 2) / (1 - r^2)).
This is an approximation to the exact t-distribution p-value; it is close
for moderate n and anti-conservative for very small n.
"""

import math

from mvextras.descriptive._common import CorrelationCI
from mvextras.special import normal_cdf


def _from_z(z: float) -> float:
    """Inverse Fisher transform (e^{2z} - 1) / (e^{2z} + 1)."""
    return math.tanh(z)


def correlation_ci(r: float, n: int, z: float = 1.96) -> CorrelationCI:
    """
    Fisher-z confidence interval for a correlation coefficient.

    Args:
        r: Observed correlation
        n: Number of complete cases it was computed from
        z: Normal quantile; 1.96 gives a 95% interval

    Returns:
        CorrelationCI. Invalid input (|r| > 1, NaN r, n <= 3) gives NaN
        bounds with a diagnostic; |r| == 1 gives the degenerate [r, r].
    """
    if math.isnan(r) or r < -1 or r > 1:
        return CorrelationCI(
            low=math.nan, high=math.nan,
            error="Correlation coefficient must be between -1 and 1",
        )
    if n <= 3:
        return CorrelationCI(
            low=math.nan, high=math.nan,
            error="Sample size must be greater than 3",
        )
    if abs(r) == 1:
        return CorrelationCI(
            low=r, high=r,
            error="Perfect correlation - CI is the point estimate",
        )

    z_r = 0.5 * math.log((1 + r) / (1 - r))
    se = 1.0 / math.sqrt(n - 3)
    margin = z * se

    return CorrelationCI(
        low=_from_z(z_r - margin),
        high=_from_z(z_r + margin),
        z_transformed=z_r,
        standard_error=se,
        margin_of_error=margin,
    )


def pearson_p_value(r: float, n: int) -> float:
    """
    Two-sided p-value for H0: rho = 0 (normal approximation).

    Exactly 0 for |r| == 1. NaN for NaN r, |r| > 1, or n < 3.
    """
    if math.isnan(r) or abs(r) > 1 or n < 3:
        return math.nan
    if abs(r) == 1:
        return 0.0
    t = r * math.sqrt((n - 2) / (1 - r * r))
    return 2.0 * (1.0 - normal_cdf(abs(t)))
