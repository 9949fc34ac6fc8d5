"""
Error function and standard normal CDF.

Abramowitz & Stegun formula 7.1.26, evaluated with Horner's rule.
Maximum absolute error 1.5e-7.
"""

import math

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_SQRT2 = math.sqrt(2.0)


def erf(x: float) -> float:
    """Error function, |error| <= 1.5e-7. NaN in, NaN out."""
    if math.isnan(x):
        return math.nan
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    t = 1.0 / (1.0 + _P * x)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    return sign * (1.0 - poly * math.exp(-x * x))


def normal_cdf(x: float) -> float:
    """P(Z <= x) for a standard normal Z."""
    if math.isnan(x):
        return math.nan
    return 0.5 * (1.0 + erf(x / _SQRT2))
