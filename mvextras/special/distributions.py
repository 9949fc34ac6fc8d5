"""
Cumulative distribution functions built on the special functions.

    F(d1, d2):      P(F <= x) = I_{d1 x / (d1 x + d2)}(d1/2, d2/2)
    chi-squared(k): P(X <= x) = P(k/2, x/2)

Upper-tail helpers return 1 - CDF directly so that p-values are computed
in one place. The Wilson-Hilferty cube-root normal approximation is kept
as an independent cross-check on the chi-squared tail.
"""

import math

from mvextras.special._beta import regularized_incomplete_beta
from mvextras.special._gamma import regularized_gamma_p, regularized_gamma_q
from mvextras.special._normal import normal_cdf


def _bad_df(*dfs: float) -> bool:
    return any(math.isnan(df) or df <= 0 for df in dfs)


def f_cdf(x: float, d1: float, d2: float) -> float:
    """
    CDF of the F distribution with (d1, d2) degrees of freedom.

    Returns NaN for non-positive degrees of freedom or NaN x, 0 for x <= 0.
    """
    if math.isnan(x) or _bad_df(d1, d2):
        return math.nan
    if x <= 0:
        return 0.0
    if math.isinf(x):
        return 1.0
    z = (d1 * x) / (d1 * x + d2)
    return regularized_incomplete_beta(z, d1 / 2.0, d2 / 2.0)


def f_sf(x: float, d1: float, d2: float) -> float:
    """Upper tail 1 - f_cdf(x, d1, d2)."""
    cdf = f_cdf(x, d1, d2)
    if math.isnan(cdf):
        return math.nan
    return 1.0 - cdf


def chi2_cdf(x: float, df: float) -> float:
    """
    CDF of the chi-squared distribution with df degrees of freedom.

    Returns NaN for df <= 0 or NaN x, 0 for x <= 0.
    """
    if math.isnan(x) or _bad_df(df):
        return math.nan
    if x <= 0:
        return 0.0
    return regularized_gamma_p(df / 2.0, x / 2.0)


def chi2_sf(x: float, df: float) -> float:
    """Upper tail of the chi-squared distribution, via Q to keep tail precision."""
    if math.isnan(x) or _bad_df(df):
        return math.nan
    if x <= 0:
        return 1.0
    return regularized_gamma_q(df / 2.0, x / 2.0)


def chi2_sf_wilson_hilferty(x: float, df: float) -> float:
    """
    Wilson-Hilferty approximation to the chi-squared upper tail.

    (X/k)^(1/3) is approximately normal with mean 1 - 2/(9k) and
    variance 2/(9k).
    """
    if math.isnan(x) or _bad_df(df):
        return math.nan
    if x <= 0:
        return 1.0
    v = 2.0 / (9.0 * df)
    z = ((x / df) ** (1.0 / 3.0) - (1.0 - v)) / math.sqrt(v)
    return 1.0 - normal_cdf(z)
