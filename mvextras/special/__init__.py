"""
Special functions used for p-values.

Public API:
    log_gamma(z)
    regularized_incomplete_beta(x, a, b)
    regularized_gamma_p(a, x), regularized_gamma_q(a, x)
    f_cdf(x, d1, d2), f_sf(x, d1, d2)
    chi2_cdf(x, df), chi2_sf(x, df), chi2_sf_wilson_hilferty(x, df)
    erf(x), normal_cdf(x)

All functions are scalar, pure, and return NaN on invalid domain input.
"""

from mvextras.special._gamma import (
    LOG_GAMMA_FLOOR,
    log_gamma,
    regularized_gamma_p,
    regularized_gamma_q,
)
from mvextras.special._beta import regularized_incomplete_beta
from mvextras.special._normal import erf, normal_cdf
from mvextras.special.distributions import (
    chi2_cdf,
    chi2_sf,
    chi2_sf_wilson_hilferty,
    f_cdf,
    f_sf,
)

__all__ = [
    "LOG_GAMMA_FLOOR",
    "log_gamma",
    "regularized_incomplete_beta",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "f_cdf",
    "f_sf",
    "chi2_cdf",
    "chi2_sf",
    "chi2_sf_wilson_hilferty",
    "erf",
    "normal_cdf",
]
