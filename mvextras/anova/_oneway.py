"""
One-way ANOVA from group summary statistics.

Given per-group counts n_i, means m_i and variances v_i (denominator n_i):

    grand mean  = sum(n_i m_i) / N
    SS_between  = sum(n_i (m_i - grand)^2)
    SS_within   = sum(n_i v_i)
    SS_total    = SS_between + SS_within
    df          = (k - 1, N - k)
    F           = MS_between / MS_within
    eta^2       = SS_between / SS_total
    p           = 1 - F_cdf(F; k - 1, N - k)

Variances use denominator n_i so a singleton group has variance 0 rather
than 0/0; multiplying back by n_i recovers the group's sum of squares
either way.

This routine sits inside the m x m association sweep, where sparse or
degenerate groupings are routine. Every undefined quantity is NaN; nothing
raises for data-dependent reasons.
"""

import math

import numpy as np
from numpy.typing import ArrayLike

from mvextras.anova._common import AnovaTableRow
from mvextras.core.validation import check_consistent_length
from mvextras.special import f_sf


def _safe_div(num: float, den: float) -> float:
    if den == 0 or math.isnan(num) or math.isnan(den):
        return math.nan
    return num / den


def _nan_table(df_between: float, df_within: float) -> tuple[AnovaTableRow, AnovaTableRow]:
    nan = math.nan
    return (
        AnovaTableRow('Between', nan, df_between, nan, nan, nan, nan),
        AnovaTableRow('Within', nan, df_within, nan, nan, nan, nan),
    )


def oneway_table(
    counts: ArrayLike,
    means: ArrayLike,
    variances: ArrayLike,
) -> tuple[tuple[AnovaTableRow, AnovaTableRow], float]:
    """
    Build the two-row ANOVA table.

    Returns:
        (table, grand_mean). With fewer than two groups or a zero total
        count every entry of both rows is NaN.
    """
    n = np.asarray(counts, dtype=np.float64)
    m = np.asarray(means, dtype=np.float64)
    v = np.asarray(variances, dtype=np.float64)
    check_consistent_length(n, m, v, names=("counts", "means", "variances"))

    k = len(n)
    n_total = float(n.sum())
    if k < 2 or n_total <= 0:
        return _nan_table(math.nan, math.nan), math.nan

    grand_mean = float(np.dot(n, m)) / n_total
    ss_between = float(np.sum(n * (m - grand_mean) ** 2))
    ss_within = float(np.sum(n * v))
    ss_total = ss_between + ss_within

    df_between = float(k - 1)
    df_within = n_total - k

    ms_between = _safe_div(ss_between, df_between)
    ms_within = _safe_div(ss_within, df_within)
    f_value = _safe_div(ms_between, ms_within)
    eta_squared = _safe_div(ss_between, ss_total)

    if math.isnan(f_value) or f_value < 0:
        p_value = math.nan
    else:
        p_value = f_sf(f_value, df_between, df_within)

    between = AnovaTableRow(
        source='Between',
        sum_sq=ss_between,
        df=df_between,
        mean_sq=ms_between,
        f_value=f_value,
        p_value=p_value,
        eta_squared=eta_squared,
    )
    within = AnovaTableRow(
        source='Within',
        sum_sq=ss_within,
        df=df_within,
        mean_sq=ms_within,
        f_value=math.nan,
        p_value=math.nan,
        eta_squared=math.nan,
    )
    return (between, within), grand_mean
