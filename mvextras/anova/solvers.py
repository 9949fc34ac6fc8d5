"""
ANOVA entry points.

Public API:
    anova_from_summary(counts, means, variances) -> AnovaSolution
    anova_by_category(table, predictor, response, ...) -> AnovaSolution
    eta_with_missing(table, predictor, response, ...) -> EtaSummary
"""

import math
import time

from numpy.typing import ArrayLike

from mvextras.anova._common import AnovaParams, EtaSummary
from mvextras.anova._eta import stream_eta
from mvextras.anova._oneway import oneway_table
from mvextras.anova.solution import AnovaSolution
from mvextras.core.result import Result
from mvextras.data import CaseTable


def _solution(counts, means, variances, info: dict, t0: float) -> AnovaSolution:
    table, grand_mean = oneway_table(counts, means, variances)
    between, within = table
    total = between.sum_sq + within.sum_sq
    n_groups = len(counts)

    warnings_list: list[str] = []
    if n_groups < 2:
        warnings_list.append(f"ANOVA undefined with {n_groups} group(s)")
    elif math.isnan(between.f_value):
        warnings_list.append("F statistic undefined (zero within-group variance or df)")

    params = AnovaParams(
        table=table,
        n_obs=float(sum(counts)),
        n_groups=n_groups,
        grand_mean=grand_mean,
        total_sum_sq=total,
    )
    result = Result(
        params=params,
        info=info,
        timing={'total_seconds': time.perf_counter() - t0},
        backend_name='cpu_summary',
        warnings=tuple(warnings_list),
    )
    return AnovaSolution(_result=result)


def anova_from_summary(
    counts: ArrayLike,
    means: ArrayLike,
    variances: ArrayLike,
) -> AnovaSolution:
    """
    One-way ANOVA table from per-group summary statistics.

    Args:
        counts: Group sizes n_i (length k)
        means: Group means (length k)
        variances: Group variances with denominator n_i, not n_i - 1

    Returns:
        AnovaSolution with Between/Within rows. Undefined entries are NaN.

    Raises:
        DimensionError: If the three arrays differ in length

    Examples:
        >>> sol = anova_from_summary([2, 2], [1.5, 11.0], [0.25, 1.0])
        >>> sol.eta_squared
        0.973...
    """
    t0 = time.perf_counter()
    counts = list(counts)
    return _solution(counts, means, variances, {'design_type': 'summary'}, t0)


def anova_by_category(
    table: CaseTable,
    predictor: str,
    response: str,
    *,
    include_missing: bool = False,
    empty_string_missing: bool = True,
) -> AnovaSolution:
    """
    One-way ANOVA of a numeric response grouped by a categorical predictor.

    Args:
        table: Source cases
        predictor: Categorical attribute defining the groups
        response: Numeric attribute
        include_missing: Pool cases with a missing predictor into one extra
            group instead of dropping them
        empty_string_missing: Treat '' predictor values as missing

    Returns:
        AnovaSolution; group_means keyed by label ('<missing>' for the pool)
    """
    t0 = time.perf_counter()
    _, summary = stream_eta(
        table.categorical(predictor, empty_string_missing=empty_string_missing),
        table.numeric(response),
    )
    groups = summary.including_missing() if include_missing else summary.excluding_missing()
    group_means = {
        (label if isinstance(label, str) else '<missing>'): float(mean)
        for label, mean in zip(groups.labels, groups.means)
    }
    info = {
        'design_type': 'oneway',
        'predictor': predictor,
        'response': response,
        'include_missing': include_missing,
        'group_means': group_means,
    }
    return _solution(list(groups.counts), groups.means, groups.variances, info, t0)


def eta_with_missing(
    table: CaseTable,
    predictor: str,
    response: str,
    *,
    empty_string_missing: bool = True,
) -> EtaSummary:
    """
    Eta of a categorical predictor on a numeric response, reported with and
    without a pooled group for missing predictor values, together with the
    missingness correlation of the pair.

    Examples:
        >>> eta = eta_with_missing(table, 'team', 'score')
        >>> eta.correlation, eta.correl_incl_missing, eta.p_value
    """
    summary, _ = stream_eta(
        table.categorical(predictor, empty_string_missing=empty_string_missing),
        table.numeric(response),
    )
    return summary
