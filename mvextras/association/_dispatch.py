"""
Association dispatch by attribute kind.

    predictor    response     statistic
    ---------    --------     ---------
    numeric      numeric      Pearson r (+ Fisher CI, normal-approx p)
    categorical  numeric      eta from one-way ANOVA
    categorical  categorical  Cramer's V from chi-squared
    numeric      categorical  blank, or eta with roles swapped (npcr_mode)
    other        any          missingness correlation only
"""

import math

from mvextras.anova import eta_with_missing
from mvextras.association._common import AssociationResult, MeasureType
from mvextras.core.config import DEFAULT_CONFIG, AnalysisConfig
from mvextras.data import AttributeKind, CaseTable
from mvextras.descriptive import (
    correlation_ci,
    missingness_correlation,
    pearson_p_value,
    pearson_with_missing,
)
from mvextras.descriptive._pearson import stream_missingness
from mvextras.hypothesis import cramers_v_with_missing

# Below this many complete cases the Fisher CI and p-value are not reported.
_MIN_CASES_FOR_CI = 4


def _pearson(table: CaseTable, x: str, y: str, config: AnalysisConfig) -> AssociationResult:
    s = pearson_with_missing(table, x, y)
    r = s.correlation

    ci_low = ci_high = p_value = math.nan
    ci_error = None
    if not math.isnan(r) and s.n_complete >= _MIN_CASES_FOR_CI:
        ci = correlation_ci(r, s.n_complete, config.ci_z)
        ci_low, ci_high, ci_error = ci.low, ci.high, ci.error
        p_value = pearson_p_value(r, s.n_complete)

    return AssociationResult(
        predictor=x,
        response=y,
        measure_type=MeasureType.PEARSON,
        method="Pearson correlation",
        measure=r,
        n_complete=s.n_complete,
        n_total=s.missing.n_total,
        n_missing_x=s.missing.n_missing_x,
        n_missing_y=s.missing.n_missing_y,
        missingness_correlation=s.missing.missingness_correlation,
        ci_low=ci_low,
        ci_high=ci_high,
        ci_error=ci_error,
        p_value=p_value,
    )


def _eta(table: CaseTable, x: str, y: str, config: AnalysisConfig) -> AssociationResult:
    e = eta_with_missing(table, x, y, empty_string_missing=config.empty_string_missing)
    return AssociationResult(
        predictor=x,
        response=y,
        measure_type=MeasureType.ETA,
        method="eta (sqrt of eta-squared, one-way ANOVA)",
        measure=e.correlation,
        n_complete=e.n_complete,
        n_total=e.missing.n_total,
        n_missing_x=e.missing.n_missing_x,
        n_missing_y=e.missing.n_missing_y,
        missingness_correlation=e.missing.missingness_correlation,
        p_value=e.p_value,
        measure_incl_missing=e.correl_incl_missing,
        p_value_incl_missing=e.p_incl_missing,
    )


def _cramers_v(table: CaseTable, x: str, y: str, config: AnalysisConfig) -> AssociationResult:
    v = cramers_v_with_missing(table, x, y, empty_string_missing=config.empty_string_missing)
    return AssociationResult(
        predictor=x,
        response=y,
        measure_type=MeasureType.CRAMERS_V,
        method="Cramer's V (Pearson chi-squared)",
        measure=v.correlation,
        n_complete=v.n_complete,
        n_total=v.missing.n_total,
        n_missing_x=v.missing.n_missing_x,
        n_missing_y=v.missing.n_missing_y,
        missingness_correlation=v.missing.missingness_correlation,
        p_value=v.p_value,
        measure_incl_missing=v.correl_incl_missing,
        p_value_incl_missing=v.p_incl_missing,
    )


def _numeric_predicts_categorical(
    table: CaseTable, x: str, y: str, config: AnalysisConfig,
) -> AssociationResult:
    if config.npcr_mode == 'eta':
        # Categorical response stands in as the predictor; swap the
        # per-side missing counts back afterwards.
        e = eta_with_missing(table, y, x, empty_string_missing=config.empty_string_missing)
        return AssociationResult(
            predictor=x,
            response=y,
            measure_type=MeasureType.NUMERIC_PREDICTS_CATEGORICAL,
            method="eta with predictor and response swapped (placeholder)",
            measure=e.correlation,
            n_complete=e.n_complete,
            n_total=e.missing.n_total,
            n_missing_x=e.missing.n_missing_y,
            n_missing_y=e.missing.n_missing_x,
            missingness_correlation=e.missing.missingness_correlation,
            p_value=e.p_value,
            measure_incl_missing=e.correl_incl_missing,
            p_value_incl_missing=e.p_incl_missing,
        )

    m = stream_missingness(
        table.numeric(x),
        table.categorical(y, empty_string_missing=config.empty_string_missing),
    )
    return AssociationResult(
        predictor=x,
        response=y,
        measure_type=MeasureType.NUMERIC_PREDICTS_CATEGORICAL,
        method="not implemented (left blank)",
        measure=None,
        n_complete=m.n_complete,
        n_total=m.n_total,
        n_missing_x=m.n_missing_x,
        n_missing_y=m.n_missing_y,
        missingness_correlation=m.missingness_correlation,
    )


def _unsupported(table: CaseTable, x: str, y: str, config: AnalysisConfig) -> AssociationResult:
    m = missingness_correlation(table, x, y, empty_string_missing=config.empty_string_missing)
    return AssociationResult(
        predictor=x,
        response=y,
        measure_type=MeasureType.UNSUPPORTED,
        method="missingness correlation only",
        measure=None,
        n_complete=m.n_complete,
        n_total=m.n_total,
        n_missing_x=m.n_missing_x,
        n_missing_y=m.n_missing_y,
        missingness_correlation=m.missingness_correlation,
    )


_DISPATCH = {
    (AttributeKind.NUMERIC, AttributeKind.NUMERIC): _pearson,
    (AttributeKind.CATEGORICAL, AttributeKind.NUMERIC): _eta,
    (AttributeKind.CATEGORICAL, AttributeKind.CATEGORICAL): _cramers_v,
    (AttributeKind.NUMERIC, AttributeKind.CATEGORICAL): _numeric_predicts_categorical,
}


def associate(
    table: CaseTable,
    predictor: str,
    response: str,
    *,
    config: AnalysisConfig | None = None,
) -> AssociationResult:
    """
    Compute the association record for one ordered attribute pair.

    The statistic is chosen from the declared kinds of the two attributes.

    Args:
        table: Source cases
        predictor: First attribute (row of the association matrix)
        response: Second attribute (column of the association matrix)
        config: Analysis options; DEFAULT_CONFIG if None

    Returns:
        AssociationResult

    Raises:
        ValidationError: If either attribute is not in the table

    Examples:
        >>> rec = associate(table, 'height', 'weight')
        >>> rec.measure_type, rec.measure, rec.p_value
    """
    config = config or DEFAULT_CONFIG
    kinds = (table.attribute(predictor).kind, table.attribute(response).kind)
    compute = _DISPATCH.get(kinds, _unsupported)
    return compute(table, predictor, response, config)
