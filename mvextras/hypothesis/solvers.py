"""
Entry points for categorical-by-categorical association.

Public API:
    contingency_table(table, row, col, ...) -> ContingencyTable
    cramers_v_with_missing(table, predictor, response, ...) -> CramersVSummary
"""

from mvextras.data import CaseTable
from mvextras.hypothesis._chisq import chi_squared
from mvextras.hypothesis._common import CramersVSummary
from mvextras.hypothesis._contingency import ContingencyTable, stream_contingency


def contingency_table(
    table: CaseTable,
    row: str,
    col: str,
    *,
    empty_string_missing: bool = True,
) -> ContingencyTable:
    """
    Cross-tabulate two categorical attributes, MISSING included as a level.
    """
    counts, _ = stream_contingency(
        table.categorical(row, empty_string_missing=empty_string_missing),
        table.categorical(col, empty_string_missing=empty_string_missing),
    )
    return counts


def cramers_v_with_missing(
    table: CaseTable,
    predictor: str,
    response: str,
    *,
    empty_string_missing: bool = True,
) -> CramersVSummary:
    """
    Cramer's V between two categorical attributes.

    Reported twice: over complete cases only (correlation, p_value) and with
    missing values kept as a category on each axis (correl_incl_missing,
    p_incl_missing). Also carries the missingness correlation of the pair.

    Examples:
        >>> v = cramers_v_with_missing(table, 'smoker', 'region')
        >>> v.correlation, v.test.statistic, v.test.df
    """
    counts, missing = stream_contingency(
        table.categorical(predictor, empty_string_missing=empty_string_missing),
        table.categorical(response, empty_string_missing=empty_string_missing),
    )
    complete = counts.excluding_missing()
    test = chi_squared(complete)
    test_incl = chi_squared(counts.including_missing())

    return CramersVSummary(
        correlation=test.cramers_v,
        p_value=test.p_value,
        correl_incl_missing=test_incl.cramers_v,
        p_incl_missing=test_incl.p_value,
        n_complete=complete.total,
        test=test,
        test_incl_missing=test_incl,
        missing=missing,
    )
