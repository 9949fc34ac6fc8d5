"""
Table-level entry points for streaming correlations.

Public API:
    pearson_with_missing(table, x, y) -> PearsonSummary
    missingness_correlation(table, x, y, ...) -> MissingnessSummary
"""

from mvextras.data import CaseTable
from mvextras.descriptive._common import MissingnessSummary, PearsonSummary
from mvextras.descriptive._pearson import stream_missingness, stream_pearson


def pearson_with_missing(table: CaseTable, x: str, y: str) -> PearsonSummary:
    """
    Pearson correlation between two numeric attributes, plus the
    correlation of their missingness indicators.

    Values that do not parse to a finite number count as missing.

    Args:
        table: Source cases
        x: Name of the first (predictor) attribute
        y: Name of the second (response) attribute

    Returns:
        PearsonSummary

    Examples:
        >>> s = pearson_with_missing(table, 'height', 'weight')
        >>> s.correlation, s.n_complete, s.missing.missingness_correlation
    """
    return stream_pearson(table.numeric(x), table.numeric(y))


def missingness_correlation(
    table: CaseTable,
    x: str,
    y: str,
    *,
    empty_string_missing: bool = True,
) -> MissingnessSummary:
    """
    Missingness summary for a pair whose types support no value measure.

    Both attributes are read as categorical, so only null-like values
    count as missing (an unparseable string is a value, not a blank).
    """
    return stream_missingness(
        table.categorical(x, empty_string_missing=empty_string_missing),
        table.categorical(y, empty_string_missing=empty_string_missing),
    )
