"""
Contingency tables, chi-squared independence test, Cramer's V.

Public API:
    chi_squared(table) -> ChiSquaredResult
    contingency_table(table, row, col, ...) -> ContingencyTable
    cramers_v_with_missing(table, predictor, response, ...) -> CramersVSummary
"""

from mvextras.hypothesis._common import ChiSquaredResult, CramersVSummary
from mvextras.hypothesis._contingency import ContingencyTable, stream_contingency
from mvextras.hypothesis._chisq import chi_squared
from mvextras.hypothesis.solvers import contingency_table, cramers_v_with_missing

__all__ = [
    "chi_squared",
    "contingency_table",
    "cramers_v_with_missing",
    "stream_contingency",
    "ContingencyTable",
    "ChiSquaredResult",
    "CramersVSummary",
]
