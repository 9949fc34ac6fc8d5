"""
One-way Analysis of Variance from summary statistics.

Public API:
    anova_from_summary(counts, means, variances) -> AnovaSolution
    anova_by_category(table, predictor, response, ...) -> AnovaSolution
    eta_with_missing(table, predictor, response, ...) -> EtaSummary
"""

from mvextras.anova._common import AnovaParams, AnovaTableRow, EtaSummary
from mvextras.anova._summary import MISSING_CATEGORY, CategorySummary, GroupArrays
from mvextras.anova.solution import AnovaSolution
from mvextras.anova.solvers import (
    anova_by_category,
    anova_from_summary,
    eta_with_missing,
)

__all__ = [
    "anova_from_summary",
    "anova_by_category",
    "eta_with_missing",
    "AnovaSolution",
    "AnovaParams",
    "AnovaTableRow",
    "EtaSummary",
    "CategorySummary",
    "GroupArrays",
    "MISSING_CATEGORY",
]
