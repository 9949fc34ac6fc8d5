"""
mvextras: association and regression statistics for tabular case data.

Given a table of cases with numeric, categorical and other attributes,
mvextras computes a pairwise association matrix (Pearson r, eta, Cramer's
V, each with missing-value diagnostics) and fits multiple linear
regressions by coordinate descent.

Submodules:
    special: Gamma/beta functions and F, chi-squared, normal CDFs
    data: Case tables and attribute classification
    descriptive: Streaming moments, Pearson correlation, confidence intervals
    anova: One-way ANOVA and eta
    hypothesis: Contingency tables, chi-squared, Cramer's V
    association: Pairwise association dispatch and sweeps
    regression: Coordinate-descent multiple regression
"""

__version__ = "0.1.0"

from mvextras import special
from mvextras import data
from mvextras import descriptive
from mvextras import anova
from mvextras import hypothesis
from mvextras import association
from mvextras import regression
from mvextras.core import AnalysisConfig, Session
from mvextras.data import CaseTable

__all__ = [
    "__version__",
    "special",
    "data",
    "descriptive",
    "anova",
    "hypothesis",
    "association",
    "regression",
    "AnalysisConfig",
    "Session",
    "CaseTable",
]
