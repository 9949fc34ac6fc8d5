"""
Common types for contingency-table tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mvextras.descriptive import MissingnessSummary


@dataclass(frozen=True)
class ChiSquaredResult:
    """
    Pearson chi-squared test of independence on a contingency table.

    Attributes
    ----------
    statistic : float
        sum((O - E)^2 / E) over cells with E > 0. NaN for an empty table.
    df : float
        (rows - 1) * (cols - 1) over observed levels.
    p_value : float
        1 - chi2_cdf(statistic, df).
    p_value_wilson_hilferty : float
        Wilson-Hilferty approximation of the same tail, kept as a
        cross-check; not the reported p-value.
    cramers_v : float
        sqrt(statistic / (n * min(rows - 1, cols - 1))). NaN when either
        margin has fewer than two levels.
    n : int
        Grand total of the table.
    n_rows, n_cols : int
        Observed levels on each axis.
    expected : ndarray or None
        Expected counts under independence.
    """
    statistic: float
    df: float
    p_value: float
    p_value_wilson_hilferty: float
    cramers_v: float
    n: int
    n_rows: int
    n_cols: int
    expected: NDArray[np.floating[Any]] | None = None


@dataclass(frozen=True)
class CramersVSummary:
    """
    Cramer's V between two categorical attributes, with and without a
    category for missing values on either axis.
    """
    correlation: float
    p_value: float
    correl_incl_missing: float
    p_incl_missing: float
    n_complete: int
    test: ChiSquaredResult
    test_incl_missing: ChiSquaredResult
    missing: MissingnessSummary
