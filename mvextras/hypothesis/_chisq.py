"""
Chi-squared test of independence and Cramer's V.

Levels are the ones observed in the table; a day-of-week column in which
only four days occur is treated as having four levels.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from mvextras.core.exceptions import DimensionError
from mvextras.hypothesis._common import ChiSquaredResult
from mvextras.hypothesis._contingency import ContingencyTable
from mvextras.special import chi2_sf, chi2_sf_wilson_hilferty


def _nan_result(n: int, n_rows: int, n_cols: int) -> ChiSquaredResult:
    nan = math.nan
    return ChiSquaredResult(
        statistic=nan, df=nan, p_value=nan, p_value_wilson_hilferty=nan,
        cramers_v=nan, n=n, n_rows=n_rows, n_cols=n_cols, expected=None,
    )


def chi_squared(table: ContingencyTable | ArrayLike) -> ChiSquaredResult:
    """
    Pearson chi-squared statistic, p-value and Cramer's V.

    Args:
        table: ContingencyTable, or a 2D array of counts

    Returns:
        ChiSquaredResult. An empty table gives NaN throughout.

    Raises:
        DimensionError: If an array input is not 2D
    """
    if isinstance(table, ContingencyTable):
        observed, _, _ = table.to_array()
    else:
        observed = np.asarray(table)
        if observed.ndim != 2:
            raise DimensionError(
                f"table: expected 2D array, got {observed.ndim}D with shape {observed.shape}"
            )
    observed = observed.astype(np.float64)
    n_rows, n_cols = observed.shape
    total = float(observed.sum())

    if total <= 0:
        return _nan_result(0, n_rows, n_cols)

    row_sums = observed.sum(axis=1)
    col_sums = observed.sum(axis=0)
    expected = np.outer(row_sums, col_sums) / total

    positive = expected > 0
    statistic = float(np.sum(
        (observed[positive] - expected[positive]) ** 2 / expected[positive]
    ))
    df = float((n_rows - 1) * (n_cols - 1))

    if min(n_rows, n_cols) < 2:
        cramers_v = math.nan
    else:
        cramers_v = math.sqrt(statistic / (total * min(n_rows - 1, n_cols - 1)))

    return ChiSquaredResult(
        statistic=statistic,
        df=df,
        p_value=chi2_sf(statistic, df),
        p_value_wilson_hilferty=chi2_sf_wilson_hilferty(statistic, df),
        cramers_v=cramers_v,
        n=int(round(total)),
        n_rows=n_rows,
        n_cols=n_cols,
        expected=expected,
    )
