"""
Common data types for regression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class DescentResult:
    """
    Raw output of coordinate descent on centered data.

    Attributes:
        coefficients: Slopes, one per column
        converged: Whether the stopping rule was met within max_iter
        iterations: Major iterations performed
        max_change: Largest coefficient change in the last iteration
    """
    coefficients: NDArray[np.floating[Any]]
    converged: bool
    iterations: int
    max_change: float


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for a coordinate-descent OLS fit.

    r_squared is NaN when the response is constant (SST == 0);
    adj_r_squared and sigma are NaN when residual_df <= 0.
    """
    intercept: float
    coefficients: NDArray[np.floating[Any]]
    predictor_names: tuple[str, ...]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    sse: float
    sst: float
    r_squared: float
    adj_r_squared: float
    sigma: float
    df: int
    residual_df: int
    n_obs_used: int
    n_obs_total: int
    converged: bool
    iterations: int
