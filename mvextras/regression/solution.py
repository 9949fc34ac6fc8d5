"""
Regression solution types.

Contains the user-facing wrapper around a coordinate-descent fit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from mvextras.core.result import Result
from mvextras.regression._common import RegressionParams

if TYPE_CHECKING:
    from mvextras.regression.design import RegressionDesign


def _fmt(value: float) -> str:
    return 'NaN' if math.isnan(value) else f"{value:.6f}"


@dataclass
class RegressionSolution:
    """
    User-facing multiple regression results.

    Wraps the solver Result and the design it was fitted on.
    """
    _result: Result[RegressionParams]
    _design: RegressionDesign

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def predictor_names(self) -> tuple[str, ...]:
        return self._result.params.predictor_names

    @property
    def response(self) -> str:
        return self._design.response

    @property
    def attempted_predictors(self) -> tuple[str, ...]:
        return self._design.attempted

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def sse(self) -> float:
        return self._result.params.sse

    @property
    def sst(self) -> float:
        return self._result.params.sst

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def adj_r_squared(self) -> float:
        return self._result.params.adj_r_squared

    @property
    def sigma(self) -> float:
        return self._result.params.sigma

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def residual_df(self) -> int:
        return self._result.params.residual_df

    @property
    def n_obs_used(self) -> int:
        return self._result.params.n_obs_used

    @property
    def n_obs_total(self) -> int:
        return self._result.params.n_obs_total

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, X: NDArray) -> NDArray[np.floating[Any]]:
        """Predictions for rows of X (columns in predictor_names order)."""
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        return self.intercept + X @ self.coefficients

    def formula(self) -> str:
        """
        Fitted equation with coefficients at full precision.

        e.g. 'y = 5.0 + 3.0*x1 - 0.25*x2'
        """
        parts = [f"{self.response} = {self.intercept!r}"]
        for name, coef in zip(self.predictor_names, self.coefficients):
            coef = float(coef)
            sign = '-' if coef < 0 else '+'
            parts.append(f" {sign} {abs(coef)!r}*{name}")
        return "".join(parts)

    def summary(self) -> str:
        """Generate a tabular summary of the fit."""
        lines = [
            "Multiple Regression Results (coordinate descent)",
            "=" * 60,
            f"Response: {self.response}",
            f"Observations: {self.n_obs_used} used of {self.n_obs_total}",
            f"Predictors: {len(self.predictor_names)} used of {len(self.attempted_predictors)} requested",
            f"R-squared: {_fmt(self.r_squared)}",
            f"Adj. R-squared: {_fmt(self.adj_r_squared)}",
            f"Residual Std. Error: {_fmt(self.sigma)} on {self.residual_df} DF",
            f"Converged: {self.converged} ({self.iterations} iterations)",
            "",
            "Coefficients:",
            "-" * 60,
            f"  {'(Intercept)':<24} {self.intercept:14.6f}",
        ]
        for name, coef in zip(self.predictor_names, self.coefficients):
            lines.append(f"  {name:<24} {coef:14.6f}")
        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(n={self.n_obs_used}, p={len(self.predictor_names)}, "
            f"r_squared={self.r_squared:.4f}, converged={self.converged})"
        )
