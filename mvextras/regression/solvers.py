"""
Regression solver dispatch.

Public API:
    fit_regression(table, response, predictors, ...) -> RegressionSolution
"""

from __future__ import annotations

import logging
import math
import warnings
from collections.abc import Sequence

from mvextras.core.config import DEFAULT_CONFIG, AnalysisConfig
from mvextras.core.exceptions import ConvergenceError
from mvextras.core.result import Result
from mvextras.core.timing import Timer
from mvextras.data import CaseTable
from mvextras.regression._common import RegressionParams
from mvextras.regression.backends.cpu import coordinate_descent
from mvextras.regression.design import RegressionDesign
from mvextras.regression.solution import RegressionSolution

logger = logging.getLogger(__name__)


def fit_regression(
    table: CaseTable,
    response: str,
    predictors: Sequence[str],
    *,
    max_iter: int | None = None,
    tol: float | None = None,
    strict: bool = False,
    config: AnalysisConfig | None = None,
) -> RegressionSolution:
    """
    Fit a multiple linear regression by coordinate descent.

    Predictors that are not numeric are dropped. Rows with a missing or
    non-numeric response or predictor are excluded. Both sides are
    centered before solving and the intercept is recovered from the
    column means.

    Args:
        table: Source cases
        response: Response attribute name
        predictors: Candidate predictor names
        max_iter: Maximum major iterations (config.max_iter if None)
        tol: Convergence threshold on the largest coefficient change
            (config.tol if None)
        strict: Raise ConvergenceError instead of warning when the
            iteration cap is reached
        config: Source of defaults for max_iter and tol

    Returns:
        RegressionSolution. A non-converged fit is still returned, with
        converged=False and a warning.

    Raises:
        ValidationError: On unknown attributes or bad max_iter/tol
        RegressionAbortedError: If no usable predictor or row remains
        ConvergenceError: If strict and the solver did not converge

    Examples:
        >>> sol = fit_regression(table, 'weight', ['height', 'age'])
        >>> sol.intercept, sol.coefficients, sol.r_squared
        >>> sol.formula()
    """
    config = config or DEFAULT_CONFIG
    max_iter = config.max_iter if max_iter is None else max_iter
    tol = config.tol if tol is None else tol

    timer = Timer()
    timer.start()

    with timer.section('build_matrix'):
        design = RegressionDesign.from_table(table, response, predictors)

    X, y = design.X, design.y
    n, p = design.n, design.p

    with timer.section('center'):
        x_means = X.mean(axis=0)
        y_mean = float(y.mean())
        Xc = X - x_means
        yc = y - y_mean

    with timer.section('solve'):
        descent = coordinate_descent(Xc, yc, max_iter=max_iter, tol=tol)

    with timer.section('statistics'):
        beta = descent.coefficients
        intercept = y_mean - float(x_means @ beta)
        fitted = intercept + X @ beta
        residuals = y - fitted
        sse = float(residuals @ residuals)
        sst = float(yc @ yc)
        residual_df = n - p - 1

        r_squared = 1.0 - sse / sst if sst > 0 else math.nan
        if residual_df > 0:
            adj_r_squared = 1.0 - (1.0 - r_squared) * (n - 1) / residual_df
            sigma = math.sqrt(sse / residual_df)
        else:
            adj_r_squared = math.nan
            sigma = math.nan

    timer.stop()

    warnings_list: list[str] = []
    if design.dropped:
        warnings_list.append(
            f"Dropped non-numeric predictor(s): {', '.join(design.dropped)}"
        )
    if design.n_excluded:
        warnings_list.append(f"Excluded {design.n_excluded} row(s) with missing values")

    if not descent.converged:
        msg = (
            f"Coordinate descent did not converge in {descent.iterations} iterations "
            f"(last max change {descent.max_change:.3g}, tol {tol:g})"
        )
        if strict:
            raise ConvergenceError(
                msg,
                iterations=descent.iterations,
                final_change=descent.max_change,
                threshold=tol,
            )
        logger.warning(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warnings_list.append(msg)

    logger.info("Fitted %r on %s: R^2=%.6g, %d iterations",
                response, list(design.predictors), r_squared, descent.iterations)

    params = RegressionParams(
        intercept=intercept,
        coefficients=beta,
        predictor_names=design.predictors,
        fitted_values=fitted,
        residuals=residuals,
        sse=sse,
        sst=sst,
        r_squared=r_squared,
        adj_r_squared=adj_r_squared,
        sigma=sigma,
        df=p,
        residual_df=residual_df,
        n_obs_used=n,
        n_obs_total=design.n_total,
        converged=descent.converged,
        iterations=descent.iterations,
    )
    result = Result(
        params=params,
        info={
            'method': 'coordinate_descent',
            'converged': descent.converged,
            'iterations': descent.iterations,
            'final_change': descent.max_change,
            'max_iter': max_iter,
            'tol': tol,
            'n_excluded': design.n_excluded,
            'dropped_predictors': design.dropped,
            'predictor_means': x_means,
            'response_mean': y_mean,
        },
        timing=timer.result(),
        backend_name='cpu_coordinate_descent',
        warnings=tuple(warnings_list),
    )
    return RegressionSolution(_result=result, _design=design)
