"""
Multiple linear regression by cyclic coordinate descent.

Public API:
    fit_regression(table, response, predictors, ...) -> RegressionSolution
    RegressionDesign.from_table(table, response, predictors)
    coordinate_descent(X, y, max_iter, tol) -> DescentResult
    regression_records(solution, run_id, ...) -> list[dict]
"""

from mvextras.regression._common import DescentResult, RegressionParams
from mvextras.regression.backends.cpu import coordinate_descent
from mvextras.regression.design import RegressionDesign
from mvextras.regression.records import INTERCEPT_TERM, regression_records
from mvextras.regression.solution import RegressionSolution
from mvextras.regression.solvers import fit_regression

__all__ = [
    "fit_regression",
    "coordinate_descent",
    "regression_records",
    "RegressionDesign",
    "RegressionSolution",
    "RegressionParams",
    "DescentResult",
    "INTERCEPT_TERM",
]
