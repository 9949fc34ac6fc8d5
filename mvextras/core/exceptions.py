"""
Exception hierarchy for mvextras.

All exceptions inherit from MVExtrasError so callers can catch any
library-specific error in one place.

Statistics that are merely undefined for the data at hand (a single
category, zero variance, too few complete cases) are NOT errors: they come
back as NaN. Exceptions are reserved for bad input at the public boundary
and for requests that cannot produce any result at all.
"""


class MVExtrasError(Exception):
    """Base exception for all mvextras errors."""
    pass


class ValidationError(MVExtrasError):
    """
    Input validation failed.

    Raised when user-provided inputs (attribute names, configuration values,
    array shapes) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when per-group summary arrays or model-matrix columns have
    mismatched lengths.
    """
    pass


class NumericalError(MVExtrasError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Only raised when a caller explicitly asks for strict solving; by default
    a non-converged coordinate-descent fit is returned with a warning.

    Attributes:
        iterations: Number of major iterations completed
        final_change: Largest coefficient change in the last iteration
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.threshold = threshold


class RegressionAbortedError(MVExtrasError):
    """
    A regression request cannot produce any fit.

    Raised when no numeric predictor survives filtering, when no valid row
    remains, or when there are fewer valid rows than predictors.

    Attributes:
        reason: Short machine-readable reason
            ('no_numeric_predictors', 'no_valid_rows', 'too_few_rows')
        n_valid_rows: Rows left after listwise deletion
        n_predictors: Numeric predictors left after filtering
    """

    def __init__(
        self,
        message: str,
        reason: str,
        n_valid_rows: int | None = None,
        n_predictors: int | None = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.n_valid_rows = n_valid_rows
        self.n_predictors = n_predictors


class SweepCancelled(MVExtrasError):
    """
    An association sweep was aborted by its caller.

    Attributes:
        completed: Number of attribute pairs finished before cancellation
        total: Number of pairs the sweep would have computed
    """

    def __init__(self, message: str, completed: int, total: int):
        super().__init__(message)
        self.completed = completed
        self.total = total
