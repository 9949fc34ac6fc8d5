"""
CPU coordinate-descent solver for ordinary least squares.

The model has no intercept column: callers center X and y first and
recover the intercept from the column means afterwards.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from mvextras.core.config import DEFAULT_MAX_ITER, DEFAULT_TOL
from mvextras.core.validation import check_positive_finite, check_positive_int
from mvextras.core.exceptions import DimensionError
from mvextras.regression._common import DescentResult

# Columns with a smaller self inner product are treated as constant.
DEGENERATE_COLUMN_NORM = 1e-10


def coordinate_descent(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
) -> DescentResult:
    """
    Cyclic coordinate descent for min ||y - X beta||^2.

    Algorithm:
        beta = 0, r = y
        repeat up to max_iter times:
            for j in columns, in order:
                rho_j  = X_j'r + (X_j'X_j) beta_j     # residual without j
                new_j  = rho_j / X_j'X_j
                r     -= X_j (new_j - beta_j)
                beta_j = new_j
            stop if max |change| < tol, or if no column would move by
            tol or more on another pass

    Each update is the exact least-squares solution for beta_j with the
    others held fixed, so the iteration is Gauss-Seidel on the normal
    equations. Columns with X_j'X_j below DEGENERATE_COLUMN_NORM keep
    their coefficient unchanged.

    Args:
        X: (n, p) centered predictors
        y: (n,) centered response
        max_iter: Maximum major iterations
        tol: Threshold on the largest coefficient change

    Returns:
        DescentResult
    """
    check_positive_int(max_iter, 'max_iter')
    check_positive_finite(tol, 'tol')
    X = np.asarray(X, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if X.ndim != 2 or y.ndim != 1 or X.shape[0] != y.shape[0]:
        raise DimensionError(f"X must be (n, p) and y (n,), got {X.shape} and {y.shape}")

    p = X.shape[1]
    beta = np.zeros(p, dtype=np.float64)
    residual = y.copy()
    col_norms = np.einsum('ij,ij->j', X, X)
    active = col_norms >= DEGENERATE_COLUMN_NORM

    converged = False
    max_change = np.inf
    iterations = 0
    for iterations in range(1, max_iter + 1):
        max_change = 0.0
        for j in range(p):
            if not active[j]:
                continue
            x_j = X[:, j]
            new = (x_j @ residual + col_norms[j] * beta[j]) / col_norms[j]
            delta = new - beta[j]
            if delta != 0.0:
                residual -= delta * x_j
                beta[j] = new
            max_change = max(max_change, abs(delta))

        if max_change < tol:
            converged = True
            break

        pending = np.abs(X[:, active].T @ residual) / col_norms[active]
        if pending.size == 0 or pending.max() < tol:
            converged = True
            break

    return DescentResult(
        coefficients=beta,
        converged=converged,
        iterations=iterations,
        max_change=float(max_change),
    )
