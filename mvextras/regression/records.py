"""
Flat output records for a regression run.

One row for the intercept and one per used predictor. Every row repeats
the fit-level statistics so each can be displayed or filtered alone.
"""

from __future__ import annotations

from typing import Any

from mvextras.association.records import iso_timestamp
from mvextras.regression.solution import RegressionSolution

INTERCEPT_TERM = '(Intercept)'


def regression_records(
    solution: RegressionSolution,
    run_id: int,
    *,
    table_name: str = '',
    timestamp: str | None = None,
) -> list[dict[str, Any]]:
    """
    Records for one regression run.

    Args:
        solution: The fit
        run_id: Identifier shared by every row of this run
        table_name: Display name of the source table
        timestamp: ISO-8601 string; current UTC time if None

    Returns:
        List of dicts, intercept row first
    """
    stamp = timestamp or iso_timestamp()
    note = '' if solution.converged else '; '.join(
        w for w in solution.warnings if 'converge' in w
    )
    shared = {
        "runID": run_id,
        "TableName": table_name,
        "response": solution.response,
        "formula": solution.formula(),
        "rSquared": solution.r_squared,
        "adjRSquared": solution.adj_r_squared,
        "sigma": solution.sigma,
        "df": solution.df,
        "residualDF": solution.residual_df,
        "nObsUsed": solution.n_obs_used,
        "nObsTotal": solution.n_obs_total,
        "iterations": solution.iterations,
        "converged": solution.converged,
        "note": note,
        "predictorsAttempted": ", ".join(solution.attempted_predictors),
        "nTermsAttempted": len(solution.attempted_predictors),
        "predictorsUsed": ", ".join(solution.predictor_names),
        "nTermsUsed": len(solution.predictor_names),
        "date": stamp,
    }

    rows = [{"term": INTERCEPT_TERM, "coefficient": solution.intercept, **shared}]
    for name, coef in zip(solution.predictor_names, solution.coefficients):
        rows.append({"term": name, "coefficient": float(coef), **shared})
    return rows
