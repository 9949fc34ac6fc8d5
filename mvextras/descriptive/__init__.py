"""
Streaming moments and correlations.

Public API:
    pearson_with_missing(table, x, y) -> PearsonSummary
    missingness_correlation(table, x, y) -> MissingnessSummary
    correlation_ci(r, n, z=1.96) -> CorrelationCI
    pearson_p_value(r, n) -> float

Building blocks:
    OnlineMoments, OnlineCovariance, MissingnessTracker (Welford accumulators)
    stream_pearson(xs, ys), stream_missingness(xs, ys)
"""

from mvextras.descriptive._common import (
    CorrelationCI,
    MissingnessSummary,
    PearsonSummary,
)
from mvextras.descriptive._welford import (
    MissingnessTracker,
    OnlineCovariance,
    OnlineMoments,
)
from mvextras.descriptive._pearson import stream_missingness, stream_pearson
from mvextras.descriptive._ci import correlation_ci, pearson_p_value
from mvextras.descriptive.solvers import missingness_correlation, pearson_with_missing

__all__ = [
    "pearson_with_missing",
    "missingness_correlation",
    "correlation_ci",
    "pearson_p_value",
    "stream_pearson",
    "stream_missingness",
    "OnlineMoments",
    "OnlineCovariance",
    "MissingnessTracker",
    "CorrelationCI",
    "MissingnessSummary",
    "PearsonSummary",
]
