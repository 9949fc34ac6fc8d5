"""
Common data types for correlation summaries.

Frozen payloads only; computation lives in _pearson.py and _ci.py.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MissingnessSummary:
    """Missingness of an attribute pair, shared by every measure."""
    n_total: int
    n_missing_x: int
    n_missing_y: int
    n_complete: int
    missingness_correlation: float


@dataclass(frozen=True)
class PearsonSummary:
    """
    Streaming Pearson correlation of two numeric attributes.

    correlation, means and covariance are over complete cases only
    (neither value missing); the missingness fields cover every case.
    """
    correlation: float
    n_complete: int
    mean_x: float
    mean_y: float
    covariance: float
    missing: MissingnessSummary


@dataclass(frozen=True)
class CorrelationCI:
    """
    Fisher-z confidence interval for a correlation.

    error carries a diagnostic when the interval is invalid (NaN bounds) or
    degenerate (|r| == 1, bounds equal to r); it is None otherwise.
    """
    low: float
    high: float
    z_transformed: float | None = None
    standard_error: float | None = None
    margin_of_error: float | None = None
    error: str | None = None
