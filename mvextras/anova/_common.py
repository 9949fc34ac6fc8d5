"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes
or are returned directly by the eta computation. Pure data containers.
"""

from dataclasses import dataclass

from mvextras.descriptive import MissingnessSummary


@dataclass(frozen=True)
class AnovaTableRow:
    """
    One row of a one-way ANOVA table.

    The Between row carries F, p and eta^2; on the Within row those are NaN.
    df is a float so that an undefined table can carry NaN throughout.
    """
    source: str          # 'Between' or 'Within'
    sum_sq: float
    df: float
    mean_sq: float
    f_value: float
    p_value: float
    eta_squared: float


@dataclass(frozen=True)
class AnovaParams:
    """Parameter payload for a one-way ANOVA computed from group summaries."""
    table: tuple[AnovaTableRow, AnovaTableRow]
    n_obs: float
    n_groups: int
    grand_mean: float
    total_sum_sq: float


@dataclass(frozen=True)
class EtaSummary:
    """
    Eta (square root of eta^2) of a categorical predictor on a numeric
    response, with and without a category for missing predictor values.

    correlation / p_value exclude cases whose predictor is missing;
    correl_incl_missing / p_incl_missing pool those cases into one extra
    group. n_complete counts cases where neither value is missing.
    """
    correlation: float
    p_value: float
    correl_incl_missing: float
    p_incl_missing: float
    n_complete: int
    n_groups: int
    missing: MissingnessSummary
