"""
Common data types for pairwise association.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MeasureType(str, Enum):
    """Which association statistic a record carries."""
    PEARSON = 'Pearson'
    ETA = 'eta'
    CRAMERS_V = 'CramersV'
    NUMERIC_PREDICTS_CATEGORICAL = 'NumericPredictsCategorical'
    UNSUPPORTED = 'Unsupported'


@dataclass(frozen=True)
class AssociationResult:
    """
    Normalised association record for one (predictor, response) pair.

    Value fields use two distinct markers for "no number here":
        None -- the statistic is not implemented for this pairing
                (numeric-predicts-categorical in blank mode, pairs
                involving an unsupported type, inclusive measures for
                Pearson, CIs for eta and Cramer's V)
        NaN  -- the statistic applies but is undefined for this data
                (zero variance, a single category, too few cases)

    Attributes:
        predictor, response: Attribute names
        measure_type: Which statistic measure holds
        method: Human-readable description of how measure was obtained
        measure: Pearson r in [-1, 1]; eta or Cramer's V in [0, 1]
        n_complete: Cases where neither value is missing
        n_total: All cases
        n_missing_x, n_missing_y: Missing values of predictor / response
        missingness_correlation: Correlation of the missingness indicators
        ci_low, ci_high: Confidence bounds (Pearson only)
        ci_error: Diagnostic from the CI computation, if any
        p_value: p-value of measure
        measure_incl_missing: measure recomputed with missing values kept
            as a category
        p_value_incl_missing: its p-value
    """
    predictor: str
    response: str
    measure_type: MeasureType
    method: str
    measure: float | None
    n_complete: int
    n_total: int
    n_missing_x: int
    n_missing_y: int
    missingness_correlation: float
    ci_low: float | None = None
    ci_high: float | None = None
    ci_error: str | None = None
    p_value: float | None = None
    measure_incl_missing: float | None = None
    p_value_incl_missing: float | None = None

    @property
    def is_supported(self) -> bool:
        """False when measure is the not-implemented marker (None)."""
        return self.measure is not None
