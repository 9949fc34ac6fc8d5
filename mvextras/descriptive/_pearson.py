"""
One-pass Pearson correlation with missingness tracking.

Every case updates the missingness indicators; only complete cases
(neither value missing) update the bivariate accumulator.
"""

from collections.abc import Sequence

from mvextras.data import NumericValue, CategoryValue, MISSING
from mvextras.descriptive._common import MissingnessSummary, PearsonSummary
from mvextras.descriptive._welford import MissingnessTracker, OnlineCovariance


def stream_pearson(
    xs: Sequence[NumericValue],
    ys: Sequence[NumericValue],
) -> PearsonSummary:
    """
    Pearson correlation and missingness correlation in a single pass.

    Args:
        xs, ys: Ingested numeric columns (floats or MISSING), same length
    """
    tracker = MissingnessTracker()
    values = OnlineCovariance()

    for x, y in zip(xs, ys):
        x_missing = x is MISSING
        y_missing = y is MISSING
        tracker.update(x_missing, y_missing)
        if not (x_missing or y_missing):
            values.update(x, y)

    return PearsonSummary(
        correlation=values.correlation,
        n_complete=values.n,
        mean_x=values.mean_x if values.n else float('nan'),
        mean_y=values.mean_y if values.n else float('nan'),
        covariance=values.sample_covariance,
        missing=tracker.summary(),
    )


def stream_missingness(
    xs: Sequence[NumericValue | CategoryValue],
    ys: Sequence[NumericValue | CategoryValue],
) -> MissingnessSummary:
    """Missingness counts and indicator correlation only."""
    tracker = MissingnessTracker()
    for x, y in zip(xs, ys):
        tracker.update(x is MISSING, y is MISSING)
    return tracker.summary()
