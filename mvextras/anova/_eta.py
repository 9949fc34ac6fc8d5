"""
Eta of a categorical predictor on a numeric response, streamed.

One pass over the cases updates the missingness indicators and, for every
case with a usable response, the response moments of the predictor's
category (or of the missing-predictor group). The ANOVA is then run twice:
once without the missing-predictor group and once with it.
"""

import math
from collections.abc import Sequence

from mvextras.anova._common import EtaSummary
from mvextras.anova._oneway import oneway_table
from mvextras.anova._summary import MISSING_CATEGORY, CategorySummary, GroupArrays
from mvextras.data import MISSING, CategoryValue, NumericValue
from mvextras.descriptive import MissingnessTracker


def _eta_and_p(groups: GroupArrays) -> tuple[float, float]:
    if len(groups.counts) == 0 or groups.n_total <= 0:
        return math.nan, math.nan
    (between, _), _ = oneway_table(groups.counts, groups.means, groups.variances)
    eta_sq = between.eta_squared
    if math.isnan(eta_sq) or eta_sq < 0:
        return math.nan, math.nan
    return math.sqrt(eta_sq), between.p_value


def stream_eta(
    categories: Sequence[CategoryValue],
    responses: Sequence[NumericValue],
) -> tuple[EtaSummary, CategorySummary]:
    """
    Eta with and without the missing-predictor group, in one pass.

    Args:
        categories: Ingested predictor labels (str or MISSING)
        responses: Ingested numeric responses (float or MISSING)

    Returns:
        (EtaSummary, the CategorySummary it was computed from)
    """
    tracker = MissingnessTracker()
    summary = CategorySummary()

    for category, response in zip(categories, responses):
        x_missing = category is MISSING
        y_missing = response is MISSING
        tracker.update(x_missing, y_missing)
        if not y_missing:
            summary.update(MISSING_CATEGORY if x_missing else category, response)

    excluding = summary.excluding_missing()
    including = summary.including_missing()

    correlation, p_value = _eta_and_p(excluding)
    correl_incl, p_incl = _eta_and_p(including)

    return EtaSummary(
        correlation=correlation,
        p_value=p_value,
        correl_incl_missing=correl_incl,
        p_incl_missing=p_incl,
        n_complete=excluding.n_total,
        n_groups=len(excluding.labels),
        missing=tracker.summary(),
    ), summary
