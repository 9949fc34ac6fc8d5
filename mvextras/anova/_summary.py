"""
Per-category running summaries of a numeric response.

Groups are keyed by the ingested category label. Cases whose predictor is
missing are pooled under the MISSING sentinel, which can never collide
with a real label. Each group keeps a Welford accumulator, so group
variances come out with denominator n_i.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from mvextras.data import MISSING
from mvextras.descriptive import OnlineMoments

MISSING_CATEGORY = MISSING


@dataclass(frozen=True)
class GroupArrays:
    """Parallel per-group arrays, ready for anova_from_summary()."""
    labels: tuple[Hashable, ...]
    counts: NDArray[np.float64]
    means: NDArray[np.float64]
    variances: NDArray[np.float64]

    @property
    def n_total(self) -> int:
        return int(self.counts.sum())


@dataclass
class CategorySummary:
    """Map from category label to the running moments of the response."""
    groups: dict[Hashable, OnlineMoments] = field(default_factory=dict)

    def update(self, category: Hashable, value: float) -> None:
        moments = self.groups.get(category)
        if moments is None:
            moments = OnlineMoments()
            self.groups[category] = moments
        moments.update(value)

    def _arrays(self, labels: list[Hashable]) -> GroupArrays:
        moments = [self.groups[label] for label in labels]
        return GroupArrays(
            labels=tuple(labels),
            counts=np.array([m.n for m in moments], dtype=np.float64),
            means=np.array([m.mean for m in moments], dtype=np.float64),
            variances=np.array(
                [m.s / m.n if m.n > 0 else 0.0 for m in moments],
                dtype=np.float64,
            ),
        )

    def including_missing(self) -> GroupArrays:
        """All groups, the missing-predictor group included."""
        return self._arrays(list(self.groups))

    def excluding_missing(self) -> GroupArrays:
        """All groups except the missing-predictor group."""
        return self._arrays([g for g in self.groups if g is not MISSING_CATEGORY])
