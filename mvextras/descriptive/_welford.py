"""
Single-pass (Welford) moment accumulators.

Each accumulator keeps a running count, mean(s), and sums of squared
deviations about the running mean. Raw sums of squares are never formed,
so there is no catastrophic cancellation for data with a large mean and a
small spread.

After n updates:
    mean == sum(v) / n
    s    == sum((v - mean)**2)
    sxy  == sum((x - mean_x) * (y - mean_y))
"""

import math
from dataclasses import dataclass, field

from mvextras.descriptive._common import MissingnessSummary


@dataclass
class OnlineMoments:
    """Running count, mean and sum of squared deviations of one variable."""
    n: int = 0
    mean: float = 0.0
    s: float = 0.0

    def update(self, value: float) -> None:
        self.n += 1
        delta = value - self.mean
        self.mean += delta / self.n
        self.s += delta * (value - self.mean)

    @property
    def population_variance(self) -> float:
        """s / n. NaN when empty."""
        return self.s / self.n if self.n > 0 else math.nan

    @property
    def sample_variance(self) -> float:
        """s / (n - 1). NaN for fewer than two values."""
        return self.s / (self.n - 1) if self.n > 1 else math.nan


@dataclass
class OnlineCovariance:
    """Running means, squared deviations and cross deviations of a pair."""
    n: int = 0
    mean_x: float = 0.0
    mean_y: float = 0.0
    sx: float = 0.0
    sy: float = 0.0
    sxy: float = 0.0

    def update(self, x: float, y: float) -> None:
        self.n += 1
        dx = x - self.mean_x
        dy = y - self.mean_y
        self.mean_x += dx / self.n
        self.mean_y += dy / self.n
        self.sx += dx * (x - self.mean_x)
        self.sy += dy * (y - self.mean_y)
        self.sxy += dx * (y - self.mean_y)

    @property
    def correlation(self) -> float:
        """Pearson r, clipped to [-1, 1]. NaN if either variable has zero spread."""
        if self.sx > 0 and self.sy > 0:
            r = self.sxy / math.sqrt(self.sx * self.sy)
            return max(-1.0, min(1.0, r))
        return math.nan

    @property
    def sample_covariance(self) -> float:
        return self.sxy / (self.n - 1) if self.n > 1 else math.nan


@dataclass
class MissingnessTracker:
    """
    Streams the 0/1 "is missing" indicators of two attributes.

    Tracks how often each side is missing and the correlation between the
    two indicators over every case seen.
    """
    indicators: OnlineCovariance = field(default_factory=OnlineCovariance)
    n_missing_x: int = 0
    n_missing_y: int = 0
    n_complete: int = 0

    def update(self, x_missing: bool, y_missing: bool) -> None:
        self.n_missing_x += int(x_missing)
        self.n_missing_y += int(y_missing)
        self.n_complete += int(not (x_missing or y_missing))
        self.indicators.update(float(x_missing), float(y_missing))

    @property
    def n_total(self) -> int:
        return self.indicators.n

    @property
    def correlation(self) -> float:
        """Correlation of the missingness indicators; NaN if either is constant."""
        return self.indicators.correlation

    def summary(self) -> MissingnessSummary:
        return MissingnessSummary(
            n_total=self.n_total,
            n_missing_x=self.n_missing_x,
            n_missing_y=self.n_missing_y,
            n_complete=self.n_complete,
            missingness_correlation=self.correlation,
        )
