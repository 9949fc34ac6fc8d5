"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides accessors and a formatted table.
"""

import math
from dataclasses import dataclass
from typing import Any

from mvextras.anova._common import AnovaParams, AnovaTableRow
from mvextras.core.result import Result


def _fmt(value: float, spec: str) -> str:
    return 'NaN' if math.isnan(value) else format(value, spec)


@dataclass
class AnovaSolution:
    """
    One-way ANOVA computed from group summaries.

    Produced by anova_from_summary() and anova_by_category().
    """
    _result: Result[AnovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, AnovaTableRow]:
        """(Between, Within) rows."""
        return self._result.params.table

    @property
    def between(self) -> AnovaTableRow:
        return self._result.params.table[0]

    @property
    def within(self) -> AnovaTableRow:
        return self._result.params.table[1]

    @property
    def f_value(self) -> float:
        return self.between.f_value

    @property
    def p_value(self) -> float:
        return self.between.p_value

    @property
    def eta_squared(self) -> float:
        return self.between.eta_squared

    @property
    def total_sum_sq(self) -> float:
        return self._result.params.total_sum_sq

    @property
    def n_obs(self) -> float:
        return self._result.params.n_obs

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def group_means(self) -> dict[str, float] | None:
        return self._result.info.get('group_means')

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Formatted one-way ANOVA table."""
        lines = [
            "One-way Analysis of Variance (from group summaries)",
            "=" * 78,
            f"Groups: {self.n_groups}    Observations: {_fmt(self.n_obs, '.0f')}",
            "",
            f"{'Source':<10} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} "
            f"{'F value':>10} {'Pr(>F)':>12} {'eta^2':>7}",
            "-" * 78,
        ]
        b, w = self.table
        lines.append(
            f"{b.source:<10} {_fmt(b.df, '.0f'):>6} {_fmt(b.sum_sq, '.4f'):>14} "
            f"{_fmt(b.mean_sq, '.4f'):>14} {_fmt(b.f_value, '.4f'):>10} "
            f"{_fmt(b.p_value, '.4e'):>12} {_fmt(b.eta_squared, '.4f'):>7}"
        )
        lines.append(
            f"{w.source:<10} {_fmt(w.df, '.0f'):>6} {_fmt(w.sum_sq, '.4f'):>14} "
            f"{_fmt(w.mean_sq, '.4f'):>14}"
        )
        lines.append("-" * 78)
        lines.append(f"Total SS: {_fmt(self.total_sum_sq, '.4f')}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(groups={self.n_groups}, F={self.f_value:.4g}, "
            f"p={self.p_value:.4g}, eta2={self.eta_squared:.4g})"
        )
