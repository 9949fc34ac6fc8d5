"""
Per-user analysis session.

A Session carries the state that persists between requests in an
interactive tool: which attributes are hidden from the association view,
the highest regression run id handed out so far, and the analysis
configuration. Solvers never keep state of their own; anything stateful
is passed in through a Session.

Usage:
    session = Session(config=AnalysisConfig(npcr_mode='eta'))
    session.hide('notes')
    sol = session.association_matrix(table)
    fit = session.run_regression(table, 'weight', ['height', 'age'])
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mvextras.core.config import DEFAULT_CONFIG, AnalysisConfig
from mvextras.core.exceptions import RegressionAbortedError

if TYPE_CHECKING:
    from mvextras.association import AssociationSolution
    from mvextras.data import CaseTable
    from mvextras.regression import RegressionSolution

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    Mutable state for one analysis session.

    Attributes:
        config: Options used by every request made through the session
        hidden: Attribute names excluded from association sweeps
        last_run_id: Highest regression run id issued (0 before any run)
    """
    config: AnalysisConfig = DEFAULT_CONFIG
    hidden: set[str] = field(default_factory=set)
    last_run_id: int = 0

    def hide(self, name: str) -> None:
        self.hidden.add(name)

    def show(self, name: str) -> None:
        self.hidden.discard(name)

    def toggle(self, name: str) -> bool:
        """Flip visibility of an attribute; returns True if now hidden."""
        if name in self.hidden:
            self.hidden.discard(name)
            return False
        self.hidden.add(name)
        return True

    def is_hidden(self, name: str) -> bool:
        return name in self.hidden

    def visible(self, names: Iterable[str]) -> list[str]:
        """names minus the hidden ones, order preserved."""
        return [n for n in names if n not in self.hidden]

    def switch_dataset(self) -> None:
        """Forget per-dataset state when a different table is selected."""
        if self.hidden:
            logger.info("Dataset switched; clearing %d hidden attribute(s)", len(self.hidden))
        self.hidden.clear()

    def next_run_id(self, persisted_max: int | None = None) -> int:
        """
        Issue a regression run id.

        The id is one more than the larger of the highest id this session
        has issued and the highest id already persisted elsewhere, so ids
        keep increasing across sessions writing to the same store.

        Args:
            persisted_max: Highest run id found in existing output, if any
        """
        self.last_run_id = max(self.last_run_id, persisted_max or 0) + 1
        return self.last_run_id

    def association_matrix(
        self,
        table: CaseTable,
        *,
        attributes: Sequence[str] | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> AssociationSolution:
        """association_matrix() over the attributes visible in this session."""
        from mvextras.association import association_matrix

        return association_matrix(
            table,
            attributes=attributes,
            session=self,
            config=self.config,
            should_cancel=should_cancel,
        )

    def run_regression(
        self,
        table: CaseTable,
        response: str,
        predictors: Sequence[str],
        *,
        persisted_max: int | None = None,
        **kwargs: Any,
    ) -> tuple[int, RegressionSolution] | None:
        """
        Fit a regression and assign it a run id.

        An aborted request (no numeric predictor, no usable rows) is logged
        and returns None; it does not consume a run id.

        Args:
            table, response, predictors: As for fit_regression()
            persisted_max: Highest run id already persisted, if known
            **kwargs: Passed through to fit_regression(); a config given
                here overrides the session config

        Returns:
            (run_id, solution), or None if the regression was aborted
        """
        from mvextras.regression import fit_regression

        kwargs.setdefault('config', self.config)
        try:
            solution = fit_regression(table, response, predictors, **kwargs)
        except RegressionAbortedError as e:
            logger.warning("Regression of %r aborted (%s): %s", response, e.reason, e)
            return None
        return self.next_run_id(persisted_max), solution
