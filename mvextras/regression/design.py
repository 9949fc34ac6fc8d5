"""
Regression design.

RegressionDesign pulls the response and predictor columns out of a
CaseTable and turns them into a numeric model matrix. The table knows
nothing about regression; the design knows which columns it needs and
which rows it can use.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mvextras.core.exceptions import RegressionAbortedError, ValidationError
from mvextras.core.validation import check_known_attributes
from mvextras.data import MISSING, AttributeKind, CaseTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Model matrix for a multiple regression.

    Construct via from_table(). X is column-major (Fortran order) since
    the solver walks it one column at a time.

    Attributes:
        X: (n, p) predictor values for rows with every value finite
        y: (n,) response values for the same rows
        response: Response attribute name
        predictors: Predictors actually used (numeric only)
        attempted: Predictors originally requested
        n_total: Rows in the source table
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    response: str
    predictors: tuple[str, ...]
    attempted: tuple[str, ...]
    n_total: int

    @property
    def n(self) -> int:
        return int(self.y.shape[0])

    @property
    def p(self) -> int:
        return int(self.X.shape[1])

    @property
    def n_excluded(self) -> int:
        """Rows dropped because the response or a predictor was missing."""
        return self.n_total - self.n

    @property
    def dropped(self) -> tuple[str, ...]:
        """Requested predictors removed for not being numeric."""
        return tuple(name for name in self.attempted if name not in self.predictors)

    @classmethod
    def from_table(
        cls,
        table: CaseTable,
        response: str,
        predictors: Sequence[str],
    ) -> RegressionDesign:
        """
        Build the model matrix from a case table.

        Non-numeric predictors are dropped with a logged notice. A row is
        excluded when the response or any kept predictor is not a finite
        number.

        Args:
            table: Source cases
            response: Response attribute name
            predictors: Candidate predictor names, in model order

        Raises:
            ValidationError: If an attribute name is not in the table
            RegressionAbortedError: If no numeric predictor remains, no row
                is usable, or there are fewer usable rows than predictors
        """
        if isinstance(predictors, str):
            raise ValidationError("predictors: expected a sequence of names, got a single string")
        attempted = tuple(predictors)
        check_known_attributes([response, *attempted], table.names, 'predictors')

        used = tuple(
            name for name in attempted
            if table.attribute(name).kind is AttributeKind.NUMERIC
        )
        for name in attempted:
            if name not in used:
                logger.info(
                    "Dropping predictor %r of type %r: only numeric predictors are used",
                    name, table.attribute(name).type,
                )
        if not used:
            raise RegressionAbortedError(
                f"No numeric predictors among {list(attempted)}",
                reason='no_numeric_predictors',
                n_predictors=0,
            )

        columns = [table.numeric(response)] + [table.numeric(name) for name in used]
        rows = [
            values for values in zip(*columns)
            if not any(v is MISSING for v in values)
        ]
        n_valid = len(rows)
        logger.info("Regression of %r on %d predictors: %d of %d rows usable",
                    response, len(used), n_valid, table.n_cases)

        if n_valid == 0:
            raise RegressionAbortedError(
                f"No rows with finite {response!r} and predictors",
                reason='no_valid_rows',
                n_valid_rows=0,
                n_predictors=len(used),
            )
        if n_valid < len(used):
            raise RegressionAbortedError(
                f"Only {n_valid} usable rows for {len(used)} predictors",
                reason='too_few_rows',
                n_valid_rows=n_valid,
                n_predictors=len(used),
            )

        data = np.array(rows, dtype=np.float64)
        return cls(
            X=np.asfortranarray(data[:, 1:]),
            y=data[:, 0].copy(),
            response=response,
            predictors=used,
            attempted=attempted,
            n_total=table.n_cases,
        )
