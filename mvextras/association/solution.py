"""
User-facing association matrix solution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mvextras.association._common import AssociationResult
from mvextras.association.records import association_record, iso_timestamp
from mvextras.core.result import Result
from mvextras.data import CaseTable


@dataclass(frozen=True)
class AssociationParams:
    """Parameter payload: one record per ordered attribute pair."""
    attributes: tuple[str, ...]
    results: tuple[AssociationResult, ...]


def _cell(value: float | None) -> str:
    if value is None:
        return '--'
    if math.isnan(value):
        return 'NaN'
    return f"{value:.3f}"


@dataclass
class AssociationSolution:
    """
    Results of an association sweep over the visible attributes.

    Produced by association_matrix().
    """
    _result: Result[AssociationParams]
    _table: CaseTable

    @property
    def attributes(self) -> tuple[str, ...]:
        return self._result.params.attributes

    @property
    def results(self) -> tuple[AssociationResult, ...]:
        return self._result.params.results

    def get(self, predictor: str, response: str) -> AssociationResult:
        """Record for an ordered pair."""
        for r in self.results:
            if r.predictor == predictor and r.response == response:
                return r
        raise KeyError(f"No association computed for ({predictor!r}, {response!r})")

    def matrix(self, field: str = 'measure') -> NDArray[np.floating[Any]]:
        """
        (m x m) array of one result field, rows = predictor.

        None (not implemented) becomes NaN here; use the records to tell
        the two apart.
        """
        names = self.attributes
        index = {name: i for i, name in enumerate(names)}
        out = np.full((len(names), len(names)), np.nan, dtype=np.float64)
        for r in self.results:
            value = getattr(r, field)
            if value is not None:
                out[index[r.predictor], index[r.response]] = float(value)
        return out

    def to_records(self, *, timestamp: str | None = None) -> list[dict[str, Any]]:
        """Flat records for the host platform, one per ordered pair."""
        order = self._table.order_map()
        stamp = timestamp or iso_timestamp()
        return [
            association_record(r, self._table, timestamp=stamp, order=order)
            for r in self.results
        ]

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
        """Association matrix as text ('--' marks an unimplemented measure)."""
        names = self.attributes
        if not names:
            return "Association matrix: no attributes"
        width = max(10, max(len(n) for n in names) + 1)
        lines = [
            f"Association matrix ({len(names)} attributes, rows predict columns)",
            "=" * (width + 10 * len(names)),
            " " * width + "".join(f"{n[:9]:>10}" for n in names),
        ]
        by_pair = {(r.predictor, r.response): r for r in self.results}
        for row in names:
            cells = "".join(f"{_cell(by_pair[(row, col)].measure):>10}" for col in names)
            lines.append(f"{row:<{width}}{cells}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"AssociationSolution(attributes={len(self.attributes)}, pairs={len(self.results)})"
