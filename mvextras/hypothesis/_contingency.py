"""
Contingency tables keyed by (row category, column category).

Cells are keyed by tuples of ingested labels, with MISSING standing for a
missing value on either axis. Tuple keys cannot collide the way joined
"row|col" strings would when a label itself contains the separator.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from mvextras.data import MISSING, CategoryValue
from mvextras.descriptive import MissingnessSummary, MissingnessTracker


def _level_order(label: Hashable) -> tuple[int, str]:
    # Real labels sorted, MISSING last.
    if label is MISSING:
        return (1, '')
    return (0, str(label))


@dataclass
class ContingencyTable:
    """Sparse cell counts of two categorical attributes."""
    cells: Counter = field(default_factory=Counter)

    def add(self, row: Hashable, col: Hashable, count: int = 1) -> None:
        self.cells[(row, col)] += count

    @classmethod
    def from_nested(cls, nested: dict[Hashable, dict[Hashable, int]]) -> ContingencyTable:
        """Build from {row: {col: count}}; zero counts are dropped."""
        table = cls()
        for row, cols in nested.items():
            for col, count in cols.items():
                if count:
                    table.add(row, col, int(count))
        return table

    @property
    def total(self) -> int:
        return sum(self.cells.values())

    def row_levels(self) -> list[Hashable]:
        return sorted({r for r, _ in self.cells}, key=_level_order)

    def col_levels(self) -> list[Hashable]:
        return sorted({c for _, c in self.cells}, key=_level_order)

    def including_missing(self) -> ContingencyTable:
        """Copy keeping the MISSING row/column as ordinary levels."""
        return ContingencyTable(cells=Counter(self.cells))

    def excluding_missing(self) -> ContingencyTable:
        """Copy without any cell whose row or column is MISSING."""
        return ContingencyTable(cells=Counter({
            (r, c): n for (r, c), n in self.cells.items()
            if r is not MISSING and c is not MISSING
        }))

    def transpose(self) -> ContingencyTable:
        return ContingencyTable(cells=Counter({(c, r): n for (r, c), n in self.cells.items()}))

    def to_array(self) -> tuple[NDArray[np.int64], list[Hashable], list[Hashable]]:
        """Dense (rows x cols) count matrix and the level labels of each axis."""
        rows = self.row_levels()
        cols = self.col_levels()
        row_index = {r: i for i, r in enumerate(rows)}
        col_index = {c: j for j, c in enumerate(cols)}
        dense = np.zeros((len(rows), len(cols)), dtype=np.int64)
        for (r, c), n in self.cells.items():
            dense[row_index[r], col_index[c]] = n
        return dense, rows, cols


def stream_contingency(
    rows: Sequence[CategoryValue],
    cols: Sequence[CategoryValue],
) -> tuple[ContingencyTable, MissingnessSummary]:
    """Cell counts and missingness summary in one pass."""
    tracker = MissingnessTracker()
    table = ContingencyTable()
    for r, c in zip(rows, cols):
        tracker.update(r is MISSING, c is MISSING)
        table.add(r, c)
    return table, tracker.summary()
