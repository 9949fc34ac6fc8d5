"""
Pairwise association between attributes of mixed types.

Public API:
    associate(table, predictor, response, *, config) -> AssociationResult
    association_matrix(table, ...) -> AssociationSolution
    association_record(result, table, ...) -> dict
"""

from mvextras.association._common import AssociationResult, MeasureType
from mvextras.association._dispatch import associate
from mvextras.association.records import association_record, iso_timestamp, table_order_label
from mvextras.association.solution import AssociationParams, AssociationSolution
from mvextras.association.solvers import association_matrix

__all__ = [
    "associate",
    "association_matrix",
    "association_record",
    "iso_timestamp",
    "table_order_label",
    "AssociationResult",
    "AssociationSolution",
    "AssociationParams",
    "MeasureType",
]
