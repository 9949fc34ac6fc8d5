"""
Tabular input: cases, attribute descriptors, value ingestion.

Public API:
    CaseTable.from_records(cases, attributes, ...) -> CaseTable
    Attribute, Case
    AttributeKind, classify(raw_type)
    MISSING, to_number(raw), to_category(raw, ...), is_missing(value)
"""

from mvextras.data._types import AttributeKind, classify
from mvextras.data._values import (
    MISSING,
    CategoryValue,
    Missing,
    NumericValue,
    is_missing,
    to_category,
    to_number,
)
from mvextras.data.table import Attribute, Case, CaseTable

__all__ = [
    "AttributeKind",
    "classify",
    "MISSING",
    "Missing",
    "NumericValue",
    "CategoryValue",
    "is_missing",
    "to_category",
    "to_number",
    "Attribute",
    "Case",
    "CaseTable",
]
