"""
Flat output records for the host platform.

Field names are a contract with downstream consumers (saved tables,
graphs keyed on these columns) and must not change.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from mvextras.association._common import AssociationResult
from mvextras.data import CaseTable


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp in the 'YYYY-MM-DDTHH:MM:SS.mmmZ' form."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def table_order_label(name: str, order: Mapping[str, int]) -> str:
    """
    Zero-padded ordinal prefix, e.g. '007_height'.

    Sorting these strings reproduces table order rather than alphabetical
    order. Unknown attributes get ordinal 0.
    """
    return f"{order.get(name, 0):03d}_{name}"


def association_record(
    result: AssociationResult,
    table: CaseTable,
    *,
    timestamp: str | None = None,
    order: Mapping[str, int] | None = None,
) -> dict[str, Any]:
    """
    One association result as a flat dict.

    Args:
        result: The pair's association
        table: Table the pair came from (for names, types, units)
        timestamp: ISO-8601 string; current UTC time if None
        order: Attribute ordinals; table.order_map() if None
    """
    order = order if order is not None else table.order_map()
    a1 = table.attribute(result.predictor)
    a2 = table.attribute(result.response)

    return {
        "TableName": table.title,
        "Predictor": result.predictor,
        "Response": result.response,
        "correlation": result.measure,
        "correlationType": result.measure_type.value,
        "nNeitherMissing": result.n_complete,
        "nCases": result.n_total,
        "nBlanks1": result.n_missing_x,
        "nBlanks2": result.n_missing_y,
        "correlBlanks": result.missingness_correlation,
        "CI_low95": result.ci_low,
        "CI_high95": result.ci_high,
        "p_value": result.p_value,
        "correlInclMissing": result.measure_incl_missing,
        "pValueInclMissing": result.p_value_incl_missing,
        "date": timestamp or iso_timestamp(),
        "type1": a1.type,
        "unit1": a1.unit,
        "type2": a2.type,
        "unit2": a2.unit,
        "description1": a1.description,
        "description2": a2.description,
        "table_order_Predictor": table_order_label(result.predictor, order),
        "table_order_Response": table_order_label(result.response, order),
    }
