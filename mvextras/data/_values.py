"""
Ingestion of raw cell values.

Raw values arrive as numbers, strings, or one of several spellings of
"nothing here" (None, empty string, NaN). They are resolved once, at
ingestion, into either a concrete value or the MISSING sentinel, so the
algorithms downstream never have to re-interpret raw input.

Rules:
    categorical: None, float NaN, and (by default) '' are MISSING;
                 any other value is its own label. Labels are keyed
                 on the raw value, so 1 and "1" are different
                 categories; unhashable values fall back to str().
    numeric:     everything missing for categorical, plus anything that
                 does not parse to a finite float, is MISSING.
"""

import math
from collections.abc import Hashable
from typing import Any, Union


class Missing:
    """Singleton marker for a missing value. Use the MISSING instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (Missing, ())


MISSING = Missing()

NumericValue = Union[float, Missing]
CategoryValue = Union[Hashable, Missing]


def _is_blank(raw: Any, empty_string_missing: bool) -> bool:
    if raw is None or raw is MISSING:
        return True
    if isinstance(raw, float) and math.isnan(raw):
        return True
    if isinstance(raw, str) and raw == '' and empty_string_missing:
        return True
    return False


def to_category(raw: Any, *, empty_string_missing: bool = True) -> CategoryValue:
    """
    Resolve a raw value as a category label.

    Args:
        raw: Raw cell value
        empty_string_missing: Treat '' as MISSING (default) rather than as
            a category of its own

    Returns:
        The raw value itself (or its string form if unhashable), or MISSING
    """
    if _is_blank(raw, empty_string_missing):
        return MISSING
    try:
        hash(raw)
    except TypeError:
        return str(raw)
    return raw


def to_number(raw: Any) -> NumericValue:
    """
    Resolve a raw value as a finite float.

    Booleans, unparseable strings, NaN and infinities are MISSING.
    """
    if _is_blank(raw, True) or isinstance(raw, bool):
        return MISSING
    try:
        value = float(raw.strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError, OverflowError):
        return MISSING
    if not math.isfinite(value):
        return MISSING
    return value


def is_missing(value: Any) -> bool:
    """True if an ingested value is the MISSING sentinel."""
    return value is MISSING
