"""
Attribute type classification.

Host platforms label columns with free-form type strings. The statistics
only care whether a column behaves numerically, categorically, or neither
(boundaries, colours and anything unrecognised).
"""

from enum import Enum


class AttributeKind(str, Enum):
    """Essential kind of an attribute, as far as the statistics are concerned."""
    NUMERIC = 'numeric'
    CATEGORICAL = 'categorical'
    OTHER = 'other'


# An empty or absent type label means categorical.
_CATEGORICAL_TYPES = frozenset({'', 'categorical', 'checkbox', 'nominal'})
# 'qualitative' is numeric data displayed as bars.
_NUMERIC_TYPES = frozenset({'numeric', 'date', 'qualitative'})
_OTHER_TYPES = frozenset({'boundary', 'color'})


def classify(raw_type: str | None) -> AttributeKind:
    """
    Map a raw type label to its AttributeKind.

    Unrecognised labels are OTHER rather than an error.

    Examples:
        >>> classify('numeric')
        <AttributeKind.NUMERIC: 'numeric'>
        >>> classify(None)
        <AttributeKind.CATEGORICAL: 'categorical'>
        >>> classify('boundary')
        <AttributeKind.OTHER: 'other'>
    """
    if raw_type is None or raw_type in _CATEGORICAL_TYPES:
        return AttributeKind.CATEGORICAL
    if raw_type in _NUMERIC_TYPES:
        return AttributeKind.NUMERIC
    # _OTHER_TYPES and anything unrecognised
    return AttributeKind.OTHER
