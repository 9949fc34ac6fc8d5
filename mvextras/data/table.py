"""
Case tables.

A CaseTable is the "I have data" object: an ordered list of attribute
descriptors and a materialised collection of cases, as handed over by the
host data platform. It knows nothing about which statistic will consume it.
Columns are ingested on request according to the kind the consumer needs,
applying the missing-value rules in mvextras.data._values.

Usage:
    table = CaseTable.from_records(
        cases=[{'id': 1, 'values': {'height': 1.7, 'team': 'A'}}, ...],
        attributes=[{'name': 'height', 'type': 'numeric', 'unit': 'm'},
                    {'name': 'team', 'type': 'categorical'}],
        name='players',
    )
    table.numeric('height')      # (1.7, MISSING, ...)
    table.categorical('team')    # ('A', ...)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from mvextras.core.exceptions import ValidationError
from mvextras.data._types import AttributeKind, classify
from mvextras.data._values import (
    CategoryValue,
    NumericValue,
    to_category,
    to_number,
)


@dataclass(frozen=True)
class Attribute:
    """
    Attribute descriptor.

    Attributes:
        name: Column name, unique within a table
        type: Raw type label from the host platform ('' if absent)
        unit: Unit label ('' if absent)
        description: Free-text description ('' if absent)
    """
    name: str
    type: str = ''
    unit: str = ''
    description: str = ''

    @property
    def kind(self) -> AttributeKind:
        return classify(self.type)

    @classmethod
    def from_mapping(cls, spec: Mapping[str, Any]) -> Attribute:
        if 'name' not in spec:
            raise ValidationError(f"attribute: missing 'name' in {dict(spec)!r}")
        return cls(
            name=str(spec['name']),
            type=spec.get('type') or '',
            unit=spec.get('unit') or '',
            description=spec.get('description') or '',
        )


@dataclass(frozen=True)
class Case:
    """One row: an identifier plus a read-only mapping of raw values."""
    id: Any
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'values', MappingProxyType(dict(self.values)))

    def get(self, name: str) -> Any:
        """Raw value for an attribute; absent attributes read as None."""
        return self.values.get(name)

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> Case:
        if 'values' not in record:
            raise ValidationError(f"case: missing 'values' in record with keys {sorted(record)}")
        return cls(id=record.get('id'), values=record['values'])


@dataclass(frozen=True)
class CaseTable:
    """
    Immutable, materialised table of cases.

    Construct via from_records(), not directly.
    """
    attributes: tuple[Attribute, ...]
    cases: tuple[Case, ...]
    name: str = ''
    title: str = ''

    @classmethod
    def from_records(
        cls,
        cases: Iterable[Case | Mapping[str, Any]],
        attributes: Iterable[Attribute | Mapping[str, Any]],
        *,
        name: str = '',
        title: str | None = None,
    ) -> CaseTable:
        """
        Build a table from host-platform records.

        Args:
            cases: Iterable of Case or {'id': ..., 'values': {name: raw}}
            attributes: Iterable of Attribute or
                {'name', 'type', 'unit'?, 'description'?}, in table order
            name: Internal dataset name
            title: Display title (defaults to name)

        Raises:
            ValidationError: On malformed records or duplicate attribute names
        """
        attrs = tuple(
            a if isinstance(a, Attribute) else Attribute.from_mapping(a)
            for a in attributes
        )
        seen: set[str] = set()
        for a in attrs:
            if a.name in seen:
                raise ValidationError(f"attributes: duplicate attribute name {a.name!r}")
            seen.add(a.name)

        rows = tuple(
            c if isinstance(c, Case) else Case.from_mapping(c)
            for c in cases
        )
        return cls(
            attributes=attrs,
            cases=rows,
            name=name,
            title=title if title is not None else name,
        )

    @property
    def n_cases(self) -> int:
        return len(self.cases)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(a.name for a in self.attributes)

    def attribute(self, name: str) -> Attribute:
        """Look up an attribute descriptor by name."""
        for a in self.attributes:
            if a.name == name:
                return a
        raise ValidationError(
            f"CaseTable has no attribute {name!r}. Available: {list(self.names)}"
        )

    def __contains__(self, name: str) -> bool:
        return any(a.name == name for a in self.attributes)

    def raw(self, name: str) -> tuple[Any, ...]:
        """Raw values of one attribute, in case order."""
        self.attribute(name)
        return tuple(c.get(name) for c in self.cases)

    def numeric(self, name: str) -> tuple[NumericValue, ...]:
        """Column ingested as finite floats or MISSING."""
        return tuple(to_number(v) for v in self.raw(name))

    def categorical(
        self,
        name: str,
        *,
        empty_string_missing: bool = True,
    ) -> tuple[CategoryValue, ...]:
        """Column ingested as category labels (raw values) or MISSING."""
        return tuple(
            to_category(v, empty_string_missing=empty_string_missing)
            for v in self.raw(name)
        )

    def column(
        self,
        name: str,
        kind: AttributeKind | None = None,
        *,
        empty_string_missing: bool = True,
    ) -> tuple[Any, ...]:
        """
        Column ingested as the given kind (the attribute's own kind if None).

        OTHER columns come back raw.
        """
        kind = kind or self.attribute(name).kind
        if kind is AttributeKind.NUMERIC:
            return self.numeric(name)
        if kind is AttributeKind.CATEGORICAL:
            return self.categorical(name, empty_string_missing=empty_string_missing)
        return self.raw(name)

    def order_map(self) -> dict[str, int]:
        """Attribute name -> 1-based position in table order."""
        return {a.name: i for i, a in enumerate(self.attributes, start=1)}
