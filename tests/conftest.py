"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from mvextras.data import CaseTable


def build_table(columns, types, *, name='test', units=None, descriptions=None):
    """
    CaseTable from {name: list of raw values} and {name: type label}.

    Cases get ids 1..n in list order.
    """
    names = list(columns)
    n = len(columns[names[0]]) if names else 0
    units = units or {}
    descriptions = descriptions or {}
    attributes = [
        {
            'name': col,
            'type': types[col],
            'unit': units.get(col, ''),
            'description': descriptions.get(col, ''),
        }
        for col in names
    ]
    cases = [
        {'id': i + 1, 'values': {col: columns[col][i] for col in names}}
        for i in range(n)
    ]
    return CaseTable.from_records(cases, attributes, name=name)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def make_table():
    """Factory for small CaseTables; see build_table()."""
    return build_table


@pytest.fixture
def mixed_table():
    """
    Eight cases covering every attribute kind, with gaps in each column.

    height / weight numeric, team / shirt categorical, area boundary.
    """
    return build_table(
        {
            'height': [1.60, 1.72, 1.81, None, 1.65, 1.90, 'n/a', 1.77],
            'weight': [55.0, 68.0, 80.0, 70.0, None, 92.0, 61.0, 75.0],
            'team': ['A', 'A', 'B', 'B', '', 'C', 'C', 'A'],
            'shirt': ['S', 'M', 'L', 'L', 'S', None, 'M', 'M'],
            'area': ['{...}', '{...}', None, '{...}', '{...}', '{...}', '{...}', None],
        },
        {
            'height': 'numeric',
            'weight': 'numeric',
            'team': 'categorical',
            'shirt': 'nominal',
            'area': 'boundary',
        },
        name='players',
        units={'height': 'm', 'weight': 'kg'},
        descriptions={'height': 'standing height'},
    )
