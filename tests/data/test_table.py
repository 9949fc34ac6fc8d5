"""
Tests for CaseTable construction and column access.
"""

from types import MappingProxyType

import pytest

from mvextras.core.exceptions import ValidationError
from mvextras.data import MISSING, Attribute, AttributeKind, Case, CaseTable


class TestFromRecords:

    def test_basic(self, mixed_table):
        assert mixed_table.n_cases == 8
        assert mixed_table.names == ('height', 'weight', 'team', 'shirt', 'area')
        assert mixed_table.title == 'players'

    def test_title_defaults_to_name(self):
        t = CaseTable.from_records([], [{'name': 'x', 'type': 'numeric'}], name='ds')
        assert t.title == 'ds'
        t = CaseTable.from_records([], [{'name': 'x'}], name='ds', title='Data Set')
        assert t.title == 'Data Set'

    def test_attribute_defaults(self):
        t = CaseTable.from_records([], [{'name': 'x', 'type': None}])
        a = t.attribute('x')
        assert a.type == '' and a.unit == '' and a.description == ''
        assert a.kind is AttributeKind.CATEGORICAL

    def test_accepts_dataclass_inputs(self):
        t = CaseTable.from_records(
            [Case(id=1, values={'x': 1})],
            [Attribute('x', 'numeric')],
        )
        assert t.numeric('x') == (1.0,)

    def test_duplicate_attribute_rejected(self):
        with pytest.raises(ValidationError, match="duplicate"):
            CaseTable.from_records([], [{'name': 'x'}, {'name': 'x'}])

    def test_attribute_without_name_rejected(self):
        with pytest.raises(ValidationError, match="name"):
            CaseTable.from_records([], [{'type': 'numeric'}])

    def test_case_without_values_rejected(self):
        with pytest.raises(ValidationError, match="values"):
            CaseTable.from_records([{'id': 1}], [{'name': 'x'}])


class TestColumns:

    def test_numeric_ingestion(self, mixed_table):
        col = mixed_table.numeric('height')
        assert col[0] == 1.60
        assert col[3] is MISSING
        assert col[6] is MISSING

    def test_categorical_ingestion(self, mixed_table):
        col = mixed_table.categorical('team')
        assert col[:4] == ('A', 'A', 'B', 'B')
        assert col[4] is MISSING

    def test_empty_string_category_option(self, mixed_table):
        col = mixed_table.categorical('team', empty_string_missing=False)
        assert col[4] == ''

    def test_column_uses_declared_kind(self, mixed_table):
        assert mixed_table.column('weight') == mixed_table.numeric('weight')
        assert mixed_table.column('shirt') == mixed_table.categorical('shirt')
        assert mixed_table.column('area') == mixed_table.raw('area')
        assert mixed_table.column('weight', AttributeKind.CATEGORICAL)[0] == '55.0'

    def test_absent_value_reads_as_none(self):
        t = CaseTable.from_records(
            [{'id': 1, 'values': {}}], [{'name': 'x', 'type': 'numeric'}],
        )
        assert t.raw('x') == (None,)
        assert t.numeric('x') == (MISSING,)

    def test_unknown_attribute(self, mixed_table):
        with pytest.raises(ValidationError, match="no attribute 'age'"):
            mixed_table.numeric('age')
        assert 'age' not in mixed_table
        assert 'team' in mixed_table

    def test_case_values_read_only(self, mixed_table):
        case = mixed_table.cases[0]
        assert isinstance(case.values, MappingProxyType)
        with pytest.raises(TypeError):
            case.values['height'] = 2.0

    def test_order_map(self, mixed_table):
        assert mixed_table.order_map() == {
            'height': 1, 'weight': 2, 'team': 3, 'shirt': 4, 'area': 5,
        }
