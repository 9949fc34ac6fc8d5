"""
Tests for associate(): statistic selection by attribute kind.
"""

import math

import pytest

from mvextras.anova import eta_with_missing
from mvextras.association import MeasureType, associate
from mvextras.core.config import AnalysisConfig
from mvextras.core.exceptions import ValidationError
from mvextras.descriptive import pearson_with_missing
from mvextras.hypothesis import cramers_v_with_missing


class TestPearsonPairs:

    def test_example_perfect_correlation(self, make_table):
        table = make_table(
            {'x': [1, 2, 3, 4, 5], 'y': [2, 4, 6, 8, 10]},
            {'x': 'numeric', 'y': 'numeric'},
        )
        rec = associate(table, 'x', 'y')
        assert rec.measure_type is MeasureType.PEARSON
        assert rec.measure == 1.0
        assert rec.n_complete == 5
        assert rec.n_total == 5
        assert (rec.ci_low, rec.ci_high) == (1.0, 1.0)
        assert rec.p_value == 0.0
        assert rec.measure_incl_missing is None

    def test_exact_non_integer_lines(self, make_table, rng):
        for _ in range(200):
            x = [round(float(v), 3) for v in rng.uniform(0.0, 10.0, 6)]
            y = [3.1 * v + 0.7 for v in x]
            table = make_table({'x': x, 'y': y}, {'x': 'numeric', 'y': 'numeric'})
            rec = associate(table, 'x', 'y')
            assert -1.0 <= rec.measure <= 1.0
            assert not math.isnan(rec.ci_low)
            assert not math.isnan(rec.p_value)
            if rec.measure == 1.0:
                assert (rec.ci_low, rec.ci_high) == (1.0, 1.0)
                assert rec.p_value == 0.0

    def test_matches_streaming_pearson(self, mixed_table):
        rec = associate(mixed_table, 'height', 'weight')
        s = pearson_with_missing(mixed_table, 'height', 'weight')
        assert rec.measure == pytest.approx(s.correlation)
        assert rec.n_complete == 5
        assert rec.n_missing_x == 2
        assert rec.n_missing_y == 1
        assert rec.ci_low < rec.measure < rec.ci_high
        assert 0.0 <= rec.p_value <= 1.0
        assert rec.ci_error is None

    def test_too_few_cases_no_ci(self, make_table):
        table = make_table(
            {'x': [1, 2, 3, None], 'y': [2, 1, 5, 3]},
            {'x': 'numeric', 'y': 'numeric'},
        )
        rec = associate(table, 'x', 'y')
        assert rec.n_complete == 3
        assert not math.isnan(rec.measure)
        assert math.isnan(rec.ci_low) and math.isnan(rec.ci_high)
        assert math.isnan(rec.p_value)

    def test_undefined_correlation_no_ci(self, make_table):
        table = make_table(
            {'x': [1, 1, 1, 1, 1], 'y': [2, 1, 5, 3, 4]},
            {'x': 'numeric', 'y': 'numeric'},
        )
        rec = associate(table, 'x', 'y')
        assert math.isnan(rec.measure)
        assert rec.is_supported
        assert math.isnan(rec.p_value)

    def test_ci_z_from_config(self, mixed_table):
        narrow = associate(mixed_table, 'height', 'weight')
        wide = associate(mixed_table, 'height', 'weight', config=AnalysisConfig(ci_z=2.576))
        assert wide.ci_low < narrow.ci_low
        assert wide.ci_high > narrow.ci_high


class TestCategoricalPairs:

    def test_eta(self, mixed_table):
        rec = associate(mixed_table, 'team', 'weight')
        e = eta_with_missing(mixed_table, 'team', 'weight')
        assert rec.measure_type is MeasureType.ETA
        assert rec.measure == pytest.approx(e.correlation)
        assert rec.measure_incl_missing == pytest.approx(e.correl_incl_missing)
        assert rec.p_value_incl_missing == pytest.approx(e.p_incl_missing)
        assert rec.ci_low is None

    def test_cramers_v(self, mixed_table):
        rec = associate(mixed_table, 'team', 'shirt')
        v = cramers_v_with_missing(mixed_table, 'team', 'shirt')
        assert rec.measure_type is MeasureType.CRAMERS_V
        assert rec.measure == pytest.approx(v.correlation)
        assert rec.n_missing_x == 1
        assert rec.n_missing_y == 1
        assert 0.0 <= rec.measure <= 1.0

    def test_empty_string_option_reaches_measure(self, mixed_table):
        rec = associate(mixed_table, 'team', 'shirt',
                        config=AnalysisConfig(empty_string_missing=False))
        assert rec.n_missing_x == 0


class TestNumericPredictsCategorical:

    def test_blank_mode_default(self, mixed_table):
        rec = associate(mixed_table, 'height', 'team')
        assert rec.measure_type is MeasureType.NUMERIC_PREDICTS_CATEGORICAL
        assert rec.measure is None
        assert not rec.is_supported
        assert rec.p_value is None
        assert rec.n_missing_x == 2
        assert rec.n_missing_y == 1
        assert rec.n_total == 8

    def test_eta_mode_swaps_roles(self, mixed_table):
        rec = associate(mixed_table, 'height', 'team', config=AnalysisConfig(npcr_mode='eta'))
        e = eta_with_missing(mixed_table, 'team', 'height')
        assert rec.measure_type is MeasureType.NUMERIC_PREDICTS_CATEGORICAL
        assert rec.measure == pytest.approx(e.correlation)
        assert rec.p_value == pytest.approx(e.p_value)
        # missing counts stay attached to predictor / response
        assert rec.n_missing_x == 2
        assert rec.n_missing_y == 1


class TestUnsupported:

    @pytest.mark.parametrize("pair", [('area', 'height'), ('height', 'area'), ('area', 'team')])
    def test_missingness_only(self, mixed_table, pair):
        rec = associate(mixed_table, *pair)
        assert rec.measure_type is MeasureType.UNSUPPORTED
        assert rec.measure is None
        assert rec.p_value is None
        assert rec.n_total == 8

    def test_missing_counts_read_as_categories(self, mixed_table):
        rec = associate(mixed_table, 'area', 'height')
        assert rec.n_missing_x == 2
        # 'n/a' is a value here, only None is missing
        assert rec.n_missing_y == 1
        assert not math.isnan(rec.missingness_correlation)


def test_unknown_attribute(mixed_table):
    with pytest.raises(ValidationError):
        associate(mixed_table, 'height', 'age')
