"""
Tests for streaming Pearson correlation, its CI and p-value.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from mvextras.data import MISSING
from mvextras.descriptive import (
    OnlineCovariance,
    correlation_ci,
    missingness_correlation,
    pearson_p_value,
    pearson_with_missing,
    stream_pearson,
)


class TestStreamPearson:

    def test_perfect_linear_example(self, make_table):
        table = make_table(
            {'x': [1, 2, 3, 4, 5], 'y': [2, 4, 6, 8, 10]},
            {'x': 'numeric', 'y': 'numeric'},
        )
        s = pearson_with_missing(table, 'x', 'y')
        assert s.correlation == 1.0
        assert s.n_complete == 5
        assert s.missing.n_missing_x == 0
        assert s.missing.n_total == 5
        assert math.isnan(s.missing.missingness_correlation)

    def test_exact_lines_stay_in_range(self, rng):
        for _ in range(500):
            x = np.round(rng.uniform(0.0, 10.0, 6), 3)
            y = 3.1 * x + 0.7
            s = stream_pearson(tuple(x), tuple(y))
            assert -1.0 <= s.correlation <= 1.0
            assert s.correlation == pytest.approx(1.0)
            ci = correlation_ci(s.correlation, s.n_complete)
            assert ci.error is None or "between -1 and 1" not in ci.error
            assert not math.isnan(pearson_p_value(s.correlation, s.n_complete))

    def test_rounding_overshoot_clipped(self):
        acc = OnlineCovariance(n=4, sx=2.0, sy=2.0, sxy=2.0 * (1.0 + 4e-16))
        assert acc.correlation == 1.0
        acc = OnlineCovariance(n=4, sx=2.0, sy=2.0, sxy=-2.0 * (1.0 + 4e-16))
        assert acc.correlation == -1.0

    def test_matches_two_pass(self, rng):
        x = rng.normal(100.0, 15.0, 400)
        y = 0.3 * x + rng.normal(0.0, 5.0, 400)
        s = stream_pearson(tuple(x), tuple(y))
        assert_allclose(s.correlation, np.corrcoef(x, y)[0, 1], rtol=1e-9)
        assert_allclose(s.mean_x, x.mean(), rtol=1e-12)

    def test_complete_cases_only(self):
        xs = (1.0, 2.0, MISSING, 4.0, 5.0, 6.0)
        ys = (1.5, MISSING, 9.0, 4.5, 4.0, 7.0)
        s = stream_pearson(xs, ys)
        expected = np.corrcoef([1.0, 4.0, 5.0, 6.0], [1.5, 4.5, 4.0, 7.0])[0, 1]
        assert s.n_complete == 4
        assert_allclose(s.correlation, expected, rtol=1e-12)
        assert s.missing.n_missing_x == 1
        assert s.missing.n_missing_y == 1
        assert s.missing.n_complete == 4

    def test_unparseable_counts_as_missing(self, make_table):
        table = make_table(
            {'x': [1, 'two', 3, 4], 'y': ['1', '2', '', 4]},
            {'x': 'numeric', 'y': 'numeric'},
        )
        s = pearson_with_missing(table, 'x', 'y')
        assert s.n_complete == 2
        assert s.missing.n_missing_x == 1
        assert s.missing.n_missing_y == 1

    def test_constant_column_is_nan(self):
        s = stream_pearson((1.0, 2.0, 3.0), (5.0, 5.0, 5.0))
        assert math.isnan(s.correlation)

    def test_no_complete_cases(self):
        s = stream_pearson((MISSING, 1.0), (2.0, MISSING))
        assert s.n_complete == 0
        assert math.isnan(s.correlation)
        assert math.isnan(s.mean_x)
        assert s.missing.missingness_correlation == pytest.approx(-1.0)


class TestMissingnessCorrelation:

    def test_categorical_reading(self, make_table):
        # 'abc' is a value when both sides are read as categories
        table = make_table(
            {'a': [None, 'abc', None, 'x'], 'b': [None, 'p', None, '']},
            {'a': 'boundary', 'b': 'color'},
        )
        m = missingness_correlation(table, 'a', 'b')
        assert m.n_missing_x == 2
        assert m.n_missing_y == 3
        assert m.n_complete == 1


class TestCorrelationCI:

    def test_known_value(self):
        r, n = 0.5, 30
        ci = correlation_ci(r, n)
        z = math.atanh(r)
        se = 1 / math.sqrt(n - 3)
        assert ci.low == pytest.approx(math.tanh(z - 1.96 * se), rel=1e-12)
        assert ci.high == pytest.approx(math.tanh(z + 1.96 * se), rel=1e-12)
        assert ci.z_transformed == pytest.approx(z)
        assert ci.standard_error == pytest.approx(se)
        assert ci.margin_of_error == pytest.approx(1.96 * se)
        assert ci.error is None
        assert ci.low < r < ci.high

    def test_custom_z_is_wider(self):
        assert correlation_ci(0.3, 50, z=2.576).low < correlation_ci(0.3, 50).low

    def test_perfect_correlation_degenerate(self):
        ci = correlation_ci(1.0, 5)
        assert (ci.low, ci.high) == (1.0, 1.0)
        ci = correlation_ci(-1.0, 10)
        assert (ci.low, ci.high) == (-1.0, -1.0)
        assert "Perfect correlation" in ci.error

    @pytest.mark.parametrize("r,n,msg", [
        (1.2, 10, "between -1 and 1"),
        (math.nan, 10, "between -1 and 1"),
        (0.5, 3, "greater than 3"),
    ])
    def test_invalid(self, r, n, msg):
        ci = correlation_ci(r, n)
        assert math.isnan(ci.low) and math.isnan(ci.high)
        assert msg in ci.error


class TestPearsonPValue:

    def test_normal_approximation(self):
        r, n = 0.4, 40
        t = r * math.sqrt((n - 2) / (1 - r * r))
        assert pearson_p_value(r, n) == pytest.approx(2 * stats.norm.sf(t), abs=1e-6)

    def test_perfect_is_zero(self):
        assert pearson_p_value(1.0, 5) == 0.0
        assert pearson_p_value(-1.0, 5) == 0.0

    def test_zero_correlation(self):
        assert pearson_p_value(0.0, 20) == pytest.approx(1.0, abs=1e-7)

    def test_invalid_is_nan(self):
        assert math.isnan(pearson_p_value(math.nan, 10))
        assert math.isnan(pearson_p_value(1.5, 10))
        assert math.isnan(pearson_p_value(0.5, 2))
