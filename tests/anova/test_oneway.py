"""
Tests for one-way ANOVA from group summaries.

F and p are validated against scipy.stats.f_oneway on the raw data.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from mvextras.anova import AnovaSolution, anova_by_category, anova_from_summary
from mvextras.core.exceptions import DimensionError


class TestAnovaFromSummary:

    def test_returns_solution(self, oneway_summary):
        sol = anova_from_summary(*oneway_summary)
        assert isinstance(sol, AnovaSolution)
        assert sol.between.source == 'Between'
        assert sol.within.source == 'Within'

    def test_matches_scipy(self, oneway_groups, oneway_summary):
        sol = anova_from_summary(*oneway_summary)
        ref = stats.f_oneway(*oneway_groups)
        assert_allclose(sol.f_value, ref.statistic, rtol=1e-10)
        assert_allclose(sol.p_value, ref.pvalue, rtol=1e-6, atol=1e-10)

    def test_degrees_of_freedom(self, oneway_summary):
        sol = anova_from_summary(*oneway_summary)
        assert sol.between.df == 2
        assert sol.within.df == 27
        assert sol.n_obs == 30
        assert sol.n_groups == 3

    def test_sum_of_squares_identity(self, oneway_groups, oneway_summary):
        sol = anova_from_summary(*oneway_summary)
        assert_allclose(sol.between.sum_sq + sol.within.sum_sq, sol.total_sum_sq, rtol=1e-12)
        pooled = np.concatenate(oneway_groups)
        assert_allclose(sol.total_sum_sq, np.sum((pooled - pooled.mean()) ** 2), rtol=1e-10)
        assert_allclose(sol.grand_mean, pooled.mean(), rtol=1e-12)

    def test_identity_random_inputs(self, rng):
        for _ in range(50):
            k = rng.integers(2, 7)
            sol = anova_from_summary(
                rng.integers(1, 20, k), rng.normal(0, 5, k), rng.uniform(0, 4, k),
            )
            assert_allclose(sol.between.sum_sq + sol.within.sum_sq, sol.total_sum_sq)
            assert 0.0 <= sol.eta_squared <= 1.0

    def test_eta_squared_example(self):
        # groups A = [1, 2], B = [10, 12]
        sol = anova_from_summary([2, 2], [1.5, 11.0], [0.25, 1.0])
        assert sol.between.sum_sq == pytest.approx(90.25)
        assert sol.within.sum_sq == pytest.approx(2.5)
        assert sol.eta_squared == pytest.approx(90.25 / 92.75)
        assert sol.eta_squared > 0.9

    def test_singleton_groups_have_zero_variance(self):
        sol = anova_from_summary([1, 1, 2], [3.0, 5.0, 4.0], [0.0, 0.0, 1.0])
        assert sol.within.sum_sq == pytest.approx(2.0)
        assert not math.isnan(sol.f_value)

    def test_single_group_all_nan(self):
        sol = anova_from_summary([5], [2.0], [1.0])
        for row in sol.table:
            assert math.isnan(row.sum_sq)
            assert math.isnan(row.df)
        assert math.isnan(sol.eta_squared)
        assert any("1 group" in w for w in sol.warnings)

    def test_zero_total_count_all_nan(self):
        sol = anova_from_summary([0, 0], [0.0, 0.0], [0.0, 0.0])
        assert math.isnan(sol.f_value)
        assert math.isnan(sol.p_value)

    def test_zero_within_variance(self):
        sol = anova_from_summary([2, 2], [1.0, 3.0], [0.0, 0.0])
        assert math.isnan(sol.f_value)
        assert math.isnan(sol.p_value)
        assert sol.eta_squared == pytest.approx(1.0)

    def test_zero_within_df(self):
        sol = anova_from_summary([1, 1], [1.0, 3.0], [0.0, 0.0])
        assert sol.within.df == 0
        assert math.isnan(sol.within.mean_sq)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            anova_from_summary([1, 2], [1.0], [0.0, 0.0])

    def test_summary_text(self, oneway_summary):
        text = anova_from_summary(*oneway_summary).summary()
        assert "Between" in text and "Within" in text
        assert "Pr(>F)" in text
        assert "AnovaSolution" in repr(anova_from_summary(*oneway_summary))


class TestAnovaByCategory:

    def test_example_table(self, make_table):
        table = make_table(
            {'g': ['A', 'A', 'B', 'B'], 'y': [1, 2, 10, 12]},
            {'g': 'categorical', 'y': 'numeric'},
        )
        sol = anova_by_category(table, 'g', 'y')
        assert sol.eta_squared == pytest.approx(90.25 / 92.75)
        assert sol.group_means == {'A': 1.5, 'B': 11.0}

    def test_include_missing_adds_group(self, make_table):
        table = make_table(
            {'g': ['A', 'A', None, 'B', 'B', ''], 'y': [1, 2, 6, 10, 12, 7]},
            {'g': 'categorical', 'y': 'numeric'},
        )
        excl = anova_by_category(table, 'g', 'y')
        incl = anova_by_category(table, 'g', 'y', include_missing=True)
        assert excl.n_groups == 2
        assert incl.n_groups == 3
        assert incl.group_means['<missing>'] == pytest.approx(6.5)
        assert incl.n_obs == 6
