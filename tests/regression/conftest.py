"""
Shared fixtures for regression tests.
"""

import numpy as np
import pytest


@pytest.fixture
def table_from_arrays(make_table):
    """Factory: CaseTable with numeric columns x1..xp and response 'y'."""
    def build(X, y, names=None):
        X = np.asarray(X, dtype=float)
        names = names or [f"x{j + 1}" for j in range(X.shape[1])]
        columns = {name: list(X[:, j]) for j, name in enumerate(names)}
        columns['y'] = list(np.asarray(y, dtype=float))
        return make_table(columns, {name: 'numeric' for name in columns}, name='regression')
    return build


@pytest.fixture
def linear_table(make_table):
    """y = 3x + 5 exactly."""
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    return make_table(
        {'x': x, 'y': [3 * v + 5 for v in x]},
        {'x': 'numeric', 'y': 'numeric'},
        name='line',
    )


@pytest.fixture
def noisy_data(rng):
    """Three roughly uncorrelated predictors plus noise."""
    n = 200
    X = rng.standard_normal((n, 3))
    y = 1.5 + X @ np.array([2.0, -1.0, 0.5]) + rng.standard_normal(n) * 0.3
    return X, y


@pytest.fixture
def noisy_table(noisy_data, table_from_arrays):
    X, y = noisy_data
    return table_from_arrays(X, y)


@pytest.fixture
def collinear_table(rng, table_from_arrays):
    """Two almost identical predictors; coordinate descent zig-zags slowly."""
    n = 50
    x1 = rng.standard_normal(n)
    x2 = x1 + rng.standard_normal(n) * 0.01
    y = x1 + x2 + rng.standard_normal(n) * 0.1
    return table_from_arrays(np.column_stack([x1, x2]), y)
