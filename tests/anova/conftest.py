"""
Shared fixtures for ANOVA tests.
"""

import numpy as np
import pytest


@pytest.fixture
def oneway_groups():
    """3 unbalanced groups with clear mean differences, as raw arrays."""
    rng = np.random.default_rng(42)
    return [
        rng.normal(10.0, 2.0, 5),
        rng.normal(15.0, 2.0, 10),
        rng.normal(20.0, 2.0, 15),
    ]


@pytest.fixture
def oneway_summary(oneway_groups):
    """(counts, means, variances with denominator n_i) of oneway_groups."""
    counts = [len(g) for g in oneway_groups]
    means = [float(g.mean()) for g in oneway_groups]
    variances = [float(g.var()) for g in oneway_groups]
    return counts, means, variances
