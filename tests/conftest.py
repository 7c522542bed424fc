"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylearnkit.core.capabilities import ALL_CAPABILITIES, reset_capabilities


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def _fresh_capabilities():
    """Backend resolution is cached per process; start every test clean."""
    reset_capabilities()
    yield
    reset_capabilities()


@pytest.fixture
def no_capabilities():
    """Capability set forcing every estimator onto its fallback path."""
    return frozenset()


@pytest.fixture
def all_capabilities():
    return frozenset(ALL_CAPABILITIES)


@pytest.fixture
def classification_data(rng):
    """Three well-separated Gaussian blobs with labels 0, 1, 2."""
    centers = np.array([[0.0, 0.0], [6.0, 6.0], [0.0, 8.0]])
    x = np.vstack([c + rng.standard_normal((30, 2)) * 0.5 for c in centers])
    y = np.repeat(np.arange(3), 30).astype(np.int32)
    return x, y


@pytest.fixture
def regression_data(rng):
    """Linear dataset y = X beta + 2 + small noise."""
    n, p = 100, 3
    x = rng.standard_normal((n, p))
    beta_true = np.array([1.0, -2.0, 0.5])
    y = x @ beta_true + 2.0 + rng.standard_normal(n) * 0.01
    return x, y, beta_true
