"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


# Survey fixture constants
SURVEY_N = 2421
AGE_PROGRESSIVISM_R = -0.0418
SUSTAINABILITY_LOCALISM_R = 0.35


def with_exact_correlation(rng, n, rho):
    """
    Two standardized vectors whose sample correlation is exactly ``rho``.

    Centers two normal draws, removes from the second its projection on
    the first, normalizes both, and mixes them with weights rho and
    sqrt(1 - rho^2).
    """
    x = rng.standard_normal(n)
    z = rng.standard_normal(n)
    x = x - x.mean()
    z = z - z.mean()
    z = z - (z @ x) / (x @ x) * x
    x = x / np.sqrt(x @ x)
    z = z / np.sqrt(z @ z)
    y = rho * x + np.sqrt(1.0 - rho ** 2) * z
    # Unit-norm vectors: rescale so the sample sd is about 1
    return x * np.sqrt(n), y * np.sqrt(n)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def survey_columns():
    """
    Synthetic survey of 2421 respondents.

    age/progressivism correlate at exactly -0.0418 and
    sustainability/localism at exactly 0.35.
    """
    gen = np.random.default_rng(20240101)
    a, p = with_exact_correlation(gen, SURVEY_N, AGE_PROGRESSIVISM_R)
    s, l = with_exact_correlation(gen, SURVEY_N, SUSTAINABILITY_LOCALISM_R)
    return {
        'age': 46.0 + 16.5 * a,
        'progressivism': 3.1 + 0.9 * p,
        'sustainability': 3.6 + 0.7 * s,
        'localism': 2.8 + 1.1 * l,
    }


@pytest.fixture
def small_pair():
    """Small paired sample with a clear positive association."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0])
    y = np.array([2.1, 3.9, 6.2, 7.8, 10.1, 12.2, 13.8, 16.1, 18.0, 19.9])
    return {'x': x, 'y': y}
