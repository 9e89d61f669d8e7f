"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pycurves.regression import SampleSet


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line():
    """y = 2 + 3x, no noise."""
    return [(0.0, 2.0), (1.0, 5.0), (2.0, 8.0), (3.0, 11.0)]


@pytest.fixture
def noisy_line(rng):
    """y = 1.5 - 0.8x plus Gaussian noise."""
    x = np.linspace(0.0, 10.0, 50)
    y = 1.5 - 0.8 * x + rng.standard_normal(50) * 0.3
    return SampleSet.from_arrays(x, y)


@pytest.fixture
def exact_quadratic():
    """y = 1 + 2x + 3x², no noise."""
    x = np.arange(-3.0, 4.0)
    return SampleSet.from_arrays(x, 1.0 + 2.0 * x + 3.0 * x ** 2)


@pytest.fixture
def exact_exponential():
    """y = 2·e^(0.5x), no noise."""
    x = np.linspace(0.0, 5.0, 11)
    return SampleSet.from_arrays(x, 2.0 * np.exp(0.5 * x))


@pytest.fixture
def step_data():
    """Sharp 0/1 transition at x = 0."""
    x = np.array([-5.0, -4.0, -3.0, -2.0, -1.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    y = (x > 0).astype(float)
    return SampleSet.from_arrays(x, y)


@pytest.fixture
def mixed_sign_data():
    """Samples with zero and negative values in both x and y."""
    return [
        (-2.0, -1.0), (-1.0, 0.0), (0.0, 0.5), (1.0, 2.0),
        (2.0, 3.5), (3.0, 6.0), (4.0, 8.5), (5.0, 12.0),
    ]
