"""
Shared fixtures for the particle filter test suite.
"""

import numpy as np
import pytest

from pf_localization.landmark import Map, MapLandmark


@pytest.fixture
def rng():
    """Seeded generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def zero_noise():
    """Process noise turned off, [sigma_x, sigma_y, sigma_theta]."""
    return [0.0, 0.0, 0.0]


@pytest.fixture
def std_landmark():
    return [0.3, 0.3]


@pytest.fixture
def small_map():
    """Two close landmarks near the origin and one far away."""
    return Map([
        MapLandmark(1, 2.0, 0.0),
        MapLandmark(2, 0.0, 3.0),
        MapLandmark(3, 100.0, 100.0),
    ])
