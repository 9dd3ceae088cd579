"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def rng():
    """Seeded local generator for reproducible draws."""
    return np.random.default_rng(42)


@pytest.fixture
def square_points():
    """Four corners of the unit square as points."""
    from point_clouds.points import Point
    return [Point((0, 0)), Point((0, 1)), Point((1, 0)), Point((1, 1))]
