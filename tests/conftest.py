"""
-------
conftest.py
-------
Shared pytest fixtures for curve tests.
"""

import pytest

from paracurve import Segment, Concat, Circle
from paracurve.rng import RNG


# -----------------------------------------------------------------------------
# Curve fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def diagonal():
    """Unit diagonal segment (0, 0) -> (1, 1)."""
    return Segment((0.0, 0.0), (1.0, 1.0))


@pytest.fixture
def zigzag():
    """Two segments sharing the joint (1, 1): (0, 0) -> (1, 1) -> (0, 2)."""
    return Concat([
        Segment((0.0, 0.0), (1.0, 1.0)),
        Segment((1.0, 1.0), (0.0, 2.0)),
    ])


@pytest.fixture
def unit_circle():
    return Circle((0.0, 0.0), 1.0)


# -----------------------------------------------------------------------------
# RNG fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fixed_rng():
    """Deterministic RNG instance."""
    return RNG(seed=123)
