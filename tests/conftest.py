"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from balancing.curve import Curve
from tests.helpers import make_flat_curve, make_two_point_curve

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CURVES_DIR = FIXTURES_DIR / "curves"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def curves_dir() -> Path:
    """Return the curve fixtures directory path."""
    return CURVES_DIR


@pytest.fixture
def two_point_curve() -> Curve:
    """Curve [(100, 0.01), (200, 0.02)] in 18-decimal fixed-point."""
    return make_two_point_curve()


@pytest.fixture
def flat_curve() -> Curve:
    """Single-point curve with a constant 3% rate."""
    return make_flat_curve()


@pytest.fixture
def empty_curve() -> Curve:
    """Curve with no cutoff points (flat zero rate)."""
    return Curve()
