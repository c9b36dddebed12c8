"""Piecewise-linear rate curves.

This package provides:
- Curve / CutoffPoint: validated, immutable curve configuration
- locate / bounds: half-open segment lookup
- integrate: closed-form integral of one segment
"""

from balancing.curve.integration import integrate
from balancing.curve.locator import NO_INTERVAL, bounds, locate
from balancing.curve.types import Bound, Curve, CutoffPoint, Interval

__all__ = [
    # Types
    "Bound",
    "Curve",
    "CutoffPoint",
    "Interval",
    # Lookup
    "NO_INTERVAL",
    "bounds",
    "locate",
    # Integration
    "integrate",
]
