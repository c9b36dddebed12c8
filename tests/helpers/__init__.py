"""Test helpers module for shared test utilities.

- constants: fixed-point scale and common raw amounts
- curves: curve factory functions
"""

from tests.helpers.constants import ONE, pct, units
from tests.helpers.curves import make_curve, make_flat_curve, make_two_point_curve

__all__ = [
    # Constants
    "ONE",
    "pct",
    "units",
    # Factories
    "make_curve",
    "make_flat_curve",
    "make_two_point_curve",
]
