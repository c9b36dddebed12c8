"""Mathematical utilities for balancing fees.

This package provides the arithmetic primitive the fee engine relies on:
- FixedPoint: signed 18-decimal fixed-point arithmetic (truncating)
"""

from balancing.math.fixed_point import (
    ONE_18,
    DivisionByZero,
    FixedPoint,
    FixedPointError,
    div_trunc,
)

__all__ = ["ONE_18", "DivisionByZero", "FixedPoint", "FixedPointError", "div_trunc"]
