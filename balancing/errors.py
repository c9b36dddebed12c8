"""Balancing fee error classes.

Arithmetic failures (division by zero) live in balancing.math.fixed_point and
derive from ArithmeticError; the errors here cover configuration and caller
contract violations.
"""


class BalancingError(Exception):
    """Base error for balancing fee operations."""

    pass


class CurveConfigError(BalancingError, ValueError):
    """Curve cutoffs are not strictly increasing."""

    pass


class InvalidAmountError(BalancingError, ValueError):
    """Modification amount must be non-negative."""

    pass


class UnboundedIntervalError(BalancingError):
    """An integral was requested up to an unbounded interval side."""

    pass
