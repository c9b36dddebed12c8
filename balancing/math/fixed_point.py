"""Signed 18-decimal fixed-point math.

This module implements the scaled-integer arithmetic that balancing fee
contracts use on-chain. All values are stored as integers scaled by 10^18 and
every division truncates toward zero, as Solidity and ethers' BigNumber do.
Python's // rounds toward negative infinity, so all rescaling goes through
div_trunc().
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar

__all__ = [
    # Classes
    "FixedPoint",
    # Errors
    "FixedPointError",
    "DivisionByZero",
    # Functions
    "div_trunc",
    # Constants
    "ONE_18",
]

ONE_18 = 10**18


# =============================================================================
# Error classes
# =============================================================================


class FixedPointError(ArithmeticError):
    """Base error for fixed-point operations."""

    pass


class DivisionByZero(FixedPointError):
    """Division by a zero divisor."""

    pass


# =============================================================================
# Core math functions
# =============================================================================


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        DivisionByZero: If b is zero

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        Solidity: -7 / 3 = -2 (truncates toward zero)
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} / 0")

    # Same sign: result is non-negative, so floor and truncate agree
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


# =============================================================================
# FixedPoint class
# =============================================================================


class FixedPoint:
    """Signed 18-decimal fixed-point number stored as int.

    Example: 1.5 is stored as 1_500_000_000_000_000_000 and -0.01 as
    -10_000_000_000_000_000.
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, value: int) -> None:
        """Create FixedPoint from raw scaled value."""
        self.value = value

    @classmethod
    def from_raw(cls, raw: int) -> FixedPoint:
        """Create from a raw value already scaled to 18 decimals."""
        return cls(raw)

    @classmethod
    def from_int(cls, i: int) -> FixedPoint:
        """Create from integer (will be scaled by 10^18)."""
        return cls(i * cls.ONE)

    @classmethod
    def from_decimal(cls, d: Decimal | str) -> FixedPoint:
        """Create from decimal (will be scaled by 10^18).

        Uses ROUND_HALF_UP. Negative values are allowed since rates and
        balance deltas are signed.
        """
        scaled = (Decimal(d) * cls.ONE).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(int(scaled))

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        return Decimal(self.value) / Decimal(self.ONE)

    def add(self, other: FixedPoint) -> FixedPoint:
        """Add two values."""
        return FixedPoint(self.value + other.value)

    def sub(self, other: FixedPoint) -> FixedPoint:
        """Subtract other from self. The result may be negative."""
        return FixedPoint(self.value - other.value)

    def mul(self, other: FixedPoint) -> FixedPoint:
        """Multiply, dividing out one scale factor: (a * b) / 10^18."""
        return FixedPoint(div_trunc(self.value * other.value, self.ONE))

    def div(self, other: FixedPoint) -> FixedPoint:
        """Divide, adding one scale factor: (a * 10^18) / b.

        Raises:
            DivisionByZero: If other is zero
        """
        if other.value == 0:
            raise DivisionByZero(f"FixedPoint division by zero: {self.value} / 0")
        return FixedPoint(div_trunc(self.value * self.ONE, other.value))

    def half_square(self) -> FixedPoint:
        """Compute x^2 / 2.

        The square is rescaled first and halved second. Halving before
        squaring truncates differently, so the order is fixed.
        """
        return FixedPoint(div_trunc(self.mul(self).value, 2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.value >= other.value

    def __repr__(self) -> str:
        return f"FixedPoint({self.value})"

    def __str__(self) -> str:
        return str(self.to_decimal())
