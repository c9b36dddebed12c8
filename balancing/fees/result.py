"""Fee calculation result types."""

from dataclasses import dataclass
from enum import Enum


class FeeError(Enum):
    """Types of fee calculation errors."""

    INVALID_AMOUNT = "invalid_amount"
    DIVISION_BY_ZERO = "division_by_zero"
    UNBOUNDED_INTERVAL = "unbounded_interval"
    NEGATIVE_FEE = "negative_fee"


@dataclass(frozen=True)
class FeeResult:
    """Result of a balancing fee or utilization calculation.

    Gives the service layer explicit success/failure handling instead of
    letting errors turn into a silent zero fee.

    Attributes:
        fee: The calculated value (18-decimal), or None on error.
        error: If calculation failed, the type of error that occurred.
        error_detail: Optional human-readable detail about the error.
        segments: Number of curve segments the flow crossed.

    Examples:
        # Successful calculation
        result = FeeResult.with_fee(875000000000000000, segments=1)
        assert result.is_valid

        # Error case
        result = FeeResult.with_error(FeeError.INVALID_AMOUNT)
        assert not result.is_valid
        assert result.fee is None
    """

    fee: int | None
    error: FeeError | None = None
    error_detail: str | None = None
    segments: int = 0

    @property
    def is_valid(self) -> bool:
        """True if calculation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if calculation failed with an error."""
        return self.error is not None

    @property
    def is_rebate(self) -> bool:
        """True if the flow earns a rebate (negative fee)."""
        return self.is_valid and self.fee is not None and self.fee < 0

    @classmethod
    def with_fee(cls, amount: int, segments: int = 0) -> "FeeResult":
        """Create a successful result with a fee amount."""
        return cls(fee=amount, segments=segments)

    @classmethod
    def with_error(cls, error: FeeError, detail: str | None = None) -> "FeeResult":
        """Create an error result."""
        return cls(fee=None, error=error, error_detail=detail)
