"""Balancing fee calculator service.

Wraps the raw engine functions, which raise on bad input, and reports
failures as FeeResult errors with a structured log line.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import structlog

from balancing.curve.types import Curve
from balancing.errors import UnboundedIntervalError
from balancing.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from balancing.fees.engine import FlowDirection, plan_segments
from balancing.fees.result import FeeError, FeeResult
from balancing.fees.utilization import SpokeTarget, calculate_utilization
from balancing.math.fixed_point import DivisionByZero

logger = structlog.get_logger()


class BalancingFeeCalculator(Protocol):
    """Protocol for balancing fee calculation.

    Different implementations can be used for testing or for different
    fee policies.
    """

    def calculate_balancing_fee(
        self,
        curve: Curve,
        running_balance: int,
        amount: int,
        direction: FlowDirection,
    ) -> FeeResult:
        """Calculate the balancing fee for a deposit or refund.

        Args:
            curve: The rate curve configured for the pool
            running_balance: Running balance before the flow (18-decimal)
            amount: Flow amount, non-negative (18-decimal)
            direction: DEPOSIT or REFUND

        Returns:
            FeeResult with the calculated fee or error information
        """
        ...

    def calculate_utilization(
        self,
        decimals: int,
        hub_balance: int,
        hub_equity: int,
        hub_spoke_balance: int,
        spoke_targets: Iterable[SpokeTarget],
        hub_chain_id: int | None = None,
    ) -> FeeResult:
        """Calculate hub pool utilization.

        Returns:
            FeeResult whose fee field holds the utilization value
        """
        ...


class DefaultBalancingFeeCalculator:
    """Default implementation of balancing fee calculation.

    Attributes:
        config: Fee configuration settings
    """

    def __init__(self, config: FeeConfig | None = None):
        """Initialize with optional configuration.

        Args:
            config: Fee configuration. Uses DEFAULT_FEE_CONFIG if not provided.
        """
        self.config = config or DEFAULT_FEE_CONFIG

    def calculate_balancing_fee(
        self,
        curve: Curve,
        running_balance: int,
        amount: int,
        direction: FlowDirection,
    ) -> FeeResult:
        """Calculate the balancing fee for a deposit or refund.

        Error mapping:
            - negative amount -> INVALID_AMOUNT
            - equal neighbouring cutoffs -> DIVISION_BY_ZERO
            - unbounded integration side -> UNBOUNDED_INTERVAL
            - rebate with reject_on_negative_fee -> NEGATIVE_FEE
        """
        if amount < 0:
            logger.warning(
                "balancing_fee_invalid_amount",
                direction=direction.value,
                amount=str(amount),
            )
            return FeeResult.with_error(
                FeeError.INVALID_AMOUNT,
                f"Amount must be non-negative, got {amount}",
            )

        if direction == FlowDirection.DEPOSIT:
            end = running_balance + amount
        else:
            end = running_balance - amount

        try:
            spans = plan_segments(curve, running_balance, end)
            fee = sum((span.integrate(curve) for span in spans), 0)
        except DivisionByZero as err:
            logger.warning(
                "balancing_fee_division_by_zero",
                direction=direction.value,
                curve_points=len(curve),
                error=str(err),
            )
            return FeeResult.with_error(FeeError.DIVISION_BY_ZERO, str(err))
        except UnboundedIntervalError as err:
            logger.warning(
                "balancing_fee_unbounded_interval",
                direction=direction.value,
                error=str(err),
            )
            return FeeResult.with_error(FeeError.UNBOUNDED_INTERVAL, str(err))

        if fee < 0 and self.config.reject_on_negative_fee:
            logger.info(
                "balancing_fee_rebate_rejected",
                direction=direction.value,
                fee=str(fee),
            )
            return FeeResult.with_error(
                FeeError.NEGATIVE_FEE,
                f"Flow would earn a rebate of {-fee}",
            )

        logger.debug(
            "balancing_fee_calculated",
            direction=direction.value,
            running_balance=str(running_balance),
            amount=str(amount),
            fee=str(fee),
            segments=len(spans),
        )
        return FeeResult.with_fee(fee, segments=len(spans))

    def calculate_utilization(
        self,
        decimals: int,
        hub_balance: int,
        hub_equity: int,
        hub_spoke_balance: int,
        spoke_targets: Iterable[SpokeTarget],
        hub_chain_id: int | None = None,
    ) -> FeeResult:
        """Calculate hub pool utilization.

        hub_chain_id defaults to the configured hub chain.
        """
        chain_id = self.config.hub_chain_id if hub_chain_id is None else hub_chain_id
        try:
            utilization = calculate_utilization(
                decimals,
                hub_balance,
                hub_equity,
                hub_spoke_balance,
                spoke_targets,
                chain_id,
            )
        except DivisionByZero as err:
            logger.warning(
                "utilization_zero_equity",
                hub_balance=str(hub_balance),
                hub_chain_id=chain_id,
            )
            return FeeResult.with_error(FeeError.DIVISION_BY_ZERO, str(err))
        return FeeResult.with_fee(utilization)


# Default calculator instance
DEFAULT_FEE_CALCULATOR = DefaultBalancingFeeCalculator()
