"""Balancing fee module.

This module provides:
- The balancing fee engine (deposit / refund integration over a curve)
- Hub pool utilization
- A calculator service with explicit FeeResult error handling

Usage:
    from balancing.fees import DEFAULT_FEE_CALCULATOR, FlowDirection

    result = DEFAULT_FEE_CALCULATOR.calculate_balancing_fee(
        curve, running_balance, amount, FlowDirection.DEPOSIT
    )

    if result.is_valid:
        fee = result.fee
    else:
        handle_error(result.error)
"""

from balancing.fees.calculator import (
    DEFAULT_FEE_CALCULATOR,
    BalancingFeeCalculator,
    DefaultBalancingFeeCalculator,
)
from balancing.fees.config import DEFAULT_FEE_CONFIG, HUB_POOL_CHAIN_ID, FeeConfig
from balancing.fees.engine import (
    FlowDirection,
    SegmentSpan,
    balancing_fee,
    deposit_fee,
    plan_segments,
    refund_fee,
)
from balancing.fees.result import FeeError, FeeResult
from balancing.fees.utilization import SpokeTarget, calculate_utilization

__all__ = [
    # Engine
    "FlowDirection",
    "SegmentSpan",
    "balancing_fee",
    "deposit_fee",
    "plan_segments",
    "refund_fee",
    # Utilization
    "SpokeTarget",
    "calculate_utilization",
    # Calculator
    "BalancingFeeCalculator",
    "DefaultBalancingFeeCalculator",
    "DEFAULT_FEE_CALCULATOR",
    # Config
    "FeeConfig",
    "DEFAULT_FEE_CONFIG",
    "HUB_POOL_CHAIN_ID",
    # Result
    "FeeResult",
    "FeeError",
]
