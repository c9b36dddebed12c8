"""Balancing fee engine.

A deposit moves the running balance up by `amount` and a refund moves it down.
The fee is the integral of the curve's rate function over the range the
balance travels, computed segment by segment:

    deposit: balance -> balance + amount, walking segment indices upward
    refund:  balance -> balance - amount, walking segment indices downward

Each span is integrated in the direction of travel, so
deposit_fee(c, b, a) == -refund_fee(c, b + a, a) holds exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from balancing.curve.integration import integrate
from balancing.curve.locator import bounds, locate
from balancing.curve.types import Bound, Curve
from balancing.errors import InvalidAmountError, UnboundedIntervalError

logger = structlog.get_logger()


class FlowDirection(str, Enum):
    """Which way a flow moves the running balance."""

    DEPOSIT = "deposit"
    REFUND = "refund"


@dataclass(frozen=True, slots=True)
class SegmentSpan:
    """One partial integral of a fee computation.

    Attributes:
        index: Curve segment index
        start: Integral start (18-decimal)
        end: Integral end (18-decimal)
    """

    index: int
    start: int
    end: int

    def integrate(self, curve: Curve) -> int:
        return integrate(curve, self.index, self.start, self.end)


def _finite(bound: Bound, index: int) -> int:
    if bound is None:
        raise UnboundedIntervalError(f"Segment {index} has no finite bound to integrate to")
    return bound


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise InvalidAmountError(f"Modification amount must be non-negative, got {amount}")


def plan_segments(curve: Curve, balance: int, end: int) -> list[SegmentSpan]:
    """Split the move from `balance` to `end` into per-segment spans.

    Spans are ordered in the direction of travel. The first span starts at
    `balance`, the last ends at `end`, and every span in between covers a
    whole segment.

    Args:
        curve: The rate curve
        balance: Running balance before the flow
        end: Running balance after the flow

    Returns:
        List of SegmentSpan, |balance_index - end_index| + 1 long

    Raises:
        UnboundedIntervalError: If a span would reach an unbounded side
    """
    balance_interval = locate(curve, balance)
    end_interval = locate(curve, end)
    ascending = end >= balance
    step = 1 if ascending else -1

    # Where the balance segment is left and the end segment entered
    if ascending:
        balance_exit, end_entry = balance_interval.upper, end_interval.lower
    else:
        balance_exit, end_entry = balance_interval.lower, end_interval.upper

    spans = []
    for index in range(balance_interval.index, end_interval.index + step, step):
        if index == balance_interval.index and index == end_interval.index:
            start, stop = balance, end
        elif index == balance_interval.index:
            start, stop = balance, _finite(balance_exit, index)
        elif index == end_interval.index:
            start, stop = _finite(end_entry, index), end
        else:
            lower, upper = bounds(curve, index)
            lower, upper = _finite(lower, index), _finite(upper, index)
            start, stop = (lower, upper) if ascending else (upper, lower)
        spans.append(SegmentSpan(index=index, start=start, end=stop))
    return spans


def _sum_spans(curve: Curve, spans: list[SegmentSpan]) -> int:
    return sum((span.integrate(curve) for span in spans), 0)


def refund_fee(curve: Curve, balance: int, amount: int) -> int:
    """Compute the balancing fee for a refund of `amount`.

    Args:
        curve: The rate curve
        balance: Current running balance (18-decimal)
        amount: Refund amount, must be >= 0 (18-decimal)

    Returns:
        Total fee as a raw 18-decimal value. The sign is not clamped.

    Raises:
        InvalidAmountError: If amount is negative
    """
    _check_amount(amount)
    return _sum_spans(curve, plan_segments(curve, balance, balance - amount))


def deposit_fee(curve: Curve, balance: int, amount: int) -> int:
    """Compute the balancing fee for a deposit of `amount`.

    Args:
        curve: The rate curve
        balance: Current running balance (18-decimal)
        amount: Deposit amount, must be >= 0 (18-decimal)

    Returns:
        Total fee as a raw 18-decimal value. The sign is not clamped.

    Raises:
        InvalidAmountError: If amount is negative
    """
    _check_amount(amount)
    return _sum_spans(curve, plan_segments(curve, balance, balance + amount))


def balancing_fee(curve: Curve, balance: int, amount: int, direction: FlowDirection) -> int:
    """Compute the balancing fee for a flow in either direction."""
    if direction == FlowDirection.DEPOSIT:
        fee = deposit_fee(curve, balance, amount)
    else:
        fee = refund_fee(curve, balance, amount)
    logger.debug(
        "balancing_fee_computed",
        direction=direction.value,
        balance=str(balance),
        amount=str(amount),
        fee=str(fee),
    )
    return fee
