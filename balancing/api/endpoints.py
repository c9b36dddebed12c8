"""API endpoints for balancing fee quotes."""

import os

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from balancing.fees.calculator import BalancingFeeCalculator, DefaultBalancingFeeCalculator
from balancing.fees.config import HUB_POOL_CHAIN_ID, FeeConfig
from balancing.fees.engine import FlowDirection
from balancing.fees.result import FeeResult
from balancing.models.requests import (
    BalancingFeeRequest,
    BalancingFeeResponse,
    ErrorResponse,
    UtilizationRequest,
    UtilizationResponse,
)

logger = structlog.get_logger()

router = APIRouter()

# Chain id of the hub pool, excluded from spoke targets in utilization
HUB_CHAIN_ID = int(os.environ.get("BALANCING_HUB_CHAIN_ID", str(HUB_POOL_CHAIN_ID)))

_calculator = DefaultBalancingFeeCalculator(FeeConfig(hub_chain_id=HUB_CHAIN_ID))


def get_calculator() -> BalancingFeeCalculator:
    """Dependency provider for the fee calculator.

    Override this in tests to inject a different calculator:
        app.dependency_overrides[get_calculator] = lambda: calculator

    Returns:
        The calculator instance to use.
    """
    return _calculator


def _error_response(result: FeeResult) -> JSONResponse:
    assert result.error is not None
    body = ErrorResponse(detail=result.error_detail or result.error.value, error=result.error.value)
    return JSONResponse(status_code=400, content=body.model_dump())


@router.post(
    "/fees/{direction}",
    response_model=BalancingFeeResponse,
    responses={400: {"model": ErrorResponse}},
)
async def quote_balancing_fee(
    direction: FlowDirection,
    request: BalancingFeeRequest,
    calculator: BalancingFeeCalculator = Depends(get_calculator),
) -> BalancingFeeResponse | JSONResponse:
    """Quote the balancing fee of a deposit or refund.

    Error Handling:
        - Invalid request schema or malformed curve: 422 (Pydantic)
        - Negative amount, arithmetic failure: 400 with error code
    """
    curve = request.curve.to_curve()
    logger.info(
        "received_fee_quote",
        direction=direction.value,
        curve_points=len(curve),
        running_balance=str(request.running_balance),
        amount=str(request.amount),
    )

    result = calculator.calculate_balancing_fee(
        curve, request.running_balance, request.amount, direction
    )
    if result.is_error:
        return _error_response(result)

    assert result.fee is not None
    return BalancingFeeResponse(direction=direction, fee=result.fee, segments=result.segments)


@router.post(
    "/utilization",
    response_model=UtilizationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def utilization(
    request: UtilizationRequest,
    calculator: BalancingFeeCalculator = Depends(get_calculator),
) -> UtilizationResponse | JSONResponse:
    """Compute hub pool utilization (remaining capacity)."""
    result = calculator.calculate_utilization(
        request.decimals,
        request.hub_balance,
        request.hub_equity,
        request.hub_spoke_balance,
        [t.to_target() for t in request.spoke_targets],
        request.hub_chain_id,
    )
    if result.is_error:
        return _error_response(result)

    assert result.fee is not None
    return UtilizationResponse(utilization=result.fee)
