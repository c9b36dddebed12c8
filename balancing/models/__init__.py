"""Pydantic models for balancing fee configuration and API payloads."""

from balancing.models.curve import CurveConfig, CutoffPointModel, load_curve, load_curve_file
from balancing.models.requests import (
    BalancingFeeRequest,
    BalancingFeeResponse,
    ErrorResponse,
    SpokeTargetModel,
    UtilizationRequest,
    UtilizationResponse,
)
from balancing.models.types import Int256

__all__ = [
    # Types
    "Int256",
    # Curve configuration
    "CurveConfig",
    "CutoffPointModel",
    "load_curve",
    "load_curve_file",
    # API payloads
    "BalancingFeeRequest",
    "BalancingFeeResponse",
    "SpokeTargetModel",
    "UtilizationRequest",
    "UtilizationResponse",
    "ErrorResponse",
]
