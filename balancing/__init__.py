"""Balancing fee engine for hub and spoke liquidity pools."""

__version__ = "0.1.0"

from balancing.curve import Curve, CutoffPoint, Interval, bounds, integrate, locate  # noqa: E402
from balancing.fees import (  # noqa: E402
    FlowDirection,
    SpokeTarget,
    balancing_fee,
    calculate_utilization,
    deposit_fee,
    refund_fee,
)

__all__ = [
    "Curve",
    "CutoffPoint",
    "Interval",
    "bounds",
    "locate",
    "integrate",
    "FlowDirection",
    "SpokeTarget",
    "balancing_fee",
    "calculate_utilization",
    "deposit_fee",
    "refund_fee",
    "__version__",
]
