"""Request and response models for the balancing fee API."""

from pydantic import BaseModel, Field

from balancing.fees.engine import FlowDirection
from balancing.fees.utilization import SpokeTarget
from balancing.models.curve import CurveConfig
from balancing.models.types import Int256


class BalancingFeeRequest(BaseModel):
    """Quote the balancing fee of a deposit or refund."""

    curve: CurveConfig
    running_balance: Int256 = Field(alias="runningBalance")
    amount: Int256 = Field(description="Flow amount, must be non-negative.")

    model_config = {"populate_by_name": True}


class BalancingFeeResponse(BaseModel):
    """Balancing fee quote."""

    direction: FlowDirection
    fee: Int256
    segments: int = Field(description="Number of curve segments the flow crossed.")


class SpokeTargetModel(BaseModel):
    """Target balance of a spoke pool."""

    target: Int256
    spoke_chain_id: int = Field(alias="spokeChainId")

    model_config = {"populate_by_name": True}

    def to_target(self) -> SpokeTarget:
        return SpokeTarget(target=self.target, spoke_chain_id=self.spoke_chain_id)


class UtilizationRequest(BaseModel):
    """Compute hub pool utilization."""

    # Same bound as token decimals
    decimals: int = Field(ge=0, le=77)
    hub_balance: Int256 = Field(alias="hubBalance")
    hub_equity: Int256 = Field(alias="hubEquity")
    hub_spoke_balance: Int256 = Field(alias="hubSpokeBalance")
    spoke_targets: list[SpokeTargetModel] = Field(default_factory=list, alias="spokeTargets")
    hub_chain_id: int | None = Field(default=None, alias="hubChainId")

    model_config = {"populate_by_name": True}


class UtilizationResponse(BaseModel):
    """Hub pool utilization."""

    utilization: Int256


class ErrorResponse(BaseModel):
    """Error body for rejected calculations."""

    detail: str
    error: str
