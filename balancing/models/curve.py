"""Curve configuration models.

A curve configuration is a list of cutoff points, either as objects

    {"cutoffs": [{"cutoff": "100000000000000000000", "rate": "10000000000000000"}]}

or in the compact pair form used by the on-chain config store

    {"cutoffs": [["100000000000000000000", "10000000000000000"]]}

Values are raw 18-decimal scaled integers.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from balancing.curve.types import Curve, CutoffPoint
from balancing.errors import CurveConfigError
from balancing.models.types import Int256


class CutoffPointModel(BaseModel):
    """A (cutoff, rate) point of a curve configuration."""

    cutoff: Int256
    rate: Int256

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Cutoff pair must have 2 elements, got {len(data)}")
            return {"cutoff": data[0], "rate": data[1]}
        return data

    def to_point(self) -> CutoffPoint:
        return CutoffPoint(cutoff=self.cutoff, rate=self.rate)


class CurveConfig(BaseModel):
    """Balancing fee curve configuration."""

    cutoffs: list[CutoffPointModel] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("cutoffs")
    @classmethod
    def _strictly_increasing(cls, cutoffs: list[CutoffPointModel]) -> list[CutoffPointModel]:
        for i in range(1, len(cutoffs)):
            if cutoffs[i].cutoff <= cutoffs[i - 1].cutoff:
                raise ValueError(
                    f"Cutoffs must be strictly increasing at index {i}: "
                    f"{cutoffs[i - 1].cutoff} >= {cutoffs[i].cutoff}"
                )
        return cutoffs

    def to_curve(self) -> Curve:
        """Build the immutable Curve used by the fee engine."""
        return Curve(tuple(c.to_point() for c in self.cutoffs))


def load_curve(data: Any) -> Curve:
    """Build a validated Curve from parsed configuration data.

    Args:
        data: A dict with a "cutoffs" key, or a bare list of cutoff points

    Returns:
        The validated Curve

    Raises:
        CurveConfigError: If the configuration is malformed
    """
    if isinstance(data, list):
        data = {"cutoffs": data}
    try:
        config = CurveConfig.model_validate(data)
    except ValueError as err:
        # pydantic.ValidationError subclasses ValueError
        raise CurveConfigError(f"Invalid curve configuration: {err}") from err
    return config.to_curve()


def load_curve_file(path: Path | str) -> Curve:
    """Load and validate a curve configuration from a JSON file."""
    with open(path) as f:
        data = json.load(f)
    return load_curve(data)
