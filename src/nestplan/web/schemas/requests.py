"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from nestplan.infrastructure.placement_strategies import available_strategies


class PlanRequest(BaseModel):
    """Request for creating a cutting plan from a planning job."""

    config: dict[str, Any] = Field(..., description="Planning job JSON")
    name: str | None = Field(default=None, description="Plan name (overrides the job's)")
    strategy: str | None = Field(
        default=None, description="Placement strategy (overrides the job's)"
    )

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str | None) -> str | None:
        if v is not None and v not in available_strategies():
            raise ValueError(
                f"Unknown placement strategy '{v}'. "
                f"Available: {', '.join(available_strategies())}"
            )
        return v


class ConfigValidateRequest(BaseModel):
    """Request for validating a planning job."""

    config: dict[str, Any] = Field(..., description="Planning job JSON")
