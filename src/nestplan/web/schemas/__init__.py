"""Pydantic schemas for the REST API."""

from nestplan.web.schemas.requests import ConfigValidateRequest, PlanRequest
from nestplan.web.schemas.responses import (
    AreaSchema,
    BoundingBoxSchema,
    ErrorResponseSchema,
    MaterialSchema,
    PlacementSchema,
    PlanResponseSchema,
    PlanSummarySchema,
    PlateSchema,
    UnplacedPieceSchema,
    UpdatedStockSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "PlanRequest",
    # Responses
    "AreaSchema",
    "BoundingBoxSchema",
    "ErrorResponseSchema",
    "MaterialSchema",
    "PlacementSchema",
    "PlanResponseSchema",
    "PlanSummarySchema",
    "PlateSchema",
    "UnplacedPieceSchema",
    "UpdatedStockSchema",
    "ValidationResultSchema",
]
