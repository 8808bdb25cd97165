"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class BoundingBoxSchema(BaseModel):
    """Axis-aligned footprint of a piece."""

    width: float = Field(..., description="Extent along x in mm")
    height: float = Field(..., description="Extent along y in mm")


class AreaSchema(BaseModel):
    """Rectangular region of a plate."""

    x: float
    y: float
    width: float
    height: float


class PlacementSchema(BaseModel):
    """A piece placed on a plate."""

    piece_id: str = Field(..., description="Piece identifier")
    name: str = Field(..., description="Piece name")
    shape: str = Field(..., description="Piece shape")
    plate_id: str = Field(..., description="Plate the piece is cut from")
    x: float = Field(..., description="Left edge in mm")
    y: float = Field(..., description="Bottom edge in mm")
    rotation: int = Field(..., description="Rotation in degrees (0 or 90)")
    bounding_box: BoundingBoxSchema = Field(..., description="Footprint as placed")


class PlateSchema(BaseModel):
    """A sheet or remnant."""

    id: str
    material_id: str
    material_type: str
    length: float
    width: float
    thickness: float
    price: float = Field(..., description="Cost of consuming the plate")
    is_remnant: bool
    parent_id: str | None = None
    origin_area: AreaSchema | None = None


class UnplacedPieceSchema(BaseModel):
    """A piece no plate could hold."""

    id: str
    name: str
    shape: str
    bounding_box: BoundingBoxSchema


class PlanSummarySchema(BaseModel):
    """Plan counters."""

    pieces_requested: int
    pieces_placed: int
    new_sheets: int
    remnants_used: int
    remnants_created: int
    total_cost: float


class UpdatedStockSchema(BaseModel):
    """Stock left after the plan is cut."""

    remnants: list[PlateSchema] = Field(default_factory=list)
    sheets: list[PlateSchema] = Field(default_factory=list)


class PlanResponseSchema(BaseModel):
    """Response for cutting-plan creation."""

    id: str = Field(..., description="Plan identifier")
    name: str = Field(..., description="Plan name")
    created_at: str = Field(..., description="Creation time (ISO 8601)")
    outcome: str = Field(
        ...,
        description="fully_satisfied, partially_satisfied or unsatisfiable",
    )
    summary: PlanSummarySchema
    placements: list[PlacementSchema] = Field(default_factory=list)
    plates_used: list[PlateSchema] = Field(default_factory=list)
    new_remnants: list[PlateSchema] = Field(default_factory=list)
    unplaced: list[UnplacedPieceSchema] = Field(default_factory=list)
    updated_stock: UpdatedStockSchema


class ValidationResultSchema(BaseModel):
    """Response for planning job validation."""

    is_valid: bool = Field(..., description="Whether the job can be planned")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class MaterialSchema(BaseModel):
    """Catalog material."""

    id: str
    material_type: str
    description: str
    standard_thicknesses: list[float]


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: Any = None
