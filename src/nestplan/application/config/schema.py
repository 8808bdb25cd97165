"""Pydantic configuration schema models for planning jobs.

This module defines the schema for JSON planning job files: the pieces to
cut, the stock available to cut them from, and packing/output options. It
uses Pydantic v2 for validation and serialization.

The ShapeType, MaterialType and SemicircleOrientation enums are reused from
the domain layer so configuration values map onto domain objects directly.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nestplan.domain.value_objects import MaterialType, SemicircleOrientation, ShapeType
from nestplan.infrastructure.bin_packing import MIN_REMNANT_HEIGHT, MIN_REMNANT_WIDTH
from nestplan.infrastructure.placement_strategies import available_strategies

# Supported schema versions for planning job files
# Version 1.0: Pieces, sheets, remnants, packing and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DimensionsConfig(BaseModel):
    """Shape dimensions of a piece, in millimetres.

    Which fields matter depends on the piece shape; fields the shape needs
    but the job omits resolve to 0.

    Attributes:
        length: Rectangle length, semicircle chord length.
        width: Rectangle and triangle width.
        radius: Circle and semicircle radius.
        height: Triangle height.
        side_count: Polygon side count.
        side_length: Regular polygon side length.
        side_lengths: Irregular polygon side lengths.
        orient: Semicircle orientation.
    """

    model_config = ConfigDict(extra="forbid")

    length: float | None = Field(default=None, ge=0)
    width: float | None = Field(default=None, ge=0)
    radius: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    side_count: int | None = Field(default=None, ge=3)
    side_length: float | None = Field(default=None, ge=0)
    side_lengths: list[float] = Field(default_factory=list)
    orient: SemicircleOrientation | None = None

    @field_validator("side_lengths")
    @classmethod
    def validate_side_lengths(cls, v: list[float]) -> list[float]:
        """Validate that polygon side lengths are non-negative."""
        if any(length < 0 for length in v):
            raise ValueError("Side lengths must be non-negative")
        return v


class PieceConfig(BaseModel):
    """A piece to cut.

    Attributes:
        id: Piece identifier, unique within the job. ``#`` is reserved for
            the numbered copies of multi-quantity pieces.
        name: Display name.
        quantity: Number of identical copies to cut.
        shape: Piece shape.
        dimensions: Shape dimensions.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, pattern=r"^[^#]+$")
    name: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)
    shape: ShapeType
    dimensions: DimensionsConfig = Field(default_factory=DimensionsConfig)


class OriginAreaConfig(BaseModel):
    """Region of a parent plate a remnant was cut from."""

    model_config = ConfigDict(extra="forbid")

    x: float = Field(..., ge=0)
    y: float = Field(..., ge=0)
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class StockPlateConfig(BaseModel):
    """A plate in stock, either a new sheet or a remnant.

    Sheets must carry a positive price; remnants may omit it and must name
    the plate they were cut from. Those cross-field rules are checked by
    ``validate_config`` so that every misfiled plate is reported at once.

    Attributes:
        id: Plate identifier, unique across sheets and remnants.
        material_id: Catalog material id.
        material_type: Material family.
        length: Plate length (vertical extent) in mm.
        width: Plate width (horizontal extent) in mm.
        thickness: Plate thickness in mm.
        price: Purchase price; ignored for remnants.
        is_remnant: Optional kind marker, as written in a plan's
            ``updated_stock``. When given it must agree with the list the
            plate is filed under.
        parent_id: Plate a remnant was cut from.
        origin_area: Region of the parent the remnant occupies.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    material_id: str = Field(..., min_length=1)
    material_type: MaterialType
    length: float = Field(..., ge=0)
    width: float = Field(..., ge=0)
    thickness: float = Field(..., gt=0)
    price: float | None = Field(default=None, ge=0)
    is_remnant: bool | None = None
    parent_id: str | None = None
    origin_area: OriginAreaConfig | None = None


class PackingConfigSchema(BaseModel):
    """Packing engine options.

    Attributes:
        min_remnant_width: Narrowest leftover kept as a remnant (mm).
        min_remnant_height: Shortest leftover kept as a remnant (mm).
        strategy: Free-rectangle selection heuristic.
    """

    model_config = ConfigDict(extra="forbid")

    min_remnant_width: float = Field(default=MIN_REMNANT_WIDTH, ge=0)
    min_remnant_height: float = Field(default=MIN_REMNANT_HEIGHT, ge=0)
    strategy: str = "min_waste"

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Validate that the strategy is registered."""
        if v not in available_strategies():
            raise ValueError(
                f"Unknown placement strategy '{v}'. "
                f"Available: {', '.join(available_strategies())}"
            )
        return v


class OutputConfig(BaseModel):
    """Report output options.

    Attributes:
        format: Report format.
        indent: JSON indentation (json format only).
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json"] = "text"
    indent: int = Field(default=2, ge=0, description="JSON indentation spaces")


class PlanningConfiguration(BaseModel):
    """Root configuration model for a planning job.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        name: Optional plan name
        pieces: Pieces to cut
        sheets: New sheets available
        remnants: Remnants available
        packing: Packing engine options
        output: Report output options

    Example:
        >>> config = PlanningConfiguration(
        ...     schema_version="1.0",
        ...     pieces=[PieceConfig(id="p1", name="Door", shape="rectangle",
        ...                         dimensions={"width": 400, "length": 700})],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str | None = None
    pieces: list[PieceConfig] = Field(default_factory=list)
    sheets: list[StockPlateConfig] = Field(default_factory=list)
    remnants: list[StockPlateConfig] = Field(default_factory=list)
    packing: PackingConfigSchema = Field(default_factory=PackingConfigSchema)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
