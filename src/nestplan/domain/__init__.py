"""Domain layer - pieces, stock plates and shape geometry."""

from .materials import STANDARD_MATERIALS, Material, find_material
from .shapes import resolve_bounding_box, supported_shapes
from .value_objects import (
    BoundingBox,
    MaterialType,
    Piece,
    PieceDimensions,
    Rectangle,
    SemicircleOrientation,
    ShapeType,
    StockPlate,
)

__all__ = [
    "BoundingBox",
    "Material",
    "MaterialType",
    "Piece",
    "PieceDimensions",
    "Rectangle",
    "STANDARD_MATERIALS",
    "SemicircleOrientation",
    "ShapeType",
    "StockPlate",
    "find_material",
    "resolve_bounding_box",
    "supported_shapes",
]
