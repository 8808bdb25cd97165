"""Value objects for the nesting domain.

Pieces, stock plates and the rectangles that describe them. All classes are
frozen dataclasses so a planning run can never mutate caller-owned stock.
Dimensions are in millimetres, prices in the caller's currency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ShapeType(str, Enum):
    """Closed set of piece shapes the planner understands."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    SEMICIRCLE = "semicircle"
    TRIANGLE = "triangle"
    POLYGON = "polygon"


class MaterialType(str, Enum):
    """Sheet material families."""

    MDF = "MDF"
    MDP = "MDP"
    PLYWOOD = "plywood"
    ACRYLIC = "acrylic"
    ALUMINUM = "aluminum"


class SemicircleOrientation(str, Enum):
    """Which way the curved edge of a semicircle faces (display only)."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned region on a plate, origin at the plate's corner.

    Used both for the free space tracked while packing and for the origin
    area a remnant occupied inside its parent plate.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        """Area of the rectangle."""
        return self.width * self.height

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        return self.y + self.height

    def fits(self, width: float, height: float) -> bool:
        """Whether a width x height footprint fits inside this rectangle."""
        return self.width >= width and self.height >= height

    def overlaps(self, other: Rectangle) -> bool:
        """Whether the interiors of two rectangles intersect."""
        return (
            self.x < other.right_edge
            and other.x < self.right_edge
            and self.y < other.top_edge
            and other.y < self.top_edge
        )


@dataclass(frozen=True)
class BoundingBox:
    """Packable rectangle standing in for a piece's true outline."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def rotated(self) -> BoundingBox:
        """The same box turned through 90 degrees."""
        return BoundingBox(width=self.height, height=self.width)


@dataclass(frozen=True)
class PieceDimensions:
    """Shape-specific measurements of a piece.

    Every field is optional; which ones matter depends on the shape:

    - rectangle: ``width`` and ``length``
    - circle: ``radius``
    - semicircle: ``length`` (straight side) and ``radius``
    - triangle: ``width`` (base) and ``height``
    - polygon: ``side_lengths`` or ``side_length``, plus ``side_count``

    Attributes:
        length: Rectangle length or semicircle straight side.
        width: Rectangle width or triangle base.
        radius: Circle or semicircle radius.
        side_count: Number of sides of a polygon.
        side_length: Side length of a regular polygon.
        side_lengths: Individual side lengths of an irregular polygon.
        height: Triangle height.
        orient: Semicircle orientation, used only for display.
    """

    length: float | None = None
    width: float | None = None
    radius: float | None = None
    side_count: int | None = None
    side_length: float | None = None
    side_lengths: tuple[float, ...] = ()
    height: float | None = None
    orient: SemicircleOrientation | None = None

    def __post_init__(self) -> None:
        for name in ("length", "width", "radius", "side_length", "height"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"Dimension '{name}' must be non-negative")
        if any(side < 0 for side in self.side_lengths):
            raise ValueError("Polygon side lengths must be non-negative")
        if self.side_count is not None and self.side_count < 3:
            raise ValueError("A polygon needs at least 3 sides")


@dataclass(frozen=True)
class Piece:
    """A part that has to be cut out of stock.

    The bounding box is derived from ``shape`` and ``dimensions`` on every
    access and is never stored.
    """

    id: str
    name: str
    shape: ShapeType
    dimensions: PieceDimensions = field(default_factory=PieceDimensions)
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def bounding_box(self) -> BoundingBox:
        """Rectangle used to pack this piece."""
        from nestplan.domain.shapes import resolve_bounding_box

        return resolve_bounding_box(self.shape, self.dimensions)

    @property
    def can_rotate(self) -> bool:
        """Whether a quarter turn changes how the piece packs."""
        return self.shape in (ShapeType.RECTANGLE, ShapeType.SEMICIRCLE)


@dataclass(frozen=True)
class StockPlate:
    """A sheet of raw material or a reusable remnant of one.

    ``width`` runs along the x axis of a layout and ``length`` along the y
    axis. Remnants are already paid for, so their price is always reported
    as zero.

    Attributes:
        id: Stock identifier, unique within a planning run.
        material_id: Catalog id of the material (e.g. "mdf-white").
        material_type: Material family label.
        length: Extent along the y axis in mm.
        width: Extent along the x axis in mm.
        thickness: Thickness in mm.
        price: Purchase price of a new sheet.
        is_remnant: True for offcuts produced by an earlier plan.
        parent_id: Plate this remnant was cut from.
        origin_area: Region of the parent plate this remnant occupied.
    """

    id: str
    material_id: str
    material_type: MaterialType
    length: float
    width: float
    thickness: float
    price: float = 0.0
    is_remnant: bool = False
    parent_id: str | None = None
    origin_area: Rectangle | None = None

    def __post_init__(self) -> None:
        if self.length < 0 or self.width < 0:
            raise ValueError("Plate dimensions must be non-negative")
        if self.thickness <= 0:
            raise ValueError("Plate thickness must be positive")
        if self.is_remnant:
            if self.parent_id is None:
                raise ValueError("A remnant must reference its parent plate")
        else:
            if self.price <= 0:
                raise ValueError("A new sheet must have a positive price")
            if self.parent_id is not None:
                raise ValueError("A new sheet cannot have a parent plate")

    @property
    def area(self) -> float:
        """Plate area in square millimetres."""
        return self.width * self.length

    @property
    def effective_price(self) -> float:
        """Cost of consuming this plate; remnants are free."""
        return 0.0 if self.is_remnant else self.price

    def describe(self) -> str:
        """Short human-readable label, e.g. ``MDF 15mm - 2750x1850mm``."""
        kind = "Remnant" if self.is_remnant else "Sheet"
        return (
            f"{kind} {self.material_type.value} {self.thickness:g}mm - "
            f"{self.width:g}x{self.length:g}mm"
        )
