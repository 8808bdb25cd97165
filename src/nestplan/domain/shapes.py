"""Bounding-box resolution for piece shapes.

Every shape is packed through the axis-aligned rectangle computed here. The
mapping is lossy on purpose: curvature and concavity are never checked during
placement, only the rectangle is. Missing measurements count as zero, which
yields a degenerate box rather than an error.
"""

from __future__ import annotations

from typing import Callable

from nestplan.domain.value_objects import BoundingBox, PieceDimensions, ShapeType


def _value(measure: float | None) -> float:
    return measure or 0.0


def _rectangle(dims: PieceDimensions) -> BoundingBox:
    return BoundingBox(width=_value(dims.width), height=_value(dims.length))


def _circle(dims: PieceDimensions) -> BoundingBox:
    diameter = _value(dims.radius) * 2
    return BoundingBox(width=diameter, height=diameter)


def _semicircle(dims: PieceDimensions) -> BoundingBox:
    # Flat side along the bottom, curve rising to the radius.
    return BoundingBox(width=_value(dims.length), height=_value(dims.radius))


def _triangle(dims: PieceDimensions) -> BoundingBox:
    return BoundingBox(width=_value(dims.width), height=_value(dims.height))


def _polygon(dims: PieceDimensions) -> BoundingBox:
    # Without vertex geometry, twice the longest side always encloses the shape.
    sides = dims.side_lengths or (_value(dims.side_length),)
    envelope = max(sides) * 2
    return BoundingBox(width=envelope, height=envelope)


_RESOLVERS: dict[ShapeType, Callable[[PieceDimensions], BoundingBox]] = {
    ShapeType.RECTANGLE: _rectangle,
    ShapeType.CIRCLE: _circle,
    ShapeType.SEMICIRCLE: _semicircle,
    ShapeType.TRIANGLE: _triangle,
    ShapeType.POLYGON: _polygon,
}


def resolve_bounding_box(
    shape: ShapeType,
    dimensions: PieceDimensions,
) -> BoundingBox:
    """Map a shape and its measurements to a packable rectangle.

    Args:
        shape: The piece's shape.
        dimensions: Shape-specific measurements; absent ones count as 0.

    Returns:
        BoundingBox with width along x and height along y.

    Example:
        >>> resolve_bounding_box(ShapeType.CIRCLE, PieceDimensions(radius=50.0))
        BoundingBox(width=100.0, height=100.0)
    """
    return _RESOLVERS[shape](dimensions)


def supported_shapes() -> tuple[ShapeType, ...]:
    """Shapes with a bounding-box rule."""
    return tuple(_RESOLVERS)
