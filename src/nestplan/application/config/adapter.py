"""Adapter converting PlanningConfiguration into domain objects.

The conversion functions expect a configuration that passed
``validate_config``; plates that break the sheet/remnant rules make the
domain constructors raise ``ValueError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nestplan.application.config.schema import (
    PieceConfig,
    PlanningConfiguration,
    StockPlateConfig,
)
from nestplan.domain.value_objects import Piece, PieceDimensions, Rectangle, StockPlate

if TYPE_CHECKING:
    from nestplan.infrastructure.bin_packing import PackingConfig


def config_to_pieces(config: PlanningConfiguration) -> list[Piece]:
    """Convert configured pieces to domain Pieces (quantities not expanded)."""
    return [piece_config_to_domain(piece) for piece in config.pieces]


def piece_config_to_domain(piece: PieceConfig) -> Piece:
    dims = piece.dimensions
    return Piece(
        id=piece.id,
        name=piece.name,
        shape=piece.shape,
        dimensions=PieceDimensions(
            length=dims.length,
            width=dims.width,
            radius=dims.radius,
            side_count=dims.side_count,
            side_length=dims.side_length,
            side_lengths=tuple(dims.side_lengths),
            height=dims.height,
            orient=dims.orient,
        ),
        quantity=piece.quantity,
    )


def config_to_sheets(config: PlanningConfiguration) -> list[StockPlate]:
    """Convert configured sheets to new-sheet StockPlates."""
    return [
        _plate_config_to_domain(sheet, is_remnant=False) for sheet in config.sheets
    ]


def config_to_remnants(config: PlanningConfiguration) -> list[StockPlate]:
    """Convert configured remnants to remnant StockPlates.

    A remnant's price is dropped; consuming a remnant never costs anything.
    """
    return [
        _plate_config_to_domain(remnant, is_remnant=True)
        for remnant in config.remnants
    ]


def _plate_config_to_domain(plate: StockPlateConfig, is_remnant: bool) -> StockPlate:
    origin_area = None
    if plate.origin_area is not None:
        area = plate.origin_area
        origin_area = Rectangle(x=area.x, y=area.y, width=area.width, height=area.height)

    return StockPlate(
        id=plate.id,
        material_id=plate.material_id,
        material_type=plate.material_type,
        length=plate.length,
        width=plate.width,
        thickness=plate.thickness,
        price=0.0 if is_remnant else (plate.price or 0.0),
        is_remnant=is_remnant,
        parent_id=plate.parent_id,
        origin_area=origin_area,
    )


def config_to_packing_config(
    config: PlanningConfiguration,
    strategy: str | None = None,
) -> "PackingConfig":
    """Convert packing options to the engine's PackingConfig.

    Args:
        config: Planning configuration.
        strategy: Strategy name overriding the configured one.

    Returns:
        PackingConfig for the allocation service.
    """
    from nestplan.infrastructure.bin_packing import PackingConfig

    packing = config.packing
    return PackingConfig(
        min_remnant_width=packing.min_remnant_width,
        min_remnant_height=packing.min_remnant_height,
        strategy=strategy or packing.strategy,
    )
