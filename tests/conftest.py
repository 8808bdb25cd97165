"""Pytest configuration and shared fixtures for nestplan tests."""

from __future__ import annotations

from typing import Callable

import pytest

from nestplan.domain.value_objects import (
    MaterialType,
    Piece,
    PieceDimensions,
    ShapeType,
    StockPlate,
)


# =============================================================================
# Domain object builders
# =============================================================================


@pytest.fixture
def make_piece() -> Callable[..., Piece]:
    """Build a rectangular piece from a width and length."""

    def _make(
        piece_id: str,
        width: float,
        length: float,
        quantity: int = 1,
        name: str | None = None,
    ) -> Piece:
        return Piece(
            id=piece_id,
            name=name or piece_id,
            shape=ShapeType.RECTANGLE,
            dimensions=PieceDimensions(width=width, length=length),
            quantity=quantity,
        )

    return _make


@pytest.fixture
def make_sheet() -> Callable[..., StockPlate]:
    """Build a new MDF sheet."""

    def _make(
        plate_id: str = "s1",
        width: float = 2750.0,
        length: float = 1850.0,
        price: float = 250.0,
    ) -> StockPlate:
        return StockPlate(
            id=plate_id,
            material_id="mdf-white",
            material_type=MaterialType.MDF,
            length=length,
            width=width,
            thickness=15.0,
            price=price,
        )

    return _make


@pytest.fixture
def make_remnant() -> Callable[..., StockPlate]:
    """Build an MDF remnant cut from sheet s0."""

    def _make(
        plate_id: str = "r1",
        width: float = 900.0,
        length: float = 600.0,
        parent_id: str = "s0",
    ) -> StockPlate:
        return StockPlate(
            id=plate_id,
            material_id="mdf-white",
            material_type=MaterialType.MDF,
            length=length,
            width=width,
            thickness=15.0,
            is_remnant=True,
            parent_id=parent_id,
        )

    return _make


@pytest.fixture
def standard_sheet(make_sheet: Callable[..., StockPlate]) -> StockPlate:
    """A 2750x1850 MDF sheet priced at 250."""
    return make_sheet()
