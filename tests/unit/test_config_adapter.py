"""Tests for converting planning jobs into domain objects."""

from __future__ import annotations

from pathlib import Path

import pytest

from nestplan.application.config import (
    config_to_packing_config,
    config_to_pieces,
    config_to_remnants,
    config_to_sheets,
    load_config,
    load_config_from_dict,
)
from nestplan.domain.value_objects import BoundingBox, Rectangle, SemicircleOrientation

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def valid_config():
    return load_config(FIXTURES_PATH / "valid_job.json")


class TestConfigToDomain:
    """Tests for the config_to_* adapters."""

    def test_pieces_keep_quantity(self, valid_config) -> None:
        pieces = config_to_pieces(valid_config)

        assert [p.id for p in pieces] == ["door", "top"]
        assert pieces[0].quantity == 2
        assert pieces[0].bounding_box == BoundingBox(width=400.0, height=700.0)
        assert pieces[1].bounding_box == BoundingBox(width=500.0, height=500.0)

    def test_sheets(self, valid_config) -> None:
        sheet = config_to_sheets(valid_config)[0]

        assert not sheet.is_remnant
        assert sheet.price == 250.0
        assert (sheet.width, sheet.length, sheet.thickness) == (2750.0, 1850.0, 15.0)

    def test_remnants(self, valid_config) -> None:
        remnant = config_to_remnants(valid_config)[0]

        assert remnant.is_remnant
        assert remnant.parent_id == "s0"
        assert remnant.effective_price == 0.0
        assert remnant.origin_area == Rectangle(x=0.0, y=0.0, width=900.0, height=600.0)

    def test_remnant_price_dropped(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "remnants": [
                    {
                        "id": "r1",
                        "material_id": "mdf-white",
                        "material_type": "MDF",
                        "length": 600,
                        "width": 900,
                        "thickness": 15,
                        "price": 40.0,
                        "parent_id": "s0",
                    }
                ],
            }
        )
        assert config_to_remnants(config)[0].price == 0.0

    def test_polygon_and_semicircle_dimensions(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "pieces": [
                    {
                        "id": "hex",
                        "name": "Hex",
                        "shape": "polygon",
                        "dimensions": {"side_count": 3, "side_lengths": [100, 120, 90]},
                    },
                    {
                        "id": "arch",
                        "name": "Arch",
                        "shape": "semicircle",
                        "dimensions": {"length": 600, "radius": 300, "orient": "top"},
                    },
                ],
            }
        )
        polygon, semicircle = config_to_pieces(config)

        assert polygon.dimensions.side_lengths == (100.0, 120.0, 90.0)
        assert polygon.bounding_box == BoundingBox(width=240.0, height=240.0)
        assert semicircle.dimensions.orient == SemicircleOrientation.TOP

    def test_packing_config(self, valid_config) -> None:
        packing = config_to_packing_config(valid_config)
        assert (packing.min_remnant_width, packing.min_remnant_height) == (210.0, 297.0)
        assert packing.strategy == "min_waste"

    def test_strategy_override(self, valid_config) -> None:
        packing = config_to_packing_config(valid_config, strategy="best_short_side")
        assert packing.strategy == "best_short_side"

    def test_unknown_strategy_override_raises(self, valid_config) -> None:
        with pytest.raises(ValueError, match="Unknown placement strategy"):
            config_to_packing_config(valid_config, strategy="skyline")
