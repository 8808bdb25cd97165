"""Tests for plan report formatting and JSON export."""

from __future__ import annotations

import json

import pytest

from nestplan.application.commands import CreateCuttingPlanCommand
from nestplan.application.dtos import PlanRecord
from nestplan.infrastructure.formatters import JsonExporter, PlanReportFormatter


@pytest.fixture
def complete_record(standard_sheet, make_piece) -> PlanRecord:
    """Single 1000x500 door on a 2750x1850 sheet."""
    return CreateCuttingPlanCommand().execute(
        [make_piece("door", 1000.0, 500.0, name="Door")],
        [],
        [standard_sheet],
        name="Hall cupboard",
    )


@pytest.fixture
def partial_record(standard_sheet, make_piece) -> PlanRecord:
    """Two full-height panels; only the first fits."""
    return CreateCuttingPlanCommand().execute(
        [make_piece("panel", 1400.0, 1850.0, quantity=2, name="Panel")],
        [],
        [standard_sheet],
    )


class TestPlanReportFormatter:
    """Tests for the text report."""

    def test_summary(self, complete_record: PlanRecord) -> None:
        summary = PlanReportFormatter().format_summary(complete_record)

        assert "CUTTING PLAN: Hall cupboard" in summary
        assert "Pieces requested: 1" in summary
        assert "Pieces placed:    1" in summary
        assert "New sheets:       1" in summary
        assert "Remnants created: 3" in summary
        assert "Total cost:       250.00" in summary
        assert "Outcome:          fully satisfied" in summary

    def test_placements_and_plates(self, complete_record: PlanRecord) -> None:
        report = PlanReportFormatter().format(complete_record)

        assert "PLACED PIECES" in report
        assert "1000x500" in report
        assert "(0, 0)" in report
        assert "s1 (sheet)" in report
        assert "s1: Sheet MDF 15mm - 2750x1850mm, 1 piece, price 250.00" in report

    def test_remnants_listed(self, complete_record: PlanRecord) -> None:
        report = PlanReportFormatter().format(complete_record)

        assert "REMNANTS GENERATED: 3" in report
        assert "s1-r1: 1750x500 MDF 15mm from s1" in report
        assert "s1-r3: 1750x1350 MDF 15mm from s1" in report
        assert "UNPLACED" not in report

    def test_unplaced_section(self, partial_record: PlanRecord) -> None:
        report = PlanReportFormatter().format(partial_record)

        assert "Outcome:          partially satisfied" in report
        assert "UNPLACED PIECES: 1" in report
        assert "Panel #2 (rectangle, 1400x1850)" in report

    def test_empty_plan(self, standard_sheet) -> None:
        record = CreateCuttingPlanCommand().execute([], [], [standard_sheet])
        report = PlanReportFormatter().format(record)

        assert "No pieces placed." in report
        assert "No plates used." in report
        assert "No reusable remnants generated." in report


class TestJsonExporter:
    """Tests for the JSON export."""

    def test_export_is_valid_json(self, complete_record: PlanRecord) -> None:
        data = json.loads(JsonExporter().export(complete_record))

        assert data["id"] == complete_record.id
        assert data["name"] == "Hall cupboard"
        assert data["outcome"] == "fully_satisfied"

    def test_summary_block(self, complete_record: PlanRecord) -> None:
        summary = JsonExporter().to_dict(complete_record)["summary"]
        assert summary == {
            "pieces_requested": 1,
            "pieces_placed": 1,
            "new_sheets": 1,
            "remnants_used": 0,
            "remnants_created": 3,
            "total_cost": 250.0,
        }

    def test_placement_entry(self, complete_record: PlanRecord) -> None:
        placement = JsonExporter().to_dict(complete_record)["placements"][0]
        assert placement == {
            "piece_id": "door",
            "name": "Door",
            "shape": "rectangle",
            "plate_id": "s1",
            "x": 0.0,
            "y": 0.0,
            "rotation": 0,
            "bounding_box": {"width": 1000.0, "height": 500.0},
        }

    def test_remnant_entry(self, complete_record: PlanRecord) -> None:
        remnant = JsonExporter().to_dict(complete_record)["new_remnants"][1]

        assert remnant["id"] == "s1-r2"
        assert remnant["is_remnant"] is True
        assert remnant["parent_id"] == "s1"
        assert remnant["price"] == 0.0
        assert remnant["origin_area"] == {"x": 0.0, "y": 500.0, "width": 1000.0, "height": 1350.0}

    def test_updated_stock(self, partial_record: PlanRecord) -> None:
        data = JsonExporter().to_dict(partial_record)

        assert data["updated_stock"]["sheets"] == []
        assert [r["id"] for r in data["updated_stock"]["remnants"]] == ["s1-r1"]
        assert [p["id"] for p in data["unplaced"]] == ["panel#2"]
