"""Output formatters and exporters for cutting plans."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from nestplan.domain.value_objects import Piece, Rectangle, StockPlate

if TYPE_CHECKING:
    from nestplan.application.dtos import PlanRecord
    from nestplan.infrastructure.bin_packing import PlacedPiece


class PlanReportFormatter:
    """Formats a cutting plan as a plain-text report.

    Sections: summary counters, placed pieces, plates used, generated
    remnants and, when present, the pieces that could not be placed.
    """

    def format(self, record: PlanRecord) -> str:
        """Format the full report."""
        sections = [
            self.format_summary(record),
            self._format_placements(record),
            self._format_plates(record),
            self._format_remnants(record),
        ]
        if record.result.unplaced:
            sections.append(self._format_unplaced(record.result.unplaced))
        return "\n\n".join(sections)

    def format_summary(self, record: PlanRecord) -> str:
        plan = record.result.plan
        lines = [
            f"CUTTING PLAN: {record.name}",
            "=" * 60,
            f"Pieces requested: {record.pieces_requested}",
            f"Pieces placed:    {record.pieces_placed}",
            f"New sheets:       {plan.new_sheet_count}",
            f"Remnants used:    {plan.remnant_count}",
            f"Remnants created: {len(plan.new_remnants)}",
            f"Total cost:       {plan.total_cost:.2f}",
            f"Outcome:          {record.result.outcome.value.replace('_', ' ')}",
        ]
        return "\n".join(lines)

    def _format_placements(self, record: PlanRecord) -> str:
        plan = record.result.plan
        if not plan.placements:
            return "No pieces placed."

        plates = {plate.id: plate for plate in plan.plates_used}
        lines = [
            "PLACED PIECES",
            "-" * 60,
            f"{'Piece':<20} {'Size (mm)':>13} {'Position':>14} {'Rot':>4}  Plate",
        ]
        for placement in plan.placements:
            plate_label = placement.plate_id
            plate = plates.get(placement.plate_id)
            if plate is not None:
                kind = "remnant" if plate.is_remnant else "sheet"
                plate_label = f"{plate.id} ({kind})"
            lines.append(
                f"{placement.piece.name[:20]:<20} "
                f"{_size(placement.bounding_box.width, placement.bounding_box.height):>13} "
                f"{_point(placement.x, placement.y):>14} "
                f"{placement.rotation:>3}°  {plate_label}"
            )
        return "\n".join(lines)

    def _format_plates(self, record: PlanRecord) -> str:
        plan = record.result.plan
        if not plan.plates_used:
            return "No plates used."

        lines = ["PLATES USED", "-" * 60]
        for plate in plan.plates_used:
            count = len(plan.placements_on(plate.id))
            lines.append(
                f"  {plate.id}: {plate.describe()}, "
                f"{count} piece{'s' if count != 1 else ''}, "
                f"price {plate.effective_price:.2f}"
            )
        return "\n".join(lines)

    def _format_remnants(self, record: PlanRecord) -> str:
        remnants = record.result.plan.new_remnants
        if not remnants:
            return "No reusable remnants generated."

        lines = [f"REMNANTS GENERATED: {len(remnants)}", "-" * 60]
        for remnant in remnants:
            lines.append(
                f"  {remnant.id}: {_size(remnant.width, remnant.length)} "
                f"{remnant.material_type.value} {remnant.thickness:g}mm "
                f"from {remnant.parent_id}"
            )
        return "\n".join(lines)

    def _format_unplaced(self, pieces: tuple[Piece, ...]) -> str:
        lines = [f"UNPLACED PIECES: {len(pieces)}", "-" * 60]
        for piece in pieces:
            box = piece.bounding_box
            lines.append(f"  {piece.name} ({piece.shape.value}, {_size(box.width, box.height)})")
        return "\n".join(lines)


class JsonExporter:
    """Exports a plan record as JSON-compatible data."""

    def export(self, record: PlanRecord, indent: int = 2) -> str:
        """Export plan as a JSON string."""
        return json.dumps(self.to_dict(record), indent=indent)

    def to_dict(self, record: PlanRecord) -> dict[str, Any]:
        result = record.result
        plan = result.plan
        return {
            "id": record.id,
            "name": record.name,
            "created_at": record.created_at.isoformat(),
            "outcome": result.outcome.value,
            "summary": {
                "pieces_requested": record.pieces_requested,
                "pieces_placed": record.pieces_placed,
                "new_sheets": plan.new_sheet_count,
                "remnants_used": plan.remnant_count,
                "remnants_created": len(plan.new_remnants),
                "total_cost": plan.total_cost,
            },
            "placements": [_placement_dict(p) for p in plan.placements],
            "plates_used": [_plate_dict(p) for p in plan.plates_used],
            "new_remnants": [_plate_dict(r) for r in plan.new_remnants],
            "unplaced": [_piece_dict(p) for p in result.unplaced],
            "updated_stock": {
                "remnants": [_plate_dict(r) for r in result.updated_remnant_stock],
                "sheets": [_plate_dict(s) for s in result.updated_sheet_stock],
            },
        }


def _size(width: float, height: float) -> str:
    return f"{width:g}x{height:g}"


def _point(x: float, y: float) -> str:
    return f"({x:g}, {y:g})"


def _rect_dict(rect: Rectangle) -> dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def _piece_dict(piece: Piece) -> dict[str, Any]:
    box = piece.bounding_box
    return {
        "id": piece.id,
        "name": piece.name,
        "shape": piece.shape.value,
        "bounding_box": {"width": box.width, "height": box.height},
    }


def _placement_dict(placement: PlacedPiece) -> dict[str, Any]:
    return {
        "piece_id": placement.piece.id,
        "name": placement.piece.name,
        "shape": placement.piece.shape.value,
        "plate_id": placement.plate_id,
        "x": placement.x,
        "y": placement.y,
        "rotation": placement.rotation,
        "bounding_box": {
            "width": placement.bounding_box.width,
            "height": placement.bounding_box.height,
        },
    }


def _plate_dict(plate: StockPlate) -> dict[str, Any]:
    return {
        "id": plate.id,
        "material_id": plate.material_id,
        "material_type": plate.material_type.value,
        "length": plate.length,
        "width": plate.width,
        "thickness": plate.thickness,
        "price": plate.effective_price,
        "is_remnant": plate.is_remnant,
        "parent_id": plate.parent_id,
        "origin_area": None if plate.origin_area is None else _rect_dict(plate.origin_area),
    }
