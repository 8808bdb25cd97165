"""Validation structures and planning-job checks.

Schema validation (types, ranges, unknown fields) happens when a job is
loaded. This module runs the checks that need the whole job at once: id
uniqueness, sheet/remnant filing rules, and advisories about pieces and
materials that will not plan well.
"""

from dataclasses import dataclass, field
from typing import Any

from nestplan.application.config.adapter import piece_config_to_domain
from nestplan.application.config.schema import PlanningConfiguration, StockPlateConfig
from nestplan.domain.materials import find_material
from nestplan.domain.value_objects import Piece


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "remnants[0].parent_id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    The job can still be planned, but the result is likely not what the
    user expects.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_unique_ids(config: PlanningConfiguration) -> ValidationResult:
    """Check that piece ids are unique and plate ids are unique across stock.

    Sheets and remnants share one id space because the allocator tracks
    consumed plates by id.
    """
    result = ValidationResult()

    seen_pieces: set[str] = set()
    for i, piece in enumerate(config.pieces):
        if piece.id in seen_pieces:
            result.add_error(f"pieces[{i}].id", "Duplicate piece id", piece.id)
        seen_pieces.add(piece.id)

    seen_plates: set[str] = set()
    for path, plate in _iter_plates(config):
        if plate.id in seen_plates:
            result.add_error(f"{path}.id", "Duplicate plate id", plate.id)
        seen_plates.add(plate.id)

    return result


def check_stock_filing(config: PlanningConfiguration) -> ValidationResult:
    """Check that sheets and remnants are filed in the right list.

    Sheets must have a positive price and no parent; remnants must name the
    plate they were cut from. An explicit ``is_remnant`` marker must match
    the list.
    """
    result = ValidationResult()

    for i, sheet in enumerate(config.sheets):
        if sheet.is_remnant:
            result.add_error(
                f"sheets[{i}].is_remnant",
                "A plate marked as a remnant belongs under remnants",
                sheet.is_remnant,
            )
        if sheet.parent_id is not None:
            result.add_error(
                f"sheets[{i}].parent_id",
                "A new sheet cannot have a parent plate; list it under remnants",
                sheet.parent_id,
            )
        if not sheet.price:
            result.add_error(
                f"sheets[{i}].price",
                "A new sheet must have a positive price",
                sheet.price,
            )

    for i, remnant in enumerate(config.remnants):
        if remnant.is_remnant is False:
            result.add_error(
                f"remnants[{i}].is_remnant",
                "A plate marked as a new sheet belongs under sheets",
                remnant.is_remnant,
            )
        if remnant.parent_id is None:
            result.add_error(
                f"remnants[{i}].parent_id",
                "A remnant must reference its parent plate; list new sheets under sheets",
            )

    return result


def check_piece_geometry(config: PlanningConfiguration) -> ValidationResult:
    """Warn about degenerate pieces and pieces no plate can hold.

    A piece whose resolved bounding box has zero area usually lacks the
    dimensions its shape needs. A piece too large for every plate, in every
    rotation it allows, will end up unplaced.
    """
    result = ValidationResult()
    plates = [plate for _, plate in _iter_plates(config)]

    if config.pieces and not plates:
        result.add_warning(
            "sheets",
            "No sheets or remnants available; no piece can be placed",
            "Add at least one sheet",
        )

    for i, piece_config in enumerate(config.pieces):
        piece = piece_config_to_domain(piece_config)
        box = piece.bounding_box
        if box.area == 0:
            result.add_warning(
                f"pieces[{i}].dimensions",
                f"Piece '{piece.name}' has a zero-area bounding box "
                f"({box.width:g}x{box.height:g}) for shape '{piece.shape.value}'",
                "Check that the dimensions required by the shape are set",
            )
            continue
        if plates and not any(_fits(piece, plate) for plate in plates):
            result.add_warning(
                f"pieces[{i}]",
                f"Piece '{piece.name}' ({box.width:g}x{box.height:g}) "
                "does not fit on any available plate",
                "Add a larger sheet or split the piece",
            )

    return result


def check_materials(config: PlanningConfiguration) -> ValidationResult:
    """Check plates against the standard material catalog."""
    result = ValidationResult()

    for path, plate in _iter_plates(config):
        material = find_material(plate.material_id)
        if material is None:
            result.add_warning(
                f"{path}.material_id",
                f"Unknown material '{plate.material_id}'",
                "Run 'nestplan materials' to list catalog materials",
            )
            continue
        if material.material_type != plate.material_type:
            result.add_warning(
                f"{path}.material_type",
                f"Material '{material.id}' is {material.material_type.value}, "
                f"not {plate.material_type.value}",
            )
        if not material.is_standard_thickness(plate.thickness):
            standard = ", ".join(f"{t:g}" for t in material.standard_thicknesses)
            result.add_warning(
                f"{path}.thickness",
                f"{plate.thickness:g}mm is not a standard thickness for "
                f"'{material.id}' ({standard}mm)",
            )

    return result


def validate_config(config: PlanningConfiguration) -> ValidationResult:
    """Run every planning-job check.

    Args:
        config: A schema-valid planning configuration.

    Returns:
        ValidationResult with all errors and warnings found.
    """
    result = ValidationResult()
    result.merge(check_unique_ids(config))
    result.merge(check_stock_filing(config))
    result.merge(check_piece_geometry(config))
    result.merge(check_materials(config))
    return result


def _iter_plates(config: PlanningConfiguration) -> list[tuple[str, StockPlateConfig]]:
    plates = [(f"sheets[{i}]", sheet) for i, sheet in enumerate(config.sheets)]
    plates.extend(
        (f"remnants[{i}]", remnant) for i, remnant in enumerate(config.remnants)
    )
    return plates


def _fits(piece: Piece, plate: StockPlateConfig) -> bool:
    box = piece.bounding_box
    if box.width <= plate.width and box.height <= plate.length:
        return True
    return piece.can_rotate and box.height <= plate.width and box.width <= plate.length
