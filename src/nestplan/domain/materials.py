"""Standard material catalog.

Reference list of the sheet materials a workshop commonly stocks, with the
thicknesses each is sold in. The planner itself never consults this; it is
used by configuration validation and the ``materials`` CLI command.
"""

from __future__ import annotations

from dataclasses import dataclass

from nestplan.domain.value_objects import MaterialType


@dataclass(frozen=True)
class Material:
    """A catalog material.

    Attributes:
        id: Catalog identifier referenced by stock plates.
        material_type: Material family.
        description: Finish or colour description.
        standard_thicknesses: Thicknesses (mm) the material is sold in.
    """

    id: str
    material_type: MaterialType
    description: str
    standard_thicknesses: tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.standard_thicknesses:
            raise ValueError("A material needs at least one standard thickness")
        if any(t <= 0 for t in self.standard_thicknesses):
            raise ValueError("Standard thicknesses must be positive")

    def is_standard_thickness(self, thickness: float) -> bool:
        return thickness in self.standard_thicknesses


STANDARD_MATERIALS: tuple[Material, ...] = (
    Material("mdf-white", MaterialType.MDF, "White textured", (15.0, 18.0, 25.0)),
    Material("mdp-oak", MaterialType.MDP, "Oak woodgrain", (15.0, 18.0)),
    Material("plywood-natural", MaterialType.PLYWOOD, "Natural finish", (10.0, 15.0, 20.0)),
    Material("acrylic-clear", MaterialType.ACRYLIC, "Clear", (3.0, 5.0, 8.0)),
    Material("aluminum-brushed", MaterialType.ALUMINUM, "Brushed silver", (1.0, 3.0, 5.0)),
)


def find_material(material_id: str) -> Material | None:
    """Look up a catalog material by id."""
    for material in STANDARD_MATERIALS:
        if material.id == material_id:
            return material
    return None
