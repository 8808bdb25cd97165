"""Reference data endpoints: material catalog and placement strategies."""

from fastapi import APIRouter

from nestplan.domain import STANDARD_MATERIALS
from nestplan.infrastructure.placement_strategies import available_strategies
from nestplan.web.schemas.responses import MaterialSchema

router = APIRouter(tags=["catalog"])


@router.get("/materials", response_model=list[MaterialSchema])
async def list_materials() -> list[MaterialSchema]:
    """List the standard material catalog."""
    return [
        MaterialSchema(
            id=material.id,
            material_type=material.material_type.value,
            description=material.description,
            standard_thicknesses=list(material.standard_thicknesses),
        )
        for material in STANDARD_MATERIALS
    ]


@router.get("/strategies", response_model=list[str])
async def list_strategies() -> list[str]:
    """List the available placement strategies."""
    return available_strategies()
