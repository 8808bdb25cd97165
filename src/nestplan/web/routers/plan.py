"""Cutting-plan endpoints."""

from fastapi import APIRouter

from nestplan.application.config import (
    config_to_packing_config,
    config_to_pieces,
    config_to_remnants,
    config_to_sheets,
    load_config_from_dict,
    validate_config,
)
from nestplan.web.dependencies import JsonExporterDep, ServiceFactoryDep
from nestplan.web.exceptions import PlanningJobError
from nestplan.web.schemas.requests import PlanRequest
from nestplan.web.schemas.responses import PlanResponseSchema

router = APIRouter(prefix="/plan", tags=["plan"])


@router.post("", response_model=PlanResponseSchema)
def create_plan(
    request: PlanRequest,
    factory: ServiceFactoryDep,
    exporter: JsonExporterDep,
) -> PlanResponseSchema:
    """Create a cutting plan from a planning job.

    Declared as a plain function so FastAPI runs the packing work in its
    threadpool. A plan that leaves pieces unplaced is still a 200 response;
    check ``outcome`` and ``unplaced``.

    Raises:
        ConfigError: If the job fails schema validation (422).
        PlanningJobError: If the job fails whole-job validation (422).
    """
    config = load_config_from_dict(request.config)

    validation = validate_config(config)
    if not validation.is_valid:
        raise PlanningJobError(validation.errors)

    command = factory.create_plan_command(
        config_to_packing_config(config, strategy=request.strategy)
    )
    record = command.execute(
        config_to_pieces(config),
        config_to_remnants(config),
        config_to_sheets(config),
        name=request.name or config.name,
    )
    return PlanResponseSchema.model_validate(exporter.to_dict(record))
