"""Planning job validation endpoints."""

from fastapi import APIRouter

from nestplan.application.config import load_config_from_dict, validate_config
from nestplan.web.schemas.requests import ConfigValidateRequest
from nestplan.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a planning job without planning it.

    Schema violations are reported as a 422 error response; whole-job
    errors and warnings come back in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
