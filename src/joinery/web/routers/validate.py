"""Configuration validation endpoints."""

from fastapi import APIRouter

from joinery.application.config import load_config_from_dict, validate_config
from joinery.web.schemas.requests import ConfigValidateRequest
from joinery.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a quote item configuration without laying it out.

    Schema errors are raised as ConfigError and returned as HTTP 422;
    geometry errors and warnings are part of a normal response.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
