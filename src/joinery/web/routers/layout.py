"""Quote item elevation layout endpoint."""

from fastapi import APIRouter

from joinery.application.config import load_config_from_dict
from joinery.infrastructure import elevation_to_dict
from joinery.web.dependencies import LayoutCommandDep
from joinery.web.exceptions import LayoutError
from joinery.web.schemas.requests import LayoutRequest
from joinery.web.schemas.responses import ElevationResponseSchema

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("", response_model=ElevationResponseSchema)
async def layout_item(
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> ElevationResponseSchema:
    """Lay out the full elevation of a configured quote item.

    Raises:
        ConfigError: If the configuration fails schema validation.
        LayoutError: If geometry validation reports blocking errors.
    """
    config = load_config_from_dict(request.config)
    result = command.execute(config)
    if not result.is_valid or result.elevation is None:
        raise LayoutError(result.errors)

    return ElevationResponseSchema(
        is_valid=True,
        warnings=result.warnings,
        elevation=elevation_to_dict(result.elevation),
    )
