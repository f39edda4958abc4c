"""Pane decomposition and subdivision endpoints."""

from fastapi import APIRouter

from joinery.application.dtos import OpeningInput, PaneLayoutOutput, SashInput
from joinery.web.dependencies import DecomposeCommandDep, SubdivideCommandDep
from joinery.web.exceptions import LayoutError
from joinery.web.schemas.requests import DecomposeRequest, SubdivideRequest
from joinery.web.schemas.responses import FootprintSchema, PaneLayoutSchema, PaneSchema

router = APIRouter(prefix="/panes", tags=["panes"])


def _pane_layout_to_schema(output: PaneLayoutOutput) -> PaneLayoutSchema:
    """Convert PaneLayoutOutput to response schema."""
    return PaneLayoutSchema(
        width=output.width,
        height=output.height,
        panes=[
            PaneSchema(id=p.id, x=p.x, y=p.y, width=p.width, height=p.height)
            for p in output.panes
        ],
        footprints=[
            FootprintSchema(
                divider_id=fp.divider_id,
                kind=fp.kind.value,
                x=fp.rect.x,
                y=fp.rect.y,
                width=fp.rect.width,
                height=fp.rect.height,
            )
            for fp in output.footprints
        ],
        glass_area_m2=round(output.glass_area / 1_000_000, 4),
    )


@router.post("/decompose", response_model=PaneLayoutSchema)
async def decompose_opening(
    request: DecomposeRequest,
    command: DecomposeCommandDep,
) -> PaneLayoutSchema:
    """Split a frame opening into glass panes around mullions and transoms.

    Raises:
        LayoutError: If the opening is rejected.
    """
    result = command.execute(OpeningInput(**request.model_dump()))
    if not result.is_valid:
        raise LayoutError(result.errors)
    return _pane_layout_to_schema(result)


@router.post("/subdivide", response_model=PaneLayoutSchema)
async def subdivide_sash(
    request: SubdivideRequest,
    command: SubdivideCommandDep,
) -> PaneLayoutSchema:
    """Split a sash's glass into panes between evenly spaced glazing bars."""
    result = command.execute(SashInput(**request.model_dump()))
    if not result.is_valid:
        raise LayoutError(result.errors)
    return _pane_layout_to_schema(result)
