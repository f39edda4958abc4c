"""Pydantic schemas for the REST API."""

from joinery.web.schemas.requests import (
    ConfigValidateRequest,
    DecomposeRequest,
    LayoutRequest,
    SubdivideRequest,
)
from joinery.web.schemas.responses import (
    ElevationResponseSchema,
    ErrorResponseSchema,
    FootprintSchema,
    PaneLayoutSchema,
    PaneSchema,
    ValidationResultSchema,
)

__all__ = [
    "ConfigValidateRequest",
    "DecomposeRequest",
    "ElevationResponseSchema",
    "ErrorResponseSchema",
    "FootprintSchema",
    "LayoutRequest",
    "PaneLayoutSchema",
    "PaneSchema",
    "SubdivideRequest",
    "ValidationResultSchema",
]
