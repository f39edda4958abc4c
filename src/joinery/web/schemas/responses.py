"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PaneSchema(BaseModel):
    """A rectangular glass pane."""

    id: str = Field(..., description="Pane id, '{row}-{col}' of its top-left cell")
    x: float = Field(..., description="Left edge in mm")
    y: float = Field(..., description="Top edge in mm")
    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")


class FootprintSchema(BaseModel):
    """Rectangle occupied by a mullion or transom."""

    divider_id: str = Field(..., description="Divider id")
    kind: str = Field(..., description="vertical or horizontal")
    x: float
    y: float
    width: float
    height: float


class PaneLayoutSchema(BaseModel):
    """Response for opening decomposition and sash subdivision."""

    width: float = Field(..., description="Width of the laid out area in mm")
    height: float = Field(..., description="Height of the laid out area in mm")
    panes: list[PaneSchema] = Field(default_factory=list, description="Glass panes")
    footprints: list[FootprintSchema] = Field(
        default_factory=list, description="Divider footprints"
    )
    glass_area_m2: float = Field(..., description="Total glass area in square metres")


class ElevationResponseSchema(BaseModel):
    """Response for elevation layout."""

    is_valid: bool = Field(..., description="Whether layout was successful")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[str] = Field(default_factory=list, description="Warning messages")
    elevation: dict[str, Any] | None = Field(
        default=None, description="Laid out elevation in absolute mm"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
