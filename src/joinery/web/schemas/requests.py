"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DecomposeRequest(BaseModel):
    """Request for splitting one frame opening into panes.

    Mullions and transoms given here span the whole opening; use a full
    configuration with the layout endpoint for partial spans.
    """

    width: float = Field(..., gt=0, le=10000, description="Opening width in mm")
    height: float = Field(..., gt=0, le=10000, description="Opening height in mm")
    mullions: list[float] = Field(
        default_factory=list, description="Mullion centre offsets from the left in mm"
    )
    transoms: list[float] = Field(
        default_factory=list, description="Transom centre offsets from the top in mm"
    )
    mullion_thickness: float = Field(
        default=0.0, ge=0, description="Default mullion thickness in mm"
    )
    transom_thickness: float = Field(
        default=0.0, ge=0, description="Default transom thickness in mm"
    )


class SubdivideRequest(BaseModel):
    """Request for splitting a sash's glass between glazing bars."""

    width: float = Field(..., gt=0, le=10000, description="Glass width in mm")
    height: float = Field(..., gt=0, le=10000, description="Glass height in mm")
    vertical_bars: int = Field(default=0, ge=0, le=20, description="Vertical bar count")
    horizontal_bars: int = Field(
        default=0, ge=0, le=20, description="Horizontal bar count"
    )
    bar_thickness: float = Field(default=0.0, ge=0, description="Bar thickness in mm")


class LayoutRequest(BaseModel):
    """Request for laying out a quote item from a full configuration."""

    config: dict[str, Any] = Field(..., description="Quote item configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Quote item configuration JSON")
