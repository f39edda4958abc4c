"""Pydantic models for quote item configuration files.

A configuration file describes one quote item (its window instances, frame
and sash member sizes, dividers and placed sashes) plus the layout settings
to use. The item is a discriminated union on ``item_type``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from joinery.domain.value_objects import HingeSide, Orientation, SashType

# Supported schema versions for configuration files
# Version 1.0: Quote items with instances, dividers and placed sashes
# Version 1.1: Added layout settings (coordinate tolerance)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class LayoutSettingsConfig(BaseModel):
    """Layout settings.

    Attributes:
        coordinate_tolerance: Cut lines closer than this (mm) are merged.
            0.0 means exact equality.
    """

    model_config = ConfigDict(extra="forbid")

    coordinate_tolerance: float = Field(default=0.0, ge=0.0, le=5.0)


class FrameProfileConfig(BaseModel):
    """Outer frame member sizes in mm."""

    model_config = ConfigDict(extra="forbid")

    head: float = Field(default=0.0, ge=0.0)
    cill: float = Field(default=0.0, ge=0.0)
    left_jamb: float = Field(default=0.0, ge=0.0)
    right_jamb: float = Field(default=0.0, ge=0.0)
    mullion: float = Field(default=0.0, ge=0.0)
    transom: float = Field(default=0.0, ge=0.0)


class SashSectionsConfig(BaseModel):
    """Sash member sizes in mm."""

    model_config = ConfigDict(extra="forbid")

    head: float = Field(default=0.0, ge=0.0)
    stile: float = Field(default=0.0, ge=0.0)
    bottom_rail: float = Field(default=0.0, ge=0.0)
    meeting_stile: float = Field(default=0.0, ge=0.0)


class GlazingBarConfig(BaseModel):
    """A glazing bar inside a sash.

    The offset orders bars but does not position them; panes between bars
    are always equal.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    kind: Orientation
    offset: float = Field(default=0.0, ge=0.0)


class DividerConfig(BaseModel):
    """A mullion or transom.

    Whether it is a mullion or a transom follows from the list it is in.

    Attributes:
        id: Divider identifier.
        offset: Centreline position in mm from the left (mullion) or top
            (transom) of the frame opening.
        start: Optional start of the divider along its length.
        end: Optional end of the divider along its length.
        thickness: Optional thickness override; 0 means use the frame default.
        instance_id: Restrict the divider to one window instance.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    offset: float = Field(..., gt=0.0)
    start: float | None = Field(default=None, ge=0.0)
    end: float | None = Field(default=None, gt=0.0)
    thickness: float | None = Field(default=None, ge=0.0)
    instance_id: str | None = None

    @model_validator(mode="after")
    def validate_span(self) -> "DividerConfig":
        """Validate that the span is not reversed."""
        if self.start is not None and self.end is not None and self.start >= self.end:
            raise ValueError(
                f"start ({self.start}) must be less than end ({self.end})"
            )
        return self


class PlacedSashConfig(BaseModel):
    """A sash placed into a pane, keyed "{instance_id}-{row}-{col}"."""

    model_config = ConfigDict(extra="forbid")

    pane_id: str = Field(..., min_length=1)
    type: SashType
    hinge_side: HingeSide | None = None
    glazing_bars: list[GlazingBarConfig] = Field(default_factory=list)


class WindowInstanceConfig(BaseModel):
    """One window instance.

    The top/bottom sash fields apply to sliding sash items only.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    overall_width: float = Field(..., gt=0.0, le=10000.0)
    overall_height: float = Field(..., gt=0.0, le=10000.0)
    top_sash_height: float | None = Field(default=None, gt=0.0)
    top_sash_glazing_bars: list[GlazingBarConfig] = Field(default_factory=list)
    bottom_sash_glazing_bars: list[GlazingBarConfig] = Field(default_factory=list)


class _ItemConfigBase(BaseModel):
    """Fields shared by every item type."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    instances: list[WindowInstanceConfig] = Field(..., min_length=1, max_length=20)
    frame: FrameProfileConfig = Field(default_factory=FrameProfileConfig)
    sash: SashSectionsConfig = Field(default_factory=SashSectionsConfig)
    glazing_bar_thickness: float = Field(default=0.0, ge=0.0)
    is_new_frame: bool = True
    pair_spacing: float = Field(default=0.0, ge=0.0)
    pair_rebate: float = Field(default=0.0, ge=0.0)

    @field_validator("instances")
    @classmethod
    def validate_unique_instance_ids(
        cls, v: list[WindowInstanceConfig]
    ) -> list[WindowInstanceConfig]:
        """Ensure instance ids are unique, since pane keys are built from them."""
        seen: set[str] = set()
        for instance in v:
            if instance.id in seen:
                raise ValueError(f"Duplicate instance id '{instance.id}'")
            seen.add(instance.id)
        return v


class SashItemConfig(_ItemConfigBase):
    """Vertical sliding sash window."""

    item_type: Literal["sash"]


class _DividedItemConfigBase(_ItemConfigBase):
    """Item with mullions, transoms and placed sashes."""

    mullions: list[DividerConfig] = Field(default_factory=list, max_length=50)
    transoms: list[DividerConfig] = Field(default_factory=list, max_length=50)
    placed_sashes: list[PlacedSashConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_divider_instances(self) -> "_DividedItemConfigBase":
        """Validate that dividers only reference existing instances."""
        instance_ids = {inst.id for inst in self.instances}
        for divider in [*self.mullions, *self.transoms]:
            if divider.instance_id is not None and divider.instance_id not in instance_ids:
                raise ValueError(
                    f"Divider '{divider.id}' references unknown instance "
                    f"'{divider.instance_id}'"
                )
        return self


class CasementItemConfig(_DividedItemConfigBase):
    item_type: Literal["casement"]


class DoorItemConfig(_DividedItemConfigBase):
    item_type: Literal["door"]


class ScreenItemConfig(_DividedItemConfigBase):
    item_type: Literal["screen"]


ItemConfig = Annotated[
    Union[SashItemConfig, CasementItemConfig, DoorItemConfig, ScreenItemConfig],
    Field(discriminator="item_type"),
]


class ElevationConfiguration(BaseModel):
    """Root configuration model for a quote item elevation.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        settings: Layout settings
        item: The quote item to lay out

    Example:
        >>> config = ElevationConfiguration.model_validate({
        ...     "schema_version": "1.0",
        ...     "item": {
        ...         "id": "W1",
        ...         "item_type": "casement",
        ...         "instances": [{"id": "A", "overall_width": 1200, "overall_height": 1200}],
        ...     },
        ... })
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    settings: LayoutSettingsConfig = Field(default_factory=LayoutSettingsConfig)
    item: ItemConfig

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
