"""Elevation entities produced by the layout service.

All coordinates are absolute millimetres in the item's elevation space:
origin at the top-left of the first instance's bounding box, y pointing down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .value_objects import HingeSide, ItemType, Pane, Point2D, Rect, SashType

__all__ = [
    "Elevation",
    "FrameMember",
    "GlazedArea",
    "InstanceElevation",
    "MemberKind",
]


class MemberKind(str, Enum):
    """Structural members drawn around and between the glass."""

    HEAD = "head"
    CILL = "cill"
    LEFT_JAMB = "left_jamb"
    RIGHT_JAMB = "right_jamb"
    MULLION = "mullion"
    TRANSOM = "transom"


@dataclass
class FrameMember:
    """A frame member or divider drawn as a solid rectangle."""

    kind: MemberKind
    rect: Rect
    member_id: str | None = None


@dataclass
class GlazedArea:
    """One pane opening, the sash filling it (if any) and its glass.

    Attributes:
        key: Cross-reference key, "{instance_id}-{pane_id}" for divided items
            and "{instance_id}-top" / "{instance_id}-bottom" for sash windows.
        outline: The opening the area fills.
        glass: Glass area inside the sash members.
        panes: Sub-panes between glazing bars, in absolute coordinates.
        sash_type: Type of the sash filling the opening, None for plain glass.
        hinge_side: Edge the sash is hung from, if any.
        hinge_marker: Polyline showing the opening direction, empty when the
            sash has no hinge side.
    """

    key: str
    outline: Rect
    glass: Rect
    panes: list[Pane] = field(default_factory=list)
    sash_type: SashType | None = None
    hinge_side: HingeSide | None = None
    hinge_marker: tuple[Point2D, ...] = ()

    @property
    def glass_area(self) -> float:
        """Visible glass in square millimetres."""
        return sum(pane.area for pane in self.panes)


@dataclass
class InstanceElevation:
    """Layout of one window instance.

    Attributes:
        instance_id: Id of the window instance.
        outline: Overall bounding box of the instance.
        opening: Inner frame opening.
        members: Frame members and dividers.
        openings: Panes from the decomposer, relative to ``opening``. Empty for
            sliding sash windows, which are not divided.
        glazed_areas: Glass for every opening.
    """

    instance_id: str
    outline: Rect
    opening: Rect
    members: list[FrameMember] = field(default_factory=list)
    openings: list[Pane] = field(default_factory=list)
    glazed_areas: list[GlazedArea] = field(default_factory=list)


@dataclass
class Elevation:
    """Complete front elevation of a quote item."""

    item_id: str
    item_type: ItemType
    width: float
    height: float
    instances: list[InstanceElevation] = field(default_factory=list)

    @property
    def glazed_areas(self) -> list[GlazedArea]:
        return [area for inst in self.instances for area in inst.glazed_areas]

    @property
    def glass_area(self) -> float:
        """Total visible glass in square millimetres."""
        return sum(area.glass_area for area in self.glazed_areas)

    def find_area(self, key: str) -> GlazedArea | None:
        """Look up a glazed area by its cross-reference key."""
        for area in self.glazed_areas:
            if area.key == key:
                return area
        return None
