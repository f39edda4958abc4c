"""Domain layer - frame and pane layout logic."""

from .entities import Elevation, FrameMember, GlazedArea, InstanceElevation, MemberKind
from .items import (
    CasementItem,
    DividedItem,
    DoorItem,
    QuoteItem,
    SashWindowItem,
    ScreenItem,
)
from .services import (
    DividerFootprint,
    ElevationLayoutService,
    PaneDecomposer,
    PaneRedistributor,
    SashSubdivider,
    decompose,
    distribute_evenly,
    remap_placed_sashes,
    subdivide,
)
from .value_objects import (
    Divider,
    FrameProfile,
    GlazingBar,
    HingeSide,
    ItemType,
    LayoutSettings,
    MemberThickness,
    Orientation,
    Pane,
    PlacedSash,
    Point2D,
    Rect,
    SashSections,
    SashType,
    WindowInstance,
)

__all__ = [
    "CasementItem",
    "Divider",
    "DividedItem",
    "DividerFootprint",
    "DoorItem",
    "Elevation",
    "ElevationLayoutService",
    "FrameMember",
    "FrameProfile",
    "GlazedArea",
    "GlazingBar",
    "HingeSide",
    "InstanceElevation",
    "ItemType",
    "LayoutSettings",
    "MemberKind",
    "MemberThickness",
    "Orientation",
    "Pane",
    "PaneDecomposer",
    "PaneRedistributor",
    "PlacedSash",
    "Point2D",
    "QuoteItem",
    "Rect",
    "SashSections",
    "SashSubdivider",
    "SashType",
    "SashWindowItem",
    "ScreenItem",
    "WindowInstance",
    "decompose",
    "distribute_evenly",
    "remap_placed_sashes",
    "subdivide",
]
