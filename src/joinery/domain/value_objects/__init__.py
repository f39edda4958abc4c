"""Domain value objects for frame and pane layout."""

from ._frame import (
    Divider,
    FrameProfile,
    GlazingBar,
    HingeSide,
    ItemType,
    MemberThickness,
    Orientation,
    PlacedSash,
    SashSections,
    SashType,
    WindowInstance,
)
from ._geometry import Pane, Point2D, Rect
from ._settings import LayoutSettings

__all__ = [
    "Divider",
    "FrameProfile",
    "GlazingBar",
    "HingeSide",
    "ItemType",
    "LayoutSettings",
    "MemberThickness",
    "Orientation",
    "Pane",
    "PlacedSash",
    "Point2D",
    "Rect",
    "SashSections",
    "SashType",
    "WindowInstance",
]
