"""Frame, divider and sash value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Orientation(str, Enum):
    """Direction a divider or glazing bar runs along.

    A vertical divider is a mullion, a horizontal one is a transom.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class SashType(str, Enum):
    """Kinds of leaf that can be placed in a pane opening."""

    CASEMENT = "casement"
    DOOR_SASH = "door-sash"
    FIXED_GLAZING = "fixed-glazing"


class HingeSide(str, Enum):
    """Edge a casement or door leaf is hung from."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class ItemType(str, Enum):
    """Product families a quote item can belong to."""

    SASH = "sash"
    CASEMENT = "casement"
    DOOR = "door"
    SCREEN = "screen"


@dataclass(frozen=True)
class MemberThickness:
    """Default divider thickness used when a divider has no override."""

    mullion_thickness: float
    transom_thickness: float

    def __post_init__(self) -> None:
        if self.mullion_thickness < 0 or self.transom_thickness < 0:
            raise ValueError("Member thickness cannot be negative")

    def for_orientation(self, orientation: Orientation) -> float:
        if orientation is Orientation.VERTICAL:
            return self.mullion_thickness
        return self.transom_thickness


@dataclass(frozen=True)
class Divider:
    """A mullion or transom dividing a frame opening.

    Attributes:
        id: Identifier of the divider.
        kind: VERTICAL for a mullion, HORIZONTAL for a transom.
        offset: Centreline position in mm, measured from the left edge for a
            mullion and from the top edge for a transom.
        span_start: Where the divider starts along its own length. Defaults to
            the opening edge.
        span_end: Where the divider stops along its own length. Defaults to
            the opposite opening edge.
        thickness: Member thickness override. None or 0 falls back to the
            default thickness for its kind.
        instance_id: Window instance the divider belongs to, or None when it
            applies to every instance of the item.
    """

    id: str
    kind: Orientation
    offset: float
    span_start: float | None = None
    span_end: float | None = None
    thickness: float | None = None
    instance_id: str | None = None

    def __post_init__(self) -> None:
        if self.thickness is not None and self.thickness < 0:
            raise ValueError("Divider thickness cannot be negative")

    @property
    def is_mullion(self) -> bool:
        return self.kind is Orientation.VERTICAL

    def resolved_thickness(self, defaults: MemberThickness) -> float:
        """Thickness used for layout, falling back to the default for its kind."""
        return self.thickness or defaults.for_orientation(self.kind)

    def applies_to(self, instance_id: str) -> bool:
        return self.instance_id is None or self.instance_id == instance_id


@dataclass(frozen=True)
class GlazingBar:
    """A glazing bar inside a sash's glass area.

    The offset is kept for ordering only. Sub-panes are always spaced evenly
    between bars regardless of the stored offset.
    """

    id: str
    kind: Orientation
    offset: float = 0.0


@dataclass(frozen=True)
class FrameProfile:
    """Outer frame member sizes in millimetres."""

    head: float = 0.0
    cill: float = 0.0
    left_jamb: float = 0.0
    right_jamb: float = 0.0
    mullion: float = 0.0
    transom: float = 0.0

    def __post_init__(self) -> None:
        for name in ("head", "cill", "left_jamb", "right_jamb", "mullion", "transom"):
            if getattr(self, name) < 0:
                raise ValueError(f"Frame {name} cannot be negative")

    @property
    def member_thickness(self) -> MemberThickness:
        return MemberThickness(self.mullion, self.transom)


@dataclass(frozen=True)
class SashSections:
    """Sash member sizes in millimetres."""

    head: float = 0.0
    stile: float = 0.0
    bottom_rail: float = 0.0
    meeting_stile: float = 0.0

    def __post_init__(self) -> None:
        for name in ("head", "stile", "bottom_rail", "meeting_stile"):
            if getattr(self, name) < 0:
                raise ValueError(f"Sash {name} cannot be negative")


@dataclass(frozen=True)
class PlacedSash:
    """A leaf placed into one of the panes of a divided frame.

    Attributes:
        pane_id: Pane the sash fills, as "{instance_id}-{row}-{col}".
        sash_type: Casement, door leaf or fixed glazing.
        hinge_side: Edge the leaf is hung from, if it opens.
        glazing_bars: Bars subdividing the sash's own glass.
    """

    pane_id: str
    sash_type: SashType
    hinge_side: HingeSide | None = None
    glazing_bars: tuple[GlazingBar, ...] = field(default_factory=tuple)

    @property
    def has_sash_frame(self) -> bool:
        """Fixed glazing sits directly in the pane without sash members."""
        return self.sash_type is not SashType.FIXED_GLAZING


@dataclass(frozen=True)
class WindowInstance:
    """One physical unit within a (possibly ganged) quote item.

    The top/bottom sash fields are used by vertical sliding sash windows only.
    """

    id: str
    overall_width: float
    overall_height: float
    top_sash_height: float | None = None
    top_sash_glazing_bars: tuple[GlazingBar, ...] = field(default_factory=tuple)
    bottom_sash_glazing_bars: tuple[GlazingBar, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.overall_width <= 0 or self.overall_height <= 0:
            raise ValueError("Window instance dimensions must be positive")
