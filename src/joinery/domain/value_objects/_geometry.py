"""Planar geometry value objects shared by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """2D point in elevation space, millimetres, y pointing down."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner.

    Zero-sized rectangles are allowed (a frame member of zero size when the
    item reuses an existing frame), negative sizes are not.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle dimensions cannot be negative")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        """Area in square millimetres."""
        return self.width * self.height

    @property
    def center(self) -> Point2D:
        return Point2D(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Point2D) -> bool:
        """Check whether a point lies inside or on the boundary."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def overlaps(self, other: Rect) -> bool:
        """Check whether two rectangles share interior area."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


@dataclass(frozen=True)
class Pane:
    """A rectangular glass area produced by the layout engine.

    Coordinates are relative to the top-left corner of the area that was
    decomposed (the frame's inner opening, or a sash's glass area).

    Attributes:
        id: Grid identifier in the form "row-col". Renderers use it to match
            placed sashes and glass types, so it must be stable across
            re-layouts that keep the same grid topology.
        x: Left edge in millimetres.
        y: Top edge in millimetres.
        width: Width in millimetres.
        height: Height in millimetres.
    """

    id: str
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Pane dimensions must be positive")

    @property
    def area(self) -> float:
        """Glass area in square millimetres."""
        return self.width * self.height

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def translated(self, dx: float, dy: float) -> Pane:
        """Return the same pane moved into another coordinate space."""
        return Pane(self.id, self.x + dx, self.y + dy, self.width, self.height)
