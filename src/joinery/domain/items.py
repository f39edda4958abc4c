"""Quote item variants.

Each product family is its own type, so layout code dispatches on the item's
class instead of checking an item type field against a set of optional
attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .value_objects import (
    Divider,
    FrameProfile,
    ItemType,
    MemberThickness,
    Orientation,
    PlacedSash,
    SashSections,
    WindowInstance,
)

__all__ = [
    "CasementItem",
    "DividedItem",
    "DoorItem",
    "QuoteItem",
    "SashWindowItem",
    "ScreenItem",
]


@dataclass(frozen=True)
class _ItemBase:
    """Fields shared by every quote item.

    Attributes:
        id: Item identifier.
        instances: Window instances ganged left to right.
        frame: Outer frame member sizes.
        sash: Sash member sizes.
        glazing_bar_thickness: Width of glazing bars inside sashes.
        is_new_frame: False when the item reuses an existing frame, in which
            case no frame members are drawn and dividers default to zero
            thickness.
        pair_spacing: Gap between neighbouring instances.
        pair_rebate: Overlap between neighbouring instances.
    """

    item_type: ClassVar[ItemType]

    id: str
    instances: tuple[WindowInstance, ...]
    frame: FrameProfile = field(default_factory=FrameProfile)
    sash: SashSections = field(default_factory=SashSections)
    glazing_bar_thickness: float = 0.0
    is_new_frame: bool = True
    pair_spacing: float = 0.0
    pair_rebate: float = 0.0

    def __post_init__(self) -> None:
        if not self.instances:
            raise ValueError("A quote item needs at least one window instance")
        if self.glazing_bar_thickness < 0:
            raise ValueError("Glazing bar thickness cannot be negative")

    @property
    def effective_frame(self) -> FrameProfile:
        """Frame members actually present in the elevation."""
        return self.frame if self.is_new_frame else FrameProfile()

    @property
    def instance_step(self) -> float:
        """Extra horizontal offset applied between ganged instances."""
        if len(self.instances) > 1:
            return self.pair_spacing - self.pair_rebate
        return 0.0


@dataclass(frozen=True)
class SashWindowItem(_ItemBase):
    """Vertical sliding sash window: a top and a bottom sash per instance."""

    item_type: ClassVar[ItemType] = ItemType.SASH


@dataclass(frozen=True)
class DividedItem(_ItemBase):
    """Item whose frame opening is divided by mullions and transoms."""

    mullions: tuple[Divider, ...] = field(default_factory=tuple)
    transoms: tuple[Divider, ...] = field(default_factory=tuple)
    placed_sashes: tuple[PlacedSash, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        super().__post_init__()
        if any(d.kind is not Orientation.VERTICAL for d in self.mullions):
            raise ValueError("Mullions must be vertical dividers")
        if any(d.kind is not Orientation.HORIZONTAL for d in self.transoms):
            raise ValueError("Transoms must be horizontal dividers")

    @property
    def default_thickness(self) -> MemberThickness:
        return self.effective_frame.member_thickness

    def dividers_for(self, instance_id: str) -> list[Divider]:
        """Mullions then transoms that apply to one instance."""
        return [
            d for d in (*self.mullions, *self.transoms) if d.applies_to(instance_id)
        ]

    def sash_for(self, pane_key: str) -> PlacedSash | None:
        for sash in self.placed_sashes:
            if sash.pane_id == pane_key:
                return sash
        return None


@dataclass(frozen=True)
class CasementItem(DividedItem):
    item_type: ClassVar[ItemType] = ItemType.CASEMENT


@dataclass(frozen=True)
class DoorItem(DividedItem):
    item_type: ClassVar[ItemType] = ItemType.DOOR


@dataclass(frozen=True)
class ScreenItem(DividedItem):
    item_type: ClassVar[ItemType] = ItemType.SCREEN


QuoteItem = Union[SashWindowItem, CasementItem, DoorItem, ScreenItem]
