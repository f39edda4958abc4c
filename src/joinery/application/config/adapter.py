"""Conversion from configuration models to domain objects."""

from __future__ import annotations

from joinery.application.config.schema import (
    DividerConfig,
    ElevationConfiguration,
    GlazingBarConfig,
    PlacedSashConfig,
    SashItemConfig,
    WindowInstanceConfig,
)
from joinery.domain.items import (
    CasementItem,
    DoorItem,
    QuoteItem,
    SashWindowItem,
    ScreenItem,
)
from joinery.domain.value_objects import (
    Divider,
    FrameProfile,
    GlazingBar,
    ItemType,
    LayoutSettings,
    Orientation,
    PlacedSash,
    SashSections,
    WindowInstance,
)

__all__ = [
    "config_to_divider",
    "config_to_glazing_bars",
    "config_to_item",
    "config_to_settings",
]

_DIVIDED_ITEM_CLASSES: dict[str, type[CasementItem | DoorItem | ScreenItem]] = {
    ItemType.CASEMENT.value: CasementItem,
    ItemType.DOOR.value: DoorItem,
    ItemType.SCREEN.value: ScreenItem,
}


def config_to_settings(config: ElevationConfiguration) -> LayoutSettings:
    return LayoutSettings(coordinate_tolerance=config.settings.coordinate_tolerance)


def config_to_glazing_bars(bars: list[GlazingBarConfig]) -> tuple[GlazingBar, ...]:
    return tuple(GlazingBar(id=b.id, kind=b.kind, offset=b.offset) for b in bars)


def config_to_divider(divider: DividerConfig, kind: Orientation) -> Divider:
    return Divider(
        id=divider.id,
        kind=kind,
        offset=divider.offset,
        span_start=divider.start,
        span_end=divider.end,
        thickness=divider.thickness,
        instance_id=divider.instance_id,
    )


def _to_instance(instance: WindowInstanceConfig) -> WindowInstance:
    return WindowInstance(
        id=instance.id,
        overall_width=instance.overall_width,
        overall_height=instance.overall_height,
        top_sash_height=instance.top_sash_height,
        top_sash_glazing_bars=config_to_glazing_bars(instance.top_sash_glazing_bars),
        bottom_sash_glazing_bars=config_to_glazing_bars(
            instance.bottom_sash_glazing_bars
        ),
    )


def _to_placed_sash(sash: PlacedSashConfig) -> PlacedSash:
    return PlacedSash(
        pane_id=sash.pane_id,
        sash_type=sash.type,
        hinge_side=sash.hinge_side,
        glazing_bars=config_to_glazing_bars(sash.glazing_bars),
    )


def config_to_item(config: ElevationConfiguration) -> QuoteItem:
    """Convert the configured item into its domain variant.

    Args:
        config: A validated configuration.

    Returns:
        SashWindowItem, CasementItem, DoorItem or ScreenItem depending on the
        configured item_type.
    """
    item = config.item
    common = dict(
        id=item.id,
        instances=tuple(_to_instance(inst) for inst in item.instances),
        frame=FrameProfile(**item.frame.model_dump()),
        sash=SashSections(**item.sash.model_dump()),
        glazing_bar_thickness=item.glazing_bar_thickness,
        is_new_frame=item.is_new_frame,
        pair_spacing=item.pair_spacing,
        pair_rebate=item.pair_rebate,
    )

    if isinstance(item, SashItemConfig):
        return SashWindowItem(**common)

    item_class = _DIVIDED_ITEM_CLASSES[item.item_type]
    return item_class(
        **common,
        mullions=tuple(config_to_divider(d, Orientation.VERTICAL) for d in item.mullions),
        transoms=tuple(
            config_to_divider(d, Orientation.HORIZONTAL) for d in item.transoms
        ),
        placed_sashes=tuple(_to_placed_sash(s) for s in item.placed_sashes),
    )
