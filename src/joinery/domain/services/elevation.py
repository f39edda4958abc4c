"""Elevation layout service for quote items.

Composes the pane decomposer and the sash subdivider into the full front
elevation of a quote item: ganged instances, frame members, dividers, sashes
and glass. Every renderer consumes this one layout.
"""

from __future__ import annotations

import logging

from ..entities import (
    Elevation,
    FrameMember,
    GlazedArea,
    InstanceElevation,
    MemberKind,
)
from ..items import DividedItem, QuoteItem, SashWindowItem
from ..value_objects import (
    GlazingBar,
    HingeSide,
    LayoutSettings,
    Orientation,
    Pane,
    Point2D,
    Rect,
    WindowInstance,
)
from .pane_decomposer import PaneDecomposer
from .sash_subdivider import SashSubdivider

__all__ = [
    "ElevationLayoutService",
    "hinge_marker",
]

logger = logging.getLogger(__name__)


def _rect(x: float, y: float, width: float, height: float) -> Rect:
    """Build a rectangle, collapsing negative sizes to zero."""
    return Rect(x, y, max(width, 0.0), max(height, 0.0))


def hinge_marker(outline: Rect, side: HingeSide | None) -> tuple[Point2D, ...]:
    """Opening-direction marker for a hinged sash.

    The marker is a three-point polyline with its apex at the middle of the
    hinge edge and its ends at the corners of the opposite edge.

    Args:
        outline: Outline of the sash.
        side: Edge the sash is hung from, or None.

    Returns:
        Three points, or an empty tuple when there is no hinge side.
    """
    if side is None:
        return ()
    x, y, right, bottom = outline.x, outline.y, outline.right, outline.bottom
    mid = outline.center
    if side is HingeSide.TOP:
        return (Point2D(x, bottom), Point2D(mid.x, y), Point2D(right, bottom))
    if side is HingeSide.BOTTOM:
        return (Point2D(x, y), Point2D(mid.x, bottom), Point2D(right, y))
    if side is HingeSide.LEFT:
        return (Point2D(right, y), Point2D(x, mid.y), Point2D(right, bottom))
    return (Point2D(x, y), Point2D(right, mid.y), Point2D(x, bottom))


class ElevationLayoutService:
    """Lays out the complete elevation of a quote item."""

    def __init__(
        self,
        settings: LayoutSettings | None = None,
        decomposer: PaneDecomposer | None = None,
        subdivider: SashSubdivider | None = None,
    ) -> None:
        self.settings = settings or LayoutSettings()
        self.decomposer = decomposer or PaneDecomposer(self.settings)
        self.subdivider = subdivider or SashSubdivider()

    def layout(self, item: QuoteItem) -> Elevation:
        """Lay out every instance of an item side by side.

        Instances are placed left to right, separated by the item's pair
        spacing less its pair rebate, and centred vertically on the tallest
        instance.

        Args:
            item: The quote item to lay out.

        Returns:
            Elevation with absolute geometry for all instances.
        """
        total_height = max(inst.overall_height for inst in item.instances)
        total_width = sum(inst.overall_width for inst in item.instances) + (
            len(item.instances) - 1
        ) * item.instance_step

        elevation = Elevation(
            item_id=item.id,
            item_type=item.item_type,
            width=total_width,
            height=total_height,
        )

        x = 0.0
        for instance in item.instances:
            origin = Point2D(x, (total_height - instance.overall_height) / 2)
            elevation.instances.append(self._layout_instance(item, instance, origin))
            x += instance.overall_width + item.instance_step

        logger.debug(
            f"Laid out {item.item_type.value} item '{item.id}': "
            f"{len(elevation.instances)} instance(s), "
            f"{len(elevation.glazed_areas)} glazed area(s)"
        )
        return elevation

    def _layout_instance(
        self, item: QuoteItem, instance: WindowInstance, origin: Point2D
    ) -> InstanceElevation:
        frame = item.effective_frame
        width, height = instance.overall_width, instance.overall_height
        inner_width = width - frame.left_jamb - frame.right_jamb
        inner_height = height - frame.head - frame.cill

        result = InstanceElevation(
            instance_id=instance.id,
            outline=Rect(origin.x, origin.y, width, height),
            opening=_rect(
                origin.x + frame.left_jamb,
                origin.y + frame.head,
                inner_width,
                inner_height,
            ),
        )

        if item.is_new_frame:
            result.members.extend(
                [
                    FrameMember(MemberKind.HEAD, Rect(origin.x, origin.y, width, frame.head)),
                    FrameMember(
                        MemberKind.LEFT_JAMB,
                        _rect(origin.x, result.opening.y, frame.left_jamb, inner_height),
                    ),
                    FrameMember(
                        MemberKind.RIGHT_JAMB,
                        _rect(
                            origin.x + width - frame.right_jamb,
                            result.opening.y,
                            frame.right_jamb,
                            inner_height,
                        ),
                    ),
                    FrameMember(
                        MemberKind.CILL,
                        Rect(origin.x, origin.y + height - frame.cill, width, frame.cill),
                    ),
                ]
            )

        if isinstance(item, SashWindowItem):
            self._layout_sliding_sashes(item, instance, result, inner_width, inner_height)
        else:
            self._layout_divided(item, instance, result, inner_width, inner_height)
        return result

    def _layout_divided(
        self,
        item: DividedItem,
        instance: WindowInstance,
        result: InstanceElevation,
        inner_width: float,
        inner_height: float,
    ) -> None:
        opening = result.opening
        footprints, panes = self.decomposer.decompose_with_footprints(
            inner_width,
            inner_height,
            item.dividers_for(instance.id),
            item.default_thickness,
        )

        for fp in footprints:
            kind = (
                MemberKind.MULLION
                if fp.kind is Orientation.VERTICAL
                else MemberKind.TRANSOM
            )
            result.members.append(
                FrameMember(kind, fp.rect.translated(opening.x, opening.y), fp.divider_id)
            )

        result.openings = panes
        sections = item.sash
        for pane in panes:
            key = f"{instance.id}-{pane.id}"
            outline = pane.rect.translated(opening.x, opening.y)
            sash = item.sash_for(key)

            if sash is not None and sash.has_sash_frame:
                glass = _rect(
                    outline.x + sections.stile,
                    outline.y + sections.head,
                    outline.width - 2 * sections.stile,
                    outline.height - sections.head - sections.bottom_rail,
                )
            else:
                glass = outline

            result.glazed_areas.append(
                GlazedArea(
                    key=key,
                    outline=outline,
                    glass=glass,
                    panes=self._glass_panes(
                        glass,
                        sash.glazing_bars if sash is not None else None,
                        item.glazing_bar_thickness,
                    ),
                    sash_type=sash.sash_type if sash is not None else None,
                    hinge_side=sash.hinge_side if sash is not None else None,
                    hinge_marker=hinge_marker(
                        outline, sash.hinge_side if sash is not None else None
                    ),
                )
            )

        placed = {area.key for area in result.glazed_areas}
        for sash in item.placed_sashes:
            if sash.pane_id.startswith(f"{instance.id}-") and sash.pane_id not in placed:
                logger.warning(
                    f"Placed sash '{sash.pane_id}' does not match any pane of "
                    f"instance '{instance.id}'"
                )

    def _layout_sliding_sashes(
        self,
        item: SashWindowItem,
        instance: WindowInstance,
        result: InstanceElevation,
        inner_width: float,
        inner_height: float,
    ) -> None:
        """Lay out the top and bottom sash of a vertical sliding window.

        Without an explicit top sash height the meeting rail sits so that both
        sashes show the same glass height.
        """
        opening = result.opening
        s = item.sash
        top_height = (
            instance.top_sash_height
            or (inner_height + s.head - s.bottom_rail) / 2
        )
        bottom_height = inner_height - top_height
        glass_width = inner_width - 2 * s.stile

        top_outline = _rect(opening.x, opening.y, inner_width, top_height)
        top_glass = _rect(
            opening.x + s.stile,
            opening.y + s.head,
            glass_width,
            top_height - s.head - s.meeting_stile,
        )
        bottom_outline = _rect(
            opening.x, opening.y + top_height, inner_width, bottom_height
        )
        bottom_glass = _rect(
            opening.x + s.stile,
            opening.y + top_height + s.meeting_stile,
            glass_width,
            bottom_height - s.meeting_stile - s.bottom_rail,
        )

        for name, outline, glass, bars in (
            ("top", top_outline, top_glass, instance.top_sash_glazing_bars),
            ("bottom", bottom_outline, bottom_glass, instance.bottom_sash_glazing_bars),
        ):
            result.glazed_areas.append(
                GlazedArea(
                    key=f"{instance.id}-{name}",
                    outline=outline,
                    glass=glass,
                    panes=self._glass_panes(glass, bars, item.glazing_bar_thickness),
                )
            )

    def _glass_panes(
        self,
        glass: Rect,
        bars: tuple[GlazingBar, ...] | None,
        bar_thickness: float,
    ) -> list[Pane]:
        panes = self.subdivider.subdivide(glass.width, glass.height, bars, bar_thickness)
        return [pane.translated(glass.x, glass.y) for pane in panes]
