"""Even redistribution of dividers and remapping of placed sashes.

Pane ids are grid positions, so moving or adding dividers can give a sash's
pane a new id. After any divider change the sashes are carried across by
geometry: each one moves to the new pane that contains the centre of the
pane it used to sit in.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import replace

from ..items import DividedItem
from ..value_objects import Divider, MemberThickness, Orientation, Pane, PlacedSash
from .pane_decomposer import PaneDecomposer

__all__ = [
    "PaneRedistributor",
    "distribute_evenly",
    "remap_placed_sashes",
]

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _find_pane(panes: Sequence[Pane], x: float, y: float) -> Pane | None:
    # Half-open bounds so a point on a shared edge belongs to one pane only
    for pane in panes:
        if pane.x <= x < pane.x + pane.width and pane.y <= y < pane.y + pane.height:
            return pane
    return None


def remap_placed_sashes(
    old_panes: Sequence[Pane],
    new_panes: Sequence[Pane],
    sashes: Sequence[PlacedSash],
    instance_id: str,
) -> list[PlacedSash]:
    """Carry one instance's placed sashes onto a new pane layout.

    Sashes of other instances are returned unchanged after the remapped
    ones. A sash of this instance is dropped when its old pane is unknown,
    when the old pane's centre is not glass in the new layout, or when an
    earlier sash already claimed the same new pane.

    Args:
        old_panes: Panes of the instance before the divider change.
        new_panes: Panes of the instance after the divider change.
        sashes: All placed sashes of the item.
        instance_id: Instance whose dividers changed.

    Returns:
        The item's placed sashes with this instance's pane ids updated.
    """
    prefix = f"{instance_id}-"
    old_by_id = {pane.id: pane for pane in old_panes}

    remapped: list[PlacedSash] = []
    others: list[PlacedSash] = []
    claimed: set[str] = set()
    for sash in sashes:
        if not sash.pane_id.startswith(prefix):
            others.append(sash)
            continue

        old_pane = old_by_id.get(sash.pane_id[len(prefix):])
        if old_pane is None:
            logger.warning(
                f"Dropping sash '{sash.pane_id}': no such pane in the old layout"
            )
            continue

        center = old_pane.rect.center
        new_pane = _find_pane(new_panes, center.x, center.y)
        if new_pane is None:
            logger.warning(
                f"Dropping sash '{sash.pane_id}': pane centre "
                f"({center.x:g}, {center.y:g}) is no longer glass"
            )
            continue

        new_id = f"{prefix}{new_pane.id}"
        if new_id in claimed:
            logger.warning(
                f"Dropping sash '{sash.pane_id}': pane '{new_id}' already holds a sash"
            )
            continue

        claimed.add(new_id)
        remapped.append(replace(sash, pane_id=new_id))

    return remapped + others


def distribute_evenly(
    inner_width: float,
    inner_height: float,
    dividers: Sequence[Divider],
    default_thickness: MemberThickness,
) -> list[Divider]:
    """Respace dividers so the panes between them are equal.

    Mullions share the opening width and transoms the opening height, each
    kind independently and keeping its order by offset. New offsets are
    rounded to whole millimetres. Spans, thicknesses and ids are kept.

    Returns:
        Mullions then transoms, each sorted by their new offsets.

    Example:
        >>> mullions = [Divider("m1", Orientation.VERTICAL, 200)]
        >>> [d.offset for d in distribute_evenly(1100, 1000, mullions, MemberThickness(100, 100))]
        [550.0]
    """
    result: list[Divider] = []
    for kind, extent in (
        (Orientation.VERTICAL, inner_width),
        (Orientation.HORIZONTAL, inner_height),
    ):
        group = sorted(
            (d for d in dividers if d.kind is kind), key=lambda d: d.offset
        )
        if not group:
            continue

        thicknesses = [d.resolved_thickness(default_thickness) for d in group]
        pane_size = (extent - sum(thicknesses)) / (len(group) + 1)
        if pane_size <= 0:
            logger.warning(
                f"{kind.value.capitalize()} dividers are wider than the opening "
                f"({extent}); leaving them in place"
            )
            result.extend(group)
            continue

        position = 0.0
        for divider, thickness in zip(group, thicknesses):
            position += pane_size
            result.append(
                replace(divider, offset=_round_half_up(position + thickness / 2))
            )
            position += thickness
    return result


class PaneRedistributor:
    """Equalises the panes of one instance of a divided item."""

    def __init__(self, decomposer: PaneDecomposer | None = None) -> None:
        self.decomposer = decomposer or PaneDecomposer()

    def equalise(self, item: DividedItem, instance_id: str) -> DividedItem:
        """Respace an instance's own dividers and carry its sashes across.

        Only dividers bound to the instance move; dividers shared by every
        instance stay where they are but still shape the panes used for
        remapping.

        Args:
            item: The item to change.
            instance_id: Instance whose dividers are respaced.

        Returns:
            A new item, or the same item when the instance has no dividers
            of its own.

        Raises:
            KeyError: If the item has no instance with that id.
        """
        instance = next(
            (inst for inst in item.instances if inst.id == instance_id), None
        )
        if instance is None:
            raise KeyError(f"Item '{item.id}' has no instance '{instance_id}'")

        own = [
            d for d in (*item.mullions, *item.transoms) if d.instance_id == instance_id
        ]
        if not own:
            return item

        frame = item.effective_frame
        inner_width = instance.overall_width - frame.left_jamb - frame.right_jamb
        inner_height = instance.overall_height - frame.head - frame.cill
        thickness = item.default_thickness

        old_panes = self.decomposer.decompose(
            inner_width, inner_height, item.dividers_for(instance_id), thickness
        )
        moved = distribute_evenly(inner_width, inner_height, own, thickness)

        mullions = tuple(d for d in item.mullions if d.instance_id != instance_id)
        transoms = tuple(d for d in item.transoms if d.instance_id != instance_id)
        mullions += tuple(d for d in moved if d.is_mullion)
        transoms += tuple(d for d in moved if not d.is_mullion)
        updated = replace(item, mullions=mullions, transoms=transoms)
        new_panes = self.decomposer.decompose(
            inner_width, inner_height, updated.dividers_for(instance_id), thickness
        )

        logger.debug(
            f"Equalised {len(own)} divider(s) of instance '{instance_id}' "
            f"into {len(new_panes)} pane(s)"
        )
        return replace(
            updated,
            placed_sashes=tuple(
                remap_placed_sashes(
                    old_panes, new_panes, item.placed_sashes, instance_id
                )
            ),
        )
