"""Glazing-bar subdivision of a single sash's glass area."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..value_objects import GlazingBar, Orientation, Pane

__all__ = [
    "SashSubdivider",
    "subdivide",
]

logger = logging.getLogger(__name__)


class SashSubdivider:
    """Splits a sash's glass area into an even grid between glazing bars.

    Bars are counted per orientation and the glass is shared out equally
    between them. A bar's stored offset only orders the bars; it does not
    move the bar.
    """

    def subdivide(
        self,
        glass_width: float,
        glass_height: float,
        bars: Sequence[GlazingBar] | None,
        bar_thickness: float,
    ) -> list[Pane]:
        """Compute the sub-panes of a sash.

        Args:
            glass_width: Width of the sash's glass area in mm.
            glass_height: Height of the sash's glass area in mm.
            bars: Glazing bars, or None for an undivided sash.
            bar_thickness: Width of every glazing bar in mm.

        Returns:
            Equal-sized panes with ids "{row}-{col}", listed column by column.
            Empty when the bars leave no glass or the area is empty.
        """
        if not bars:
            if glass_width > 0 and glass_height > 0:
                return [Pane("0-0", 0.0, 0.0, glass_width, glass_height)]
            return []

        verticals = sorted(
            (b for b in bars if b.kind is Orientation.VERTICAL), key=lambda b: b.offset
        )
        horizontals = sorted(
            (b for b in bars if b.kind is Orientation.HORIZONTAL),
            key=lambda b: b.offset,
        )

        available_width = glass_width - len(verticals) * bar_thickness
        available_height = glass_height - len(horizontals) * bar_thickness
        if available_width <= 0 or available_height <= 0:
            logger.debug(
                f"{len(verticals)}x{len(horizontals)} glazing bars leave no glass "
                f"in a {glass_width}x{glass_height} sash"
            )
            return []

        num_cols = len(verticals) + 1
        num_rows = len(horizontals) + 1
        pane_width = available_width / num_cols
        pane_height = available_height / num_rows

        panes: list[Pane] = []
        x = 0.0
        for col in range(num_cols):
            y = 0.0
            for row in range(num_rows):
                panes.append(Pane(f"{row}-{col}", x, y, pane_width, pane_height))
                y += pane_height + (bar_thickness if row < len(horizontals) else 0.0)
            x += pane_width + (bar_thickness if col < len(verticals) else 0.0)
        return panes


def subdivide(
    glass_width: float,
    glass_height: float,
    bars: Sequence[GlazingBar] | None,
    bar_thickness: float,
) -> list[Pane]:
    """Subdivide a sash's glass area between glazing bars.

    Convenience wrapper around SashSubdivider.subdivide().
    """
    return SashSubdivider().subdivide(glass_width, glass_height, bars, bar_thickness)
