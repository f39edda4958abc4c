"""Pane decomposition of a divided frame opening.

Given the inner size of a frame opening and its mullions and transoms, the
decomposer cuts the opening into a grid along every divider edge, marks each
grid cell as frame or glass, and greedily merges glass cells into maximal
rectangles. The resulting panes are what every renderer draws, so preview,
PDF and print output agree pane for pane.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..value_objects import (
    Divider,
    LayoutSettings,
    MemberThickness,
    Orientation,
    Pane,
    Point2D,
    Rect,
)
from .coordinates import clamp, unique_sorted

__all__ = [
    "CellState",
    "DividerFootprint",
    "PaneDecomposer",
    "decompose",
]

logger = logging.getLogger(__name__)


class CellState(str, Enum):
    """Classification of an elementary grid cell."""

    GLASS = "glass"
    FRAME = "frame"


@dataclass(frozen=True)
class DividerFootprint:
    """Area of the opening occupied by one divider, clamped to the opening.

    Attributes:
        divider_id: Id of the divider this footprint belongs to.
        kind: VERTICAL for a mullion, HORIZONTAL for a transom.
        rect: Occupied rectangle relative to the opening's top-left corner.
    """

    divider_id: str
    kind: Orientation
    rect: Rect

    def covers(self, point: Point2D) -> bool:
        """Check whether a cell centre falls on this divider.

        The thickness band is tested exclusively and the span inclusively, so
        a zero-thickness divider adds cut lines without covering any glass.
        """
        r = self.rect
        if self.kind is Orientation.VERTICAL:
            return r.x < point.x < r.right and r.y <= point.y <= r.bottom
        return r.y < point.y < r.bottom and r.x <= point.x <= r.right


class PaneDecomposer:
    """Splits a frame opening into maximal glass panes."""

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        self.settings = settings or LayoutSettings()

    def footprints(
        self,
        inner_width: float,
        inner_height: float,
        dividers: Sequence[Divider],
        default_thickness: MemberThickness,
    ) -> list[DividerFootprint]:
        """Compute the occupied rectangle of every usable divider.

        Dividers whose centreline is not strictly inside the opening, or
        whose span is empty after clamping, are skipped with a warning.

        Args:
            inner_width: Opening width in mm.
            inner_height: Opening height in mm.
            dividers: Mullions and transoms in any order.
            default_thickness: Thickness for dividers without an override.

        Returns:
            Footprints in the order of the input dividers.
        """
        result: list[DividerFootprint] = []
        for divider in dividers:
            footprint = self._footprint(
                divider, inner_width, inner_height, default_thickness
            )
            if footprint is not None:
                result.append(footprint)
        return result

    def decompose(
        self,
        inner_width: float,
        inner_height: float,
        dividers: Sequence[Divider],
        default_thickness: MemberThickness,
    ) -> list[Pane]:
        """Compute the glass panes of a divided opening.

        Never raises for bad geometry: a non-positive opening or one that
        dividers cover completely yields an empty list.

        Args:
            inner_width: Opening width in mm.
            inner_height: Opening height in mm.
            dividers: Mullions and transoms in any order.
            default_thickness: Thickness for dividers without an override.

        Returns:
            Panes in row-major order of their top-left grid cell, with ids
            "{row}-{col}" counting only grid rows and columns that hold glass.

        Example:
            >>> mullion = Divider("m1", Orientation.VERTICAL, 600, thickness=80)
            >>> [p.id for p in decompose(1200, 1200, [mullion], MemberThickness(80, 80))]
            ['0-0', '0-1']
        """
        _, panes = self.decompose_with_footprints(
            inner_width, inner_height, dividers, default_thickness
        )
        return panes

    def decompose_with_footprints(
        self,
        inner_width: float,
        inner_height: float,
        dividers: Sequence[Divider],
        default_thickness: MemberThickness,
    ) -> tuple[list[DividerFootprint], list[Pane]]:
        """Compute divider footprints and glass panes in one pass.

        Renderers draw members from the footprints and glass from the panes,
        so both come from the same geometry.

        Returns:
            Tuple of (footprints, panes). Both are empty for an empty opening.
        """
        if inner_width <= 0 or inner_height <= 0:
            logger.debug(
                f"Opening {inner_width}x{inner_height} is empty, no panes produced"
            )
            return [], []

        footprints = self.footprints(
            inner_width, inner_height, dividers, default_thickness
        )
        xs, ys = self._cut_lines(inner_width, inner_height, footprints)
        grid = self._classify(xs, ys, footprints)
        row_index, col_index = self._dense_indices(grid)
        panes = self._merge(grid, xs, ys, row_index, col_index)

        logger.debug(
            f"Decomposed {inner_width}x{inner_height} opening with "
            f"{len(footprints)} dividers into {len(panes)} panes"
        )
        return footprints, panes

    def _footprint(
        self,
        divider: Divider,
        inner_width: float,
        inner_height: float,
        default_thickness: MemberThickness,
    ) -> DividerFootprint | None:
        if divider.is_mullion:
            across, along = inner_width, inner_height
        else:
            across, along = inner_height, inner_width

        if not 0 < divider.offset < across:
            logger.warning(
                f"Ignoring divider '{divider.id}': offset {divider.offset} "
                f"is outside the opening (0, {across})"
            )
            return None

        start = clamp(
            divider.span_start if divider.span_start is not None else 0.0, 0.0, along
        )
        end = clamp(
            divider.span_end if divider.span_end is not None else along, 0.0, along
        )
        if start >= end:
            logger.warning(
                f"Ignoring divider '{divider.id}': span {start}..{end} is empty"
            )
            return None

        half = divider.resolved_thickness(default_thickness) / 2
        low = clamp(divider.offset - half, 0.0, across)
        high = clamp(divider.offset + half, 0.0, across)

        if divider.is_mullion:
            rect = Rect(low, start, high - low, end - start)
        else:
            rect = Rect(start, low, end - start, high - low)
        return DividerFootprint(divider.id, divider.kind, rect)

    def _cut_lines(
        self,
        inner_width: float,
        inner_height: float,
        footprints: list[DividerFootprint],
    ) -> tuple[list[float], list[float]]:
        """Collect the distinct x and y cut lines of the grid.

        A divider contributes both edges of its band and both ends of its
        span, since a partial-length divider starts or stops mid-opening.
        """
        xs = [0.0, inner_width]
        ys = [0.0, inner_height]
        for fp in footprints:
            xs.extend((fp.rect.x, fp.rect.right))
            ys.extend((fp.rect.y, fp.rect.bottom))

        tolerance = self.settings.coordinate_tolerance
        return unique_sorted(xs, tolerance), unique_sorted(ys, tolerance)

    @staticmethod
    def _classify(
        xs: list[float], ys: list[float], footprints: list[DividerFootprint]
    ) -> list[list[CellState]]:
        grid: list[list[CellState]] = []
        for r in range(len(ys) - 1):
            row: list[CellState] = []
            center_y = (ys[r] + ys[r + 1]) / 2
            for c in range(len(xs) - 1):
                center = Point2D((xs[c] + xs[c + 1]) / 2, center_y)
                covered = any(fp.covers(center) for fp in footprints)
                row.append(CellState.FRAME if covered else CellState.GLASS)
            grid.append(row)
        return grid

    @staticmethod
    def _dense_indices(
        grid: list[list[CellState]],
    ) -> tuple[dict[int, int], dict[int, int]]:
        """Map grid rows and columns holding glass to consecutive pane indices.

        Rows or columns that are entirely frame get no index, which keeps pane
        ids unchanged when partial dividers add extra all-frame grid lines.
        """
        row_index: dict[int, int] = {}
        for r, row in enumerate(grid):
            if CellState.GLASS in row:
                row_index[r] = len(row_index)

        col_index: dict[int, int] = {}
        num_cols = len(grid[0]) if grid else 0
        for c in range(num_cols):
            if any(row[c] is CellState.GLASS for row in grid):
                col_index[c] = len(col_index)
        return row_index, col_index

    @staticmethod
    def _merge(
        grid: list[list[CellState]],
        xs: list[float],
        ys: list[float],
        row_index: dict[int, int],
        col_index: dict[int, int],
    ) -> list[Pane]:
        """Greedily merge glass cells into maximal rectangles.

        Scanning row-major, each unclaimed glass cell grows right as far as
        glass continues, which fixes the width, then grows down while every
        cell of the next row at that width is unclaimed glass.
        """
        num_rows = len(grid)
        num_cols = len(grid[0]) if grid else 0
        claimed = [[False] * num_cols for _ in range(num_rows)]

        def is_free(r: int, c: int) -> bool:
            return grid[r][c] is CellState.GLASS and not claimed[r][c]

        panes: list[Pane] = []
        for r in range(num_rows):
            for c in range(num_cols):
                if not is_free(r, c):
                    continue

                span_cols = 1
                while c + span_cols < num_cols and is_free(r, c + span_cols):
                    span_cols += 1

                span_rows = 1
                while r + span_rows < num_rows and all(
                    is_free(r + span_rows, c + i) for i in range(span_cols)
                ):
                    span_rows += 1

                for i in range(span_rows):
                    for j in range(span_cols):
                        claimed[r + i][c + j] = True

                panes.append(
                    Pane(
                        id=f"{row_index[r]}-{col_index[c]}",
                        x=xs[c],
                        y=ys[r],
                        width=xs[c + span_cols] - xs[c],
                        height=ys[r + span_rows] - ys[r],
                    )
                )
        return panes


def decompose(
    inner_width: float,
    inner_height: float,
    dividers: Sequence[Divider],
    default_thickness: MemberThickness,
    settings: LayoutSettings | None = None,
) -> list[Pane]:
    """Decompose a frame opening into glass panes.

    Convenience wrapper around PaneDecomposer.decompose().
    """
    return PaneDecomposer(settings).decompose(
        inner_width, inner_height, dividers, default_thickness
    )
