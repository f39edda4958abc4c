"""Glass schedule exporter.

Lists every pane of glass in an elevation as a CSV order list, one row per
distinct pane size, largest first. Each row names the panes it covers as
"{area key}/{pane id}" so the schedule can be checked against a drawing.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from joinery.domain.entities import Elevation
from joinery.infrastructure.exporters.base import ExporterRegistry

__all__ = [
    "GlassScheduleExporter",
    "GlassSize",
    "glass_schedule",
]

MM2_PER_M2 = 1_000_000


@dataclass
class GlassSize:
    """All panes of one size."""

    width: float
    height: float
    panes: list[str] = field(default_factory=list)

    @property
    def quantity(self) -> int:
        return len(self.panes)

    @property
    def area(self) -> float:
        """Area of one pane in square millimetres."""
        return self.width * self.height


def glass_schedule(elevation: Elevation, precision: int = 1) -> list[GlassSize]:
    """Group the panes of an elevation by size.

    Sizes are compared after rounding to ``precision`` decimal places of a
    millimetre, so float noise from the layout does not split a group.
    """
    sizes: dict[tuple[float, float], GlassSize] = {}
    for area in elevation.glazed_areas:
        for pane in area.panes:
            key = (round(pane.width, precision), round(pane.height, precision))
            size = sizes.setdefault(key, GlassSize(*key))
            size.panes.append(f"{area.key}/{pane.id}")
    return sorted(sizes.values(), key=lambda s: (-s.area, -s.width))


@ExporterRegistry.register("glass")
class GlassScheduleExporter:
    """Exports the glass order list of an elevation as CSV."""

    format_name: ClassVar[str] = "glass"
    file_extension: ClassVar[str] = "csv"

    def export(self, elevation: Elevation, path: Path) -> None:
        path.write_text(self.export_string(elevation), encoding="utf-8")

    def export_string(self, elevation: Elevation) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(
            ["Width (mm)", "Height (mm)", "Quantity", "Area each (m2)", "Area (m2)", "Panes"]
        )

        quantity = 0
        total = 0.0
        for size in glass_schedule(elevation):
            area = size.area * size.quantity
            writer.writerow(
                [
                    f"{size.width:g}",
                    f"{size.height:g}",
                    size.quantity,
                    f"{size.area / MM2_PER_M2:.4f}",
                    f"{area / MM2_PER_M2:.4f}",
                    " ".join(size.panes),
                ]
            )
            quantity += size.quantity
            total += area

        writer.writerow(["TOTAL", "", quantity, "", f"{total / MM2_PER_M2:.4f}", ""])
        return output.getvalue()
