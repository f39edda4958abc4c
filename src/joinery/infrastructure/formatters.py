"""Text formatters for pane layouts and elevations."""

from __future__ import annotations

import json
from typing import Any

from joinery.application.dtos import ElevationOutput, PaneLayoutOutput
from joinery.domain import Elevation, Pane
from joinery.infrastructure.exporters.json_exporter import elevation_to_dict, pane_to_dict

# Square millimetres per square metre
MM2_PER_M2 = 1_000_000


class PaneTableFormatter:
    """Formats a list of panes as a fixed-width table."""

    def __init__(self, title: str = "PANES") -> None:
        self.title = title

    def format(self, panes: list[Pane]) -> str:
        if not panes:
            return "No panes."

        lines = [
            self.title,
            "=" * 66,
            f"{'Pane':<10} {'X':>9} {'Y':>9} {'Width':>9} {'Height':>9} {'Area (m2)':>14}",
            "-" * 66,
        ]
        total = 0.0
        for pane in panes:
            lines.append(
                f"{pane.id:<10} {pane.x:>9.1f} {pane.y:>9.1f} "
                f"{pane.width:>9.1f} {pane.height:>9.1f} "
                f"{pane.area / MM2_PER_M2:>14.4f}"
            )
            total += pane.area
        lines.append("-" * 66)
        lines.append(f"{'TOTAL':<10} {len(panes):>9} {'':>9} {'':>9} {'':>9} {total / MM2_PER_M2:>14.4f}")
        return "\n".join(lines)


class PaneLayoutFormatter:
    """Formats a PaneLayoutOutput, including divider footprints if present."""

    def __init__(self) -> None:
        self._panes = PaneTableFormatter()

    def format(self, output: PaneLayoutOutput) -> str:
        if not output.is_valid:
            return "\n".join(["Errors:"] + [f"  - {e}" for e in output.errors])

        lines = [f"Opening: {output.width:g} x {output.height:g} mm", ""]
        if output.footprints:
            lines.append("Dividers:")
            for fp in output.footprints:
                r = fp.rect
                lines.append(
                    f"  {fp.divider_id:<8} {fp.kind.value:<10} "
                    f"x={r.x:g} y={r.y:g} w={r.width:g} h={r.height:g}"
                )
            lines.append("")
        lines.append(self._panes.format(output.panes))
        return "\n".join(lines)

    def format_json(self, output: PaneLayoutOutput) -> str:
        data: dict[str, Any] = {
            "width": output.width,
            "height": output.height,
            "errors": output.errors,
            "panes": [pane_to_dict(p) for p in output.panes],
            "footprints": [
                {
                    "divider_id": fp.divider_id,
                    "kind": fp.kind.value,
                    "x": fp.rect.x,
                    "y": fp.rect.y,
                    "width": fp.rect.width,
                    "height": fp.rect.height,
                }
                for fp in output.footprints
            ],
        }
        return json.dumps(data, indent=2)


class ElevationSummaryFormatter:
    """Formats an elevation as a human-readable summary.

    Lists every instance with its frame opening, then each glazed area by
    key with its sash, hinge side and the panes between glazing bars.
    """

    def format(self, output: ElevationOutput) -> str:
        lines: list[str] = []
        if output.errors:
            lines.append("Errors:")
            lines.extend(f"  - {e}" for e in output.errors)
        if output.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in output.warnings)
        if output.elevation is not None:
            if lines:
                lines.append("")
            lines.append(self.format_elevation(output.elevation))
        return "\n".join(lines)

    def format_elevation(self, elevation: Elevation) -> str:
        lines = [
            f"ITEM {elevation.item_id} ({elevation.item_type.value})",
            "=" * 66,
            f"Overall: {elevation.width:g} x {elevation.height:g} mm",
        ]
        for instance in elevation.instances:
            o = instance.opening
            lines.append("")
            lines.append(
                f"Instance {instance.instance_id}: "
                f"opening {o.width:g} x {o.height:g} mm at ({o.x:g}, {o.y:g})"
            )
            lines.append("-" * 66)
            for area in instance.glazed_areas:
                sash = area.sash_type.value if area.sash_type else "glass"
                hinge = f", hinged {area.hinge_side.value}" if area.hinge_side else ""
                lines.append(
                    f"  {area.key:<16} {sash}{hinge}: glass "
                    f"{area.glass.width:g} x {area.glass.height:g}, "
                    f"{len(area.panes)} pane(s)"
                )
        lines.append("-" * 66)
        lines.append(f"Total glass: {elevation.glass_area / MM2_PER_M2:.4f} m2")
        return "\n".join(lines)

    def format_json(self, output: ElevationOutput) -> str:
        data: dict[str, Any] = {
            "is_valid": output.is_valid,
            "errors": output.errors,
            "warnings": output.warnings,
            "elevation": (
                elevation_to_dict(output.elevation) if output.elevation else None
            ),
        }
        return json.dumps(data, indent=2)
