"""JSON exporter for elevations.

The JSON document is the hand-off format for renderers: every rectangle is
absolute millimetres in the elevation, pane ids are kept as produced by the
layout engine so glass types and sashes can be matched by key.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar

from joinery.domain.entities import Elevation, GlazedArea, InstanceElevation
from joinery.domain.value_objects import Pane, Rect
from joinery.infrastructure.exporters.base import ExporterRegistry

__all__ = [
    "JsonExporter",
    "elevation_to_dict",
    "pane_to_dict",
]


def _rect_to_dict(rect: Rect) -> dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def pane_to_dict(pane: Pane) -> dict[str, Any]:
    return {
        "id": pane.id,
        "x": pane.x,
        "y": pane.y,
        "width": pane.width,
        "height": pane.height,
    }


def _area_to_dict(area: GlazedArea) -> dict[str, Any]:
    return {
        "key": area.key,
        "outline": _rect_to_dict(area.outline),
        "glass": _rect_to_dict(area.glass),
        "sash_type": area.sash_type.value if area.sash_type else None,
        "hinge_side": area.hinge_side.value if area.hinge_side else None,
        "hinge_marker": [[p.x, p.y] for p in area.hinge_marker],
        "panes": [pane_to_dict(p) for p in area.panes],
    }


def _instance_to_dict(instance: InstanceElevation) -> dict[str, Any]:
    return {
        "instance_id": instance.instance_id,
        "outline": _rect_to_dict(instance.outline),
        "opening": _rect_to_dict(instance.opening),
        "members": [
            {
                "kind": m.kind.value,
                "member_id": m.member_id,
                **_rect_to_dict(m.rect),
            }
            for m in instance.members
        ],
        "openings": [pane_to_dict(p) for p in instance.openings],
        "glazed_areas": [_area_to_dict(a) for a in instance.glazed_areas],
    }


def elevation_to_dict(elevation: Elevation) -> dict[str, Any]:
    """Convert an elevation to JSON-compatible primitives."""
    return {
        "item_id": elevation.item_id,
        "item_type": elevation.item_type.value,
        "width": elevation.width,
        "height": elevation.height,
        "glass_area_m2": round(elevation.glass_area / 1_000_000, 4),
        "instances": [_instance_to_dict(i) for i in elevation.instances],
    }


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports an elevation as an indented JSON document."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, elevation: Elevation, path: Path) -> None:
        path.write_text(self.export_string(elevation), encoding="utf-8")

    def export_string(self, elevation: Elevation) -> str:
        return json.dumps(elevation_to_dict(elevation), indent=self.indent)
