"""Exporters for laid out elevations.

Importing this package registers every built-in exporter with the
ExporterRegistry.
"""

from joinery.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from joinery.infrastructure.exporters.glass_schedule import (
    GlassScheduleExporter,
    GlassSize,
    glass_schedule,
)
from joinery.infrastructure.exporters.json_exporter import (
    JsonExporter,
    elevation_to_dict,
    pane_to_dict,
)

__all__ = [
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "GlassScheduleExporter",
    "GlassSize",
    "JsonExporter",
    "elevation_to_dict",
    "glass_schedule",
    "pane_to_dict",
]
