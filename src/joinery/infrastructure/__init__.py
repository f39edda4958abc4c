"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    GlassScheduleExporter,
    JsonExporter,
    elevation_to_dict,
    glass_schedule,
    pane_to_dict,
)
from .formatters import (
    ElevationSummaryFormatter,
    PaneLayoutFormatter,
    PaneTableFormatter,
)

__all__ = [
    "ElevationSummaryFormatter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "GlassScheduleExporter",
    "JsonExporter",
    "PaneLayoutFormatter",
    "PaneTableFormatter",
    "elevation_to_dict",
    "glass_schedule",
    "pane_to_dict",
]
