"""Exporter protocol, format registry and multi-format export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from joinery.domain.entities import Elevation


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Something that turns a laid out elevation into a file.

    Attributes:
        format_name: Key the exporter is registered under.
        file_extension: Extension of written files, without the dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, elevation: Elevation, path: Path) -> None: ...

    def export_string(self, elevation: Elevation) -> str: ...


class ExporterRegistry:
    """Format name to exporter class lookup.

    Exporter modules register themselves on import:

        @ExporterRegistry.register("json")
        class JsonExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(
        cls, format_name: str
    ) -> Callable[[type[Exporter]], type[Exporter]]:
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"Format '{format_name}' re-registered: "
                    f"{previous.__name__} replaced by {exporter_class.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up the exporter class for a format.

        Raises:
            KeyError: If nothing is registered under the name.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            raise KeyError(
                f"Unknown export format '{format_name}'. "
                f"Available formats: {', '.join(cls.available_formats()) or 'none'}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes one elevation in several formats into a directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        elevation: Elevation,
        project_name: str | None = None,
    ) -> dict[str, Path]:
        """Export an elevation once per format.

        Every format is resolved before anything is written, so an unknown
        format leaves the directory untouched. Files are named
        "{project_name}_{format}.{ext}" with the item id as default name.

        Returns:
            Written path per format name.

        Raises:
            KeyError: If a format is not registered.
            OSError: If a file cannot be written.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stem = project_name or elevation.item_id

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.output_dir / f"{stem}_{name}.{exporter.file_extension}"
            exporter.export(elevation, path)
            logger.info(f"Exported {name} for item '{elevation.item_id}' to {path}")
            written[name] = path
        return written
