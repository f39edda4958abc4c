"""Application layer - use cases and orchestration."""

from .commands import DecomposeOpeningCommand, LayoutItemCommand, SubdivideSashCommand
from .dtos import ElevationOutput, OpeningInput, PaneLayoutOutput, SashInput

__all__ = [
    "DecomposeOpeningCommand",
    "ElevationOutput",
    "LayoutItemCommand",
    "OpeningInput",
    "PaneLayoutOutput",
    "SashInput",
    "SubdivideSashCommand",
]
