"""FastAPI dependency injection for layout commands."""

from typing import Annotated

from fastapi import Depends

from joinery.application.commands import (
    DecomposeOpeningCommand,
    LayoutItemCommand,
    SubdivideSashCommand,
)


def get_decompose_command() -> DecomposeOpeningCommand:
    return DecomposeOpeningCommand()


def get_subdivide_command() -> SubdivideSashCommand:
    return SubdivideSashCommand()


def get_layout_command() -> LayoutItemCommand:
    """Layout command using the settings from each configuration."""
    return LayoutItemCommand()


# Type aliases for cleaner endpoint signatures
DecomposeCommandDep = Annotated[DecomposeOpeningCommand, Depends(get_decompose_command)]
SubdivideCommandDep = Annotated[SubdivideSashCommand, Depends(get_subdivide_command)]
LayoutCommandDep = Annotated[LayoutItemCommand, Depends(get_layout_command)]
