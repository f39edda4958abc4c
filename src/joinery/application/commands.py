"""Application commands (use cases) for pane layout."""

from __future__ import annotations

import logging

from joinery.application.config import ElevationConfiguration, validate_config
from joinery.domain import ElevationLayoutService, PaneDecomposer, SashSubdivider

from .dtos import ElevationOutput, OpeningInput, PaneLayoutOutput, SashInput

logger = logging.getLogger(__name__)


class DecomposeOpeningCommand:
    """Command to split one frame opening into glass panes."""

    def __init__(self, decomposer: PaneDecomposer | None = None) -> None:
        self.decomposer = decomposer or PaneDecomposer()

    def execute(self, opening: OpeningInput) -> PaneLayoutOutput:
        """Execute the decomposition.

        Args:
            opening: Opening size, divider offsets and default thicknesses.

        Returns:
            PaneLayoutOutput with panes and divider footprints, or errors.
        """
        output = PaneLayoutOutput(width=opening.width, height=opening.height)
        output.errors = opening.validate()
        if output.errors:
            return output

        output.footprints, output.panes = self.decomposer.decompose_with_footprints(
            opening.width,
            opening.height,
            opening.to_dividers(),
            opening.to_member_thickness(),
        )
        return output


class SubdivideSashCommand:
    """Command to split a sash's glass area between glazing bars."""

    def __init__(self, subdivider: SashSubdivider | None = None) -> None:
        self.subdivider = subdivider or SashSubdivider()

    def execute(self, sash: SashInput) -> PaneLayoutOutput:
        output = PaneLayoutOutput(width=sash.width, height=sash.height)
        output.errors = sash.validate()
        if output.errors:
            return output

        output.panes = self.subdivider.subdivide(
            sash.width, sash.height, sash.to_glazing_bars(), sash.bar_thickness
        )
        return output


class LayoutItemCommand:
    """Command to lay out the full elevation of a configured quote item."""

    def __init__(self, layout_service: ElevationLayoutService | None = None) -> None:
        self.layout_service = layout_service

    def execute(self, config: ElevationConfiguration) -> ElevationOutput:
        """Validate a configuration and lay out its item.

        Validation lays the item out once. Geometry errors stop there;
        warnings are passed through alongside the elevation.

        Args:
            config: A schema-valid configuration.

        Returns:
            ElevationOutput with the elevation or the blocking errors.
        """
        validation = validate_config(config, self.layout_service)
        warnings = [f"{w.path}: {w.message}" for w in validation.warnings]
        if not validation.is_valid:
            return ElevationOutput(
                elevation=None,
                errors=[f"{e.path}: {e.message}" for e in validation.errors],
                warnings=warnings,
            )

        elevation = validation.elevation
        logger.info(
            f"Item '{elevation.item_id}' laid out: "
            f"{len(elevation.glazed_areas)} glazed area(s), "
            f"{elevation.glass_area / 1_000_000:.3f} m2 glass"
        )
        return ElevationOutput(elevation=elevation, warnings=warnings)
