"""Validation of quote item configurations beyond the schema.

The schema guarantees well-formed values. These checks look at the geometry
those values produce: openings swallowed by frame members, dividers that the
layout engine will ignore, sashes placed into panes that do not exist, and
glazing bars that leave no glass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from joinery.application.config.adapter import config_to_item, config_to_settings
from joinery.application.config.schema import ElevationConfiguration
from joinery.domain.entities import Elevation
from joinery.domain.items import DividedItem, QuoteItem, SashWindowItem
from joinery.domain.services import ElevationLayoutService, clamp
from joinery.domain.value_objects import Orientation


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "item.instances[0].overall_width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: Blocking problems.
        warnings: Advisory problems.
        elevation: The layout produced while checking, or None when the
            openings were already invalid.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    elevation: Elevation | None = None

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def validate_config(
    config: ElevationConfiguration,
    layout_service: ElevationLayoutService | None = None,
) -> ValidationResult:
    """Run geometry checks on a schema-valid configuration.

    The checks lay the item out once; the elevation is kept on the result so
    callers do not lay it out again.

    Args:
        config: A configuration that passed schema validation.
        layout_service: Service to lay the item out with. Defaults to one
            built from the configuration's settings.

    Returns:
        ValidationResult with blocking errors and advisory warnings.
    """
    result = ValidationResult()
    item = config_to_item(config)

    _check_openings(item, result)
    if not result.is_valid:
        return result

    service = layout_service or ElevationLayoutService(config_to_settings(config))
    elevation = service.layout(item)
    result.elevation = elevation

    if isinstance(item, SashWindowItem):
        _check_sliding_sashes(elevation, result)
    else:
        _check_dividers(item, result)
        _check_placed_sashes(item, elevation, result)
        if any(inst.top_sash_height is not None for inst in item.instances):
            result.add_warning(
                "item.instances",
                "top_sash_height only applies to sliding sash items and is ignored",
            )
    return result


def _check_openings(item: QuoteItem, result: ValidationResult) -> None:
    frame = item.effective_frame
    for i, inst in enumerate(item.instances):
        if inst.overall_width - frame.left_jamb - frame.right_jamb <= 0:
            result.add_error(
                f"item.instances[{i}].overall_width",
                "Frame jambs leave no opening",
                inst.overall_width,
            )
        if inst.overall_height - frame.head - frame.cill <= 0:
            result.add_error(
                f"item.instances[{i}].overall_height",
                "Frame head and cill leave no opening",
                inst.overall_height,
            )


def _check_sliding_sashes(elevation: Elevation, result: ValidationResult) -> None:
    for i, inst in enumerate(elevation.instances):
        for area in inst.glazed_areas:
            if not area.panes:
                result.add_error(
                    f"item.instances[{i}]",
                    f"Sash '{area.key}' has no glass: sash members or glazing "
                    f"bars fill its whole area",
                )


def _check_dividers(item: DividedItem, result: ValidationResult) -> None:
    frame = item.effective_frame
    lists = (("mullions", item.mullions), ("transoms", item.transoms))
    for list_name, dividers in lists:
        for j, divider in enumerate(dividers):
            for inst in item.instances:
                if not divider.applies_to(inst.id):
                    continue
                if divider.kind is Orientation.VERTICAL:
                    across = inst.overall_width - frame.left_jamb - frame.right_jamb
                    along = inst.overall_height - frame.head - frame.cill
                else:
                    across = inst.overall_height - frame.head - frame.cill
                    along = inst.overall_width - frame.left_jamb - frame.right_jamb

                path = f"item.{list_name}[{j}]"
                start = clamp(
                    divider.span_start if divider.span_start is not None else 0.0,
                    0.0,
                    along,
                )
                end = clamp(
                    divider.span_end if divider.span_end is not None else along,
                    0.0,
                    along,
                )
                if not 0 < divider.offset < across:
                    result.add_warning(
                        f"{path}.offset",
                        f"Offset {divider.offset} is outside the opening of "
                        f"instance '{inst.id}' (0, {across}); the divider is ignored",
                        suggestion="Set instance_id or move the divider inside the opening",
                    )
                elif start >= end:
                    result.add_warning(
                        f"{path}.start",
                        f"Span {divider.span_start}..{divider.span_end} leaves nothing "
                        f"inside the opening of instance '{inst.id}' (0, {along}); "
                        f"the divider is ignored",
                        suggestion="Keep start below end and inside the opening",
                    )
                elif divider.span_end is not None and divider.span_end > along:
                    result.add_warning(
                        f"{path}.end",
                        f"End {divider.span_end} extends past the opening of "
                        f"instance '{inst.id}' and is clamped to {along}",
                    )


def _check_placed_sashes(
    item: DividedItem, elevation: Elevation, result: ValidationResult
) -> None:
    seen: set[str] = set()
    for k, sash in enumerate(item.placed_sashes):
        path = f"item.placed_sashes[{k}]"
        if sash.pane_id in seen:
            result.add_error(
                f"{path}.pane_id", "More than one sash placed in the same pane", sash.pane_id
            )
            continue
        seen.add(sash.pane_id)

        area = elevation.find_area(sash.pane_id)
        if area is None:
            result.add_warning(
                f"{path}.pane_id",
                f"Pane '{sash.pane_id}' does not exist in the layout; the sash is not drawn",
                suggestion="Pane ids are '{instance_id}-{row}-{col}'",
            )
        elif not area.panes:
            result.add_warning(
                f"{path}.glazing_bars",
                f"Sash in pane '{sash.pane_id}' has no glass left after sash "
                f"members and glazing bars",
            )
