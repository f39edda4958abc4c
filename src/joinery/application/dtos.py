"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from joinery.domain import (
    Divider,
    DividerFootprint,
    Elevation,
    GlazingBar,
    MemberThickness,
    Orientation,
    Pane,
)

# Largest opening accepted from direct input, in mm
MAX_OPENING_MM = 10000.0


@dataclass
class OpeningInput:
    """Input DTO for decomposing a single opening.

    Dividers given here always span the full opening; partial spans come
    from configuration files.
    """

    width: float
    height: float
    mullions: list[float] = field(default_factory=list)
    transoms: list[float] = field(default_factory=list)
    mullion_thickness: float = 0.0
    transom_thickness: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.width > MAX_OPENING_MM:
            errors.append(f"Width exceeds maximum ({MAX_OPENING_MM:.0f} mm)")
        if self.height > MAX_OPENING_MM:
            errors.append(f"Height exceeds maximum ({MAX_OPENING_MM:.0f} mm)")
        if self.mullion_thickness < 0:
            errors.append("Mullion thickness cannot be negative")
        if self.transom_thickness < 0:
            errors.append("Transom thickness cannot be negative")
        return errors

    def to_dividers(self) -> list[Divider]:
        mullions = [
            Divider(f"m{i + 1}", Orientation.VERTICAL, offset)
            for i, offset in enumerate(self.mullions)
        ]
        transoms = [
            Divider(f"t{i + 1}", Orientation.HORIZONTAL, offset)
            for i, offset in enumerate(self.transoms)
        ]
        return mullions + transoms

    def to_member_thickness(self) -> MemberThickness:
        return MemberThickness(self.mullion_thickness, self.transom_thickness)


@dataclass
class SashInput:
    """Input DTO for subdividing a sash's glass by glazing bar counts."""

    width: float
    height: float
    vertical_bars: int = 0
    horizontal_bars: int = 0
    bar_thickness: float = 0.0

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.vertical_bars < 0 or self.horizontal_bars < 0:
            errors.append("Glazing bar counts cannot be negative")
        if self.bar_thickness < 0:
            errors.append("Bar thickness cannot be negative")
        return errors

    def to_glazing_bars(self) -> list[GlazingBar]:
        bars = [
            GlazingBar(f"v{i + 1}", Orientation.VERTICAL, float(i + 1))
            for i in range(self.vertical_bars)
        ]
        bars.extend(
            GlazingBar(f"h{i + 1}", Orientation.HORIZONTAL, float(i + 1))
            for i in range(self.horizontal_bars)
        )
        return bars


@dataclass
class PaneLayoutOutput:
    """Output DTO for opening decomposition and sash subdivision.

    Attributes:
        width: Width of the area that was laid out.
        height: Height of the area that was laid out.
        panes: Resulting panes. May be empty for degenerate geometry.
        footprints: Divider footprints (decomposition only).
        errors: Input errors; panes are empty when present.
    """

    width: float
    height: float
    panes: list[Pane] = field(default_factory=list)
    footprints: list[DividerFootprint] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def glass_area(self) -> float:
        return sum(p.area for p in self.panes)


@dataclass
class ElevationOutput:
    """Output DTO for a quote item elevation.

    Attributes:
        elevation: The laid out elevation, None when validation failed.
        errors: Blocking validation errors.
        warnings: Advisory warnings from validation.
    """

    elevation: Elevation | None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0
