"""Layout settings passed explicitly to the engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutSettings:
    """Settings shared by every layout computation.

    Attributes:
        coordinate_tolerance: Cut lines closer than this (mm) are treated as
            the same line. The default of 0.0 deduplicates by exact equality,
            which requires callers to avoid float noise (for example by laying
            out in millimetres and scaling the result afterwards).
    """

    coordinate_tolerance: float = 0.0

    def __post_init__(self) -> None:
        if self.coordinate_tolerance < 0:
            raise ValueError("coordinate_tolerance cannot be negative")
