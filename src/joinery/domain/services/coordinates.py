"""Coordinate helpers shared by the pane decomposer and sash subdivider."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "clamp",
    "unique_sorted",
]


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into the closed range [lower, upper]."""
    return max(lower, min(upper, value))


def unique_sorted(values: Iterable[float], tolerance: float = 0.0) -> list[float]:
    """Sort coordinates ascending and drop duplicates.

    With the default tolerance of 0.0 only exactly equal values collapse.
    With a positive tolerance, a value within ``tolerance`` of the previously
    kept value joins that cluster. Clusters keep their first value, except
    that the largest input always survives, so both ends of a seeded range
    (for example ``0`` and the opening width) are preserved.

    Args:
        values: Coordinates in any order, possibly repeated.
        tolerance: Maximum gap, in the same units, treated as a duplicate.

    Returns:
        Strictly increasing list of coordinates.

    Example:
        >>> unique_sorted([1000, 0, 450, 550, 450])
        [0, 450, 550, 1000]
    """
    ordered = sorted(values)
    result: list[float] = []
    for value in ordered:
        if not result or value - result[-1] > tolerance:
            result.append(value)
        elif value == ordered[-1] and len(result) > 1:
            result[-1] = value
    return result
