"""Domain services for frame and pane layout.

This package provides:
- Pane decomposition of divided frame openings
- Glazing-bar subdivision of sash glass
- Elevation layout of complete quote items
- Even redistribution of dividers and remapping of placed sashes
"""

from .coordinates import clamp, unique_sorted
from .elevation import ElevationLayoutService, hinge_marker
from .pane_decomposer import CellState, DividerFootprint, PaneDecomposer, decompose
from .redistribution import PaneRedistributor, distribute_evenly, remap_placed_sashes
from .sash_subdivider import SashSubdivider, subdivide

__all__ = [
    "CellState",
    "DividerFootprint",
    "ElevationLayoutService",
    "PaneDecomposer",
    "PaneRedistributor",
    "SashSubdivider",
    "clamp",
    "decompose",
    "distribute_evenly",
    "hinge_marker",
    "remap_placed_sashes",
    "subdivide",
    "unique_sorted",
]
