"""Pytest configuration and shared fixtures for layout tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

# JSON configuration files shared by loader, CLI and API tests
CONFIGS_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture
def configs_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return CONFIGS_PATH


@pytest.fixture
def casement_config_data() -> dict[str, Any]:
    """Single casement instance with a mullion and one hinged sash.

    Inner opening is 1080 x 1060; the 80 mm mullion at 540 leaves two
    500 mm wide panes, "A-0-0" (plain glass) and "A-0-1" (casement).
    """
    return {
        "schema_version": "1.0",
        "item": {
            "id": "W1",
            "item_type": "casement",
            "instances": [{"id": "A", "overall_width": 1200, "overall_height": 1200}],
            "frame": {
                "head": 60,
                "cill": 80,
                "left_jamb": 60,
                "right_jamb": 60,
                "mullion": 80,
                "transom": 80,
            },
            "sash": {"head": 50, "stile": 50, "bottom_rail": 70},
            "mullions": [{"id": "m1", "offset": 540}],
            "placed_sashes": [
                {"pane_id": "A-0-1", "type": "casement", "hinge_side": "right"}
            ],
        },
    }


@pytest.fixture
def sash_config_data() -> dict[str, Any]:
    """Sliding sash window with one vertical bar in the top sash."""
    return {
        "schema_version": "1.0",
        "item": {
            "id": "S1",
            "item_type": "sash",
            "instances": [
                {
                    "id": "A",
                    "overall_width": 1000,
                    "overall_height": 1600,
                    "top_sash_glazing_bars": [{"id": "v1", "kind": "vertical"}],
                }
            ],
            "frame": {"head": 50, "cill": 50, "left_jamb": 50, "right_jamb": 50},
            "sash": {"head": 50, "stile": 50, "bottom_rail": 90, "meeting_stile": 40},
            "glazing_bar_thickness": 20,
        },
    }
