"""Tests for the configuration schema and the adapter to domain items."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from joinery.application.config import (
    CasementItemConfig,
    DividerConfig,
    ElevationConfiguration,
    GlazingBarConfig,
    PlacedSashConfig,
    SashItemConfig,
    config_to_item,
    config_to_settings,
)
from joinery.domain import (
    CasementItem,
    HingeSide,
    Orientation,
    SashType,
    SashWindowItem,
)


class TestElevationConfiguration:
    """Tests for the root configuration model."""

    def test_casement_discriminated(self, casement_config_data: dict[str, Any]) -> None:
        """item_type selects the casement variant."""
        config = ElevationConfiguration.model_validate(casement_config_data)

        assert isinstance(config.item, CasementItemConfig)
        assert config.item.mullions[0].offset == 540
        assert config.settings.coordinate_tolerance == 0.0

    def test_sash_discriminated(self, sash_config_data: dict[str, Any]) -> None:
        """item_type selects the sliding sash variant."""
        config = ElevationConfiguration.model_validate(sash_config_data)

        assert isinstance(config.item, SashItemConfig)

    def test_sash_item_rejects_mullions(self, sash_config_data: dict[str, Any]) -> None:
        """Sliding sash items have no mullions field."""
        sash_config_data["item"]["mullions"] = [{"id": "m1", "offset": 100}]

        with pytest.raises(ValidationError):
            ElevationConfiguration.model_validate(sash_config_data)

    def test_unknown_item_type(self, casement_config_data: dict[str, Any]) -> None:
        """An unknown item type fails validation."""
        casement_config_data["item"]["item_type"] = "skylight"

        with pytest.raises(ValidationError):
            ElevationConfiguration.model_validate(casement_config_data)

    def test_extra_fields_forbidden(self, casement_config_data: dict[str, Any]) -> None:
        """Unknown keys are rejected."""
        casement_config_data["item"]["colour"] = "white"

        with pytest.raises(ValidationError):
            ElevationConfiguration.model_validate(casement_config_data)

    @pytest.mark.parametrize("version", ["1.0", "1.1", "1.9"])
    def test_supported_versions(
        self, casement_config_data: dict[str, Any], version: str
    ) -> None:
        """Any minor version of a supported major is accepted."""
        casement_config_data["schema_version"] = version

        assert ElevationConfiguration.model_validate(casement_config_data)

    @pytest.mark.parametrize("version", ["2.0", "1", "v1.0"])
    def test_unsupported_versions(
        self, casement_config_data: dict[str, Any], version: str
    ) -> None:
        """Other majors and malformed versions are rejected."""
        casement_config_data["schema_version"] = version

        with pytest.raises(ValidationError):
            ElevationConfiguration.model_validate(casement_config_data)

    def test_duplicate_instance_ids(self, casement_config_data: dict[str, Any]) -> None:
        """Instance ids must be unique since pane keys are built from them."""
        instance = casement_config_data["item"]["instances"][0]
        casement_config_data["item"]["instances"] = [instance, dict(instance)]

        with pytest.raises(ValidationError, match="Duplicate instance id"):
            ElevationConfiguration.model_validate(casement_config_data)

    def test_divider_unknown_instance(self, casement_config_data: dict[str, Any]) -> None:
        """Dividers can only be bound to configured instances."""
        casement_config_data["item"]["mullions"][0]["instance_id"] = "Z"

        with pytest.raises(ValidationError, match="unknown instance 'Z'"):
            ElevationConfiguration.model_validate(casement_config_data)

    def test_tolerance_bounds(self, casement_config_data: dict[str, Any]) -> None:
        """Coordinate tolerance must be between 0 and 5 mm."""
        casement_config_data["settings"] = {"coordinate_tolerance": 10}

        with pytest.raises(ValidationError):
            ElevationConfiguration.model_validate(casement_config_data)


class TestDividerConfig:
    """Tests for DividerConfig."""

    def test_reversed_span_rejected(self) -> None:
        """start must be less than end."""
        with pytest.raises(ValidationError, match="must be less than end"):
            DividerConfig(id="m1", offset=500, start=600, end=200)

    def test_offset_must_be_positive(self) -> None:
        """Offsets are measured from the opening edge and must be positive."""
        with pytest.raises(ValidationError):
            DividerConfig(id="m1", offset=0)


class TestEnumFields:
    """Tests for enum-valued configuration fields."""

    def test_domain_enums_parsed(self) -> None:
        """Kind, sash type and hinge side parse into the domain enums."""
        sash = PlacedSashConfig.model_validate(
            {
                "pane_id": "A-0-0",
                "type": "door-sash",
                "hinge_side": "left",
                "glazing_bars": [{"id": "h1", "kind": "horizontal"}],
            }
        )

        assert sash.type is SashType.DOOR_SASH
        assert sash.hinge_side is HingeSide.LEFT
        assert sash.glazing_bars[0].kind is Orientation.HORIZONTAL

    def test_unknown_kind_rejected(self) -> None:
        """Only vertical and horizontal bars exist."""
        with pytest.raises(ValidationError):
            GlazingBarConfig.model_validate({"id": "b1", "kind": "diagonal"})


class TestConfigToItem:
    """Tests for converting configuration to domain items."""

    def test_casement_item(self, casement_config_data: dict[str, Any]) -> None:
        """A casement configuration becomes a CasementItem."""
        config = ElevationConfiguration.model_validate(casement_config_data)

        item = config_to_item(config)

        assert isinstance(item, CasementItem)
        assert item.frame.mullion == 80
        assert item.mullions[0].kind is Orientation.VERTICAL
        assert item.mullions[0].span_end is None
        assert item.placed_sashes[0].sash_type is SashType.CASEMENT
        assert item.placed_sashes[0].hinge_side is HingeSide.RIGHT

    def test_transoms_are_horizontal(self, casement_config_data: dict[str, Any]) -> None:
        """Entries of the transoms list become horizontal dividers."""
        casement_config_data["item"]["transoms"] = [
            {"id": "t1", "offset": 400, "start": 0, "end": 500, "thickness": 60}
        ]
        config = ElevationConfiguration.model_validate(casement_config_data)

        transom = config_to_item(config).transoms[0]

        assert transom.kind is Orientation.HORIZONTAL
        assert (transom.span_start, transom.span_end, transom.thickness) == (0, 500, 60)

    def test_sash_item(self, sash_config_data: dict[str, Any]) -> None:
        """A sash configuration becomes a SashWindowItem with its bars."""
        config = ElevationConfiguration.model_validate(sash_config_data)

        item = config_to_item(config)

        assert isinstance(item, SashWindowItem)
        assert item.instances[0].top_sash_glazing_bars[0].kind is Orientation.VERTICAL
        assert item.glazing_bar_thickness == 20

    def test_settings(self, casement_config_data: dict[str, Any]) -> None:
        """Layout settings are carried over."""
        casement_config_data["settings"] = {"coordinate_tolerance": 0.5}
        config = ElevationConfiguration.model_validate(casement_config_data)

        assert config_to_settings(config).coordinate_tolerance == 0.5
