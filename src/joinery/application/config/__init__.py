"""Configuration schema and loading for quote item elevations.

Public API:
    - ElevationConfiguration: Root configuration model
    - LayoutSettingsConfig: Layout settings model
    - CasementItemConfig, DoorItemConfig, ScreenItemConfig, SashItemConfig:
      Item variants, discriminated on item_type
    - DividerConfig, GlazingBarConfig, PlacedSashConfig, WindowInstanceConfig
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Geometry checks producing a ValidationResult
    - config_to_item / config_to_settings: Convert to domain objects

Example:
    >>> from pathlib import Path
    >>> from joinery.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("casement.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from joinery.application.config.adapter import (
    config_to_divider,
    config_to_glazing_bars,
    config_to_item,
    config_to_settings,
)
from joinery.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from joinery.application.config.schema import (
    SUPPORTED_VERSIONS,
    CasementItemConfig,
    DividerConfig,
    DoorItemConfig,
    ElevationConfiguration,
    FrameProfileConfig,
    GlazingBarConfig,
    LayoutSettingsConfig,
    PlacedSashConfig,
    SashItemConfig,
    SashSectionsConfig,
    ScreenItemConfig,
    WindowInstanceConfig,
)
from joinery.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CasementItemConfig",
    "ConfigError",
    "DividerConfig",
    "DoorItemConfig",
    "ElevationConfiguration",
    "FrameProfileConfig",
    "GlazingBarConfig",
    "LayoutSettingsConfig",
    "PlacedSashConfig",
    "SashItemConfig",
    "SashSectionsConfig",
    "ScreenItemConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WindowInstanceConfig",
    "config_to_divider",
    "config_to_glazing_bars",
    "config_to_item",
    "config_to_settings",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
