"""Configuration file loader with error reporting.

Loads JSON quote item configurations and turns file system, JSON and
Pydantic validation failures into a single ConfigError carrying JSON-path
formatted details.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from joinery.application.config.schema import ElevationConfiguration

logger = logging.getLogger(__name__)

# Discriminator tags pydantic inserts into error locations of the item union
_ITEM_TAGS = frozenset({"sash", "casement", "door", "screen"})


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    The discriminator tag that follows ``item`` is dropped, since it does not
    appear in the document.

    Examples:
        >>> _format_json_path(("item", "casement", "mullions", 0, "offset"))
        'item.mullions[0].offset'
        >>> _format_json_path(("schema_version",))
        'schema_version'
    """
    parts: list[str] = []
    previous: str | int | None = None
    for segment in loc:
        if previous == "item" and segment in _ITEM_TAGS:
            previous = segment
            continue
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
        previous = segment
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten Pydantic errors into path/message/value/error_type dicts."""
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        # Whole-object inputs are too noisy to echo back
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> ElevationConfiguration:
    try:
        return ElevationConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> ElevationConfiguration:
    """Load and validate a quote item configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ElevationConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which.

    Example:
        >>> try:
        ...     config = load_config(Path("casement.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug(f"Loaded {config.item.item_type} item '{config.item.id}' from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> ElevationConfiguration:
    """Load and validate a configuration from a dictionary.

    Used for API requests and programmatic configuration.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
