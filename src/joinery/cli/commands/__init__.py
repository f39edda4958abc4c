"""CLI command implementations for the joinery application."""

from joinery.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
