"""Command-line interface for the joinery layout engine."""

from joinery.cli.main import app

__all__ = ["app"]
