"""FastAPI REST API for pane layout.

Usage:
    uvicorn joinery.web:app --reload
"""

from joinery.web.app import app, create_app

__all__ = ["app", "create_app"]
