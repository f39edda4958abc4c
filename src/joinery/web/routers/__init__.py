"""API routers for the REST API."""

from joinery.web.routers.layout import router as layout_router
from joinery.web.routers.panes import router as panes_router
from joinery.web.routers.validate import router as validate_router

__all__ = [
    "layout_router",
    "panes_router",
    "validate_router",
]
