"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from joinery import __version__
from joinery.web.exceptions import register_exception_handlers
from joinery.web.routers import layout_router, panes_router, validate_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Joinery Layout API",
        description="REST API for laying out glass panes and sashes in windows and doors",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Renderers run in the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(panes_router, prefix="/api/v1")
    app.include_router(layout_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
