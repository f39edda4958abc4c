"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from joinery.application.config import ConfigError


class LayoutError(Exception):
    """Raised when a layout request is rejected by input or geometry checks."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(LayoutError)
    async def layout_error_handler(request: Request, exc: LayoutError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout failed",
                "error_type": "layout",
                "details": [{"message": e} for e in exc.errors],
            },
        )
