"""
API module for the Squeeze image compression service.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from squeeze.api.compress import router as compress_router
from squeeze.api.cors import CrossOriginMiddleware
from squeeze.api.health import router as health_router
from squeeze.core.config import Settings, get_settings
from squeeze.core.exceptions import SqueezeError
from squeeze.core.jpeg import register_codecs
from squeeze.models import CompressionResult
from squeeze.utils.file_handling import ensure_output_dir

# Set up logging
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register codecs and create the output directory before serving."""
    settings: Settings = app.state.settings
    app.state.decoders = register_codecs(settings.decoder_formats)
    ensure_output_dir(app.state.output_dir)
    logger.info(
        f"{settings.app_name} ready: output directory {app.state.output_dir}, "
        f"CORS origin {settings.cors_origin}"
    )
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around a single ``Settings`` instance.

    Args:
        settings: Configuration to use; read from the environment if omitted

    Returns:
        The configured application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Re-encodes uploaded JPEG and PNG images as JPEG and reports the size savings.",
        version=settings.app_version,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.output_dir = Path(settings.output_dir).resolve()

    app.add_middleware(
        CrossOriginMiddleware,
        allow_origin=settings.cors_origin,
        paths=("/api/compress", "/download/"),
    )

    app.include_router(compress_router)
    app.include_router(health_router)

    # Directory is created during startup
    app.mount(
        "/download",
        StaticFiles(directory=app.state.output_dir, check_dir=False),
        name="download"
    )

    @app.exception_handler(SqueezeError)
    async def squeeze_error_handler(request: Request, exc: SqueezeError):
        return JSONResponse(
            status_code=exc.status_code,
            content=CompressionResult(success=False, message=exc.message).to_payload()
        )

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return PlainTextResponse("Method not allowed", status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unexpected errors."""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=CompressionResult(success=False, message="An unexpected error occurred").to_payload()
        )

    @app.get("/", response_model=CompressionResult, response_model_exclude_none=True)
    async def root():
        """
        Static welcome payload.

        Served on ``/`` only; any other unmatched path gets the regular 404
        rather than this payload.
        """
        return CompressionResult(success=True, message=f"Welcome to {settings.app_name}")

    return app


app = create_app()
