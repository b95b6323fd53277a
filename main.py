"""
Squeeze API Entry Point

This file serves as the main entry point for the application,
importing and running the FastAPI application defined in the squeeze package.

Run with uvicorn:
    uvicorn main:app --reload
"""
import logging
import sys

from squeeze import app
from squeeze.core.config import get_settings

settings = get_settings()

# Configure root logger
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format=LOG_FORMAT,
    stream=sys.stdout
)

# Set up logger
logger = logging.getLogger(__name__)

# Entry point for running with uvicorn
if __name__ == "__main__":
    import uvicorn

    logger.info(f"{settings.app_name} starting on {settings.host}:{settings.port} with {settings.workers} workers")

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        timeout_keep_alive=settings.timeout_keep_alive,
        log_level=settings.log_level.lower()
    )
