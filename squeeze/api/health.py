"""
Health check endpoints.
"""
import time
import logging
import platform

from fastapi import APIRouter, Request
from PIL import Image, features

from squeeze.models import HealthResponse
from squeeze.utils.file_handling import is_writable
from squeeze.utils.metrics import get_cpu_mem, get_disk_status

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
async def health_check(request: Request):
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=request.app.state.settings.app_version)


@router.get("/detailed")
async def detailed_health_check(request: Request):
    """
    Provides detailed health information including system metrics, codec
    availability and the state of the output directory.
    """
    settings = request.app.state.settings
    output_dir = request.app.state.output_dir

    system_info = {
        **get_cpu_mem(),
        "python_version": platform.python_version(),
        "platform": platform.platform()
    }

    codec_status = {
        "jpeg_encoder": "JPEG" in Image.SAVE,
        "libjpeg_version": features.version("jpg"),
        "decoders": list(getattr(request.app.state, "decoders", ())),
    }

    storage_status = {"path": str(output_dir), "exists": output_dir.is_dir()}
    if storage_status["exists"]:
        storage_status["writable"] = is_writable(output_dir)
        try:
            storage_status.update(get_disk_status(output_dir))
        except OSError as e:
            logger.warning(f"Could not read disk usage for {output_dir}: {e}")
            storage_status["space_error"] = str(e)

    return {
        "status": "healthy",
        "version": settings.app_version,
        "system": system_info,
        "codecs": codec_status,
        "output_directory": storage_status,
        "timestamp": time.time()
    }
