"""
JPEG compression endpoint.

Accepts a multipart upload, re-encodes it as JPEG at the requested quality,
stores the result in the output directory and reports the size savings.
"""
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import ClientDisconnect

from squeeze.core.config import Settings
from squeeze.core.exceptions import StorageError, UploadError
from squeeze.core.jpeg import decode_image, encode_jpeg
from squeeze.models import CompressionResult
from squeeze.utils.file_handling import output_file
from squeeze.utils.metrics import PerformanceTimer, calculate_savings

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Compression"])


MAX_INT64 = 2 ** 63 - 1


def parse_quality(raw: Any, default: int) -> int:
    """
    Integer quality from a form value; missing, non-numeric or < 1 gives ``default``.

    Only an optional sign followed by ASCII digits counts as numeric, so
    whitespace, underscores and non-ASCII digits fall back to ``default``,
    as do values outside the signed 64-bit range.
    """
    if not isinstance(raw, str):
        return default
    digits = raw[1:] if raw.startswith(("+", "-")) else raw
    if not (digits.isascii() and digits.isdigit()):
        return default

    quality = int(raw)
    if quality < 1 or quality > MAX_INT64:
        return default
    return quality


def compress_bytes(
    data: bytes,
    quality: int,
    settings: Settings,
    decoders: Iterable[str],
    output_dir: Path
) -> CompressionResult:
    """
    Decode ``data``, write it as JPEG into ``output_dir`` and measure the result.

    Runs synchronously; callers on the event loop should push it to a thread.
    """
    original_size = len(data)
    image, source_format = decode_image(data, decoders)

    with output_file(output_dir) as (path, handle):
        encode_jpeg(image, handle, quality)

    try:
        compressed_size = path.stat().st_size
    except OSError as e:
        logger.error(f"Failed to stat output file {path}: {e}")
        raise StorageError("Failed to read output file") from e

    return CompressionResult(
        success=True,
        original_size=original_size,
        compressed_size=compressed_size,
        savings=calculate_savings(original_size, compressed_size),
        download_url=settings.download_url(path.name),
        format=source_format,
    )


async def read_upload(request: Request, max_memory: int) -> Tuple[bytes, Optional[str], Any]:
    """
    Parse the multipart body and return (image bytes, image filename, raw quality).

    Raises:
        UploadError: If the body cannot be parsed or carries no ``image`` file
    """
    try:
        form = await request.form(max_part_size=max_memory)
    except (MultiPartException, StarletteHTTPException, ClientDisconnect) as e:
        logger.warning(f"Failed to parse multipart body: {e}")
        raise UploadError("Failed to upload image") from e

    upload = form.get("image")
    if not isinstance(upload, UploadFile):
        raise UploadError("Failed to upload image")

    data = await upload.read()
    await upload.close()
    return data, upload.filename, form.get("quality")


@router.post(
    "/compress",
    response_model=CompressionResult,
    response_model_exclude_none=True,
)
async def compress_image(request: Request):
    """
    Compress an uploaded image to JPEG.

    - **image**: The image file to compress (JPEG or PNG)
    - **quality**: JPEG quality, default 75; values below 1 or non-numeric fall back to the default

    Returns:
        Original and compressed sizes, percentage savings, download URL and source format
    """
    settings: Settings = request.app.state.settings

    data, filename, raw_quality = await read_upload(request, settings.max_upload_memory)
    if not data:
        raise UploadError("Failed to upload image: empty file")

    quality = parse_quality(raw_quality, settings.default_quality)
    logger.info(f"Compressing image {filename} ({len(data)} bytes) at quality {quality}")

    with PerformanceTimer() as timer:
        result = await run_in_threadpool(
            compress_bytes,
            data,
            quality,
            settings,
            request.app.state.decoders,
            request.app.state.output_dir,
        )

    logger.info(
        f"Compressed {filename} from {result.original_size} to {result.compressed_size} bytes "
        f"(savings: {result.savings:.2f}%) in {timer.execution_time:.3f}s"
    )
    return result
