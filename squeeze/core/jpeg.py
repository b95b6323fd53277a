"""
JPEG re-encoding on top of Pillow.

Decoding sniffs the uploaded bytes against the registered decoder set only;
encoding always produces baseline JPEG at the requested quality.
"""
import logging
from io import BytesIO
from typing import BinaryIO, Iterable, Tuple

from PIL import Image

from squeeze.core.exceptions import DecodeError, EncodeError

# Set up logging
logger = logging.getLogger(__name__)

# Modes the JPEG encoder writes without conversion
JPEG_MODES = {"1", "L", "RGB", "RGBX", "CMYK", "YCbCr"}

# Errors Pillow raises for bytes it cannot identify or fully decode
PIL_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


def register_codecs(formats: Iterable[str]) -> Tuple[str, ...]:
    """
    Load Pillow's plugins and check the requested decoders are available.

    Args:
        formats: Pillow format names to accept on upload (e.g. "JPEG", "PNG")

    Returns:
        The normalized, upper-case format names

    Raises:
        RuntimeError: If a decoder or the JPEG encoder is missing
    """
    Image.init()

    registered = tuple(fmt.upper() for fmt in formats)
    missing = [fmt for fmt in registered if fmt not in Image.OPEN]
    if missing:
        raise RuntimeError(f"Pillow has no decoder for: {', '.join(missing)}")
    if "JPEG" not in Image.SAVE:
        raise RuntimeError("Pillow was built without a JPEG encoder")

    logger.info(f"Registered image decoders: {', '.join(registered)}")
    return registered


def decode_image(data: bytes, formats: Iterable[str]) -> Tuple[Image.Image, str]:
    """
    Decode uploaded bytes into a fully loaded image.

    Args:
        data: Raw upload bytes
        formats: Decoders to try, as returned by ``register_codecs``

    Returns:
        Tuple of (image, lower-case source format name)
    """
    try:
        image = Image.open(BytesIO(data), formats=list(formats))
        # open() is lazy; force the pixel data through the decoder here
        image.load()
    except PIL_DECODE_ERRORS as e:
        raise DecodeError(f"Unsupported image format: {e}") from e

    return image, (image.format or "").lower()


def is_wide_gray(mode: str) -> bool:
    return mode == "I" or mode.startswith("I;16")


def to_8bit_gray(image: Image.Image) -> Image.Image:
    """Reduce 16-bit grayscale to 8 bits by keeping the high byte of each sample."""
    return image.convert("I").point(lambda v: v * (1 / 256)).convert("L")


def encode_jpeg(image: Image.Image, output: BinaryIO, quality: int) -> None:
    """Write ``image`` to ``output`` as JPEG at ``quality``."""
    try:
        if is_wide_gray(image.mode):
            logger.debug(f"Scaling {image.mode} image to 8-bit grayscale for JPEG output")
            image = to_8bit_gray(image)
        elif image.mode not in JPEG_MODES:
            logger.debug(f"Converting {image.mode} image to RGB for JPEG output")
            image = image.convert("RGB")
        image.save(output, format="JPEG", quality=quality)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"JPEG encoding failed: {e}")
        raise EncodeError("Compression failed") from e
