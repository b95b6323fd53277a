"""
Core pieces of the Squeeze API: configuration, errors and the JPEG codec
wrapper around Pillow.
"""
from squeeze.core.config import (
    DEFAULT_QUALITY,
    MAX_UPLOAD_MEMORY,
    Settings,
    get_settings
)

from squeeze.core.exceptions import (
    SqueezeError,
    UploadError,
    DecodeError,
    StorageError,
    EncodeError
)

from squeeze.core.jpeg import (
    register_codecs,
    decode_image,
    encode_jpeg
)

__all__ = [
    # Configuration
    'DEFAULT_QUALITY',
    'MAX_UPLOAD_MEMORY',
    'Settings',
    'get_settings',

    # Errors
    'SqueezeError',
    'UploadError',
    'DecodeError',
    'StorageError',
    'EncodeError',

    # Codec
    'register_codecs',
    'decode_image',
    'encode_jpeg'
]
