"""
Errors raised by the compression pipeline.

Each error carries the HTTP status it should be answered with; the API layer
renders them as ``{"success": false, "message": ...}``.
"""


class SqueezeError(Exception):
    """Base class for pipeline failures reported to the caller."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UploadError(SqueezeError):
    """The multipart body or its ``image`` part could not be read."""

    status_code = 400


class DecodeError(SqueezeError):
    """The uploaded bytes are not an image any registered decoder accepts."""

    status_code = 400


class StorageError(SqueezeError):
    """The output file could not be created."""

    status_code = 500


class EncodeError(SqueezeError):
    """JPEG encoding into the output file failed."""

    status_code = 500
