"""
Squeeze API Application

This package implements a FastAPI service that re-encodes uploaded images as
JPEG at a caller-supplied quality:
- JPEG and PNG input, detected from the file contents
- Compressed files stored on local disk and served under /download
- Size and savings statistics in every successful response
"""
from squeeze.api import app, create_app

__all__ = ['app', 'create_app']
