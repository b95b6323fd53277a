"""
Data models for the Squeeze API.
"""
from squeeze.models.compression import (
    CompressionResult,
    HealthResponse
)

__all__ = [
    'CompressionResult',
    'HealthResponse'
]
