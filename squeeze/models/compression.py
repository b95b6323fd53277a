"""
Response models for the Squeeze API.

Fields are exposed with camelCase aliases; responses are serialized with
``exclude_none`` so a failure carries only ``success`` and ``message``.
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class CompressionResult(BaseModel):
    """Outcome of a compress request, also used for the welcome payload"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether the request succeeded")
    message: Optional[str] = Field(None, description="Human-readable status or error text")
    original_size: Optional[int] = Field(
        None, alias="originalSize", description="Size of the uploaded file in bytes"
    )
    compressed_size: Optional[int] = Field(
        None, alias="compressedSize", description="Size of the written JPEG in bytes"
    )
    savings: Optional[float] = Field(
        None, description="Percentage of bytes saved; negative if the output grew"
    )
    download_url: Optional[str] = Field(
        None, alias="downloadUrl", description="URL of the compressed file"
    )
    format: Optional[str] = Field(None, description="Source format reported by the decoder")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    """Response model for the basic health check"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
