"""
Runtime configuration for the Squeeze API.

Values are read once from the environment (and an optional ``.env`` file in
the working directory) into a single ``Settings`` instance.
"""
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_QUALITY = 75
MAX_UPLOAD_MEMORY = 10 << 20
DEV_ORIGIN = "http://localhost:4321"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Squeeze API"
    app_version: str = "1.0.0"

    host: str = "0.0.0.0"
    port: int = 8080
    workers: int = 1
    timeout_keep_alive: int = 5
    log_level: str = "INFO"

    node_env: str = "development"
    allowed_origin: str = ""
    dev_origin: str = DEV_ORIGIN

    output_dir: Path = Path("compressed")
    default_quality: int = Field(DEFAULT_QUALITY, ge=1)
    max_upload_memory: int = Field(MAX_UPLOAD_MEMORY, gt=0)
    decoder_formats: Tuple[str, ...] = ("JPEG", "PNG")

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"

    @property
    def cors_origin(self) -> str:
        """Origin sent in ``Access-Control-Allow-Origin``."""
        if self.is_production and self.allowed_origin:
            return self.allowed_origin
        return self.dev_origin

    def download_url(self, filename: str) -> str:
        return f"{self.allowed_origin}/download/{filename}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
