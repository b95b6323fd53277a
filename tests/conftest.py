from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from squeeze.api import create_app
from squeeze.core.config import Settings
from tests.helpers import image_bytes


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "compressed"


@pytest.fixture()
def make_settings(output_dir: Path) -> Callable[..., Settings]:
    def factory(**overrides) -> Settings:
        overrides.setdefault("output_dir", output_dir)
        return Settings(_env_file=None, **overrides)

    return factory


@pytest.fixture()
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture()
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def png_bytes() -> bytes:
    return image_bytes("PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return image_bytes("JPEG", quality=95)
