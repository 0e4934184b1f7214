"""Shared pytest fixtures for Food Photography Pro tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, Mock

import pytest

from fakes import (
    image_part,
    make_data_url,
    make_image_bytes,
    make_response,
    make_truncated_jpeg,
    text_part,
)
from foodshot.core.config import FoodshotConfig
from foodshot.core.generation_client import GenerationClient
from foodshot.ui.models import UIState

TEST_API_KEY_ENV = "FOODSHOT_TEST_API_KEY"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> FoodshotConfig:
    """Create a test configuration that reads a test-only API key variable."""
    return FoodshotConfig(
        _env_file=None,
        model_id="gemini-test-image",
        api_key_env=TEST_API_KEY_ENV,
        download_filename="ai-food-photo.jpg",
    )


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Set the test API key in the environment."""
    monkeypatch.setenv(TEST_API_KEY_ENV, "test-key")
    return "test-key"


@pytest.fixture
def image_files(temp_dir: Path) -> dict[str, Path]:
    """Write sample upload files: three valid images and three unreadable ones.

    Returns:
        Mapping of short name to file path
    """
    files = {
        "png": temp_dir / "salad.png",
        "jpeg": temp_dir / "pasta.jpg",
        "webp": temp_dir / "cake.webp",
        "text": temp_dir / "notes.txt",
        "broken": temp_dir / "broken.png",
        "truncated": temp_dir / "truncated.jpg",
    }
    files["png"].write_bytes(make_image_bytes("PNG", "green"))
    files["jpeg"].write_bytes(make_image_bytes("JPEG", "yellow"))
    files["webp"].write_bytes(make_image_bytes("WEBP", "brown"))
    files["text"].write_text("not an image")
    files["broken"].write_bytes(b"\x89PNG\r\n\x1a\n")
    files["truncated"].write_bytes(make_truncated_jpeg())
    return files


@pytest.fixture
def png_data_url() -> str:
    return make_data_url("PNG", "red")


@pytest.fixture
def jpeg_data_url() -> str:
    return make_data_url("JPEG", "yellow")


@pytest.fixture
def generated_png() -> bytes:
    """Bytes of the image the fake remote model returns."""
    return make_image_bytes("PNG", "blue")


@pytest.fixture
def sdk_client(generated_png: bytes) -> Mock:
    """Mock ``genai.Client`` instance returning a text part then an image part."""
    client = Mock()
    client.aio.models.generate_content = AsyncMock(
        return_value=make_response(text_part("Here you go"), image_part(generated_png))
    )
    return client


@pytest.fixture
def client_factory(sdk_client: Mock) -> Mock:
    """Factory standing in for ``genai.Client``."""
    return Mock(return_value=sdk_client)


@pytest.fixture
def generation_client(test_config: FoodshotConfig, client_factory: Mock) -> GenerationClient:
    return GenerationClient(test_config, client_factory=client_factory)


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing.

    Returns:
        UIState instance
    """
    return UIState()
