"""Shared test fixtures for the session storage test suite."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

import pytest

from shopify_session_storage.models import Session


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "log_level = 'DEBUG'",
                "production.toml": "log_format = 'json'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from shopify_session_storage.config import get_settings
    from shopify_session_storage.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def shop() -> str:
    """Unique shop domain so tests never see each other's rows."""
    return f"test-{uuid4().hex[:12]}.myshopify.com"


@pytest.fixture
def make_session(shop: str) -> Callable[..., Session]:
    """Factory for sessions with sensible defaults.

    ``expires`` defaults to a whole second so it survives the round trip
    through the seconds-based column.
    """

    def _make(**overrides: Any) -> Session:
        data: dict[str, Any] = {
            "id": f"offline_{shop}_{uuid4().hex[:8]}",
            "shop": shop,
            "state": "state-123",
            "is_online": False,
            "scope": "read_products,write_orders",
            "expires": datetime(2030, 1, 1, 12, 30, 45, tzinfo=UTC),
            "online_access_info": None,
            "access_token": "shpat_0123456789",
        }
        data.update(overrides)
        return Session(**data)

    return _make
