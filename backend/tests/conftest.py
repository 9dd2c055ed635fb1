"""Root conftest — shared test configuration."""

import os

import pytest

# Keep test runs independent of a developer's shell or .env
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "text")

from fuelmix.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
