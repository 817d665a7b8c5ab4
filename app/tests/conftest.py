"""Shared pytest fixtures."""

import pytest

from infrastructure.i18n import runtime
from infrastructure.services.providers import get_settings


@pytest.fixture(autouse=True)
def reset_localization_runtime():
    """Ensure every test starts without a process-wide localization service."""
    runtime.reset()
    yield
    runtime.reset()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached Settings so environment overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
