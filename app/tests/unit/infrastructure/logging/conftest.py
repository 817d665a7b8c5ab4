"""Fixtures for infrastructure.logging tests."""

import pytest

from infrastructure.configuration import I18nSettings, Settings


@pytest.fixture
def mock_settings(tmp_path):
    """Development Settings with i18n pointed at an empty locales dir."""
    return Settings(
        PREFIX="dev-",
        LOG_LEVEL="INFO",
        i18n=I18nSettings(I18N_LOCALES_DIR=str(tmp_path), I18N_DEFAULT_LANGUAGE="en"),
    )


@pytest.fixture
def production_settings(tmp_path):
    """Production Settings (empty PREFIX) logging at WARNING."""
    return Settings(
        PREFIX="",
        LOG_LEVEL="WARNING",
        i18n=I18nSettings(I18N_LOCALES_DIR=str(tmp_path)),
    )
