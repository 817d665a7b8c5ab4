"""Tests for infrastructure.i18n.startup module."""

import pytest

from infrastructure.i18n import (
    Language,
    LocalizationAlreadyInitializedError,
    runtime,
    start_localization,
)


class TestStartLocalization:
    """Tests for start_localization()."""

    def test_installs_service_with_default_language(self, temp_locales_dir):
        """Without preferences the configured default is active."""
        service = start_localization(
            translations_dir=temp_locales_dir, use_environment=False
        )
        assert runtime.get_service() is service
        assert runtime.get_language() is Language.SIMPLIFIED_CHINESE
        assert runtime.translate("menu.file") == "文件"

    def test_preferred_language_wins(self, temp_locales_dir):
        """A persisted tag is applied before the environment."""
        start_localization(
            preferred_language="en",
            translations_dir=temp_locales_dir,
            environ={"LANG": "ja_JP.UTF-8"},
        )
        assert runtime.get_language() is Language.ENGLISH
        assert runtime.translate("menu.file") == "File"

    def test_environment_used_when_no_preference(self, temp_locales_dir):
        """The POSIX locale picks the language when nothing is persisted."""
        start_localization(
            translations_dir=temp_locales_dir,
            environ={"LANG": "ja_JP.UTF-8"},
        )
        assert runtime.get_language() is Language.JAPANESE

    def test_unrecognized_preference_ignored(self, temp_locales_dir):
        """An unknown persisted tag falls through to the next source."""
        start_localization(
            preferred_language="tlh",
            translations_dir=temp_locales_dir,
            environ={},
        )
        assert runtime.get_language() is Language.SIMPLIFIED_CHINESE

    def test_second_start_raises(self, temp_locales_dir):
        """Starting twice is a programming error."""
        start_localization(translations_dir=temp_locales_dir, use_environment=False)
        with pytest.raises(LocalizationAlreadyInitializedError):
            start_localization(
                translations_dir=temp_locales_dir, use_environment=False
            )
