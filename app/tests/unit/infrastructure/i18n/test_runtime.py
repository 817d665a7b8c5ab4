"""Tests for infrastructure.i18n.runtime module."""

import pytest

from infrastructure.i18n import (
    Language,
    LocalizationAlreadyInitializedError,
    runtime,
)
from tests.factories.i18n import make_localization_service


class TestUninitializedRuntime:
    """Lookups before initialize() fail safe."""

    def test_not_initialized(self):
        """is_initialized() is False after reset."""
        assert runtime.is_initialized() is False
        assert runtime.get_service() is None

    def test_translate_returns_key(self):
        """translate() returns the raw key."""
        assert runtime.translate("menu.file") == "menu.file"

    def test_translate_with_args_returns_key(self):
        """translate_with_args() returns the raw key without substitution."""
        assert runtime.translate_with_args("Hello {0}", ["Ann"]) == "Hello {0}"

    def test_translate_stable_returns_key(self):
        """translate_stable() returns the raw key."""
        assert runtime.translate_stable("menu.file") == "menu.file"

    def test_get_language_is_english(self):
        """get_language() reports English."""
        assert runtime.get_language() is Language.ENGLISH

    def test_set_language_is_noop(self):
        """set_language() does nothing and reports it."""
        assert runtime.set_language(Language.KOREAN) is False
        assert runtime.get_language() is Language.ENGLISH


class TestInitializedRuntime:
    """Lookups after initialize() delegate to the installed service."""

    @pytest.fixture
    def service(self):
        """Install a service with English active."""
        return runtime.initialize(make_localization_service())

    def test_initialize_installs_service(self, service):
        """initialize() returns and installs the service."""
        assert runtime.is_initialized() is True
        assert runtime.get_service() is service

    def test_double_initialize_raises(self, service):
        """A second initialize() is a programming error."""
        with pytest.raises(LocalizationAlreadyInitializedError):
            runtime.initialize(make_localization_service())
        assert runtime.get_service() is service

    def test_double_initialize_is_runtime_error(self, service):
        """The error is a RuntimeError subclass."""
        with pytest.raises(RuntimeError):
            runtime.initialize(make_localization_service())

    def test_translate(self, service):
        """translate() resolves through the service."""
        assert runtime.translate("menu.file") == "File"

    def test_translate_with_args(self, service):
        """translate_with_args() substitutes arguments."""
        assert (
            runtime.translate_with_args("greeting", ["Ann"])
            == "Hello Ann, you have {1} items"
        )

    def test_set_and_get_language(self, service):
        """set_language() switches the process-wide language."""
        assert runtime.set_language("zh") is True
        assert runtime.get_language() is Language.SIMPLIFIED_CHINESE
        assert runtime.translate("menu.file") == "文件"

    def test_set_language_unrecognized(self, service):
        """Unrecognized tags keep the current language."""
        assert runtime.set_language("klingon") is False
        assert runtime.get_language() is Language.ENGLISH

    def test_translate_stable_invalidated_on_switch(self, service):
        """translate_stable() never serves a value from the previous language."""
        assert runtime.translate_stable("menu.edit") == "Edit"
        runtime.set_language(Language.TRADITIONAL_CHINESE)
        assert runtime.translate_stable("menu.edit") == "編輯"

    def test_reset_allows_reinitialize(self, service):
        """reset() removes the service so initialize() can run again."""
        runtime.reset()
        assert runtime.translate("menu.file") == "menu.file"
        replacement = runtime.initialize(make_localization_service())
        assert runtime.get_service() is replacement
