"""Localization service - the explicitly passed context object.

Composes the TranslationStore and StableStringCache behind the runtime API
consumed by UI code. The application's composition root creates one
instance (usually via the factory) and hands it to whoever needs it.
"""

from typing import Any, Optional, Sequence, Union

from infrastructure.i18n.cache import StableStringCache
from infrastructure.i18n.models import Language
from infrastructure.i18n.store import TranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocalizationService:
    """Class-based localization service.

    Thin facade over a TranslationStore and its StableStringCache.

    Usage:
        from infrastructure.i18n import create_localization_service

        service = create_localization_service()
        title = service.translate("custom_panel.title")
        service.set_language("en")
        greeting = service.translate_with_args("greeting", ["Ann"])
    """

    def __init__(self, store: TranslationStore, cache: Optional[StableStringCache] = None):
        """Initialize localization service.

        Args:
            store: TranslationStore holding the loaded tables.
            cache: Optional StableStringCache bound to store. Created with
                default settings if not provided.
        """
        self._store = store
        self._cache = cache if cache is not None else StableStringCache(store)

    def translate(self, key: str) -> str:
        """Translate key in the active language, or return key itself."""
        return self._store.lookup(key)

    def translate_with_args(self, key: str, args: Sequence[Any]) -> str:
        """Translate key and substitute positional {0}, {1}, ... placeholders."""
        return self._store.lookup_with_args(key, args)

    def translate_stable(self, key: str) -> str:
        """Translate key through the stable string cache."""
        return self._cache.get_stable(key)

    def set_language(self, language: Union[Language, str]) -> bool:
        """Switch the active language.

        Args:
            language: Language or language tag (aliases accepted).

        Returns:
            True if the switch happened, False if the tag was not recognized
            (the current language is kept).
        """
        resolved = language if isinstance(language, Language) else Language.parse(language)
        if resolved is None:
            logger.warning(
                "unrecognized_language_tag",
                tag=language,
                current_language=self._store.get_active_language().tag,
            )
            return False
        self._store.set_active_language(resolved)
        return True

    def get_language(self) -> Language:
        """Return the active language."""
        return self._store.get_active_language()

    @property
    def store(self) -> TranslationStore:
        """Access the underlying TranslationStore."""
        return self._store

    @property
    def cache(self) -> StableStringCache:
        """Access the underlying StableStringCache."""
        return self._cache
