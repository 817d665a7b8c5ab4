"""Translation store: per-language tables and the active language.

The store is the single source of truth for "what language are we in now".
Tables are immutable after construction; the active language is the only
mutable state and is guarded by a re-entrant lock.
"""

import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence

from infrastructure.i18n.interpolation import substitute_args
from infrastructure.i18n.models import Language, TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()

InvalidationListener = Callable[[], None]


class TranslationStore:
    """Holds translation tables and the active language.

    Lookups resolve against the active language's table and fall back to the
    key itself. There is no cross-language fallback, so missing translations
    stay visible.

    Attributes:
        default_language: Language that was active right after construction.
    """

    def __init__(
        self,
        tables: Mapping[Language, TranslationTable],
        default_language: Language = Language.SIMPLIFIED_CHINESE,
    ):
        """Initialize TranslationStore.

        Args:
            tables: Loaded tables. Languages without a table get an empty one.
            default_language: Language active after construction.
        """
        self._tables: Dict[Language, TranslationTable] = {
            language: tables.get(language) or TranslationTable.empty(language)
            for language in Language
        }
        self.default_language = default_language
        self._active_language = default_language
        self._lock = threading.RLock()
        self._listeners: List[InvalidationListener] = []
        logger.info(
            "initialized_translation_store",
            default_language=default_language.tag,
            loaded_languages=[lang.tag for lang, table in self._tables.items() if table],
        )

    def register_invalidation_listener(self, listener: InvalidationListener) -> None:
        """Register a callback run on every language switch.

        Listeners run synchronously while the store lock is held.
        """
        with self._lock:
            self._listeners.append(listener)

    def unregister_invalidation_listener(self, listener: InvalidationListener) -> bool:
        """Remove a previously registered callback.

        Returns:
            True if the listener was registered, False otherwise.
        """
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return False
        return True

    def set_active_language(self, language: Language) -> None:
        """Atomically switch the active language.

        Every invalidation listener has completed before this returns, even
        when language equals the current one.

        Args:
            language: Language to activate.
        """
        with self._lock:
            previous = self._active_language
            self._active_language = language
            for listener in self._listeners:
                listener()
        logger.info(
            "language_switched",
            previous_language=previous.tag,
            language=language.tag,
        )

    def get_active_language(self) -> Language:
        """Return the active language."""
        with self._lock:
            return self._active_language

    @contextmanager
    def pinned_language(self) -> Iterator[Language]:
        """Hold the active language steady for the duration of the block.

        Blocks concurrent switches until the context exits, so keep the body
        short and never wait on another thread inside it.

        Yields:
            The active language.
        """
        with self._lock:
            yield self._active_language

    def lookup(self, key: str) -> str:
        """Resolve key against the active language.

        Args:
            key: Translation key.

        Returns:
            Translated text, or key itself when absent.
        """
        return self.lookup_in(self.get_active_language(), key)

    def lookup_in(self, language: Language, key: str) -> str:
        """Resolve key against an explicit language."""
        message = self._tables[language].get_message(key)
        return key if message is None else message

    def lookup_with_args(self, key: str, args: Sequence[Any]) -> str:
        """Resolve key and substitute positional {0}, {1}, ... placeholders."""
        return substitute_args(self.lookup(key), args)

    def has_key(self, key: str, language: Optional[Language] = None) -> bool:
        """Check if a translation exists for key.

        Args:
            key: Translation key.
            language: Language to check (default: the active language).
        """
        language = language or self.get_active_language()
        return self._tables[language].has_message(key)

    def get_table(self, language: Language) -> TranslationTable:
        """Return the (immutable) table for language."""
        return self._tables[language]

    def available_languages(self) -> List[Language]:
        """Languages whose table holds at least one translation."""
        return [language for language, table in self._tables.items() if table]
