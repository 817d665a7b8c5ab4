"""Stable string cache keyed by (active language, key).

Hands out resolved strings that callers may keep indefinitely. Python
strings are immutable and garbage collected, so the cache's only job is
correctness: no entry survives a language switch.
"""

import threading
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from infrastructure.i18n.models import Language
from infrastructure.i18n.store import TranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_MAX_ENTRIES = 1024

CacheKey = Tuple[str, str]


class StableStringCache:
    """Whole-cache-invalidated memo of TranslationStore lookups.

    The cache registers itself with the store on construction, so every
    TranslationStore.set_active_language() clears it before returning.

    When max_entries is positive, least-recently-used entries are evicted
    once the ceiling is reached. Eviction never affects invalidation.

    Lock order is store then cache, matching set_active_language().

    Attributes:
        max_entries: Entry ceiling, or 0 for no ceiling.
    """

    def __init__(self, store: TranslationStore, max_entries: int = DEFAULT_MAX_ENTRIES):
        self._store = store
        self.max_entries = max(max_entries, 0)
        self._entries: "OrderedDict[CacheKey, str]" = OrderedDict()
        self._lock = threading.Lock()
        # Bumped by every invalidation; inserts from an older generation are dropped.
        self._generation = 0
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._invalidations = 0
        store.register_invalidation_listener(self.invalidate_all)

    def detach(self) -> None:
        """Stop following language switches on the store."""
        self._store.unregister_invalidation_listener(self.invalidate_all)

    def get_stable(self, key: str) -> str:
        """Resolve key for the active language, caching the result.

        Args:
            key: Translation key.

        Returns:
            Translated text (or key itself), correct as of the language
            active during the call.
        """
        with self._store.pinned_language() as language, self._lock:
            cache_key = (language.tag, key)
            generation = self._generation
            cached = self._entries.get(cache_key)
            if cached is not None:
                self._entries.move_to_end(cache_key)
                self._hits += 1
                return cached
            self._misses += 1

        value = self._store.lookup_in(language, key)

        with self._lock:
            if generation == self._generation:
                self._insert(cache_key, value)
        return value

    def get(self, language: Language, key: str) -> Optional[str]:
        """Return the cached value for (language, key) without resolving."""
        with self._lock:
            return self._entries.get((language.tag, key))

    def invalidate_all(self) -> None:
        """Discard every entry."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._generation += 1
            self._invalidations += 1
        logger.debug("stable_cache_invalidated", dropped_entries=dropped)

    def count_for(self, language: Language) -> int:
        """Number of entries cached for language."""
        with self._lock:
            return sum(1 for tag, _ in self._entries if tag == language.tag)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with size, ceiling and hit/miss/eviction/invalidation counters.
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "max_entries": self.max_entries,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "invalidations": self._invalidations,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _insert(self, cache_key: CacheKey, value: str) -> None:
        # Caller holds self._lock
        self._entries[cache_key] = value
        self._entries.move_to_end(cache_key)
        if self.max_entries and len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
            self._evictions += 1
