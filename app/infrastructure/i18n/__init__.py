"""i18n system - runtime localization lookup.

Provides per-language translation tables, the active-language state, key
resolution with fallback to the key itself, positional argument
substitution, and a stable string cache invalidated on every language
switch.

Main components:
- models: Language, TranslationTable
- loader: TranslationLoader, JSONTranslationLoader and YAMLTranslationLoader
- store: TranslationStore holding tables and the active language
- cache: StableStringCache for long-lived lookup results
- service: LocalizationService context object
- factory: create_localization_service() from settings
- runtime: process-wide translate()/set_language() entry points
- resolvers: LanguageResolver for choosing the startup language
- startup: start_localization() composition-root helper
"""

from infrastructure.i18n.cache import StableStringCache
from infrastructure.i18n.exceptions import (
    LocalizationAlreadyInitializedError,
    LocalizationError,
)
from infrastructure.i18n.factory import create_localization_service
from infrastructure.i18n.interpolation import substitute_args
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import Language, TranslationTable
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.runtime import (
    get_language,
    initialize,
    set_language,
    translate,
    translate_stable,
    translate_with_args,
)
from infrastructure.i18n.service import LocalizationService
from infrastructure.i18n.startup import start_localization
from infrastructure.i18n.store import TranslationStore

__all__ = [
    "Language",
    "TranslationTable",
    "TranslationLoader",
    "JSONTranslationLoader",
    "YAMLTranslationLoader",
    "TranslationStore",
    "StableStringCache",
    "LocalizationService",
    "LanguageResolver",
    "LocalizationError",
    "LocalizationAlreadyInitializedError",
    "create_localization_service",
    "start_localization",
    "substitute_args",
    "initialize",
    "translate",
    "translate_with_args",
    "translate_stable",
    "set_language",
    "get_language",
]
