"""Factory functions for creating i18n components.

Provides convenience functions for initializing the localization service
from application settings.
"""

from pathlib import Path
from typing import Optional, Union

from infrastructure.configuration import Settings
from infrastructure.i18n.cache import StableStringCache
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import Language
from infrastructure.i18n.service import LocalizationService
from infrastructure.i18n.store import TranslationStore
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

FALLBACK_DEFAULT_LANGUAGE = Language.SIMPLIFIED_CHINESE


def default_locales_dir() -> Path:
    """Return the bundled locales directory (app/locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_loader(translations_dir: Path, locale_format: str = "json") -> TranslationLoader:
    """Create the loader matching locale_format ('json' or 'yaml')."""
    if locale_format == "yaml":
        return YAMLTranslationLoader(translations_dir)
    return JSONTranslationLoader(translations_dir)


def create_localization_service(
    translations_dir: Optional[Path] = None,
    default_language: Optional[Union[Language, str]] = None,
    locale_format: Optional[str] = None,
    max_entries: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> LocalizationService:
    """Create and configure a LocalizationService with every locale preloaded.

    Explicit arguments override settings.i18n values.

    Args:
        translations_dir: Path to locale files (default: I18N_LOCALES_DIR or app/locales)
        default_language: Language active after startup (default: I18N_DEFAULT_LANGUAGE)
        locale_format: 'json' or 'yaml' (default: I18N_LOCALE_FORMAT)
        max_entries: Stable cache ceiling (default: I18N_STABLE_CACHE_MAX_ENTRIES)
        settings: Settings instance (default: get_settings())

    Returns:
        LocalizationService: Configured service

    Usage:
        # Use settings and the bundled locales
        service = create_localization_service()

        # Custom locales directory, English first
        service = create_localization_service(
            translations_dir=Path("/custom/locales"),
            default_language=Language.ENGLISH,
        )
    """
    i18n_settings = (settings or get_settings()).i18n

    if translations_dir is None:
        translations_dir = (
            Path(i18n_settings.locales_dir)
            if i18n_settings.locales_dir
            else default_locales_dir()
        )
    locale_format = locale_format or i18n_settings.locale_format
    if max_entries is None:
        max_entries = i18n_settings.stable_cache_max_entries

    language = _resolve_default_language(
        default_language if default_language is not None else i18n_settings.default_language
    )

    loader = create_loader(translations_dir, locale_format)
    store = TranslationStore(loader.load_all(), default_language=language)
    cache = StableStringCache(store, max_entries=max_entries)

    logger.info(
        "localization_service_created",
        translations_dir=str(translations_dir),
        locale_format=locale_format,
        default_language=language.tag,
        stable_cache_max_entries=max_entries,
        language_count=len(store.available_languages()),
    )
    return LocalizationService(store, cache)


def _resolve_default_language(value: Union[Language, str]) -> Language:
    if isinstance(value, Language):
        return value
    language = Language.parse(value)
    if language is None:
        logger.warning(
            "unrecognized_default_language",
            tag=value,
            fallback_language=FALLBACK_DEFAULT_LANGUAGE.tag,
        )
        return FALLBACK_DEFAULT_LANGUAGE
    return language
