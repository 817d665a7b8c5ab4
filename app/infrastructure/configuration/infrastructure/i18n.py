"""Localization infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

SUPPORTED_LOCALE_FORMATS = ("json", "yaml")


class I18nSettings(InfrastructureSettings):
    """Localization configuration.

    Environment Variables:
        I18N_LOCALES_DIR: Directory holding one locale file per language
            (default: the bundled app/locales directory)
        I18N_DEFAULT_LANGUAGE: Language tag active right after startup
            (default: zh-CN)
        I18N_LOCALE_FORMAT: Locale file format, 'json' or 'yaml' (default: json)
        I18N_STABLE_CACHE_MAX_ENTRIES: Memory ceiling for the stable string
            cache; 0 or less disables the ceiling (default: 1024)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_tag = settings.i18n.default_language
        cache_ceiling = settings.i18n.stable_cache_max_entries
        ```
    """

    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory containing locale files",
    )
    default_language: str = Field(
        default="zh-CN",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language tag active after startup",
    )
    locale_format: str = Field(
        default="json",
        alias="I18N_LOCALE_FORMAT",
        description="Locale file format: 'json' or 'yaml'",
    )
    stable_cache_max_entries: int = Field(
        default=1024,
        alias="I18N_STABLE_CACHE_MAX_ENTRIES",
        description="Maximum stable cache entries before LRU eviction (<= 0 disables)",
    )

    @field_validator("locale_format", mode="before")
    @classmethod
    def _normalize_locale_format(cls, v: Optional[str]) -> str:
        """Lower-case the format and reject unknown values."""
        if v is None:
            return "json"
        normalized = str(v).strip().lower()
        if normalized == "yml":
            normalized = "yaml"
        if normalized not in SUPPORTED_LOCALE_FORMATS:
            raise ValueError(
                f"Unsupported locale format: {v} (expected one of {SUPPORTED_LOCALE_FORMATS})"
            )
        return normalized
