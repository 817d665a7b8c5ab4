"""Infrastructure modules for the localization manager.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation store, stable string cache and runtime lookup API
- services: Application-scoped providers (get_settings)
"""
