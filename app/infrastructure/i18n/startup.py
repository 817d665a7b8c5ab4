"""Composition-root helper wiring localization at application startup."""

import os
from pathlib import Path
from typing import Mapping, Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_localization_service
from infrastructure.i18n.resolvers import ENVIRONMENT_VARIABLES, LanguageResolver
from infrastructure.i18n.runtime import initialize
from infrastructure.i18n.service import LocalizationService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def start_localization(
    preferred_language: Optional[str] = None,
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    use_environment: bool = True,
) -> LocalizationService:
    """Build the localization service and install it process-wide.

    The startup language is, in order: preferred_language (typically the tag
    persisted in the host's settings), the POSIX locale environment when
    use_environment is set, then the configured default.

    Must run exactly once per process.

    Args:
        preferred_language: Persisted language tag, if any.
        settings: Settings instance (default: get_settings()).
        translations_dir: Override for the locales directory.
        environ: Environment mapping (default: os.environ).
        use_environment: Whether to consult LC_ALL/LC_MESSAGES/LANG.

    Returns:
        The installed LocalizationService.

    Raises:
        LocalizationAlreadyInitializedError: If localization already started.
    """
    service = create_localization_service(
        translations_dir=translations_dir, settings=settings
    )

    resolver = LanguageResolver(default_language=service.get_language())
    candidates = [preferred_language]
    if use_environment:
        env = os.environ if environ is None else environ
        candidates.extend(env.get(name) for name in ENVIRONMENT_VARIABLES)

    language = resolver.resolve(candidates)
    if language is not service.get_language():
        service.set_language(language)

    initialize(service)
    logger.info("localization_started", language=language.tag)
    return service
