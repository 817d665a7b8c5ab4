"""Process-wide localization entry points.

For callers that cannot be handed a LocalizationService (menu builders,
static display metadata), the composition root installs one service here
with initialize(). Until then every lookup returns the raw key, so
localization problems never break unrelated code.
"""

import threading
from typing import Any, Optional, Sequence, Union

from infrastructure.i18n.exceptions import LocalizationAlreadyInitializedError
from infrastructure.i18n.models import Language
from infrastructure.i18n.service import LocalizationService
from infrastructure.logging import get_module_logger

logger = get_module_logger()

UNINITIALIZED_LANGUAGE = Language.ENGLISH

_service: Optional[LocalizationService] = None
_service_lock = threading.Lock()


def initialize(service: LocalizationService) -> LocalizationService:
    """Install the process-wide localization service.

    Args:
        service: Service built by the composition root.

    Returns:
        The installed service.

    Raises:
        LocalizationAlreadyInitializedError: If called more than once.
    """
    global _service

    with _service_lock:
        if _service is not None:
            raise LocalizationAlreadyInitializedError(
                "Localization service is already initialized"
            )
        _service = service
    logger.info("localization_initialized", language=service.get_language().tag)
    return service


def is_initialized() -> bool:
    """Check whether initialize() has been called."""
    return _service is not None


def get_service() -> Optional[LocalizationService]:
    """Return the installed service, or None before initialize()."""
    return _service


def reset() -> None:
    """Remove the installed service (for testing only)."""
    global _service
    with _service_lock:
        _service = None
    logger.debug("localization_reset")


def translate(key: str) -> str:
    """Translate key, or return it unchanged before initialize()."""
    service = _service
    if service is None:
        return key
    return service.translate(key)


def translate_with_args(key: str, args: Sequence[Any]) -> str:
    """Translate key with positional arguments.

    Before initialize() the raw key is returned without substitution.
    """
    service = _service
    if service is None:
        return key
    return service.translate_with_args(key, args)


def translate_stable(key: str) -> str:
    """Translate key through the stable string cache."""
    service = _service
    if service is None:
        return key
    return service.translate_stable(key)


def set_language(language: Union[Language, str]) -> bool:
    """Switch the process-wide language.

    Returns:
        True if the switch happened; False before initialize() or for an
        unrecognized tag.
    """
    service = _service
    if service is None:
        logger.warning("set_language_before_initialize", language=str(language))
        return False
    return service.set_language(language)


def get_language() -> Language:
    """Return the active language, or English before initialize()."""
    service = _service
    if service is None:
        return UNINITIALIZED_LANGUAGE
    return service.get_language()
