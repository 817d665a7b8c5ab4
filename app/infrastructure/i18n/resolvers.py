"""Language resolution for startup.

Picks the initial Language from values the host application already has,
such as a persisted settings tag or the POSIX locale environment.
"""

import os
from typing import Iterable, List, Mapping, Optional

from infrastructure.i18n.models import Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()

ENVIRONMENT_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_locale_string(value: str) -> List[str]:
    """Expand a locale string into tag candidates, most specific first.

    "zh_CN.UTF-8" -> ["zh_CN", "zh_cn", "zh"]

    Args:
        value: Settings tag or POSIX locale string.

    Returns:
        Candidate tags to try with Language.parse().
    """
    base = value.strip().split(".")[0].split("@")[0]
    if not base:
        return []

    candidates = [base, base.replace("-", "_").lower()]
    region_sep = base.replace("-", "_").split("_")
    if len(region_sep) > 1:
        candidates.append(f"{region_sep[0].lower()}-{region_sep[1].upper()}")
    candidates.append(region_sep[0].lower())

    unique: List[str] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


class LanguageResolver:
    """Resolves the startup language from preference sources.

    Resolution order:
    1. Candidates in the order given (e.g., persisted settings tag, then OS locale)
    2. Default language
    """

    def __init__(self, default_language: Language = Language.SIMPLIFIED_CHINESE):
        """Initialize language resolver.

        Args:
            default_language: Fallback language when no candidate matches.
        """
        self.default_language = default_language
        self.log = logger.bind(default_language=default_language.tag)

    def match(self, value: Optional[str]) -> Optional[Language]:
        """Match a single tag or locale string, or return None."""
        if not value:
            return None
        for candidate in normalize_locale_string(value):
            language = Language.parse(candidate)
            if language is not None:
                return language
        return None

    def resolve(self, candidates: Iterable[Optional[str]]) -> Language:
        """Return the first candidate matching a supported language.

        Args:
            candidates: Tags or locale strings in preference order. None and
                empty values are skipped.

        Returns:
            Resolved Language, or the default if none match.
        """
        for value in candidates:
            language = self.match(value)
            if language is not None:
                self.log.info("resolved_language", source_value=value, language=language.tag)
                return language
            if value:
                self.log.debug("unmatched_language_candidate", source_value=value)

        self.log.info("no_matching_language")
        return self.default_language

    def from_environment(self, environ: Optional[Mapping[str, str]] = None) -> Language:
        """Resolve from LC_ALL, LC_MESSAGES and LANG.

        Args:
            environ: Environment mapping (default: os.environ).
        """
        environ = os.environ if environ is None else environ
        return self.resolve(environ.get(name) for name in ENVIRONMENT_VARIABLES)
