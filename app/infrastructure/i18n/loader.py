"""Translation loading interface and implementations.

Defines the contract for loading translations and provides JSON and YAML
loaders. Locale content is best-effort data: a missing or malformed file
yields an empty table for that language, never a startup failure.
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import yaml

from infrastructure.i18n.models import Language, TranslationTable
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how to locate and parse the locale resource for
    each supported language.
    """

    @abstractmethod
    def load(self, language: Language) -> TranslationTable:
        """Load translations for a specific language.

        Args:
            language: Language to load translations for.

        Returns:
            TranslationTable with loaded messages (possibly empty).
        """
        pass

    def load_all(self) -> Dict[Language, TranslationTable]:
        """Load translations for every supported language.

        Returns:
            Dict mapping each Language to its TranslationTable.
        """
        return {language: self.load(language) for language in Language}


class FileTranslationLoader(TranslationLoader):
    """Base for loaders reading flat key/value files from a directory.

    Attributes:
        translations_dir: Path to directory containing locale files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize file translation loader.

        Args:
            translations_dir: Path to directory with locale files.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.is_dir():
            logger.warning(
                "translations_dir_not_found",
                translations_dir=str(self.translations_dir),
            )

        logger.info(
            "initialized_translation_loader",
            loader=type(self).__name__,
            translations_dir=str(self.translations_dir),
        )

    @abstractmethod
    def files_for(self, language: Language) -> List[Path]:
        """Return the existing files holding translations for language."""
        pass

    @abstractmethod
    def parse(self, raw: str) -> Any:
        """Parse file content into Python data.

        Raises:
            ValueError: If content cannot be parsed.
        """
        pass

    def load(self, language: Language) -> TranslationTable:
        """Load and merge every file for a language.

        Later files override earlier ones. Unreadable or malformed files are
        skipped with a warning.

        Args:
            language: Language to load.

        Returns:
            TranslationTable with loaded messages.
        """
        files = self.files_for(language)
        if not files:
            logger.warning(
                "no_translation_files",
                language=language.tag,
                translations_dir=str(self.translations_dir),
            )
            return TranslationTable.empty(language)

        messages: Dict[str, str] = {}
        for path in files:
            try:
                data = self.parse(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, ValueError) as e:
                logger.warning(
                    "translation_file_unreadable",
                    file=str(path),
                    language=language.tag,
                    error=str(e),
                )
                continue
            self._merge_data(messages, data, path)

        logger.info(
            "loaded_translations",
            language=language.tag,
            file_count=len(files),
            key_count=len(messages),
        )
        return TranslationTable(
            language=language,
            messages=messages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def _merge_data(self, messages: Dict[str, str], data: Any, source_file: Path) -> None:
        """Merge a flat key -> string object into messages.

        Expected format:
        {"key1": "message1", "key2": "message2"}

        Args:
            messages: Dict to merge into.
            data: Parsed file content.
            source_file: Source file (for logging).
        """
        if data is None:
            return

        if not isinstance(data, dict):
            logger.warning(
                "invalid_translation_format", file=str(source_file), expected="object"
            )
            return

        for key, message in data.items():
            if not isinstance(message, str):
                logger.warning(
                    "invalid_translation_value",
                    file=str(source_file),
                    key=str(key),
                    expected="string",
                )
                continue
            messages[str(key)] = message


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for JSON locale files named <tag>.json (e.g., zh-CN.json)."""

    def files_for(self, language: Language) -> List[Path]:
        path = self.translations_dir / f"{language.tag}.json"
        return [path] if path.is_file() else []

    def parse(self, raw: str) -> Any:
        # json.JSONDecodeError is a ValueError
        return json.loads(raw)


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for YAML locale files.

    Expects files named <tag>.yml or <domain>.<tag>.yml in the translations
    directory; all files for a language are merged in name order.
    """

    def files_for(self, language: Language) -> List[Path]:
        files = sorted(self.translations_dir.glob(f"*.{language.tag}.yml"))
        exact = self.translations_dir / f"{language.tag}.yml"
        if exact.is_file():
            files.insert(0, exact)
        return [path for path in files if path.is_file()]

    def parse(self, raw: str) -> Any:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
