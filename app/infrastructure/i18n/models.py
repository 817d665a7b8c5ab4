"""Translation models for i18n system.

Defines the supported languages and the immutable per-language tables.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional


class Language(str, Enum):
    """Supported languages.

    Values are the canonical wire tags. They may be persisted by the host
    application's settings, so they must stay stable.
    """

    ENGLISH = "en"
    SIMPLIFIED_CHINESE = "zh-CN"
    TRADITIONAL_CHINESE = "zh-TW"
    JAPANESE = "ja"
    KOREAN = "ko"

    @classmethod
    def parse(cls, tag: Optional[str]) -> Optional["Language"]:
        """Convert a tag or one of its aliases to a Language.

        Args:
            tag: Language tag (e.g., "en", "zh-CN", "zh_cn", "zh").

        Returns:
            Matching Language, or None if the tag is not recognized.
        """
        if not isinstance(tag, str):
            return None
        return _ALIASES.get(tag)

    @property
    def tag(self) -> str:
        """Canonical tag (e.g., "zh-CN"). Aliases are never produced."""
        return self.value

    def __str__(self) -> str:
        return self.value


_ALIASES: Dict[str, Language] = {
    "en": Language.ENGLISH,
    "zh-CN": Language.SIMPLIFIED_CHINESE,
    "zh_cn": Language.SIMPLIFIED_CHINESE,
    "zh": Language.SIMPLIFIED_CHINESE,
    "zh-TW": Language.TRADITIONAL_CHINESE,
    "zh_tw": Language.TRADITIONAL_CHINESE,
    "ja": Language.JAPANESE,
    "ko": Language.KOREAN,
}


@dataclass(frozen=True)
class TranslationTable(Mapping[str, str]):
    """Flat key -> text mapping for a single language.

    Frozen and backed by a read-only view, so it is safe to share between
    threads without locking. Missing keys are legal.

    Attributes:
        language: The Language this table is for.
        messages: Read-only mapping of key to translated text.
        loaded_at: Timestamp (ISO 8601) when the table was loaded.
    """

    language: Language
    messages: Mapping[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def __getitem__(self, key: str) -> str:
        return self.messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a translation by key, or None if absent."""
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        """Check if a translation exists for key."""
        return key in self.messages

    @classmethod
    def empty(cls, language: Language) -> "TranslationTable":
        """Create a table with no messages."""
        return cls(language=language)
