"""
Core data models and value objects used across the Baba translator.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_MODEL_NAME = "gpt-4"
DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.3

class Language(Enum):
    """
    Enumeration of supported languages.
    """

    ENGLISH = ("english", "English")
    HEBREW = ("hebrew", "Hebrew")

    def __init__(self, code: str, label: str):
        self.code = code
        self.label = label

    @property
    def opposite(self) -> "Language":
        return Language.HEBREW if self is Language.ENGLISH else Language.ENGLISH

    @classmethod
    def from_code(cls, code: str | None) -> "Language":
        normalized = (code or "").lower()
        for language in cls:
            if language.code == normalized:
                return language
        return cls.ENGLISH

class Gender(Enum):
    """
    Speaker gender and the grammatical form it maps to.
    """

    MALE = ("male", "masculine")
    FEMALE = ("female", "feminine")

    def __init__(self, code: str, grammatical_form: str):
        self.code = code
        self.grammatical_form = grammatical_form

    @classmethod
    def from_code(cls, code: str | None) -> "Gender":
        normalized = (code or "").lower()
        for gender in cls:
            if gender.code == normalized:
                return gender
        return cls.MALE

class AudienceType(Enum):
    """
    Who the translated sentence is addressed to.
    """

    GENERAL = ("general", "General")
    MALE = ("male", "To Male")
    FEMALE = ("female", "To Female")
    GROUP_MALES = ("group_males", "To Males")
    GROUP_FEMALES = ("group_females", "To Females")
    MIXED_GROUP = ("mixed_group", "Mixed Group")

    def __init__(self, code: str, label: str):
        self.code = code
        self.label = label

    @classmethod
    def from_code(cls, code: str | None) -> "AudienceType":
        normalized = (code or "").lower()
        for audience in cls:
            if audience.code == normalized:
                return audience
        return cls.GENERAL

def audience_code(audience_type: AudienceType | str) -> str:
    """Returns the wire code for an audience, passing unknown strings through."""
    if isinstance(audience_type, AudienceType):
        return audience_type.code
    return str(audience_type)

def _lookup(enum_cls, value: Any, default):
    if isinstance(value, str):
        for member in enum_cls:
            if member.code == value:
                return member
    return default

@dataclass
class UserSettings:
    """
    Stores the user preferences persisted across sessions.
    """

    user_gender: Gender = Gender.MALE
    preferred_language: Language = Language.ENGLISH

    @classmethod
    def from_dict(cls, data: Any) -> "UserSettings":
        if not isinstance(data, dict):
            return cls()
        defaults = cls()
        return cls(
            user_gender=_lookup(Gender, data.get("userGender"), defaults.user_gender),
            preferred_language=_lookup(Language, data.get("preferredLanguage"), defaults.preferred_language),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userGender": self.user_gender.code,
            "preferredLanguage": self.preferred_language.code,
        }

@dataclass(frozen=True)
class TranslationRequest:
    """
    A single translation attempt. Never persisted.
    """

    text: str
    from_language: Language
    to_language: Language
    user_gender: Gender = Gender.MALE
    audience_type: AudienceType | str = AudienceType.GENERAL

    def __post_init__(self):
        if self.from_language == self.to_language:
            raise ValueError(
                f"Source and target language must differ (got {self.from_language.label})."
            )

    @property
    def audience_code(self) -> str:
        return audience_code(self.audience_type)

    @classmethod
    def for_text(
        cls,
        text: str,
        user_gender: Gender = Gender.MALE,
        audience_type: AudienceType | str = AudienceType.GENERAL,
    ) -> "TranslationRequest":
        """
        Detects the language of ``text`` and targets the other supported language.
        """
        from baba.language import detect_language, target_language_for

        source = detect_language(text)
        return cls(
            text=text,
            from_language=source,
            to_language=target_language_for(source),
            user_gender=user_gender,
            audience_type=audience_type,
        )

@dataclass
class TranslationResult:
    """
    Outcome of a translation request, real or placeholder.
    """

    original_text: str
    translated_text: str
    from_language: Language
    to_language: Language
    context_used: str
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        """True if the live request failed and ``translated_text`` is a placeholder."""
        return self.error is not None

@dataclass(frozen=True)
class StorageResult:
    """Outcome of a write to persistent storage."""

    ok: bool
    error: Optional[str] = None

@dataclass
class ApiConfig:
    """
    Settings for the chat-completion request.
    """

    api_key: str = ""
    model_name: str = DEFAULT_MODEL_NAME
    endpoint: str = DEFAULT_ENDPOINT
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
