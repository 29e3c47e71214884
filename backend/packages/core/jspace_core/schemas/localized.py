"""
Localized content schemas.

A LocalizedContent value holds one field's text in every supported
language. It is stored as a JSON column on the owning entity and is
never mutated in place: every change produces a new value.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from jspace_core.languages import SUPPORTED_LANGUAGES, Language, coerce_language
from jspace_core.logging_config import get_logger

logger = get_logger(__name__)

# Explicit per-language edits. A missing key means "leave unchanged",
# a key mapped to "" means "clear this slot".
LanguageUpdates = dict[Language, str]


class LocalizedContent(BaseModel):
    """
    Trilingual text value.

    Attributes:
        en: English text.
        uz: Uzbek text.
        ja: Japanese text.
        translation_locked: When set, machine translation must never
            overwrite any slot; only explicit edits are applied.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    en: str = ""
    uz: str = ""
    ja: str = ""
    translation_locked: bool = False

    @field_validator("en", "uz", "ja", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("translation_locked", mode="before")
    @classmethod
    def _none_as_unlocked(cls, value: Any) -> Any:
        return False if value is None else value

    def get(self, lang: Language | str) -> str:
        """Return the slot for ``lang`` (aliases accepted)."""
        return str(getattr(self, coerce_language(lang).value))

    def is_blank(self) -> bool:
        """Whether every language slot is empty."""
        return not any(self.get(lang) for lang in SUPPORTED_LANGUAGES)

    def to_storage(self) -> dict[str, Any]:
        """Plain dict persisted in the JSON column."""
        return self.model_dump()

    @classmethod
    def coerce(cls, value: Any) -> "LocalizedContent":
        """
        Build a value from whatever shape a stored column holds.

        Accepts None, an existing instance, a dict with possibly missing
        keys, a JSON-encoded dict, or a bare string (legacy rows, read as
        English text). Never raises.
        """
        if value is None:
            return empty()
        if isinstance(value, LocalizedContent):
            return value
        if isinstance(value, str):
            if not value.strip():
                return empty()
            try:
                parsed = json.loads(value)
            except ValueError:
                return from_single_language(value, Language.EN)
            if isinstance(parsed, dict):
                return cls.coerce(parsed)
            return from_single_language(value, Language.EN)
        if isinstance(value, dict):
            try:
                return cls.model_validate(value)
            except ValidationError:
                logger.warning(
                    "Discarding malformed localized content",
                    extra={"keys": sorted(str(k) for k in value)},
                )
                return empty()
        logger.warning(
            "Unsupported localized content type",
            extra={"type": type(value).__name__},
        )
        return empty()


def empty() -> LocalizedContent:
    """Return a value with every slot empty and translation unlocked."""
    return LocalizedContent()


def from_single_language(text: str, lang: Language | str) -> LocalizedContent:
    """
    Place ``text`` in one slot, leaving the others empty.

    Unrecognized language codes are treated as English.
    """
    return LocalizedContent(**{coerce_language(lang).value: text})


def resolve(content: LocalizedContent | str | None, preferred_lang: Language | str) -> str:
    """
    Pick the display string for a viewer.

    Returns the preferred slot if non-empty, otherwise the first
    non-empty slot in en, uz, ja order, otherwise "". Legacy plain
    strings are returned as-is.

    Args:
        content: Localized value (or legacy string).
        preferred_lang: Viewer language (aliases accepted).

    Returns:
        Display string.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content

    preferred = content.get(preferred_lang)
    if preferred:
        return preferred

    for lang in SUPPORTED_LANGUAGES:
        value = content.get(lang)
        if value:
            return value
    return ""


def apply_updates(
    content: LocalizedContent, updates: LanguageUpdates, lock: bool = False
) -> LocalizedContent:
    """
    Replace the given slots verbatim, returning a new value.

    Args:
        content: Current value (left untouched).
        updates: Slots to replace.
        lock: Also set ``translation_locked``.

    Returns:
        Updated value.
    """
    changes: dict[str, Any] = {lang.value: text for lang, text in updates.items()}
    if lock:
        changes["translation_locked"] = True
    return content.model_copy(update=changes)
