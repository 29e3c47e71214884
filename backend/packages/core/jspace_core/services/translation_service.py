"""
Translation service.

Keeps a field's per-language representations consistent: seeds new
values by machine translation and reconciles later per-language edits
with the ``translation_locked`` flag.

Provider calls run in worker threads and are issued concurrently per
target language. A failing target never aborts the others and never
raises: the slot degrades to a copy of the source text.
"""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass

from jspace_core.languages import SUPPORTED_LANGUAGES, Language, coerce_language, normalize_language
from jspace_core.logging_config import get_logger
from jspace_core.schemas.localized import (
    LanguageUpdates,
    LocalizedContent,
    apply_updates,
    empty,
    from_single_language,
)
from jspace_core.services.translation_providers import TranslationProvider

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of one provider call: either translated text or an error."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None

    def or_else(self, fallback: str) -> str:
        """Translated text, or ``fallback`` if the call failed."""
        return self.text if self.ok and self.text is not None else fallback


class ContentTranslator:
    """Machine translation and synchronization of LocalizedContent values."""

    def __init__(self, provider: TranslationProvider) -> None:
        """
        Initialize translator.

        Args:
            provider: Backend used for machine translation.
        """
        self.provider = provider

    async def translate_text(
        self, text: str, source: Language, target: Language
    ) -> TranslationResult:
        """
        Translate one string without raising.

        Args:
            text: Source text.
            source: Language of ``text``.
            target: Desired language.

        Returns:
            Result holding the translation or the provider error.
        """
        if source == target:
            return TranslationResult(text=text)

        try:
            translated = await asyncio.to_thread(
                self.provider.translate, text, source.value, target.value
            )
        except Exception as e:
            logger.warning(
                "Translation failed; keeping source text",
                extra={
                    "source": source.value,
                    "target": target.value,
                    "error": str(e) or type(e).__name__,
                },
            )
            return TranslationResult(error=str(e) or type(e).__name__)

        if not isinstance(translated, str) or not translated.strip():
            logger.warning(
                "Translation returned no text; keeping source text",
                extra={"source": source.value, "target": target.value},
            )
            return TranslationResult(error="empty translation")

        return TranslationResult(text=translated)

    async def translate(
        self, text: str, source_lang: Language | str = Language.EN
    ) -> LocalizedContent:
        """
        Seed a new value from text written in one language.

        The source slot always holds ``text`` verbatim; only the other two
        slots come from the provider. Blank text short-circuits to an
        empty value without any provider call.

        Args:
            text: Original user input.
            source_lang: Language of ``text`` (aliases accepted, unknown -> en).

        Returns:
            Unlocked value with all three slots filled.
        """
        if not text or not text.strip():
            return empty()

        source = coerce_language(source_lang)
        seeded = from_single_language(text, source)

        targets = [lang for lang in SUPPORTED_LANGUAGES if lang != source]
        results = await asyncio.gather(
            *(self.translate_text(text, source, target) for target in targets)
        )

        return apply_updates(
            seeded,
            {target: result.or_else(text) for target, result in zip(targets, results)},
        )

    async def update_field(
        self,
        existing: LocalizedContent | None,
        updates: Mapping[Language | str, str],
        auto_translate_allowed: bool = False,
    ) -> LocalizedContent:
        """
        Compute the next value of a localized field.

        Locked values only take explicit slot edits. On unlocked values a
        single-language edit with auto-translation allowed is fanned out
        to the other languages; anything else is applied verbatim. Any
        edit locks the result. ``existing`` is never mutated.

        Args:
            existing: Stored value, or None for a field never set.
            updates: Explicit per-language edits.
            auto_translate_allowed: Whether machine translation may run.

        Returns:
            New value.
        """
        current = existing if existing is not None else empty()
        changes = _normalize_updates(updates)

        if current.translation_locked:
            return apply_updates(current, changes)

        if len(changes) == 1 and auto_translate_allowed:
            ((lang, text),) = changes.items()
            logger.info(
                "Propagating single-language edit",
                extra={"source": lang.value},
            )
            translated = await self.translate(text, lang)
            return translated.model_copy(update={"translation_locked": True})

        return apply_updates(current, changes, lock=bool(changes))


def _normalize_updates(updates: Mapping[Language | str, str]) -> LanguageUpdates:
    normalized: LanguageUpdates = {}
    for key, text in updates.items():
        lang = normalize_language(key)
        if lang is None:
            logger.warning("Ignoring update for unknown language", extra={"language": str(key)})
            continue
        normalized[lang] = text
    return normalized
