"""
Translation provider abstraction.

Supports Google Translate (free), DeepL and OpenAI as configurable
machine translation backends. Google needs no key and is the default;
the paid providers fall back to it when they fail.

Providers are synchronous and may raise on any failure; callers are
expected to isolate failures per target language.
"""

import re
from abc import ABC, abstractmethod
from typing import Any

from jspace_core.logging_config import get_logger

logger = get_logger(__name__)

# Google Translate has a ~5000 character limit per request
_CHUNK_SIZE = 4500

_LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "uz": "Uzbek",
    "ja": "Japanese",
}


def split_chunks(text: str, size: int = _CHUNK_SIZE) -> list[str]:
    """
    Split text into pieces of at most ``size`` characters.

    Pieces end at whitespace; a single word longer than ``size`` is cut.
    Whitespace at a piece boundary is dropped.
    """
    chunks: list[str] = []
    current = ""
    for token in re.findall(r"\s*\S+", text):
        if len(token) > size:
            token = token.lstrip()
        while len(token) > size:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(token[:size])
            token = token[size:]
        if len(current) + len(token) > size:
            chunks.append(current)
            current = token.lstrip()
        else:
            current += token
    if current:
        chunks.append(current)
    return chunks


class TranslationProvider(ABC):
    """Base class for translation providers."""

    @abstractmethod
    def translate(self, text: str, source: str, target: str) -> str:
        """Translate a single text string."""


class GoogleFreeProvider(TranslationProvider):
    """Free Google Translate via deep-translator."""

    def translate(self, text: str, source: str, target: str) -> str:
        from deep_translator import GoogleTranslator

        if not text or not text.strip():
            return text
        translator = GoogleTranslator(source=source, target=target)
        if len(text) <= _CHUNK_SIZE:
            result: str = translator.translate(text)
            return result

        # Long descriptions go out in pieces; any failed piece fails the whole text
        pieces = split_chunks(text)
        logger.debug("Translating long text in chunks", extra={"chunks": len(pieces)})
        translated: list[str] = []
        for piece in pieces:
            result = translator.translate(piece)
            if not isinstance(result, str) or not result.strip():
                raise ValueError("Google Translate returned no text for a chunk")
            translated.append(result)
        return " ".join(translated)


class DeepLProvider(TranslationProvider):
    """DeepL translation provider."""

    # DeepL requires a regional variant for English targets
    _TARGET_MAP: dict[str, str] = {"en": "EN-US"}

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def _map_lang(self, lang: str, *, is_source: bool = False) -> str:
        if is_source:
            return lang.upper()
        return self._TARGET_MAP.get(lang, lang.upper())

    def translate(self, text: str, source: str, target: str) -> str:
        import deepl

        if not text or not text.strip():
            return text

        translator = deepl.Translator(self.api_key)
        result = translator.translate_text(
            text,
            source_lang=self._map_lang(source, is_source=True),
            target_lang=self._map_lang(target),
        )
        return str(result)


class OpenAIProvider(TranslationProvider):
    """OpenAI translation provider."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini") -> None:
        self.api_key = api_key
        self.model = model

    def translate(self, text: str, source: str, target: str) -> str:
        from openai import OpenAI

        if not text or not text.strip():
            return text

        client = OpenAI(api_key=self.api_key)
        source_name = _LANGUAGE_NAMES.get(source, source)
        target_name = _LANGUAGE_NAMES.get(target, target)
        response = client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "system",
                    "content": (
                        f"You are a translator for a project management tool. "
                        f"Translate the following text from {source_name} to "
                        f"{target_name}. Output only the translation, nothing else."
                    ),
                },
                {"role": "user", "content": text},
            ],
            temperature=0.3,
        )
        content = response.choices[0].message.content
        if not content:
            raise ValueError("OpenAI response does not contain translated text")
        return content.strip()


class FallbackProvider(TranslationProvider):
    """
    Paid provider backed by free Google Translate.

    Quota or key errors from the primary provider are retried once on
    the fallback; an error there propagates to the caller.
    """

    def __init__(
        self,
        primary: TranslationProvider,
        fallback: TranslationProvider | None = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback or GoogleFreeProvider()

    def translate(self, text: str, source: str, target: str) -> str:
        try:
            return self.primary.translate(text, source, target)
        except Exception as e:
            logger.warning(
                "Primary translation provider failed; using fallback",
                extra={
                    "provider": type(self.primary).__name__,
                    "target": target,
                    "error": str(e) or type(e).__name__,
                },
            )
            return self.fallback.translate(text, source, target)


def create_translation_provider(settings: dict[str, Any] | None) -> TranslationProvider:
    """
    Create a translation provider from configuration.

    Settings keys:
        - translation_provider: "google" | "deepl" | "openai"
        - translation_api_key: API key for DeepL/OpenAI
        - translation_model: OpenAI model name (default: "gpt-4o-mini")

    DeepL and OpenAI are wrapped so failures fall back to Google.
    Google is used directly when selected, when no key is provided for
    DeepL/OpenAI, or when settings are empty.
    """
    if not settings:
        return GoogleFreeProvider()

    provider = settings.get("translation_provider", "google")
    api_key = settings.get("translation_api_key", "")
    raw_model = settings.get("translation_model")
    model = raw_model if isinstance(raw_model, str) and raw_model else None

    if provider == "deepl" and api_key:
        logger.info("Using DeepL translation provider")
        return FallbackProvider(DeepLProvider(api_key))

    if provider == "openai" and api_key:
        openai_model = model or "gpt-4o-mini"
        logger.info(
            "Using OpenAI translation provider",
            extra={"model": openai_model},
        )
        return FallbackProvider(OpenAIProvider(api_key, openai_model))

    if provider not in ("google", "deepl", "openai"):
        logger.warning(
            "Unknown translation provider; using Google Translate",
            extra={"provider": provider},
        )
    elif provider != "google":
        logger.warning(
            "No API key configured; using Google Translate",
            extra={"provider": provider},
        )
    return GoogleFreeProvider()
