"""Tests for translation providers."""

from unittest.mock import MagicMock, patch

import pytest

from jspace_core.services.translation_providers import (
    DeepLProvider,
    FallbackProvider,
    GoogleFreeProvider,
    OpenAIProvider,
    create_translation_provider,
    split_chunks,
)
from jspace_core.services.translation_service import ContentTranslator


def _patch_google(translate_side_effect):
    """Patch deep-translator's GoogleTranslator with a fake instance."""
    google = MagicMock()
    google.return_value.translate.side_effect = translate_side_effect
    return patch("deep_translator.GoogleTranslator", google)


def test_create_provider_defaults_to_google() -> None:
    assert isinstance(create_translation_provider(None), GoogleFreeProvider)
    assert isinstance(create_translation_provider({}), GoogleFreeProvider)


def test_create_provider_wraps_deepl_with_google_fallback() -> None:
    provider = create_translation_provider(
        {"translation_provider": "deepl", "translation_api_key": "key"}
    )

    assert isinstance(provider, FallbackProvider)
    assert isinstance(provider.primary, DeepLProvider)
    assert provider.primary.api_key == "key"
    assert isinstance(provider.fallback, GoogleFreeProvider)


def test_create_provider_without_key_falls_back_to_google() -> None:
    provider = create_translation_provider({"translation_provider": "openai"})
    assert isinstance(provider, GoogleFreeProvider)


def test_create_provider_returns_openai_with_default_model() -> None:
    provider = create_translation_provider(
        {"translation_provider": "openai", "translation_api_key": "sk", "translation_model": ""}
    )

    assert isinstance(provider, FallbackProvider)
    assert isinstance(provider.primary, OpenAIProvider)
    assert provider.primary.model == "gpt-4o-mini"


def test_create_provider_falls_back_to_google_for_unknown() -> None:
    provider = create_translation_provider({"translation_provider": "mtran"})
    assert isinstance(provider, GoogleFreeProvider)


def test_deepl_maps_english_target_to_regional_variant() -> None:
    provider = DeepLProvider("key")

    assert provider._map_lang("en") == "EN-US"
    assert provider._map_lang("ja") == "JA"
    assert provider._map_lang("en", is_source=True) == "EN"


def test_fallback_provider_uses_secondary_on_failure() -> None:
    primary = MagicMock()
    primary.translate.side_effect = RuntimeError("quota exceeded")
    fallback = MagicMock()
    fallback.translate.return_value = "Salom"

    provider = FallbackProvider(primary, fallback)

    assert provider.translate("Hello", "en", "uz") == "Salom"
    fallback.translate.assert_called_once_with("Hello", "en", "uz")


def test_fallback_provider_propagates_secondary_failure() -> None:
    primary = MagicMock()
    primary.translate.side_effect = RuntimeError("quota exceeded")
    fallback = MagicMock()
    fallback.translate.side_effect = ConnectionError("offline")

    with pytest.raises(ConnectionError):
        FallbackProvider(primary, fallback).translate("Hello", "en", "uz")


class TestSplitChunks:
    """Test split_chunks."""

    def test_short_text_is_one_chunk(self):
        """Test that text under the limit is not split."""
        assert split_chunks("Hello world", size=20) == ["Hello world"]

    def test_splits_at_whitespace(self):
        """Test that pieces end between words and stay under the limit."""
        chunks = split_chunks("alpha beta gamma delta", size=11)

        assert chunks == ["alpha beta", "gamma delta"]
        assert all(len(chunk) <= 11 for chunk in chunks)

    def test_long_word_is_cut(self):
        """Test that a word longer than the limit is cut into pieces."""
        assert split_chunks("ab " + "x" * 7, size=3) == ["ab", "xxx", "xxx", "x"]

    def test_no_text_is_lost(self):
        """Test that every word survives splitting in order."""
        text = " ".join(f"word{i}" for i in range(2000))

        chunks = split_chunks(text, size=100)

        assert " ".join(chunks).split() == text.split()


class TestGoogleFreeProvider:
    """Test GoogleFreeProvider chunking."""

    def test_short_text_single_call(self):
        """Test that short text is translated in one request."""
        with _patch_google(lambda t: t.upper()) as google:
            result = GoogleFreeProvider().translate("hello", "en", "ja")

        assert result == "HELLO"
        google.return_value.translate.assert_called_once_with("hello")

    def test_long_text_translated_in_full(self):
        """Test that text over the request limit is translated completely."""
        text = "a" * 4000 + " " + "b" * 1000

        with _patch_google(lambda t: t.upper()) as google:
            result = GoogleFreeProvider().translate(text, "en", "uz")

        assert result == text.upper()
        assert google.return_value.translate.call_count == 2
        for call in google.return_value.translate.call_args_list:
            assert len(call.args[0]) <= 4500

    def test_empty_chunk_result_raises(self):
        """Test that a missing chunk fails the text instead of truncating it."""
        text = "a" * 4000 + " " + "b" * 1000

        with _patch_google(lambda t: "" if t.startswith("b") else t.upper()):
            with pytest.raises(ValueError):
                GoogleFreeProvider().translate(text, "en", "uz")

    @pytest.mark.asyncio
    async def test_long_description_slots_are_complete(self):
        """Test that translated slots of a long value match the source length."""
        text = "a" * 4000 + " " + "b" * 1000

        with _patch_google(lambda t: t.upper()):
            content = await ContentTranslator(GoogleFreeProvider()).translate(text, "en")

        assert content.en == text
        assert len(content.uz) == len(text)
        assert len(content.ja) == len(text)
