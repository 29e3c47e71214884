"""Tests for the content translator."""

import threading
from unittest.mock import MagicMock

import pytest

from jspace_core.languages import Language
from jspace_core.schemas import LocalizedContent
from jspace_core.services.translation_service import ContentTranslator, TranslationResult


def _make_provider(translate_return=None, translate_side_effect=None):
    """Create a mock translation provider."""
    provider = MagicMock()
    if translate_side_effect:
        provider.translate.side_effect = translate_side_effect
    elif translate_return is not None:
        provider.translate.return_value = translate_return
    else:
        provider.translate.side_effect = lambda text, src, tgt: f"{tgt}:{text}"
    return provider


class TestTranslationResult:
    """Test the Result wrapper."""

    def test_ok_result(self):
        """Test that successful results expose their text."""
        result = TranslationResult(text="Salom")

        assert result.ok
        assert result.or_else("fallback") == "Salom"

    def test_error_result(self):
        """Test that failed results fall back."""
        result = TranslationResult(error="boom")

        assert not result.ok
        assert result.or_else("fallback") == "fallback"


class TestTranslateText:
    """Test ContentTranslator.translate_text."""

    @pytest.mark.asyncio
    async def test_same_language_skips_provider(self):
        """Test that source == target is returned without a call."""
        provider = _make_provider()
        translator = ContentTranslator(provider)

        result = await translator.translate_text("Hi", Language.EN, Language.EN)

        assert result.text == "Hi"
        provider.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_error_becomes_error_result(self):
        """Test that exceptions never escape."""
        provider = _make_provider(translate_side_effect=RuntimeError("quota exceeded"))
        translator = ContentTranslator(provider)

        result = await translator.translate_text("Hi", Language.EN, Language.JA)

        assert not result.ok
        assert result.error == "quota exceeded"

    @pytest.mark.asyncio
    async def test_blank_translation_is_error(self):
        """Test that an empty provider response counts as a failure."""
        provider = _make_provider(translate_return="   ")
        translator = ContentTranslator(provider)

        result = await translator.translate_text("Hi", Language.EN, Language.UZ)

        assert not result.ok


class TestTranslate:
    """Test ContentTranslator.translate."""

    @pytest.mark.asyncio
    async def test_fills_other_languages(self):
        """Test that both targets are translated from the source."""
        provider = _make_provider()
        translator = ContentTranslator(provider)

        content = await translator.translate("会議", "ja")

        assert content == LocalizedContent(en="en:会議", uz="uz:会議", ja="会議")
        assert provider.translate.call_count == 2
        provider.translate.assert_any_call("会議", "ja", "en")
        provider.translate.assert_any_call("会議", "ja", "uz")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("source", ["en", "uz", "ja", "jp"])
    async def test_source_slot_is_verbatim(self, source):
        """Test that the provider never overwrites the source slot."""
        provider = _make_provider(translate_return="WRONG")
        translator = ContentTranslator(provider)

        content = await translator.translate("Original text", source)

        assert content.get(source) == "Original text"
        assert content.translation_locked is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_text_short_circuits(self, text):
        """Test that blank input returns empty content without calls."""
        provider = _make_provider()
        translator = ContentTranslator(provider)

        content = await translator.translate(text, "en")

        assert content == LocalizedContent()
        provider.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_target_copies_source(self):
        """Test that one failing target does not affect the other."""

        def _translate(text, src, tgt):
            if tgt == "uz":
                raise ConnectionError("provider down")
            return f"{tgt}:{text}"

        translator = ContentTranslator(_make_provider(translate_side_effect=_translate))

        content = await translator.translate("Meeting", "en")

        assert content == LocalizedContent(en="Meeting", uz="Meeting", ja="ja:Meeting")

    @pytest.mark.asyncio
    async def test_total_failure_copies_source_everywhere(self):
        """Test that a dead provider still yields filled slots."""
        provider = _make_provider(translate_side_effect=RuntimeError("down"))
        translator = ContentTranslator(provider)

        content = await translator.translate("会議", "ja")

        assert content == LocalizedContent(en="会議", uz="会議", ja="会議")

    @pytest.mark.asyncio
    async def test_unknown_source_treated_as_english(self):
        """Test that an unrecognized source translates from English."""
        provider = _make_provider()
        translator = ContentTranslator(provider)

        content = await translator.translate("Hello", "fr")

        assert content.en == "Hello"
        assert content.uz == "uz:Hello"
        assert content.ja == "ja:Hello"

    @pytest.mark.asyncio
    async def test_targets_translated_concurrently(self):
        """Test that both target calls are in flight at the same time."""
        barrier = threading.Barrier(2, timeout=5)

        def _translate(text, src, tgt):
            # Sequential calls would break the barrier
            barrier.wait()
            return f"{tgt}:{text}"

        translator = ContentTranslator(_make_provider(translate_side_effect=_translate))

        content = await translator.translate("Hi", "en")

        assert content == LocalizedContent(en="Hi", uz="uz:Hi", ja="ja:Hi")


class TestUpdateField:
    """Test ContentTranslator.update_field."""

    @pytest.mark.asyncio
    async def test_single_edit_on_unlocked_propagates_and_locks(self):
        """Test that one edited language is translated into the others."""
        provider = _make_provider()
        translator = ContentTranslator(provider)
        existing = LocalizedContent(en="Old", uz="Eski", ja="古い")

        updated = await translator.update_field(existing, {"ja": "新しい"}, True)

        assert updated == LocalizedContent(
            en="en:新しい", uz="uz:新しい", ja="新しい", translation_locked=True
        )

    @pytest.mark.asyncio
    async def test_locked_content_only_takes_explicit_edits(self):
        """Test that a locked value is never machine translated."""
        provider = _make_provider()
        translator = ContentTranslator(provider)
        existing = LocalizedContent(en="Old", uz="Eski", ja="古い", translation_locked=True)

        updated = await translator.update_field(existing, {"en": "Updated"}, True)

        assert updated == LocalizedContent(
            en="Updated", uz="Eski", ja="古い", translation_locked=True
        )
        provider.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_multi_language_edit_is_verbatim(self):
        """Test that editing several languages skips translation."""
        provider = _make_provider()
        translator = ContentTranslator(provider)
        existing = LocalizedContent(en="Old", uz="Eski", ja="古い")

        updated = await translator.update_field(existing, {"en": "A", "uz": "B"}, True)

        assert updated == LocalizedContent(en="A", uz="B", ja="古い", translation_locked=True)
        provider.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_single_edit_without_auto_translate(self):
        """Test that disabled auto-translation applies the edit verbatim."""
        provider = _make_provider()
        translator = ContentTranslator(provider)
        existing = LocalizedContent(en="Old", uz="Eski", ja="古い")

        updated = await translator.update_field(existing, {"uz": "Yangi"}, False)

        assert updated == LocalizedContent(en="Old", uz="Yangi", ja="古い", translation_locked=True)
        provider.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_existing_starts_empty(self):
        """Test that a never-set field is treated as empty."""
        translator = ContentTranslator(_make_provider())

        updated = await translator.update_field(None, {"en": "Hello"}, False)

        assert updated == LocalizedContent(en="Hello", translation_locked=True)

    @pytest.mark.asyncio
    async def test_clearing_single_language_clears_all(self):
        """Test that a blank single edit under auto-translation empties the field."""
        provider = _make_provider()
        translator = ContentTranslator(provider)
        existing = LocalizedContent(en="Old", uz="Eski", ja="古い")

        updated = await translator.update_field(existing, {"en": ""}, True)

        assert updated == LocalizedContent(translation_locked=True)
        provider.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_update_keys_ignored(self):
        """Test that unsupported language keys are dropped."""
        translator = ContentTranslator(_make_provider())
        existing = LocalizedContent(en="Old")

        updated = await translator.update_field(existing, {"fr": "Nouveau", "jp": "新"}, False)

        assert updated == LocalizedContent(en="Old", ja="新", translation_locked=True)

    @pytest.mark.asyncio
    async def test_empty_updates_leave_value_unlocked(self):
        """Test that no edits produce an identical value."""
        translator = ContentTranslator(_make_provider())
        existing = LocalizedContent(en="Old")

        assert await translator.update_field(existing, {}, True) == existing

    @pytest.mark.asyncio
    async def test_existing_value_not_mutated(self):
        """Test that the stored value is left untouched."""
        translator = ContentTranslator(_make_provider())
        existing = LocalizedContent(en="Old", uz="Eski", ja="古い")
        snapshot = existing.model_dump()

        await translator.update_field(existing, {"en": "New"}, True)
        await translator.update_field(existing, {"en": "A", "ja": "B"}, False)

        assert existing.model_dump() == snapshot
