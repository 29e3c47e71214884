"""
Localized field orchestration for owning entities.

Glue between request bodies, the translator and the legacy bridge:
every localized write goes through here so the JSON value and its
legacy columns always change together.
"""

from typing import Any

from jspace_core.languages import SUPPORTED_LANGUAGES, Language, coerce_language
from jspace_core.logging_config import get_logger
from jspace_core.schemas.localized import LanguageUpdates, LocalizedContent, apply_updates
from jspace_core.services.legacy_bridge import LegacyMirror
from jspace_core.services.translation_service import ContentTranslator

logger = get_logger(__name__)

PROJECT_NAME = LegacyMirror("name", "title")
PROJECT_DESCRIPTION = LegacyMirror("description", "desc")
TASK_TITLE = LegacyMirror("title", "title")
TASK_DESCRIPTION = LegacyMirror("description", "desc")


class NoFieldsToUpdateError(ValueError):
    """Raised when an update request changes nothing."""


async def seed_content(
    translator: ContentTranslator,
    updates: LanguageUpdates | None,
    source_lang: Language | str,
    default: str = "",
) -> LocalizedContent:
    """
    Build the initial value of a localized field.

    The source is the slot for ``source_lang`` when supplied, otherwise
    the first non-empty supplied slot in en, uz, ja order. Missing slots
    are machine translated from it; supplied slots are kept verbatim.

    Args:
        translator: Content translator.
        updates: Per-language values from the create request.
        source_lang: Language the user is writing in.
        default: Text stored in every slot when nothing was supplied.

    Returns:
        Unlocked value.
    """
    supplied: LanguageUpdates = {
        lang: text for lang, text in (updates or {}).items() if text.strip()
    }

    if not supplied:
        return LocalizedContent(en=default, uz=default, ja=default)

    if len(supplied) == len(SUPPORTED_LANGUAGES):
        return LocalizedContent(**{lang.value: text for lang, text in supplied.items()})

    source = coerce_language(source_lang)
    if source not in supplied:
        source = next(lang for lang in SUPPORTED_LANGUAGES if lang in supplied)

    seeded = await translator.translate(supplied[source], source)
    return apply_updates(seeded, supplied)


async def create_localized_field(
    translator: ContentTranslator,
    entity: Any,
    mirror: LegacyMirror,
    updates: LanguageUpdates | None,
    source_lang: Language | str,
    default: str = "",
) -> LocalizedContent:
    """Seed a new entity's localized field and mirror it."""
    content = await seed_content(translator, updates, source_lang, default)
    mirror.write(entity, content)
    return content


async def update_localized_field(
    translator: ContentTranslator,
    entity: Any,
    mirror: LegacyMirror,
    updates: LanguageUpdates,
    auto_translate: bool,
) -> LocalizedContent:
    """
    Apply per-language edits to an existing entity's localized field.

    Args:
        translator: Content translator.
        entity: Owning model instance.
        mirror: Field mapping.
        updates: Explicit per-language edits.
        auto_translate: Whether machine translation is enabled at all.

    Returns:
        New value (already written to the entity).
    """
    existing = mirror.read(entity)
    content = await translator.update_field(
        existing,
        updates,
        auto_translate and not existing.translation_locked,
    )
    mirror.write(entity, content)
    logger.info(
        "Localized field updated",
        extra={
            "field": mirror.attribute,
            "languages": sorted(lang.value for lang in updates),
            "translation_locked": content.translation_locked,
        },
    )
    return content
