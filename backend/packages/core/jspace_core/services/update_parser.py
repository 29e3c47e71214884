"""
Update request parsing.

Request bodies name per-language values in several historical styles:
``title_en`` / ``titleEn`` and, for Japanese, both the ISO ``ja`` and
the legacy ``jp`` code. This module extracts the explicit edits a body
carries for one field.
"""

from collections.abc import Mapping
from typing import Any

from jspace_core.languages import Language
from jspace_core.schemas.localized import LanguageUpdates

# Alias suffixes per language, in priority order
_FIELD_SUFFIXES: tuple[tuple[Language, tuple[str, ...]], ...] = (
    (Language.EN, ("_en", "En")),
    (Language.UZ, ("_uz", "Uz")),
    (Language.JA, ("_ja", "Ja", "_jp", "Jp")),
)


def language_field_names(field_prefix: str) -> dict[Language, list[str]]:
    """Body keys recognized for each language of ``field_prefix``."""
    return {
        lang: [f"{field_prefix}{suffix}" for suffix in suffixes]
        for lang, suffixes in _FIELD_SUFFIXES
    }


def extract_language_updates(body: Any, field_prefix: str) -> LanguageUpdates | None:
    """
    Extract per-language edits for one field from a request body.

    A key counts as present when it holds a string, so ``""`` is a real
    edit (clearing the slot) while a missing key or ``null`` is not. The
    first matching alias wins. When no per-language key is present, a
    bare string under ``field_prefix`` is taken as an English edit.

    Args:
        body: Decoded request body.
        field_prefix: Field name, e.g. "title" or "description".

    Returns:
        Mapping of language to new text, or None when the body does not
        touch this field (including bodies that are not objects).
    """
    if not isinstance(body, Mapping):
        return None

    updates: LanguageUpdates = {}
    for lang, keys in language_field_names(field_prefix).items():
        for key in keys:
            value = body.get(key)
            if isinstance(value, str):
                updates[lang] = value
                break

    if not updates:
        bare = body.get(field_prefix)
        if isinstance(bare, str):
            updates[Language.EN] = bare

    return updates or None


def extract_first_language_updates(
    body: Any, field_prefixes: tuple[str, ...]
) -> LanguageUpdates | None:
    """
    Extract edits for a field known under several names.

    The first prefix with any match wins, e.g. ("description", "desc").
    """
    for prefix in field_prefixes:
        updates = extract_language_updates(body, prefix)
        if updates is not None:
            return updates
    return None
