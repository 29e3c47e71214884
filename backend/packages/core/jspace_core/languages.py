"""
Supported content languages and request language resolution.

Content is kept in three languages. Older clients and legacy columns
use ``jp`` for Japanese; it is accepted everywhere as an alias of the
canonical ``ja``.
"""

from collections.abc import Mapping
from enum import Enum


class Language(str, Enum):
    """Canonical content language codes."""

    EN = "en"
    UZ = "uz"
    JA = "ja"


# Also the fixed fallback order used when resolving a display string
SUPPORTED_LANGUAGES: tuple[Language, ...] = (Language.EN, Language.UZ, Language.JA)

DEFAULT_LANGUAGE = Language.EN

_ALIASES: dict[str, Language] = {
    "en": Language.EN,
    "uz": Language.UZ,
    "ja": Language.JA,
    "jp": Language.JA,
}


def normalize_language(value: str | None) -> Language | None:
    """
    Normalize a language code strictly.

    Handles quality values ("ja;q=0.8"), region subtags ("ja-JP", "uz_UZ")
    and the legacy "jp" alias.

    Args:
        value: Raw language code or tag.

    Returns:
        Canonical language, or None if the value is not recognized.
    """
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        return None

    raw = value.strip().lower()
    if ";" in raw:
        raw = raw.split(";", 1)[0].strip()
    for sep in ("-", "_"):
        if sep in raw:
            raw = raw.split(sep, 1)[0].strip()

    return _ALIASES.get(raw)


def coerce_language(value: str | None, default: Language = DEFAULT_LANGUAGE) -> Language:
    """Normalize a language code, falling back to ``default`` when unrecognized."""
    return normalize_language(value) or default


def get_user_language(
    headers: Mapping[str, str] | None = None,
    override: str | None = None,
) -> Language:
    """
    Determine the effective language for a request.

    Priority: explicit override, then the ``X-Lang`` header, then the
    first entry of ``Accept-Language``, then English. Whichever source
    wins is normalized; unrecognized values resolve to English rather
    than falling through to the next source.

    Region subtags are stripped before matching, so ``ja-JP`` resolves to
    Japanese. Older clients matched only the bare codes and would have
    shown English for ``ja-JP``.

    Args:
        headers: Request headers (case-insensitive mapping or plain dict).
        override: Explicit language supplied by the caller.

    Returns:
        Effective language.
    """
    if override:
        return coerce_language(override)

    if headers:
        lang = _header(headers, "x-lang")
        if not lang:
            accept = _header(headers, "accept-language")
            if accept:
                lang = accept.split(",", 1)[0]
        if lang:
            return coerce_language(lang)

    return DEFAULT_LANGUAGE


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        # Plain dicts are not case-insensitive
        for key, candidate in headers.items():
            if key.lower() == name:
                return candidate
    return value
