"""
Legacy column bridge.

Before localized JSON columns existed every localized field was stored
as three flat columns (``title_en``, ``title_uz``, ``title_jp``). Those
columns are still written on every change so unmigrated readers keep
working, and are read back when a row predates the JSON column.
"""

from dataclasses import dataclass
from typing import Any

from jspace_core.languages import SUPPORTED_LANGUAGES, Language
from jspace_core.schemas.localized import LocalizedContent

# Legacy columns spell Japanese as "jp"
LEGACY_COLUMN_SUFFIXES: dict[Language, str] = {
    Language.EN: "en",
    Language.UZ: "uz",
    Language.JA: "jp",
}


@dataclass(frozen=True)
class LegacyMirror:
    """
    Mapping between one localized JSON attribute and its legacy columns.

    Attributes:
        attribute: Model attribute holding the JSON value (e.g. "name").
        column_prefix: Prefix of the flat columns (e.g. "title").
    """

    attribute: str
    column_prefix: str

    def column(self, lang: Language) -> str:
        """Legacy column name for ``lang``."""
        return f"{self.column_prefix}_{LEGACY_COLUMN_SUFFIXES[lang]}"

    def write(self, entity: Any, content: LocalizedContent) -> None:
        """Store ``content`` in the JSON attribute and mirror every slot."""
        setattr(entity, self.attribute, content.to_storage())
        for lang in SUPPORTED_LANGUAGES:
            setattr(entity, self.column(lang), content.get(lang))

    def read(self, entity: Any) -> LocalizedContent:
        """
        Read the current value of the field.

        Falls back to the legacy columns when the JSON value is missing
        or blank.
        """
        content = LocalizedContent.coerce(getattr(entity, self.attribute, None))
        if not content.is_blank():
            return content
        legacy = self.read_legacy(entity)
        # A field cleared on purpose keeps its lock
        return content if legacy.is_blank() else legacy

    def read_legacy(self, entity: Any) -> LocalizedContent:
        """Build a value from the legacy columns only."""
        return LocalizedContent(
            **{
                lang.value: getattr(entity, self.column(lang), None) or ""
                for lang in SUPPORTED_LANGUAGES
            }
        )
