"""
Translation configuration.

This module provides machine translation settings loaded from
environment variables.
"""

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class TranslationConfig(BaseSettings):
    """
    Machine translation configuration from environment variables.

    All settings are prefixed with TRANSLATION_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: str = "google"  # google | deepl | openai
    api_key: str = ""
    model: str = ""  # OpenAI model name

    # When disabled every edit is applied verbatim
    auto_translate: bool = True

    def provider_settings(self) -> dict[str, Any]:
        """Settings dict understood by ``create_translation_provider``."""
        return {
            "translation_provider": self.provider,
            "translation_api_key": self.api_key,
            "translation_model": self.model,
        }


# Global instance
translation_config = TranslationConfig()
