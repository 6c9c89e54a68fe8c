"""Centralised settings object – importable from anywhere."""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Auto-load .env from repo root
load_dotenv(Path(__file__).resolve().parents[1] / ".env")


class _Settings(BaseSettings):
    # === Lexicon ======================================================
    VALENCE_LEXICON_PATH: str = ""  # Empty = vader_lexicon.txt bundled with vaderSentiment
    VALENCE_DEFAULT_LANGUAGE: str = "en"

    # === Application Settings ========================================
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def lexicon_path(self) -> Optional[Path]:
        """Configured word-valence file, or None for the bundled one."""
        if not self.VALENCE_LEXICON_PATH.strip():
            return None
        return Path(self.VALENCE_LEXICON_PATH).expanduser()


@lru_cache
def settings() -> _Settings:
    return _Settings()
