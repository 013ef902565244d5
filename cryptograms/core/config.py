from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Cryptograms"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    api_version: str = "0.1"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./cryptograms.db"

    # Static sources
    quotes_file: Path = DATA_DIR / "quotes.json"
    words_file: Path = DATA_DIR / "words.txt"

    # Generation settings
    max_plaintext_length: int = 1000
    key_generation_max_attempts: int = 1000
    token_allocation_attempts: int = 5
    hill_matrix_size: int = 2
    hill_max_size: int = 6

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
