"""Centralized configuration.

Settings are read from environment variables prefixed with CHESS_ (or a .env file).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Off: a finished game has no legal moves left, so attempts are reported as illegal moves.
    # On: they are reported as GAME_OVER before any validation takes place.
    reject_moves_after_game_over: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
