from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Search
    max_steps: int = 1_000_000

    # Playback
    play_delay_ms: float = 10.0

    # Puzzles
    default_example: str = "b38y"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="UBONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
