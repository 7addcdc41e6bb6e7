"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``TOWERDEFENSE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOWERDEFENSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Random source seed; unset means a fresh game every run
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    # Narrate every shot and turn; off leaves only the verdict
    narrate: bool = True

    # Per-subscriber event queue bound (0 = unbounded)
    event_queue_size: int = 0


settings = Settings()
