"""
config.py — Environment configuration for the engine.

Settings are read from environment variables (and a local .env file) once
and cached.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Engine settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SWIPER_ATTR_",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Install the change watcher from SwiperController.start()
    watch_changes: bool = Field(default=True, validation_alias="SWIPER_ATTR_WATCH")

    # Dotted path of the slider factory, "package.module:attribute"
    factory_path: str = Field(default="", validation_alias="SWIPER_ATTR_FACTORY")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def has_factory_path(self) -> bool:
        """Check if a slider factory path is configured."""
        return bool(self.factory_path)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging in the standard format.

    Args:
        level: Level name or number. Defaults to the configured log level.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
