"""
Risky Dice - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and configures logging from it.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Dice; unset means a fresh OS seed per process
    dice_seed: int | None = None

    model_config = {
        "env_prefix": "RISKYDICE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging at the configured level (DEBUG when debugging)."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
