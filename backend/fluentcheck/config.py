"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings loaded from FLUENTCHECK_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Rules
    FLOAT_MULTIPLE_TOLERANCE: float = 1e-9

    model_config = {
        "env_prefix": "FLUENTCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
