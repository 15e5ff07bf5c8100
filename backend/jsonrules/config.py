"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

BUNDLED_SCHEMAS_DIR = Path(__file__).parent / "validators" / "schemas"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = True

    # Schema catalog
    SCHEMAS_DIR: Path = BUNDLED_SCHEMAS_DIR

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
