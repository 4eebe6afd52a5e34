"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - The API key comes from the environment in any real deployment
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box for local runs
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth - placeholder, override with API_KEY
    api_key: str = "12345"
    api_key_header: str = "x-api-key"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Catalog
    seed_catalog: bool = True
    default_page_size: int = 2

    @field_validator("default_page_size")
    @classmethod
    def page_size_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("default_page_size must be >= 1")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
