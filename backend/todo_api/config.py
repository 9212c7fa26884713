"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - Defaults run the service with no environment at all

Design Decisions:
    - In-memory SQLite by default: records live for the life of the process
    - Swagger UI only in the development environment
    - No CORS origins by default: there is no bundled browser client
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Record store
    database_url: str = "sqlite+aiosqlite:///:memory:"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "development"
    docs_url: str = "/swagger"
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def docs_enabled(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
