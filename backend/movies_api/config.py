"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the fixed deployment (port 3001, CORS for localhost:3000)
      so the service runs with no environment at all
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Documentation metadata
    app_name: str = "Movies API"
    app_description: str = "API de películas con operaciones CRUD"
    app_version: str = "1.0.0"
    contact_name: str = "Desarrollador"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    public_url: str = "http://localhost:3001"

    # API
    api_prefix: str = "/api"
    docs_url: str = "/api-docs"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @property
    def openapi_url(self) -> str:
        return f"{self.docs_url}/openapi.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
