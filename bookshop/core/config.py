# bookshop/core/config.py
# All application settings loaded from environment variables / .env file
# In development: loaded from .env file via pydantic-settings

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Single source of truth for all Bookshop configuration.
    pydantic-settings automatically reads from environment variables.
    Variable names are case-insensitive.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: str = "development"
    app_name: str = "Bookshop"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    # Database
    database_url: str
    auto_migrate_on_startup: bool = False

    # JWT (tokens are issued by the identity provider, verified here)
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Open Library
    openlibrary_base_url: str = "https://openlibrary.org"
    openlibrary_timeout_seconds: float = 5.0
    openlibrary_user_agent: str = "Bookshop/1.0 (+https://openlibrary.org/developers/api)"

    # Jobs
    export_directory: str = "var/export"

    @property
    def cors_origins(self) -> List[str]:
        """Parse comma-separated ALLOWED_ORIGINS into a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Returns a cached Settings instance.
    Use as a FastAPI dependency: settings = Depends(get_settings)
    Or import directly:         from bookshop.core.config import settings
    """
    return Settings()


# Module-level singleton -- import this directly in most places
settings = get_settings()
