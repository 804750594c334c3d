"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Document store
    mongo_url: str = "mongodb://localhost:27017"
    mongo_db_name: str = "orgservice"
    mongo_timeout_ms: int = 5000

    # Collections
    users_collection: str = "users"
    organizations_collection: str = "organizations"

    # Organization defaults
    default_organization_name: str = "Untitled Organization"
    workspace_domain: str = "workspace.local"
    workspace_slug_length: int = 10

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
