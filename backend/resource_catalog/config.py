"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables (never hardcoded credentials
      beyond the docker-compose default)
    - get_settings() is cached (lru_cache): single instance per process
    - Role names are stored normalized (ROLE_ prefix)

Design Decisions:
    - Defaults for every setting: works out-of-the-box with docker-compose
    - Identity arrives as trusted headers from the upstream gateway; only their
      names are configurable here
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resource_catalog.core.authorization import (
    DEFAULT_BASELINE_ROLE, DEFAULT_ELEVATED_ROLE, normalize_role,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://catalog:catalog@db:5432/catalog"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Identity (supplied by the upstream authentication gateway)
    identity_email_header: str = "X-Auth-Email"
    identity_roles_header: str = "X-Auth-Roles"
    baseline_role: str = DEFAULT_BASELINE_ROLE
    elevated_role: str = DEFAULT_ELEVATED_ROLE

    @field_validator("baseline_role", "elevated_role")
    @classmethod
    def normalize_role_name(cls, v: str) -> str:
        return normalize_role(v)

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
