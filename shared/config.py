"""
Centralized configuration for the Partshop backend.

All settings are loaded from environment variables (prefixed with PARTSHOP_)
with sensible defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PARTSHOP_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Partshop API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, used by run_migrations.py

    # Bearer credentials
    token_secret: str = ""
    token_algorithm: str = "HS256"
    token_expire_minutes: int = 60

    # Access policy
    product_mutations_require_admin: bool = True
    user_delete_requires_owner: bool = False
    allow_role_on_registration: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
