# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Supabase Postgres connection string)
      - ADMIN_PASSWORD (password for the single admin account)
      - ADMIN_TOKEN_SECRET (HS256 signing secret for admin tokens)

    Optional:
      - ADMIN_USERNAME (defaults to "admin")
      - ADMIN_TOKEN_TTL_MINUTES (defaults to 60)
      - CORS_ORIGINS (JSON list of allowed storefront origins)
    """

    PROJECT_NAME: str = "Decor Catalog API"
    API_V1_STR: str = "/api/v1"

    # DB config
    DATABASE_URL: str

    # Admin login + token issuing
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str
    ADMIN_TOKEN_SECRET: str
    ADMIN_TOKEN_ALG: str = "HS256"
    ADMIN_TOKEN_TTL_MINUTES: int = 60

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://localhost:8080",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
