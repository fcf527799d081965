"""
API configuration settings.
"""

import os
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


def resolve_env_name(*candidates: str) -> str:
    """Map APP_ENV-style values to "dev" or "prod" (anything else kept as is)."""
    name = next((c for c in candidates if c and c.strip()), "").strip().lower()
    if name in ("", "dev", "development"):
        return "dev"
    if name in ("prod", "production"):
        return "prod"
    return name


def env_files() -> tuple[str, ...]:
    """``.env`` first, then ``.env.<env>`` overriding it."""
    env_name = resolve_env_name(os.getenv("APP_ENV", ""), os.getenv("ENV", ""))
    return (".env", f".env.{env_name}")


class Settings(BaseSettings):
    """Site settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Data
    SET_DATA_PATH: str = "data/set16_champions.json"
    TRAIT_ASSETS_DIR: str = "static/assets/Traits/SET16"
    UNIT_ASSETS_DIR: str = "static/assets/Units/SET16"
    SPELL_ASSETS_DIR: str = "static/assets/Spells/SET16/webp-64"

    # Static files
    STATIC_DIR: str = "static"
    STATIC_BASE_URL: str = "/static"
    STATIC_CACHE_SECONDS: int = 0  # 0 disables caching; set in prod
    ASSET_MANIFEST_PATH: str = "static/dist/manifest.json"
    GZIP_MINIMUM_SIZE: int = 500

    # Pages
    SITE_URL: str = "http://localhost:8080"
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")

    @field_validator("PORT", mode="before")
    @classmethod
    def _strip_port_colon(cls, value):
        """Accept "8080" or ":8080"."""
        if isinstance(value, str):
            value = value.strip().lstrip(":") or "8080"
        return value

    @field_validator("STATIC_CACHE_SECONDS", mode="before")
    @classmethod
    def _non_negative_cache(cls, value):
        try:
            seconds = int(value)
        except (TypeError, ValueError):
            return 0
        return seconds if seconds >= 0 else 0

    class Config:
        env_file = env_files()
        extra = "ignore"


settings = Settings()
