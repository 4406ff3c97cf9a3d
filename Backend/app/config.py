# Backend/app/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Dit bestand staat in Backend/app/config.py → parent = Backend
BACKEND_DIR = Path(__file__).resolve().parents[1]
ENV_FILE = BACKEND_DIR / ".env"
load_dotenv(ENV_FILE, override=False)  # pre-load in procesomgeving


class Settings(BaseSettings):
    # ---- App / Infra ----
    APP_VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8081

    # ---- Content ----
    POSTS_DIR: Path = Path("posts")
    POST_EXTENSION: str = ".md"
    TEMPLATES_DIR: Path = BACKEND_DIR / "templates"
    STATIC_DIR: Path = BACKEND_DIR / "static"

    # ---- Feed channel ----
    FEED_TITLE: str = "io."
    FEED_LINK: str = "http://io.myyc.dev"
    FEED_DESCRIPTION: str = "io.myyc.dev"
    FEED_LANGUAGE: str = "en-gb"

    # ---- Logging ----
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    SERVICE_NAME: str = Field(default="posts-api")

    # Pydantic v2 configuratie
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",                  # negeer overige .env-keys
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
