"""
docpub: Central Config Loader (Pydantic Settings)

This module centralizes loading ENV for the bearer-token authenticator,
the Google OAuth / Docs / Drive endpoints, the outbound HTTP policy
(timeouts + retry) and logging config.

Services MUST import from here instead of reading ENV directly.

Usage:

from common.docpub_common.config import settings

client = GoogleDocsClient(credentials, settings=settings)
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = BASE_DIR / "configs"


class Settings(BaseSettings):
    """
    Central configuration using Pydantic Settings (v2).
    Overrides order:
    1. Environment variables
    2. .env file (optional)
    3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -----------------------------
    # Service Identity
    # -----------------------------
    COMPONENT_NAME: str = Field("docpub", description="Logical component name")
    SERVICE_VERSION: str = "1.0.0"

    # -----------------------------
    # Bearer credentials (JWT)
    # -----------------------------
    JWT_SECRET: str = "your-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60

    # -----------------------------
    # Google OAuth
    # -----------------------------
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    REDIRECT_URI: str = ""
    FRONTEND_URL: str = "http://localhost:3000"
    GOOGLE_SCOPES: List[str] = [
        "https://www.googleapis.com/auth/userinfo.profile",
        "https://www.googleapis.com/auth/userinfo.email",
        "https://www.googleapis.com/auth/drive.file",
        "https://www.googleapis.com/auth/documents",
    ]

    # -----------------------------
    # Google endpoints
    # -----------------------------
    GOOGLE_AUTH_URL: str = "https://accounts.google.com/o/oauth2/v2/auth"
    GOOGLE_TOKEN_URL: str = "https://oauth2.googleapis.com/token"
    GOOGLE_USERINFO_URL: str = "https://www.googleapis.com/oauth2/v3/userinfo"
    DOCS_API_BASE: str = "https://docs.googleapis.com/v1"
    DRIVE_API_BASE: str = "https://www.googleapis.com/drive/v3"

    # -----------------------------
    # Outbound HTTP policy
    # -----------------------------
    HTTP_TIMEOUT_MS: int = 15000
    HTTP_RETRIES: int = 3
    HTTP_BACKOFF_BASE_MS: int = 200
    HTTP_BACKOFF_MAX_MS: int = 2000

    # -----------------------------
    # HTTP surface
    # -----------------------------
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    MAX_BODY_BYTES: int = 10 * 1024 * 1024

    # -----------------------------
    # Logging
    # -----------------------------
    LOGGING_YAML: str = str(CONFIG_DIR / "logging.yaml")
    LOG_DIR: str = str(BASE_DIR / "log")
    LOG_FILES_ENABLED: bool = True

    # -----------------------------
    # Misc Runtime Settings
    # -----------------------------
    ENV: str = Field("dev", description="dev / staging / prod")
    DEBUG: bool = False


# Create global settings instance
settings = Settings()

__all__ = ["Settings", "settings"]
