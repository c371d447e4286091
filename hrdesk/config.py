"""Application configuration via environment variables."""

import json
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google Sheets (tabular store)
    GOOGLE_SPREADSHEET_ID: str = ""
    GOOGLE_CLIENT_EMAIL: str = ""
    GOOGLE_PRIVATE_KEY: str = ""

    # Firebase (document store)
    FIREBASE_CREDENTIALS_JSON: str = ""
    FIREBASE_PROJECT_ID: str = ""

    # "google" talks to Sheets + Firestore, "memory" keeps everything in-process
    STORE_BACKEND: str = "google"

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = '["http://localhost:3000"]'

    # Rate limiting (storage URI per the limits library; "memory://" counts per process)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    RATE_LIMIT_DEFAULT: str = "60/minute"
    TRACKING_RATE_LIMIT: str = "120/minute"

    # Existing mobile clients rely on 0 coordinates being rejected
    TRACKING_REJECT_ZERO_COORDINATES: bool = True

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS JSON string into a list."""
        try:
            return json.loads(self.CORS_ORIGINS)
        except (json.JSONDecodeError, TypeError):
            return ["http://localhost:3000"]

    @property
    def spreadsheet_configured(self) -> bool:
        return bool(self.GOOGLE_SPREADSHEET_ID.strip())

    @property
    def google_private_key(self) -> str:
        """Private key with literal ``\\n`` escapes expanded (as stored in .env files)."""
        return self.GOOGLE_PRIVATE_KEY.replace("\\n", "\n")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process. Used as a FastAPI dependency."""
    return Settings()


settings = get_settings()
