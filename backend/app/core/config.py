from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Any
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # JWT configuration (provide a fallback for local development)
    SECRET_KEY: str = "fallback_secret_for_dev_only"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Cookie carrying the session JWT issued at sign-in
    SESSION_COOKIE_NAME: str = "app_session_id"
    COOKIE_SECURE: bool = False

    # Identity-provider subject that is promoted to the admin role on sign-in
    OWNER_OPEN_ID: str = ""

    # Database URL. Empty means no storage is configured: reads degrade to
    # empty results and writes fail with 503.
    DATABASE_URL: str = ""

    # CORS origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_ALL: bool = False

    LOG_LEVEL: str = "INFO"

    # S3-compatible blob storage for profile photos and portfolio images
    STORAGE_BUCKET: str = ""
    STORAGE_ENDPOINT: str = ""
    STORAGE_REGION: str = "auto"
    STORAGE_ACCESS_KEY_ID: str = ""
    STORAGE_SECRET_ACCESS_KEY: str = ""
    # Public base for reads (e.g., https://media.example.com)
    STORAGE_PUBLIC_BASE_URL: str = ""

    # Upload guard for base64 image payloads (decoded bytes)
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=True)

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator(
        "DATABASE_URL",
        "OWNER_OPEN_ID",
        "STORAGE_BUCKET",
        "STORAGE_ENDPOINT",
        "STORAGE_PUBLIC_BASE_URL",
        mode="before",
    )
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(cls, values: "Settings") -> "Settings":
        if values.CORS_ALLOW_ALL:
            values.CORS_ORIGINS = ["*"]
        return values


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
