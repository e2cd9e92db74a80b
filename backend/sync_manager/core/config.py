"""
Application configuration from environment variables.
Settings class using pydantic-settings with optional validation.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from backend root so it loads when running from backend/ or project root
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"

DEFAULT_PASSWORD = "123"


class Settings(BaseSettings):
    """
    Application settings loaded from environment and .env.
    All fields have defaults for local dev; validate for production.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    # Store as string so an env value never triggers json.loads; parsed in cors_origins_list.
    cors_origins: str = Field(
        default="http://localhost:8080",
        description="Comma-separated origins or JSON array",
        validation_alias="CORS_ORIGINS",
    )

    # Integration backend
    integration_base_url: str = Field(
        default="http://127.0.0.1:3000",
        description="Base URL the /integration/* sync endpoints are appended to",
        validation_alias="INTEGRATION_BASE_URL",
    )
    logs_base_url: str = Field(
        default="",
        description="Base URL for /api/logs/*; falls back to INTEGRATION_BASE_URL",
        validation_alias="LOGS_BASE_URL",
    )
    request_timeout_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Transport timeout for a single backend call",
        validation_alias="REQUEST_TIMEOUT_SECONDS",
    )

    # Orchestrator
    sync_log_limit: int = Field(
        default=50,
        ge=1,
        description="Maximum number of sync log entries kept in memory",
        validation_alias="SYNC_LOG_LIMIT",
    )
    reject_concurrent_trigger: bool = Field(
        default=True,
        description="Reject a trigger while the same operation is still running",
        validation_alias="REJECT_CONCURRENT_TRIGGER",
    )
    auto_sync_interval_minutes: int = Field(
        default=30,
        ge=1,
        description="Interval between scheduled full syncs when auto sync is enabled",
        validation_alias="AUTO_SYNC_INTERVAL_MINUTES",
    )

    # Authentication gate
    app_password: str = Field(
        default=DEFAULT_PASSWORD,
        description="Password that unlocks the UI",
        validation_alias="APP_PASSWORD",
    )
    auth_state_file: Path = Field(
        default=Path.home() / ".sync_manager" / "auth.json",
        description="File holding the persisted authentication flag",
        validation_alias="AUTH_STATE_FILE",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def normalize_cors_origins(cls, v: object) -> str:
        """Ensure we always have a string (avoid empty env causing json.loads in pydantic-settings)."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return "http://localhost:8080"
        if isinstance(v, list):
            return ",".join(str(x).strip() for x in v if str(x).strip())
        return str(v).strip()

    @field_validator("integration_base_url", "logs_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated or JSON array string."""
        raw = (self.cors_origins or "").strip()
        if not raw:
            return ["http://localhost:8080"]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return [x.strip() for x in parsed if isinstance(x, str) and x.strip()]
        return [x.strip() for x in raw.split(",") if x.strip()] or ["http://localhost:8080"]

    @property
    def resolved_logs_base_url(self) -> str:
        return self.logs_base_url or self.integration_base_url

    def validate_for_production(self) -> None:
        """
        Call to validate settings on startup in production.
        Raises ValueError listing every problem found.
        """
        problems: List[str] = []
        for name, url in (
            ("INTEGRATION_BASE_URL", self.integration_base_url),
            ("LOGS_BASE_URL", self.resolved_logs_base_url),
        ):
            if not url.startswith(("http://", "https://")):
                problems.append(f"{name} must be an http(s) URL")
        if self.ENVIRONMENT == "production" and self.app_password == DEFAULT_PASSWORD:
            problems.append("APP_PASSWORD must be changed from the default")
        if problems:
            raise ValueError(f"Invalid configuration: {'; '.join(problems)}")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
