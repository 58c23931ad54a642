"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. CASHBOARD_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - deployed

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. CASHBOARD_ENV_FILE env var
    2. config/.env.dev (local development)
    3. config/.env
    """
    env_file_path = os.environ.get("CASHBOARD_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Cashboard"

    # Remote store (API_ prefix)
    api_base_url: str = "http://localhost:8000"
    api_session_cookie_name: str = "session-id"
    api_session_token: SecretStr | None = None
    # None keeps requests unbounded, matching the web client
    api_timeout_seconds: float | None = None

    # Account binder
    binder_success_display_seconds: float = 1.0

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("api_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, v: Any) -> str:
        return str(v).rstrip("/")

    @field_validator("api_timeout_seconds", mode="before")
    @classmethod
    def _empty_timeout_is_none(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("binder_success_display_seconds")
    @classmethod
    def _validate_display_interval(cls, v: float) -> float:
        if v < 0:
            msg = f"binder_success_display_seconds must not be negative, got: {v}"
            raise ValueError(msg)
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
