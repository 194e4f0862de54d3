"""
Utilities to centralize configuration handling for the food ordering services.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

PLACEHOLDER_SECRETS = {"change-me", "change-me-please", "your-secret-key-here"}


@dataclass
class AppConfig:
    """Simple container for application level settings."""

    app_name: str
    # PostgreSQL database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "foodorder"
    db_password: str = "foodorder"
    db_name: str = "foodorder"
    db_sslmode: str = "disable"
    # Full SQLAlchemy URL, takes precedence over the db_* parts when set
    database_url: str | None = None
    # App settings
    secret_key: str = "change-me"
    log_level: str = "INFO"
    debug_mode: bool = False
    load_reference_data: bool = False
    cors_allowed_origins: list[str] = field(default_factory=lambda: ["*"])
    # Customer sessions
    access_token_expires_hours: int = 8

    @property
    def sqlalchemy_uri(self) -> str:
        """
        Build the SQLAlchemy URI.

        DATABASE_URL wins when configured; otherwise a PostgreSQL URI using
        psycopg2 as the driver is assembled from the individual settings.
        """
        if self.database_url:
            return self.database_url
        ssl_arg = f"?sslmode={self.db_sslmode}" if self.db_sslmode else ""
        return (
            f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}{ssl_arg}"
        )


def _read_env(name: str, default: str | None = None) -> str:
    """
    Internal helper to fetch environment variables with support for defaults.
    """
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing required environment variable '{name}'")
        value = default
    return value


def read_bool(name: str, default: str = "false") -> bool:
    value = _read_env(name, default)
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_list(name: str, default: str = "") -> list[str]:
    raw = _read_env(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def validate_required_env_vars(skip_in_debug: bool = False) -> None:
    """
    Validate that the critical environment variables are set.

    Fails fast during startup rather than encountering errors on the first
    login.

    Args:
        skip_in_debug: If True, skip validation when DEBUG_MODE=true

    Raises:
        RuntimeError: If any required variable is missing or has an invalid value
    """
    if skip_in_debug and read_bool("DEBUG_MODE", "false"):
        return

    errors = []

    secret_key = os.getenv("SECRET_KEY", "")
    if not secret_key or secret_key in PLACEHOLDER_SECRETS:
        errors.append(
            "SECRET_KEY must be configured with a secure random value. "
            'Generate with: python3 -c "import secrets; print(secrets.token_urlsafe(32))"'
        )

    expires_hours = os.getenv("ACCESS_TOKEN_EXPIRES_HOURS", "")
    if expires_hours:
        try:
            if int(expires_hours) < 1:
                errors.append("ACCESS_TOKEN_EXPIRES_HOURS must be a positive integer")
        except ValueError:
            errors.append(
                f"ACCESS_TOKEN_EXPIRES_HOURS must be a valid integer, got: {expires_hours}"
            )

    if errors:
        error_msg = "\nConfiguration Errors - Missing or invalid environment variables:\n"
        for error in errors:
            error_msg += f"  - {error}\n"
        raise RuntimeError(error_msg)


def load_config(app_name: str) -> AppConfig:
    """
    Produce an AppConfig instance populated from environment variables.

    Each entry point passes its own `app_name` so logs stay easy to tell apart
    while reusing the same loader.
    """
    return AppConfig(
        app_name=app_name,
        db_host=_read_env("POSTGRES_HOST", "localhost"),
        db_port=int(_read_env("POSTGRES_PORT", "5432")),
        db_user=_read_env("POSTGRES_USER", "foodorder"),
        db_password=_read_env("POSTGRES_PASSWORD", "foodorder"),
        db_name=_read_env("POSTGRES_DB", "foodorder"),
        db_sslmode=_read_env("POSTGRES_SSLMODE", "disable"),
        database_url=os.getenv("DATABASE_URL") or None,
        secret_key=_read_env("SECRET_KEY", "change-me"),
        log_level=_read_env("LOG_LEVEL", "INFO"),
        debug_mode=read_bool("DEBUG_MODE", "false"),
        load_reference_data=read_bool("LOAD_REFERENCE_DATA", "false"),
        cors_allowed_origins=_read_list("CORS_ALLOWED_ORIGINS", "*"),
        access_token_expires_hours=int(_read_env("ACCESS_TOKEN_EXPIRES_HOURS", "8")),
    )
