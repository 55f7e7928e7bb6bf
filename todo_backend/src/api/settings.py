from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.engine import URL


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - DB_USER, DB_HOST, DB_NAME, DB_PASSWORD, DB_PORT: PostgreSQL connection parts
    - DATABASE_URL: full SQLAlchemy URL; takes precedence over the DB_* values
    - DB_CREATE_SCHEMA: 'true' (default) to create the todos table at startup
    - PORT: HTTP listen port. Default 8080
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: minimum log level. Default INFO
    - LOG_FORMAT: 'text' (default) or 'json'
    """

    db_user: str
    db_host: str
    db_name: str
    db_password: str
    db_port: int
    database_url_override: Optional[str]
    create_schema: bool
    port: int
    cors_allow_origins: List[str]
    log_level: str
    log_format: str

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured database."""
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    log_format = _get_env("LOG_FORMAT", "text").strip().lower()
    if log_format not in {"text", "json"}:
        log_format = "text"

    return Settings(
        db_user=_get_env("DB_USER", "postgres"),
        db_host=_get_env("DB_HOST", "localhost"),
        db_name=_get_env("DB_NAME", "postgres"),
        db_password=_get_env("DB_PASSWORD", "postgres"),
        db_port=_parse_int(_get_env("DB_PORT", "5432"), 5432),
        database_url_override=os.getenv("DATABASE_URL") or None,
        create_schema=_parse_bool(_get_env("DB_CREATE_SCHEMA", "true"), True),
        port=_parse_int(_get_env("PORT", "8080"), 8080),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
        log_format=log_format,
    )
