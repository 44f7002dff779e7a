"""UniCredits settings.

Values come from, highest priority first:

1. OS environment variables
2. the file named by ``UNICREDITS_ENV_FILE`` (absolute or project-relative)
3. ``config/.env.dev``, then ``config/.env``
4. defaults below

``JWT_SECRET_KEY`` and ``POSTGRES_PASSWORD`` have no default; generate them
with ``unicredits secrets generate``.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "UNICREDITS_ENV_FILE"


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for parent in [here, *here.parents]:
        if (parent / "config").is_dir() or (parent / "pyproject.toml").is_file():
            return parent
    return here.parents[1]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _find_project_root() / path)

    candidates += [get_config_dir() / ".env.dev", get_config_dir() / ".env"]
    return next((path for path in candidates if path.exists()), None)


def _split_csv(value: str, lower: bool = False) -> list[str]:
    items = [item.strip() for item in value.split(",") if item.strip()]
    return [item.lower() for item in items] if lower else items


class Settings(BaseSettings):
    """Every configurable value; field names map to upper-case env vars."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required secrets
    jwt_secret_key: SecretStr
    postgres_password: SecretStr

    app_name: str = "UniCredits"
    debug: bool = False

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = Field(default=5432, gt=0, lt=65536)
    postgres_user: str = "postgres"
    postgres_db: str = "unicredits"
    # Any SQLAlchemy async URL, e.g. sqlite+aiosqlite:///./data/unicredits.db
    database_url_override: str | None = None

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, gt=0, lt=65536)
    api_debug: bool = False
    api_cors_origins: str = ""

    # Tokens and registration
    jwt_access_token_expire_hours: int = Field(default=24, gt=0)
    allowed_email_domains: str = "stu.pku.edu.cn,pku.edu.cn"
    verification_code_expire_minutes: int = Field(default=15, gt=0)

    # Outgoing mail; when disabled the verification code is only logged
    smtp_enabled: bool = False
    smtp_host: str = ""
    smtp_port: int = Field(default=587, gt=0, lt=65536)
    smtp_user: str = ""
    smtp_password: SecretStr | None = None
    smtp_from_email: str = ""
    smtp_from_name: str = "UniCredits"
    smtp_use_tls: bool = True
    smtp_starttls: bool = True

    log_level: str = "INFO"

    @field_validator("api_cors_origins", "allowed_email_domains", mode="before")
    @classmethod
    def _join_lists(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    # Embeds the database password, so kept out of repr
    @computed_field(repr=False)  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.api_cors_origins)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def email_domains(self) -> list[str]:
        """Institutional mail domains allowed to register, lower-cased."""
        return _split_csv(self.allowed_email_domains, lower=True)


@lru_cache()
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
