"""Runtime settings read from the environment.

Values come from ``ARCHBUDGET_*`` environment variables, with ``.env``
files in the project root and ``backend/`` read as fallbacks. Settings are
built once by ``load_settings`` and passed to ``create_default_engine`` and
``create_app``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from archbudget.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ARCHBUDGET_"

_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Configuration for the calculators and the HTTP adapter."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=(_project_root / ".env", _backend_dir / ".env"),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    cost_data_dir: Path | None = None
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"]
    )
    log_level: LogLevel = "INFO"

    complexity_multiplier: float = Field(default=0.3, ge=0)
    discount_rate: float = Field(default=0.15, ge=0, le=1)
    average_billable_rate: float = Field(default=172.17, gt=0)
    hours_factor: float = Field(default=0.22, ge=0)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: object) -> object:
        # ARCHBUDGET_CORS_ORIGINS is a comma-separated list
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v


def load_settings(**overrides: Any) -> Settings:
    """Build ``Settings`` from the environment and ``.env`` files.

    Keyword arguments are passed through to ``Settings`` and take
    precedence over the environment; ``_env_file=None`` skips the ``.env``
    files (useful in tests).

    Raises:
        InvalidInputError: If a variable holds an unusable value.
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        msg = f"Invalid {ENV_PREFIX}* configuration: {exc}"
        raise InvalidInputError(msg) from exc

    logger.debug("Loaded settings: %s", settings)
    return settings


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the archbudget loggers."""
    logging.getLogger("archbudget").setLevel(settings.log_level)
