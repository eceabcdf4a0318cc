"""
Configuration for the conjugation drill API.

Values come from environment variables prefixed with ``DRILL_`` and are
validated by pydantic; a malformed value fails at startup.

- DRILL_HOST            interface to bind (default "0.0.0.0")
- DRILL_PORT            TCP port, 1-65535 (default 8000)
- DRILL_CORS_ORIGINS    "*" or a comma-separated list of origins (default "*")
- DRILL_RANDOM_SEED     integer seed for question sampling (default: unseeded)
- DRILL_LOG_LEVEL       logging level name (default "INFO")
- DRILL_DEBUG           boolean, enables FastAPI debug mode and reload
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DrillConfig(BaseSettings):
    """Configuration values for the HTTP layer."""

    host: str = "0.0.0.0"
    port: int = Field(8000, gt=0, le=65535)
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    random_seed: int | None = None
    log_level: str = "INFO"
    debug: bool = False

    model_config = SettingsConfigDict(env_prefix="DRILL_", env_ignore_empty=True, extra="ignore")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [p.strip() for p in value.split(",") if p.strip()] or ["*"]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


_CONFIG: DrillConfig | None = None


def get_config() -> DrillConfig:
    """Return the process-wide config, reading the environment on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = DrillConfig()
    return _CONFIG


def set_config(config: DrillConfig | None) -> None:
    """Replace the process-wide config (``None`` re-reads the environment).

    Affects later ``get_config()`` callers, such as logging setup and the
    sampler seed applied at application startup. The CORS origins and debug
    flag of ``main.app`` are fixed when that module is imported.
    """
    global _CONFIG
    _CONFIG = config
