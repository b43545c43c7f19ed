"""Library configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_prefix="RECORDKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Identity
    ID_START: int = 1

    # Shopping cart
    TAX_RATE: float = 0.10

    @field_validator("ID_START", mode="after")
    @classmethod
    def validate_id_start(cls, value: int) -> int:
        """Identifiers are positive integers."""
        if value < 1:
            msg = "ID_START must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("TAX_RATE", mode="after")
    @classmethod
    def validate_tax_rate(cls, value: float) -> float:
        """Reject negative tax rates."""
        if value < 0:
            msg = "TAX_RATE cannot be negative"
            raise ValueError(msg)
        return value


_LOG_LEVELS = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


def configure_logging(environment: str | None = None) -> None:
    """
    Configure structured logging with structlog.

    Services only emit ``info`` events for successful mutations, so the
    test environment stays quiet unless something is wrong.

    Args:
        environment: Overrides ``Settings.ENVIRONMENT`` when given
    """
    environment = environment or get_settings().ENVIRONMENT
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_LOG_LEVELS.get(environment, logging.INFO),
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    )
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Settings read once per process. Tests call get_settings.cache_clear()."""
    return Settings()
