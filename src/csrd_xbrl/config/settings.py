# src/csrd_xbrl/config/settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""CSRD XBRL Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the CSRD report compiler. Only the
    application façade and the dependency wiring read settings; domain
    services receive plain arguments.

Design:
    - Pydantic v2 BaseSettings with a ``CSRD_`` env prefix and ``.env`` support.
    - Explicit field declarations with constrained types and ranges.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from csrd_xbrl.domain.entities.reporting import DEFAULT_ENTITY_SCHEME

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for the CSRD report compiler."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment, stamped on report build logs.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level applied by bootstrap_reporting().",
    )

    default_decimals: int = Field(
        default=3,
        ge=0,
        le=12,
        description="Rounding precision for numeric facts without their own decimals.",
    )

    default_entity_scheme: str = Field(
        default=DEFAULT_ENTITY_SCHEME,
        min_length=1,
        description="Entity identifier scheme used when a report names no entity.",
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus metrics for report builds.",
    )

    model_config = SettingsConfigDict(
        env_prefix="CSRD_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """Accept log level names in any case."""
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid CSRD configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.info(
        "Settings initialized",
        extra={
            "environment": settings.environment.value,
            "log_level": settings.log_level,
            "default_decimals": settings.default_decimals,
            "default_entity_scheme": settings.default_entity_scheme,
            "metrics_enabled": settings.metrics_enabled,
        },
    )
    return settings
