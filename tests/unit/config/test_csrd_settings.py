# tests/unit/config/test_csrd_settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from csrd_xbrl.config.settings import Environment, Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CSRD_ENVIRONMENT",
        "CSRD_LOG_LEVEL",
        "CSRD_DEFAULT_DECIMALS",
        "CSRD_DEFAULT_ENTITY_SCHEME",
        "CSRD_METRICS_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.environment is Environment.DEVELOPMENT
    assert settings.log_level == "INFO"
    assert settings.default_decimals == 3
    assert settings.default_entity_scheme == "urn:org:eaas:profile"
    assert settings.metrics_enabled is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSRD_ENVIRONMENT", "production")
    monkeypatch.setenv("CSRD_LOG_LEVEL", "debug")
    monkeypatch.setenv("CSRD_DEFAULT_DECIMALS", "2")
    monkeypatch.setenv("CSRD_DEFAULT_ENTITY_SCHEME", "http://standards.iso.org/iso/17442")
    monkeypatch.setenv("CSRD_METRICS_ENABLED", "false")

    settings = Settings(_env_file=None)

    assert settings.environment is Environment.PRODUCTION
    assert settings.log_level == "DEBUG"
    assert settings.default_decimals == 2
    assert settings.default_entity_scheme == "http://standards.iso.org/iso/17442"
    assert settings.metrics_enabled is False


@pytest.mark.parametrize("value", ["-1", "13", "three"])
def test_invalid_default_decimals_rejected(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("CSRD_DEFAULT_DECIMALS", value)

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_get_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSRD_LOG_LEVEL", "chatty")

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()
