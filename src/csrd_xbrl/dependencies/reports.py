# src/csrd_xbrl/dependencies/reports.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Wiring for the report use cases.

Configuration is read from Settings; the use cases themselves never touch
the environment. Tests pass an explicit Settings instance.

The single process-level entry point is :func:`bootstrap_reporting`, which
installs the JSON root logger at the configured level. The use-case
factories can be called any number of times.
"""

from __future__ import annotations

from csrd_xbrl.application.use_cases.reports.build_csrd_report_package import (
    BuildCsrdReportPackageUseCase,
)
from csrd_xbrl.application.use_cases.reports.build_submission_payload import (
    BuildSubmissionPayloadUseCase,
)
from csrd_xbrl.config.settings import Settings, get_settings
from csrd_xbrl.domain.services.fact_compiler import FactCompiler
from csrd_xbrl.infrastructure.logging.logger import configure_root_logging, get_json_logger

logger = get_json_logger(__name__)


def bootstrap_reporting(settings: Settings | None = None) -> Settings:
    """Configure root logging from settings and return the settings used.

    Args:
        settings: Explicit settings. When omitted, the cached settings are used.

    Returns:
        The resolved Settings.
    """
    resolved = settings or get_settings()
    configure_root_logging(resolved.log_level)
    logger.info(
        "csrd.bootstrap",
        extra={
            "env": resolved.environment.value,
            "log_level": resolved.log_level,
            "metrics_enabled": resolved.metrics_enabled,
        },
    )
    return resolved


def get_build_csrd_report_package_use_case(
    settings: Settings | None = None,
) -> BuildCsrdReportPackageUseCase:
    """Return a report-package use case configured from settings."""
    resolved = settings or get_settings()
    return BuildCsrdReportPackageUseCase(
        compiler=FactCompiler(),
        default_decimals=resolved.default_decimals,
        default_entity_scheme=resolved.default_entity_scheme,
        metrics_enabled=resolved.metrics_enabled,
        environment=resolved.environment.value,
    )


def get_build_submission_payload_use_case(
    settings: Settings | None = None,
) -> BuildSubmissionPayloadUseCase:
    """Return a submission-payload use case configured from settings."""
    return BuildSubmissionPayloadUseCase(
        package_use_case=get_build_csrd_report_package_use_case(settings),
    )


__all__ = [
    "bootstrap_reporting",
    "get_build_csrd_report_package_use_case",
    "get_build_submission_payload_use_case",
]
