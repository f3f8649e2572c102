# tests/conftest.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Shared fixtures for the CSRD report compiler test suite."""

from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import date

import prometheus_client as prom
import pytest
from prometheus_client import CollectorRegistry

from csrd_xbrl.config.settings import get_settings
from csrd_xbrl.domain.entities.module_result import (
    CalculatedModuleResult,
    IntensityDescriptor,
    ModuleFact,
    ModuleResult,
    TableFact,
)
from csrd_xbrl.domain.entities.reporting import EntityIdentifier, ReportingPeriod
from csrd_xbrl.domain.enums.esrs import IntensityBasis

ResultFactory = Callable[..., CalculatedModuleResult]


def make_result(
    module_id: str,
    value: float | None = None,
    unit: str = "t CO2e",
    *,
    facts: tuple[ModuleFact, ...] = (),
    tables: tuple[TableFact, ...] = (),
    intensities: tuple[IntensityDescriptor, ...] = (),
    title: str | None = None,
) -> CalculatedModuleResult:
    """Build a calculated module result with sensible defaults."""
    return CalculatedModuleResult(
        module_id=module_id,
        title=title or module_id,
        result=ModuleResult(
            value=value,
            unit=unit,
            facts=facts,
            tables=tables,
            intensities=intensities,
        ),
    )


def net_revenue(denominator: float | None) -> IntensityDescriptor:
    """Return a net-revenue intensity descriptor with the given denominator."""
    return IntensityDescriptor(
        basis=IntensityBasis.NET_REVENUE,
        value=None,
        denominator_value=denominator,
        label="Intensity per net revenue",
        unit="t CO2e/mio. DKK",
        denominator_unit="DKK",
    )


@pytest.fixture
def result_factory() -> ResultFactory:
    """Expose :func:`make_result` as a fixture."""
    return make_result


@pytest.fixture
def reporting_period() -> ReportingPeriod:
    return ReportingPeriod(start=date(2024, 1, 1), end=date(2024, 12, 31))


@pytest.fixture
def entity() -> EntityIdentifier:
    return EntityIdentifier(scheme="http://standards.iso.org/iso/17442", value="5299000J2N45DDNE4Y28")


@pytest.fixture
def mixed_scope_results() -> list[CalculatedModuleResult]:
    """Scope 1, scope 2 (location plus a market adjustment) and scope 3 modules."""
    return [
        make_result("A1", 12.5),
        make_result("A2", 7.25),
        make_result("B1", 30.4),
        make_result("B6", 4.6),
        make_result("B7", -5.1),
        make_result("C1", 3.2),
        make_result("C5", 1.1),
    ]


@pytest.fixture
def fresh_registry(monkeypatch: pytest.MonkeyPatch) -> Generator[CollectorRegistry, None, None]:
    """Swap the default Prometheus registry for an empty one."""
    registry = CollectorRegistry()
    monkeypatch.setattr(prom, "REGISTRY", registry)
    yield registry


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Ensure each test reads settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def net_revenue_intensity() -> Callable[[float | None], IntensityDescriptor]:
    """Expose :func:`net_revenue` as a fixture."""
    return net_revenue
