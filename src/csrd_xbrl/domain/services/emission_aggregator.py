# src/csrd_xbrl/domain/services/emission_aggregator.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""GHG emission roll-up for CSRD reporting.

Purpose:
    Aggregate per-module emission scalars into the six mandatory ESRS E1-6
    totals (scope 1, scope 2 location-/market-based, scope 3, and the two
    grand totals) and locate the net-revenue denominator used for derived
    emission-intensity facts.

Layer:
    domain/services

Notes:
    - Which module contributes to which scope is configuration owned by the
      calculation-module collaborator (:class:`ScopeClassification`). The
      default table follows the module id convention: ``A*`` scope 1,
      ``B1``–``B6`` scope 2 location-based, ``B7``–``B11`` signed market-based
      adjustments, ``C*`` scope 3.
    - Only scalars reported in :data:`EMISSION_UNIT` are summed; modules in
      any other unit (scores, counts) are ignored without error.
    - Missing or non-finite scalars contribute zero. Nothing here raises on
      bad data.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from csrd_xbrl.domain.entities.module_result import CalculatedModuleResult, ModuleResult
from csrd_xbrl.domain.enums.esrs import IntensityBasis
from csrd_xbrl.domain.exceptions.csrd import UnknownConceptError

EMISSION_UNIT: Final[str] = "t CO2e"

NET_REVENUE_INTENSITY_DECIMALS: Final[int] = 9

# Highest B-module number that reports location-based scope 2 emissions.
_SCOPE2_LOCATION_MAX_INDEX: Final[int] = 6

KNOWN_MODULE_IDS: Final[tuple[str, ...]] = (
    *(f"A{i}" for i in range(1, 5)),
    *(f"B{i}" for i in range(1, 12)),
    *(f"C{i}" for i in range(1, 16)),
    "E1Scenarios",
    "E1CarbonPrice",
    "E1RiskGeography",
    "E1DecarbonisationDrivers",
    "E1Targets",
    "E2Water",
    "E3Pollution",
    "E4Biodiversity",
    "E5Resources",
    "SBM",
    "GOV",
    "IRO",
    "MR",
    "S1",
    "S2",
    "S3",
    "S4",
    "G1",
    "D1",
    "D2",
)


def _numeric_suffix(module_id: str) -> int | None:
    suffix = module_id[1:]
    return int(suffix) if suffix.isdigit() else None


@dataclass(frozen=True, slots=True)
class ScopeClassification:
    """Assignment of module ids to emission scope buckets.

    Attributes:
        scope1:
            Modules reporting direct (scope 1) emissions.
        scope2_location:
            Modules reporting location-based purchased-energy emissions.
        scope2_market_adjustment:
            Modules reporting signed deltas from location-based to
            market-based scope 2 emissions.
        scope3:
            Modules reporting value-chain (scope 3) emissions.
    """

    scope1: tuple[str, ...]
    scope2_location: tuple[str, ...]
    scope2_market_adjustment: tuple[str, ...]
    scope3: tuple[str, ...]

    @classmethod
    def from_module_ids(cls, module_ids: Iterable[str]) -> ScopeClassification:
        """Classify module ids using the letter-prefix/number-suffix convention.

        Ids that do not follow ``<letter><number>`` (e.g., "E1Targets") are
        left out of every bucket.
        """
        scope1: list[str] = []
        scope2_location: list[str] = []
        scope2_adjustment: list[str] = []
        scope3: list[str] = []

        for module_id in module_ids:
            index = _numeric_suffix(module_id)
            if index is None:
                continue
            prefix = module_id[0]
            if prefix == "A":
                scope1.append(module_id)
            elif prefix == "B" and index <= _SCOPE2_LOCATION_MAX_INDEX:
                scope2_location.append(module_id)
            elif prefix == "B":
                scope2_adjustment.append(module_id)
            elif prefix == "C":
                scope3.append(module_id)

        return cls(
            scope1=tuple(scope1),
            scope2_location=tuple(scope2_location),
            scope2_market_adjustment=tuple(scope2_adjustment),
            scope3=tuple(scope3),
        )


DEFAULT_SCOPE_CLASSIFICATION: Final[ScopeClassification] = ScopeClassification.from_module_ids(
    KNOWN_MODULE_IDS
)


@dataclass(frozen=True, slots=True)
class EmissionTotals:
    """Aggregated GHG emissions in tonnes CO2e.

    Attributes:
        scope1:
            Gross scope 1 emissions.
        scope2_location_based:
            Gross location-based scope 2 emissions.
        scope2_market_based:
            Location-based scope 2 plus the signed market adjustments. May be
            negative when adjustments exceed the location-based sum.
        scope3:
            Gross scope 3 emissions.
        total_location_based:
            scope1 + scope2_location_based + scope3.
        total_market_based:
            scope1 + scope2_market_based + scope3.
    """

    scope1: float = 0.0
    scope2_location_based: float = 0.0
    scope2_market_based: float = 0.0
    scope3: float = 0.0
    total_location_based: float = 0.0
    total_market_based: float = 0.0

    def for_concept(self, concept_key: str) -> float:
        """Return the total reported under one of the emission concept keys.

        Raises:
            UnknownConceptError:
                If ``concept_key`` is not an emission concept key.
        """
        attribute = _CONCEPT_TO_ATTRIBUTE.get(concept_key)
        if attribute is None:
            raise UnknownConceptError(
                f"Not an emission concept key: {concept_key}",
                details={"concept_key": concept_key},
            )
        value: float = getattr(self, attribute)
        return value


_CONCEPT_TO_ATTRIBUTE: Final[dict[str, str]] = {
    "scope1": "scope1",
    "scope2LocationBased": "scope2_location_based",
    "scope2MarketBased": "scope2_market_based",
    "scope3": "scope3",
    "totalLocationBased": "total_location_based",
    "totalMarketBased": "total_market_based",
}


class EmissionAggregator:
    """Roll up module emission scalars into ESRS E1-6 totals."""

    def __init__(self, classification: ScopeClassification | None = None) -> None:
        """Initialize the aggregator.

        Args:
            classification:
                Module-to-scope assignment. Defaults to
                :data:`DEFAULT_SCOPE_CLASSIFICATION`.
        """
        self._classification = classification or DEFAULT_SCOPE_CLASSIFICATION

    @property
    def classification(self) -> ScopeClassification:
        """Return the module-to-scope assignment in use."""
        return self._classification

    def calculate_totals(self, results: Sequence[CalculatedModuleResult]) -> EmissionTotals:
        """Aggregate module results into emission totals.

        When the same module id appears more than once, the last entry wins.

        Args:
            results:
                Calculated module results in any order.

        Returns:
            The aggregated :class:`EmissionTotals`.
        """
        by_module: dict[str, ModuleResult] = {}
        for entry in results:
            by_module[entry.module_id] = entry.result

        scope1 = _sum_tonnes(by_module, self._classification.scope1)
        scope2_location = _sum_tonnes(by_module, self._classification.scope2_location)
        scope2_adjustments = _sum_tonnes(by_module, self._classification.scope2_market_adjustment)
        scope2_market = scope2_location + scope2_adjustments
        scope3 = _sum_tonnes(by_module, self._classification.scope3)

        return EmissionTotals(
            scope1=scope1,
            scope2_location_based=scope2_location,
            scope2_market_based=scope2_market,
            scope3=scope3,
            total_location_based=scope1 + scope2_location + scope3,
            total_market_based=scope1 + scope2_market + scope3,
        )


def _sum_tonnes(by_module: dict[str, ModuleResult], module_ids: Sequence[str]) -> float:
    total = 0.0
    for module_id in module_ids:
        result = by_module.get(module_id)
        if result is None or result.unit != EMISSION_UNIT:
            continue
        value = _as_float(result.value)
        if value is not None:
            total += value
    return total


def _as_float(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def find_net_revenue_denominator(results: Sequence[CalculatedModuleResult]) -> float | None:
    """Return the first usable net-revenue denominator, if any.

    Modules are scanned in list order and descriptors in module order. A
    denominator is usable when its basis is net revenue and it is a finite,
    strictly positive number.

    Args:
        results:
            Calculated module results.

    Returns:
        The denominator, or None when no module reports a usable one.
    """
    for entry in results:
        for intensity in entry.result.intensities:
            if intensity.basis != IntensityBasis.NET_REVENUE:
                continue
            denominator = _as_float(intensity.denominator_value)
            if denominator is not None and denominator > 0:
                return denominator
    return None


__all__ = [
    "EMISSION_UNIT",
    "NET_REVENUE_INTENSITY_DECIMALS",
    "KNOWN_MODULE_IDS",
    "ScopeClassification",
    "DEFAULT_SCOPE_CLASSIFICATION",
    "EmissionTotals",
    "EmissionAggregator",
    "find_net_revenue_denominator",
]
