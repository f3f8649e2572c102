# src/csrd_xbrl/domain/services/fact_compiler.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Fact compiler for CSRD XBRL instances.

Purpose:
    Convert calculation-module output into the ordered list of prepared facts
    that make up an ESRS XBRL instance. Facts are produced in four passes:

        1. Mandatory emissions: the six E1-6 totals from the aggregator,
           always present (zero when no module contributed).
        2. Module facts: numeric, boolean, and text facts declared by each
           module, in module order.
        3. Module tables: tables declared by each module, serialized as
           compact JSON (interleaved per module, after that module's facts).
        4. Derived intensities: net-revenue emission intensities, appended
           last and only when no module reported them directly.

Layer:
    domain/services

Notes:
    - The compiler is referentially transparent: identical inputs yield
      identical prepared facts in identical order.
    - Per-item problems (unknown concept key, non-finite number, blank text,
      empty table) never raise. The item is omitted and recorded as a
      :class:`SkippedItem` for diagnostics.
    - Period type and default unit always come from the taxonomy registry;
      nothing is inferred from the data.
    - Mandatory emission facts cannot be overridden by module facts.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from csrd_xbrl.domain.entities.module_result import (
    BooleanFact,
    CalculatedModuleResult,
    CellValue,
    ModuleFact,
    NumericFact,
    TableFact,
    TextFact,
)
from csrd_xbrl.domain.entities.xbrl_instance import PreparedFact
from csrd_xbrl.domain.services.emission_aggregator import (
    NET_REVENUE_INTENSITY_DECIMALS,
    EmissionAggregator,
    EmissionTotals,
    find_net_revenue_denominator,
)
from csrd_xbrl.domain.services.esrs_taxonomy import (
    EMISSION_CONCEPT_KEYS,
    NET_REVENUE_INTENSITY_LOCATION_KEY,
    NET_REVENUE_INTENSITY_MARKET_KEY,
    get_concept_definition,
    is_concept_key,
    iter_emission_concepts,
)
from csrd_xbrl.domain.services.numeric_format import format_decimal, is_finite_number

DEFAULT_DECIMALS: Final[int] = 3


class SkipReason(str, Enum):
    """Why a module-declared item was left out of the instance."""

    UNKNOWN_CONCEPT = "unknown_concept"
    NON_FINITE_NUMBER = "non_finite_number"
    EMPTY_TEXT = "empty_text"
    EMPTY_TABLE = "empty_table"
    ALREADY_REPORTED = "already_reported"
    INVALID_INTENSITY = "invalid_intensity"
    INVALID_DECIMALS = "invalid_decimals"


class FactOrigin(str, Enum):
    """Which compilation pass produced a prepared fact."""

    MANDATORY = "mandatory"
    MODULE = "module"
    TABLE = "table"
    INTENSITY = "intensity"


@dataclass(frozen=True, slots=True)
class SkippedItem:
    """Diagnostic record for an omitted fact or table.

    Attributes:
        module_id:
            Module that declared the item, or None for derived facts.
        concept_key:
            Concept key of the omitted item.
        reason:
            Why the item was omitted.
    """

    module_id: str | None
    concept_key: str
    reason: SkipReason


@dataclass(frozen=True, slots=True)
class FactCompilation:
    """Outcome of a single compilation pass.

    Attributes:
        facts:
            Prepared facts in emission order.
        origins:
            Pass that produced each fact, aligned index-by-index with ``facts``.
        totals:
            Emission totals used for the mandatory and intensity facts.
        skipped:
            Items omitted from the instance, in encounter order.
    """

    facts: tuple[PreparedFact, ...]
    origins: tuple[FactOrigin, ...]
    totals: EmissionTotals
    skipped: tuple[SkippedItem, ...]

    def count_by_origin(self) -> dict[FactOrigin, int]:
        """Return the number of prepared facts per originating pass."""
        counts = {origin: 0 for origin in FactOrigin}
        for origin in self.origins:
            counts[origin] += 1
        return counts


class _FactBuffer:
    """Accumulates prepared facts with their origin and skipped items."""

    def __init__(self) -> None:
        self.facts: list[PreparedFact] = []
        self.origins: list[FactOrigin] = []
        self.skipped: list[SkippedItem] = []

    def add(self, fact: PreparedFact, origin: FactOrigin) -> None:
        self.facts.append(fact)
        self.origins.append(origin)

    def skip(self, module_id: str | None, concept_key: str, reason: SkipReason) -> None:
        self.skipped.append(
            SkippedItem(module_id=module_id, concept_key=concept_key, reason=reason)
        )

    def has_concept(self, concept_key: str) -> bool:
        return any(fact.concept_key == concept_key for fact in self.facts)


class FactCompiler:
    """Compile calculation-module results into prepared ESRS facts."""

    def __init__(self, aggregator: EmissionAggregator | None = None) -> None:
        """Initialize the compiler.

        Args:
            aggregator:
                Emission aggregator used for the mandatory and intensity facts.
                Defaults to an aggregator with the default scope
                classification.
        """
        self._aggregator = aggregator or EmissionAggregator()

    def compile(
        self,
        results: Sequence[CalculatedModuleResult],
        *,
        decimals: int = DEFAULT_DECIMALS,
    ) -> FactCompilation:
        """Compile module results into prepared facts.

        Args:
            results:
                Calculated module results, in reporting order.
            decimals:
                Default rounding precision for numeric facts without their
                own override. Must be non-negative.

        Returns:
            A :class:`FactCompilation` with facts in emission order.

        Raises:
            ValueError:
                If ``decimals`` is negative.
        """
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative; got {decimals}.")

        totals = self._aggregator.calculate_totals(results)
        buffer = _FactBuffer()

        self._append_emission_facts(buffer, totals, decimals)

        for entry in results:
            for fact in entry.result.facts:
                self._append_module_fact(buffer, entry.module_id, fact, decimals)
            for table in entry.result.tables:
                self._append_table_fact(buffer, entry.module_id, table)

        denominator = find_net_revenue_denominator(results)
        if denominator is not None:
            self._append_intensity_fact(
                buffer, NET_REVENUE_INTENSITY_LOCATION_KEY, totals.total_location_based, denominator
            )
            self._append_intensity_fact(
                buffer, NET_REVENUE_INTENSITY_MARKET_KEY, totals.total_market_based, denominator
            )

        return FactCompilation(
            facts=tuple(buffer.facts),
            origins=tuple(buffer.origins),
            totals=totals,
            skipped=tuple(buffer.skipped),
        )

    # ------------------------------------------------------------------ #
    # Passes                                                             #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _append_emission_facts(buffer: _FactBuffer, totals: EmissionTotals, decimals: int) -> None:
        for key, definition in iter_emission_concepts():
            buffer.add(
                PreparedFact(
                    concept_key=key,
                    value=format_decimal(totals.for_concept(key), decimals),
                    period_type=definition.period_type,
                    unit_id=definition.unit_id,
                    decimals=str(decimals),
                ),
                FactOrigin.MANDATORY,
            )

    @staticmethod
    def _append_module_fact(
        buffer: _FactBuffer,
        module_id: str,
        fact: ModuleFact,
        default_decimals: int,
    ) -> None:
        if not is_concept_key(fact.concept_key):
            buffer.skip(module_id, fact.concept_key, SkipReason.UNKNOWN_CONCEPT)
            return
        if fact.concept_key in EMISSION_CONCEPT_KEYS:
            # Aggregator totals take precedence over module-declared values.
            buffer.skip(module_id, fact.concept_key, SkipReason.ALREADY_REPORTED)
            return

        definition = get_concept_definition(fact.concept_key)
        unit_id = fact.unit_id or definition.unit_id
        decimals: str | None = None

        if isinstance(fact, NumericFact):
            if not is_finite_number(fact.value):
                buffer.skip(module_id, fact.concept_key, SkipReason.NON_FINITE_NUMBER)
                return
            precision = default_decimals if fact.decimals is None else fact.decimals
            if precision < 0:
                buffer.skip(module_id, fact.concept_key, SkipReason.INVALID_DECIMALS)
                return
            value = format_decimal(fact.value, precision)
            decimals = str(precision)
        elif isinstance(fact, BooleanFact):
            value = "true" if fact.value else "false"
        elif isinstance(fact, TextFact):
            value = str(fact.value).strip()
            if not value:
                buffer.skip(module_id, fact.concept_key, SkipReason.EMPTY_TEXT)
                return
        else:  # pragma: no cover - exhaustive over ModuleFact
            raise TypeError(f"Unsupported module fact type: {type(fact)!r}")

        buffer.add(
            PreparedFact(
                concept_key=fact.concept_key,
                value=value,
                period_type=definition.period_type,
                unit_id=unit_id,
                decimals=decimals,
            ),
            FactOrigin.MODULE,
        )

    @staticmethod
    def _append_table_fact(buffer: _FactBuffer, module_id: str, table: TableFact) -> None:
        if not is_concept_key(table.concept_key):
            buffer.skip(module_id, table.concept_key, SkipReason.UNKNOWN_CONCEPT)
            return

        serialized = serialize_table_rows(table.rows)
        if serialized is None:
            buffer.skip(module_id, table.concept_key, SkipReason.EMPTY_TABLE)
            return

        definition = get_concept_definition(table.concept_key)
        buffer.add(
            PreparedFact(
                concept_key=table.concept_key,
                value=serialized,
                period_type=definition.period_type,
                unit_id=definition.unit_id,
            ),
            FactOrigin.TABLE,
        )

    @staticmethod
    def _append_intensity_fact(
        buffer: _FactBuffer,
        concept_key: str,
        total_emissions: float,
        denominator: float,
    ) -> None:
        if buffer.has_concept(concept_key):
            buffer.skip(None, concept_key, SkipReason.ALREADY_REPORTED)
            return

        intensity = total_emissions / denominator
        if not math.isfinite(intensity):
            buffer.skip(None, concept_key, SkipReason.INVALID_INTENSITY)
            return

        definition = get_concept_definition(concept_key)
        buffer.add(
            PreparedFact(
                concept_key=concept_key,
                value=format_decimal(intensity, NET_REVENUE_INTENSITY_DECIMALS),
                period_type=definition.period_type,
                unit_id=definition.unit_id,
                decimals=str(NET_REVENUE_INTENSITY_DECIMALS),
            ),
            FactOrigin.INTENSITY,
        )


# --------------------------------------------------------------------------- #
# Table serialization                                                         #
# --------------------------------------------------------------------------- #


def normalize_table_row(row: Mapping[str, CellValue]) -> dict[str, CellValue]:
    """Order the cells of a table row by key.

    A missing key is the only way to leave a cell out; a None cell is a
    reported null and is kept. Integral floats are rendered as integers so
    that the JSON text does not depend on how a module typed a whole number,
    and non-finite floats become null.
    """
    normalized: dict[str, CellValue] = {}
    for key in sorted(row):
        value = row[key]
        if isinstance(value, float):
            if not math.isfinite(value):
                value = None
            elif value.is_integer():
                value = int(value)
        normalized[key] = value
    return normalized


def serialize_table_rows(rows: Sequence[Mapping[str, CellValue]]) -> str | None:
    """Serialize table rows as compact JSON, or None when every row is empty."""
    normalized = [row for row in (normalize_table_row(raw) for raw in rows) if row]
    if not normalized:
        return None
    return json.dumps(normalized, separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "DEFAULT_DECIMALS",
    "SkipReason",
    "FactOrigin",
    "SkippedItem",
    "FactCompilation",
    "FactCompiler",
    "normalize_table_row",
    "serialize_table_rows",
]
