# src/csrd_xbrl/domain/services/context_unit_resolver.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Context and unit resolution for prepared ESRS facts.

Purpose:
    Deduplicate the period and unit requirements of a set of prepared facts
    into XBRL contexts and units with stable, predictable identifiers, and
    bind every prepared fact to them.

Layer:
    domain/services

Notes:
    - At most two contexts exist per instance: one duration context spanning
      the reporting period and one instant context anchored on its end date.
      A context is only created when at least one fact needs it.
    - One unit exists per distinct unit id. ``pure`` maps to the
      dimensionless ``xbrli:pure`` measure; everything else maps to the Unit
      Type Registry (``utr:`` prefix).
    - Contexts and units appear in order of first use, so output is fully
      determined by the order of the prepared facts.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from csrd_xbrl.domain.entities.reporting import EntityIdentifier, ReportingPeriod
from csrd_xbrl.domain.entities.xbrl_instance import (
    DurationPeriod,
    InstantPeriod,
    PreparedFact,
    XBRLContext,
    XBRLFact,
    XBRLUnit,
)
from csrd_xbrl.domain.enums.esrs import PeriodType
from csrd_xbrl.domain.services.esrs_taxonomy import get_concept_definition

DURATION_CONTEXT_ID: Final[str] = "ctx_reporting_period"
INSTANT_CONTEXT_ID: Final[str] = f"{DURATION_CONTEXT_ID}_instant"

CONTEXT_ID_BY_PERIOD_TYPE: Final[dict[PeriodType, str]] = {
    PeriodType.DURATION: DURATION_CONTEXT_ID,
    PeriodType.INSTANT: INSTANT_CONTEXT_ID,
}

UNIT_ID_PREFIX: Final[str] = "unit_"
PURE_UNIT_ID: Final[str] = "pure"
PURE_MEASURE: Final[str] = "xbrli:pure"
UTR_PREFIX: Final[str] = "utr"


@dataclass(frozen=True, slots=True)
class ResolvedInstance:
    """Contexts, units, and facts ready for serialization.

    Attributes:
        contexts:
            Contexts in order of first use.
        units:
            Units in order of first use.
        facts:
            Facts in prepared order, referencing ``contexts`` and ``units``.
    """

    contexts: tuple[XBRLContext, ...]
    units: tuple[XBRLUnit, ...]
    facts: tuple[XBRLFact, ...]


def unit_ref_for(unit_id: str) -> str:
    """Return the unit element id generated for a Unit Type Registry id."""
    return f"{UNIT_ID_PREFIX}{unit_id}"


def unit_measure_for(unit_id: str) -> str:
    """Return the measure QName for a Unit Type Registry id."""
    if unit_id == PURE_UNIT_ID:
        return PURE_MEASURE
    return f"{UTR_PREFIX}:{unit_id}"


def build_context(
    period_type: PeriodType,
    *,
    reporting_period: ReportingPeriod,
    entity: EntityIdentifier,
) -> XBRLContext:
    """Build the context for ``period_type`` anchored on the reporting period."""
    if period_type is PeriodType.DURATION:
        return XBRLContext(
            id=CONTEXT_ID_BY_PERIOD_TYPE[PeriodType.DURATION],
            entity=entity,
            period=DurationPeriod(start=reporting_period.start, end=reporting_period.end),
        )
    return XBRLContext(
        id=CONTEXT_ID_BY_PERIOD_TYPE[PeriodType.INSTANT],
        entity=entity,
        period=InstantPeriod(instant=reporting_period.end),
    )


def resolve_references(
    prepared_facts: Sequence[PreparedFact],
    *,
    reporting_period: ReportingPeriod,
    entity: EntityIdentifier,
) -> ResolvedInstance:
    """Resolve contexts and units for prepared facts and bind the facts to them.

    Args:
        prepared_facts:
            Prepared facts in emission order.
        reporting_period:
            Reporting period the contexts are anchored on.
        entity:
            Reporting entity identifier shared by all contexts.

    Returns:
        A :class:`ResolvedInstance` whose facts reference only contexts and
        units it contains.

    Raises:
        UnknownConceptError:
            If a prepared fact carries an unregistered concept key.
    """
    contexts: dict[PeriodType, XBRLContext] = {}
    units: dict[str, XBRLUnit] = {}
    facts: list[XBRLFact] = []

    for prepared in prepared_facts:
        period_type = PeriodType(prepared.period_type)
        context = contexts.get(period_type)
        if context is None:
            context = build_context(period_type, reporting_period=reporting_period, entity=entity)
            contexts[period_type] = context

        unit_ref: str | None = None
        if prepared.unit_id:
            unit = units.get(prepared.unit_id)
            if unit is None:
                unit = XBRLUnit(
                    id=unit_ref_for(prepared.unit_id),
                    measures=(unit_measure_for(prepared.unit_id),),
                )
                units[prepared.unit_id] = unit
            unit_ref = unit.id

        definition = get_concept_definition(prepared.concept_key)
        facts.append(
            XBRLFact(
                concept=definition.qname,
                context_ref=context.id,
                value=prepared.value,
                unit_ref=unit_ref,
                decimals=prepared.decimals or None,
            )
        )

    return ResolvedInstance(
        contexts=tuple(contexts.values()),
        units=tuple(units.values()),
        facts=tuple(facts),
    )


__all__ = [
    "DURATION_CONTEXT_ID",
    "INSTANT_CONTEXT_ID",
    "CONTEXT_ID_BY_PERIOD_TYPE",
    "PURE_MEASURE",
    "ResolvedInstance",
    "unit_ref_for",
    "unit_measure_for",
    "build_context",
    "resolve_references",
]
