# src/csrd_xbrl/domain/entities/xbrl_instance.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""XBRL instance document value objects.

Purpose:
    Provide immutable, domain-level representations of the structures built
    while compiling a CSRD report into an XBRL instance:

        * Prepared facts (concept key + formatted value, pre-reference).
        * Periods (instant vs duration).
        * Contexts (entity + period).
        * Units.
        * Facts (final, referencing contexts and units by id).
        * The CsrdReportPackage container.

Design:
    - All types are frozen dataclasses.
    - Invariants are enforced in __post_init__ hooks.
    - Everything here lives for exactly one compilation call.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from csrd_xbrl.domain.entities.reporting import EntityIdentifier
from csrd_xbrl.domain.enums.esrs import PeriodType

# --------------------------------------------------------------------------- #
# Pre-reference structures                                                    #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class PreparedFact:
    """Normalized fact produced by the fact compiler.

    Attributes:
        concept_key:
            Registry key of the concept.
        value:
            Formatted lexical value.
        period_type:
            Period type declared by the taxonomy for the concept.
        unit_id:
            Unit Type Registry identifier, or None for non-numeric facts.
        decimals:
            Rounding precision used for numeric values, as a string, or None.
    """

    concept_key: str
    value: str
    period_type: PeriodType
    unit_id: str | None = None
    decimals: str | None = None


# --------------------------------------------------------------------------- #
# Instance structures                                                         #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class DurationPeriod:
    """Duration period spanning ``start`` to ``end`` inclusive."""

    start: date
    end: date

    @property
    def period_type(self) -> PeriodType:
        """Return :attr:`PeriodType.DURATION`."""
        return PeriodType.DURATION


@dataclass(frozen=True, slots=True)
class InstantPeriod:
    """Instant period anchored on a single date."""

    instant: date

    @property
    def period_type(self) -> PeriodType:
        """Return :attr:`PeriodType.INSTANT`."""
        return PeriodType.INSTANT


XBRLPeriod = DurationPeriod | InstantPeriod


@dataclass(frozen=True, slots=True)
class XBRLContext:
    """XBRL context describing entity and period.

    Attributes:
        id:
            Context identifier used by facts (contextRef attribute).
        entity:
            Reporting entity identifier.
        period:
            Duration or instant period.
    """

    id: str
    entity: EntityIdentifier
    period: XBRLPeriod

    def __post_init__(self) -> None:
        """Validate that the context identifier is non-empty."""
        if not self.id.strip():
            raise ValueError("XBRLContext.id must not be empty.")


@dataclass(frozen=True, slots=True)
class XBRLUnit:
    """XBRL unit description.

    Attributes:
        id:
            Unit identifier (referenced by facts via unitRef).
        measures:
            Ordered measure QNames (e.g., ("utr:tCO2e",), ("xbrli:pure",)).
    """

    id: str
    measures: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate that the unit has an id and at least one measure."""
        if not self.id.strip():
            raise ValueError("XBRLUnit.id must not be empty.")
        if not self.measures:
            raise ValueError("XBRLUnit.measures must contain at least one measure.")


@dataclass(frozen=True, slots=True)
class XBRLFact:
    """XBRL fact as emitted into the instance document.

    Attributes:
        concept:
            QName of the concept (e.g., "esrs:GrossScope1GreenhouseGasEmissions").
        context_ref:
            ID of the referenced context.
        value:
            Lexical value.
        unit_ref:
            ID of the referenced unit, or None for unit-less facts.
        decimals:
            Decimals attribute, or None for non-numeric facts.
    """

    concept: str
    context_ref: str
    value: str
    unit_ref: str | None = None
    decimals: str | None = None

    def __post_init__(self) -> None:
        """Validate that concept and context references are non-empty."""
        if not self.concept.strip():
            raise ValueError("XBRLFact.concept must not be empty.")
        if not self.context_ref.strip():
            raise ValueError("XBRLFact.context_ref must not be empty.")


@dataclass(frozen=True, slots=True)
class CsrdReportPackage:
    """Compiled CSRD report package.

    Attributes:
        contexts:
            Contexts required by the facts, at most one per period type.
        units:
            Units required by the facts, one per distinct unit id.
        facts:
            Facts in compilation order.
        instance:
            Serialized XBRL instance document.
    """

    contexts: tuple[XBRLContext, ...]
    units: tuple[XBRLUnit, ...]
    facts: tuple[XBRLFact, ...]
    instance: str

    def find_facts(self, concept: str) -> tuple[XBRLFact, ...]:
        """Return all facts whose concept QName equals ``concept``."""
        return tuple(fact for fact in self.facts if fact.concept == concept)


__all__ = [
    "PreparedFact",
    "DurationPeriod",
    "InstantPeriod",
    "XBRLPeriod",
    "XBRLContext",
    "XBRLUnit",
    "XBRLFact",
    "CsrdReportPackage",
]
