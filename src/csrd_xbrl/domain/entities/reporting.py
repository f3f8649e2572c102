# src/csrd_xbrl/domain/entities/reporting.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Reporting period and reporting entity value objects.

Purpose:
    Carry the per-compilation anchors every XBRL context is built from.

Layer:
    domain

Notes:
    - Presence checks live in the compilation pipeline so that a missing
      bound is reported as a ReportInputError before any work starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# Identifier scheme used when a report is built for a profile without an
# explicit entity identifier.
DEFAULT_ENTITY_SCHEME = "urn:org:eaas:profile"


@dataclass(frozen=True, slots=True)
class ReportingPeriod:
    """Reporting period covered by a CSRD report.

    Attributes:
        start:
            First day of the reporting period.
        end:
            Last day of the reporting period. Instant contexts are anchored
            on this date.
    """

    start: date
    end: date

    @classmethod
    def calendar_year(cls, year: int) -> ReportingPeriod:
        """Return the period spanning January 1st to December 31st of ``year``."""
        return cls(start=date(year, 1, 1), end=date(year, 12, 31))


@dataclass(frozen=True, slots=True)
class EntityIdentifier:
    """Identifier of the reporting entity.

    Attributes:
        scheme:
            Identifier scheme URI (e.g., "http://standards.iso.org/iso/17442"
            for LEIs).
        value:
            Identifier value within the scheme.
    """

    scheme: str
    value: str


__all__ = ["DEFAULT_ENTITY_SCHEME", "ReportingPeriod", "EntityIdentifier"]
