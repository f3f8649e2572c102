# src/csrd_xbrl/domain/enums/esrs.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""ESRS taxonomy and calculation-module enumerations.

Purpose:
    Define the small, closed vocabularies shared by the ESRS taxonomy registry
    and the fact compilation pipeline.

Layer:
    domain

Notes:
    - Values are the literal tokens used on the wire (taxonomy period types,
      calculation-module intensity bases) and must not change.
"""

from __future__ import annotations

from enum import Enum


class PeriodType(str, Enum):
    """XBRL period type declared by the taxonomy for a concept.

    DURATION concepts are flows measured over the reporting period; INSTANT
    concepts are snapshots taken at the end of the reporting period.
    """

    DURATION = "duration"
    INSTANT = "instant"


class IntensityBasis(str, Enum):
    """Denominator basis of an emission-intensity descriptor."""

    NET_REVENUE = "netRevenue"
    PRODUCTION = "production"
    ENERGY = "energy"
    EMPLOYEES = "employees"


__all__ = ["PeriodType", "IntensityBasis"]
