# src/csrd_xbrl/domain/entities/esrs_concept.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""ESRS taxonomy concept metadata.

Layer:
    domain
"""

from __future__ import annotations

from dataclasses import dataclass

from csrd_xbrl.domain.enums.esrs import PeriodType


@dataclass(frozen=True, slots=True)
class ConceptDefinition:
    """Taxonomy metadata for a single reportable ESRS concept.

    Attributes:
        qname:
            Fully qualified concept name including the namespace prefix
            (e.g., "esrs:GrossScope1GreenhouseGasEmissions").
        unit_id:
            Unit Type Registry identifier (e.g., "tCO2e", "percent", "pure"),
            or None for text blocks, booleans, and tables.
        period_type:
            Period type declared by the taxonomy for the concept.
    """

    qname: str
    unit_id: str | None
    period_type: PeriodType

    def __post_init__(self) -> None:
        """Validate that the qname is prefixed and the unit id is non-empty."""
        if ":" not in self.qname:
            raise ValueError(f"ConceptDefinition.qname must be prefixed; got {self.qname!r}.")
        if self.unit_id is not None and not self.unit_id.strip():
            raise ValueError("ConceptDefinition.unit_id must be None or a non-empty string.")

    @property
    def local_name(self) -> str:
        """Return the qname without its namespace prefix."""
        return self.qname.split(":", 1)[1]


__all__ = ["ConceptDefinition"]
