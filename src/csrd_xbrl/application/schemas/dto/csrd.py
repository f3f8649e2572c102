# src/csrd_xbrl/application/schemas/dto/csrd.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Application DTOs for CSRD report compilation.

Purpose:
    Provide Pydantic DTOs for:
        * the calculation-module output contract consumed by the compiler
          (module results with ESRS facts, tables, and intensities);
        * report options supplied by callers;
        * the report package and submission payload envelopes produced by
          the façade.

Layer:
    application/schemas/dto

Notes:
    - Wire names are camelCase (``conceptKey``, ``esrsFacts``,
      ``denominatorValue``); Python attributes are snake_case.
    - Fact values are strictly typed so that JSON ``true`` stays a boolean and
      ``"14"`` stays text.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Literal

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from csrd_xbrl.application.schemas.dto.base import BaseDTO, ModuleContractDTO

ScalarDTOValue = StrictBool | StrictInt | StrictFloat | StrictStr | None

# --------------------------------------------------------------------------- #
# Calculation-module contract                                                 #
# --------------------------------------------------------------------------- #


class ModuleEsrsFactDTO(ModuleContractDTO):
    """ESRS fact declared by a calculation module.

    Attributes:
        concept_key: Registry key of the concept (wire: ``conceptKey``).
        value: Boolean, number, text, or null.
        decimals: Optional rounding precision override for numeric values.
        unit_id: Optional unit override (wire: ``unitId``).
    """

    concept_key: str
    value: ScalarDTOValue = None
    decimals: int | None = None
    unit_id: str | None = None


class ModuleEsrsTableDTO(ModuleContractDTO):
    """ESRS table declared by a calculation module."""

    concept_key: str
    rows: list[dict[str, ScalarDTOValue]] = Field(default_factory=list)


class ModuleIntensityDTO(ModuleContractDTO):
    """Emission-intensity descriptor declared by a calculation module."""

    basis: str
    label: str = ""
    value: float | None = None
    unit: str = ""
    denominator_value: float | None = None
    denominator_unit: str = ""


class ModuleResultDTO(ModuleContractDTO):
    """Result bag of a single calculation module."""

    value: float | None = None
    unit: str = ""
    assumptions: list[str] = Field(default_factory=list)
    trace: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    intensities: list[ModuleIntensityDTO] = Field(default_factory=list)
    esrs_facts: list[ModuleEsrsFactDTO] = Field(default_factory=list)
    esrs_tables: list[ModuleEsrsTableDTO] = Field(default_factory=list)


class CalculatedModuleResultDTO(ModuleContractDTO):
    """A module result tagged with its module id (wire: ``moduleId``) and title."""

    module_id: str
    title: str = ""
    result: ModuleResultDTO


# --------------------------------------------------------------------------- #
# Report options                                                              #
# --------------------------------------------------------------------------- #


class ReportingPeriodDTO(BaseDTO):
    """Reporting period with ISO-8601 ``start`` and ``end`` dates."""

    start: date
    end: date


class EntityIdentifierDTO(BaseDTO):
    """Reporting entity identifier."""

    scheme: str
    value: str


class ReportOptionsDTO(BaseDTO):
    """Options for building a report package.

    Attributes:
        profile_id: Profile the report is generated for (required).
        organisation: Optional organisation display name.
        reporting_period: Optional period; defaults to the current calendar year.
        entity_identifier: Optional entity; defaults to the profile-scheme entity.
        decimals: Optional default rounding precision for numeric facts.
        audit_trail: Opaque audit trail carried into the submission payload.
        responsibilities: Opaque responsibility matrix carried into the payload.
    """

    profile_id: str
    organisation: str | None = None
    reporting_period: ReportingPeriodDTO | None = None
    entity_identifier: EntityIdentifierDTO | None = None
    decimals: int | None = Field(default=None, ge=0)
    audit_trail: Any = None
    responsibilities: Any = None


class SubmissionOptionsDTO(ReportOptionsDTO):
    """Options for building a submission payload."""

    include_xbrl: bool = False


# --------------------------------------------------------------------------- #
# Output envelopes                                                            #
# --------------------------------------------------------------------------- #


class DurationPeriodDTO(BaseDTO):
    """Duration context period."""

    type: Literal["duration"] = "duration"
    start: date
    end: date


class InstantPeriodDTO(BaseDTO):
    """Instant context period."""

    type: Literal["instant"] = "instant"
    instant: date


class XBRLContextDTO(BaseDTO):
    """XBRL context."""

    id: str
    entity: EntityIdentifierDTO
    period: Annotated[DurationPeriodDTO | InstantPeriodDTO, Field(discriminator="type")]


class XBRLUnitDTO(BaseDTO):
    """XBRL unit."""

    id: str
    measures: list[str]


class XBRLFactDTO(BaseDTO):
    """XBRL fact (wire: ``contextRef``, ``unitRef``)."""

    concept: str
    context_ref: str
    unit_ref: str | None = None
    decimals: str | None = None
    value: str


class CsrdReportPackageDTO(BaseDTO):
    """Compiled report package: contexts, units, facts, and the instance document."""

    contexts: list[XBRLContextDTO]
    units: list[XBRLUnitDTO]
    facts: list[XBRLFactDTO]
    instance: str


class SubmissionPayloadDTO(BaseDTO):
    """Submission envelope around a compiled report package.

    Attributes:
        profile_id: Profile the report was generated for.
        organisation: Optional organisation display name.
        reporting_period: Reporting period used for the instance.
        entity_identifier: Entity identifier used for the instance.
        generated_at: UTC ISO-8601 generation timestamp.
        audit_trail: Opaque audit trail, when supplied.
        responsibilities: Opaque responsibility matrix, when supplied.
        results: The module results the package was compiled from.
        csrd: The compiled report package.
        xbrl: The instance document, only when explicitly requested.
    """

    profile_id: str
    organisation: str | None = None
    reporting_period: ReportingPeriodDTO
    entity_identifier: EntityIdentifierDTO
    generated_at: str
    audit_trail: Any = None
    responsibilities: Any = None
    results: list[CalculatedModuleResultDTO]
    csrd: CsrdReportPackageDTO
    xbrl: str | None = None


__all__ = [
    "ModuleEsrsFactDTO",
    "ModuleEsrsTableDTO",
    "ModuleIntensityDTO",
    "ModuleResultDTO",
    "CalculatedModuleResultDTO",
    "ReportingPeriodDTO",
    "EntityIdentifierDTO",
    "ReportOptionsDTO",
    "SubmissionOptionsDTO",
    "DurationPeriodDTO",
    "InstantPeriodDTO",
    "XBRLContextDTO",
    "XBRLUnitDTO",
    "XBRLFactDTO",
    "CsrdReportPackageDTO",
    "SubmissionPayloadDTO",
]
