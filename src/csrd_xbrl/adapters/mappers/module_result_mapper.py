# src/csrd_xbrl/adapters/mappers/module_result_mapper.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Module-result and report-package mappers.

Purpose:
    Translate between the calculation-module JSON contract (Pydantic DTOs)
    and the pure-domain value objects consumed by the compilation pipeline,
    and present compiled packages and submission payloads as wire DTOs.

Layer:
    adapters/mappers

Notes:
    - Declared fact values are dispatched by type. ``bool`` is checked before
      numbers because ``bool`` is a subclass of ``int``.
    - Facts whose value is null are dropped here; they carry nothing to
      report.
    - Unknown intensity bases are kept as plain strings.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from csrd_xbrl.application.schemas.dto.csrd import (
    CalculatedModuleResultDTO,
    CsrdReportPackageDTO,
    DurationPeriodDTO,
    EntityIdentifierDTO,
    InstantPeriodDTO,
    ModuleEsrsFactDTO,
    ModuleEsrsTableDTO,
    ModuleIntensityDTO,
    ModuleResultDTO,
    ReportingPeriodDTO,
    ReportOptionsDTO,
    SubmissionOptionsDTO,
    SubmissionPayloadDTO,
    XBRLContextDTO,
    XBRLFactDTO,
    XBRLUnitDTO,
)
from csrd_xbrl.application.use_cases.reports.build_csrd_report_package import ReportOptions
from csrd_xbrl.application.use_cases.reports.build_submission_payload import (
    SubmissionOptions,
    SubmissionPayload,
)
from csrd_xbrl.domain.entities.module_result import (
    BooleanFact,
    CalculatedModuleResult,
    IntensityDescriptor,
    ModuleFact,
    ModuleResult,
    NumericFact,
    TableFact,
    TextFact,
)
from csrd_xbrl.domain.entities.reporting import EntityIdentifier, ReportingPeriod
from csrd_xbrl.domain.entities.xbrl_instance import (
    CsrdReportPackage,
    DurationPeriod,
    XBRLContext,
    XBRLFact,
    XBRLUnit,
)
from csrd_xbrl.domain.enums.esrs import IntensityBasis

# --------------------------------------------------------------------------- #
# DTO -> domain                                                               #
# --------------------------------------------------------------------------- #


def map_module_fact(dto: ModuleEsrsFactDTO) -> ModuleFact | None:
    """Map a declared fact DTO to its domain variant, or None when valueless."""
    value = dto.value
    if value is None:
        return None
    if isinstance(value, bool):
        return BooleanFact(concept_key=dto.concept_key, value=value, unit_id=dto.unit_id)
    if isinstance(value, int | float):
        return NumericFact(
            concept_key=dto.concept_key,
            value=value,
            unit_id=dto.unit_id,
            decimals=dto.decimals,
        )
    return TextFact(concept_key=dto.concept_key, value=value, unit_id=dto.unit_id)


def map_module_table(dto: ModuleEsrsTableDTO) -> TableFact:
    """Map a declared table DTO to a domain table."""
    return TableFact(concept_key=dto.concept_key, rows=tuple(dict(row) for row in dto.rows))


def _map_basis(raw: str) -> IntensityBasis | str:
    try:
        return IntensityBasis(raw)
    except ValueError:
        return raw


def map_intensity(dto: ModuleIntensityDTO) -> IntensityDescriptor:
    """Map an intensity DTO to a domain descriptor."""
    return IntensityDescriptor(
        basis=_map_basis(dto.basis),
        value=dto.value,
        denominator_value=dto.denominator_value,
        label=dto.label,
        unit=dto.unit,
        denominator_unit=dto.denominator_unit,
    )


def map_module_result(dto: ModuleResultDTO) -> ModuleResult:
    """Map a module result DTO to the domain result bag."""
    facts = tuple(fact for fact in (map_module_fact(f) for f in dto.esrs_facts) if fact is not None)
    return ModuleResult(
        value=dto.value,
        unit=dto.unit,
        facts=facts,
        tables=tuple(map_module_table(t) for t in dto.esrs_tables),
        intensities=tuple(map_intensity(i) for i in dto.intensities),
        assumptions=tuple(dto.assumptions),
        trace=tuple(dto.trace),
        warnings=tuple(dto.warnings),
    )


def map_calculated_result(dto: CalculatedModuleResultDTO) -> CalculatedModuleResult:
    """Map a tagged module result DTO to the domain object."""
    return CalculatedModuleResult(
        module_id=dto.module_id,
        title=dto.title,
        result=map_module_result(dto.result),
    )


def map_calculated_results(
    dtos: Iterable[CalculatedModuleResultDTO],
) -> tuple[CalculatedModuleResult, ...]:
    """Map a sequence of tagged module result DTOs, preserving order."""
    return tuple(map_calculated_result(dto) for dto in dtos)


def map_report_options(dto: ReportOptionsDTO) -> ReportOptions:
    """Map report options from the wire to the use-case options object."""
    return ReportOptions(**_report_option_fields(dto))


def map_submission_options(dto: SubmissionOptionsDTO) -> SubmissionOptions:
    """Map submission options from the wire to the use-case options object."""
    return SubmissionOptions(**_report_option_fields(dto), include_xbrl=dto.include_xbrl)


def _report_option_fields(dto: ReportOptionsDTO) -> dict[str, object]:
    period = dto.reporting_period
    entity = dto.entity_identifier
    return {
        "profile_id": dto.profile_id,
        "organisation": dto.organisation,
        "reporting_period": (
            ReportingPeriod(start=period.start, end=period.end) if period is not None else None
        ),
        "entity_identifier": (
            EntityIdentifier(scheme=entity.scheme, value=entity.value)
            if entity is not None
            else None
        ),
        "decimals": dto.decimals,
        "audit_trail": dto.audit_trail,
        "responsibilities": dto.responsibilities,
    }


# --------------------------------------------------------------------------- #
# Domain -> DTO                                                               #
# --------------------------------------------------------------------------- #


def _fact_to_dto(fact: ModuleFact) -> ModuleEsrsFactDTO:
    decimals = fact.decimals if isinstance(fact, NumericFact) else None
    value = fact.value
    if isinstance(value, Decimal):
        value = float(value)
    return ModuleEsrsFactDTO(
        concept_key=fact.concept_key,
        value=value,
        decimals=decimals,
        unit_id=fact.unit_id,
    )


def module_result_to_dto(entry: CalculatedModuleResult) -> CalculatedModuleResultDTO:
    """Present a domain module result as its wire DTO."""
    result = entry.result
    return CalculatedModuleResultDTO(
        module_id=entry.module_id,
        title=entry.title,
        result=ModuleResultDTO(
            value=result.value,
            unit=result.unit,
            assumptions=list(result.assumptions),
            trace=list(result.trace),
            warnings=list(result.warnings),
            intensities=[
                ModuleIntensityDTO(
                    basis=i.basis.value if isinstance(i.basis, IntensityBasis) else i.basis,
                    label=i.label,
                    value=i.value,
                    unit=i.unit,
                    denominator_value=i.denominator_value,
                    denominator_unit=i.denominator_unit,
                )
                for i in result.intensities
            ],
            esrs_facts=[_fact_to_dto(f) for f in result.facts],
            esrs_tables=[
                ModuleEsrsTableDTO(concept_key=t.concept_key, rows=[dict(row) for row in t.rows])
                for t in result.tables
            ],
        ),
    )


def _context_to_dto(context: XBRLContext) -> XBRLContextDTO:
    period = context.period
    period_dto: DurationPeriodDTO | InstantPeriodDTO
    if isinstance(period, DurationPeriod):
        period_dto = DurationPeriodDTO(start=period.start, end=period.end)
    else:
        period_dto = InstantPeriodDTO(instant=period.instant)
    return XBRLContextDTO(
        id=context.id,
        entity=EntityIdentifierDTO(scheme=context.entity.scheme, value=context.entity.value),
        period=period_dto,
    )


def _unit_to_dto(unit: XBRLUnit) -> XBRLUnitDTO:
    return XBRLUnitDTO(id=unit.id, measures=list(unit.measures))


def _xbrl_fact_to_dto(fact: XBRLFact) -> XBRLFactDTO:
    return XBRLFactDTO(
        concept=fact.concept,
        context_ref=fact.context_ref,
        unit_ref=fact.unit_ref,
        decimals=fact.decimals,
        value=fact.value,
    )


def report_package_to_dto(package: CsrdReportPackage) -> CsrdReportPackageDTO:
    """Present a compiled report package as its wire DTO."""
    return CsrdReportPackageDTO(
        contexts=[_context_to_dto(c) for c in package.contexts],
        units=[_unit_to_dto(u) for u in package.units],
        facts=[_xbrl_fact_to_dto(f) for f in package.facts],
        instance=package.instance,
    )


def submission_payload_to_dto(payload: SubmissionPayload) -> SubmissionPayloadDTO:
    """Present a submission payload as its wire DTO."""
    return SubmissionPayloadDTO(
        profile_id=payload.profile_id,
        organisation=payload.organisation,
        reporting_period=ReportingPeriodDTO(
            start=payload.reporting_period.start,
            end=payload.reporting_period.end,
        ),
        entity_identifier=EntityIdentifierDTO(
            scheme=payload.entity_identifier.scheme,
            value=payload.entity_identifier.value,
        ),
        generated_at=payload.generated_at,
        audit_trail=payload.audit_trail,
        responsibilities=payload.responsibilities,
        results=[module_result_to_dto(r) for r in payload.results],
        csrd=report_package_to_dto(payload.csrd),
        xbrl=payload.xbrl,
    )


def results_from_payloads(
    payloads: Sequence[dict[str, object]],
) -> tuple[CalculatedModuleResult, ...]:
    """Validate raw module-result JSON objects and map them to domain results.

    Raises:
        pydantic.ValidationError: If a payload does not satisfy the module contract.
    """
    return map_calculated_results(CalculatedModuleResultDTO.model_validate(p) for p in payloads)


__all__ = [
    "map_module_fact",
    "map_module_table",
    "map_intensity",
    "map_module_result",
    "map_calculated_result",
    "map_calculated_results",
    "map_report_options",
    "map_submission_options",
    "module_result_to_dto",
    "report_package_to_dto",
    "submission_payload_to_dto",
    "results_from_payloads",
]
