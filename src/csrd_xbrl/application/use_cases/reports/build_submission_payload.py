# src/csrd_xbrl/application/use_cases/reports/build_submission_payload.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Use case: Build a CSRD submission payload.

Purpose:
    Wrap a compiled report package in the submission envelope handed to the
    filing collaborator: profile, organisation, resolved period and entity,
    generation timestamp, opaque audit data, the module results, and
    optionally the serialized instance.

Layer:
    application/use_cases/reports
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from csrd_xbrl.application.use_cases.reports.build_csrd_report_package import (
    BuildCsrdReportPackageRequest,
    BuildCsrdReportPackageUseCase,
    ReportOptions,
)
from csrd_xbrl.domain.entities.module_result import CalculatedModuleResult
from csrd_xbrl.domain.entities.reporting import EntityIdentifier, ReportingPeriod
from csrd_xbrl.domain.entities.xbrl_instance import CsrdReportPackage


@dataclass(frozen=True, slots=True)
class SubmissionOptions(ReportOptions):
    """Report options plus submission-only flags.

    Attributes:
        include_xbrl:
            Whether the serialized instance is embedded in the payload.
    """

    include_xbrl: bool = False


@dataclass(frozen=True, slots=True)
class SubmissionPayload:
    """Submission envelope around a compiled report package.

    Attributes:
        profile_id:
            Profile the report was generated for.
        organisation:
            Optional organisation display name.
        reporting_period:
            Reporting period the instance was built for.
        entity_identifier:
            Entity identifier the instance was built for.
        generated_at:
            UTC ISO-8601 timestamp with millisecond precision and a ``Z``
            suffix.
        audit_trail:
            Opaque audit trail, when supplied.
        responsibilities:
            Opaque responsibility matrix, when supplied.
        results:
            Module results the package was compiled from.
        csrd:
            The compiled report package.
        xbrl:
            Serialized instance, present only when requested.
    """

    profile_id: str
    organisation: str | None
    reporting_period: ReportingPeriod
    entity_identifier: EntityIdentifier
    generated_at: str
    audit_trail: Any
    responsibilities: Any
    results: tuple[CalculatedModuleResult, ...]
    csrd: CsrdReportPackage
    xbrl: str | None = None


def format_generated_at(moment: datetime) -> str:
    """Return ``moment`` as a UTC ISO-8601 string like ``2024-05-01T12:00:00.000Z``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class BuildSubmissionPayloadUseCase:
    """Build a submission payload from calculation-module results.

    Args:
        package_use_case: Use case compiling the report package.
        now: Clock returning the current UTC datetime.
    """

    def __init__(
        self,
        *,
        package_use_case: BuildCsrdReportPackageUseCase | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._package_use_case = package_use_case or BuildCsrdReportPackageUseCase()
        self._now = now or (lambda: datetime.now(tz=UTC))

    def execute(
        self,
        results: Sequence[CalculatedModuleResult],
        options: SubmissionOptions,
        *,
        generated_at: datetime | None = None,
    ) -> SubmissionPayload:
        """Compile the report package and wrap it in a submission envelope.

        Args:
            results: Calculated module results, in reporting order.
            options: Caller options; only ``profile_id`` is required.
            generated_at: Optional generation timestamp; defaults to now.

        Returns:
            The SubmissionPayload. ``xbrl`` is set only when
            ``options.include_xbrl`` is true.

        Raises:
            ReportInputError: When the options are invalid.
        """
        resolved = self._package_use_case.resolve_options(options)
        package = self._package_use_case.execute(
            BuildCsrdReportPackageRequest(
                results=results,
                reporting_period=resolved.reporting_period,
                entity=resolved.entity,
                decimals=resolved.decimals,
            )
        )
        return SubmissionPayload(
            profile_id=resolved.profile_id,
            organisation=options.organisation,
            reporting_period=resolved.reporting_period,
            entity_identifier=resolved.entity,
            generated_at=format_generated_at(generated_at or self._now()),
            audit_trail=options.audit_trail,
            responsibilities=options.responsibilities,
            results=tuple(results),
            csrd=package,
            xbrl=package.instance if options.include_xbrl else None,
        )


__all__ = [
    "SubmissionOptions",
    "SubmissionPayload",
    "BuildSubmissionPayloadUseCase",
    "format_generated_at",
]
