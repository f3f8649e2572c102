# src/csrd_xbrl/application/use_cases/reports/build_csrd_report_package.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Use case: Build a CSRD report package.

Purpose:
    Orchestrate the compilation of calculation-module results into a CSRD
    report package, bridging:
        - Option resolution (reporting period, entity, decimals)
        - Fact compilation (mandatory emission facts, module facts, tables,
          derived intensities)
        - Context/unit resolution
        - XBRL instance serialization

Layer:
    application/use_cases/reports

Notes:
    - Structural preconditions (profile id, period bounds, entity identifier,
      decimals) are validated before any compilation work and raise
      ReportInputError.
    - Per-item data-quality problems never raise; they are logged at DEBUG
      and counted by skip reason.
    - The use case performs no I/O and is safe to call concurrently.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any
from uuid import uuid4

from csrd_xbrl.domain.entities.module_result import CalculatedModuleResult
from csrd_xbrl.domain.entities.reporting import (
    DEFAULT_ENTITY_SCHEME,
    EntityIdentifier,
    ReportingPeriod,
)
from csrd_xbrl.domain.entities.xbrl_instance import (
    CsrdReportPackage,
    XBRLContext,
    XBRLFact,
    XBRLUnit,
)
from csrd_xbrl.domain.exceptions.csrd import ReportInputError
from csrd_xbrl.domain.services.context_unit_resolver import resolve_references
from csrd_xbrl.domain.services.fact_compiler import (
    DEFAULT_DECIMALS,
    FactCompilation,
    FactCompiler,
)
from csrd_xbrl.domain.services.xbrl_serializer import render_instance
from csrd_xbrl.infrastructure.logging.logger import (
    bind_compilation_id,
    get_json_logger,
    reset_compilation_id,
)
from csrd_xbrl.infrastructure.observability.metrics import (
    get_report_build_duration_seconds,
    get_report_builds_total,
    get_report_facts_total,
    get_report_skipped_items_total,
)

logger = get_json_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Caller options for building a report package.

    Attributes:
        profile_id:
            Profile the report is generated for. Required.
        organisation:
            Optional organisation display name.
        reporting_period:
            Optional reporting period. Defaults to the current UTC calendar
            year.
        entity_identifier:
            Optional entity identifier. Defaults to the profile-scheme entity
            whose value is ``profile_id``.
        decimals:
            Optional default rounding precision for numeric facts.
        audit_trail:
            Opaque audit trail, carried into submission payloads.
        responsibilities:
            Opaque responsibility matrix, carried into submission payloads.
    """

    profile_id: str
    organisation: str | None = None
    reporting_period: ReportingPeriod | None = None
    entity_identifier: EntityIdentifier | None = None
    decimals: int | None = None
    audit_trail: Any = None
    responsibilities: Any = None


@dataclass(frozen=True, slots=True)
class BuildCsrdReportPackageRequest:
    """Fully resolved request to build a report package.

    Attributes:
        results:
            Calculated module results, in reporting order.
        reporting_period:
            Reporting period the contexts are anchored on.
        entity:
            Reporting entity identifier.
        decimals:
            Default rounding precision. When None, the use-case default
            applies.
    """

    results: Sequence[CalculatedModuleResult]
    reporting_period: ReportingPeriod | None
    entity: EntityIdentifier | None
    decimals: int | None = None


@dataclass(frozen=True, slots=True)
class ResolvedReportOptions:
    """Report options after defaults have been applied."""

    profile_id: str
    reporting_period: ReportingPeriod
    entity: EntityIdentifier
    decimals: int


def build_xbrl_instance(
    contexts: Sequence[XBRLContext],
    units: Sequence[XBRLUnit],
    facts: Sequence[XBRLFact],
) -> str:
    """Serialize contexts, units, and facts into an XBRL instance document."""
    return render_instance(contexts, units, facts)


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


class BuildCsrdReportPackageUseCase:
    """Build a CSRD report package from calculation-module results.

    Args:
        compiler: Optional fact compiler. When omitted, a default compiler is used.
        default_decimals: Rounding precision used when a request names none.
        default_entity_scheme: Scheme of the entity derived from a profile id.
        metrics_enabled: Whether Prometheus collectors are updated.
        environment: Deployment environment stamped on build logs.
        today: Clock returning the current UTC date, used for the default period.

    Raises:
        ReportInputError: When structural preconditions are not met.
    """

    def __init__(
        self,
        *,
        compiler: FactCompiler | None = None,
        default_decimals: int = DEFAULT_DECIMALS,
        default_entity_scheme: str = DEFAULT_ENTITY_SCHEME,
        metrics_enabled: bool = True,
        environment: str = "development",
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case."""
        self._compiler = compiler or FactCompiler()
        self._default_decimals = default_decimals
        self._default_entity_scheme = default_entity_scheme
        self._metrics_enabled = metrics_enabled
        self._environment = environment
        self._today = today or _utc_today

    # ------------------------------------------------------------------ #
    # Entry points                                                       #
    # ------------------------------------------------------------------ #

    def execute(self, req: BuildCsrdReportPackageRequest) -> CsrdReportPackage:
        """Build a report package for an explicit period and entity.

        Args:
            req: Request carrying results, period, entity, and optional decimals.

        Returns:
            The compiled CsrdReportPackage.

        Raises:
            ReportInputError: When the period or entity is missing or invalid,
                or decimals is negative.
        """
        token = bind_compilation_id(str(uuid4()))
        try:
            return self._build(req)
        finally:
            reset_compilation_id(token)

    def _build(self, req: BuildCsrdReportPackageRequest) -> CsrdReportPackage:
        started = time.perf_counter()

        try:
            reporting_period, entity, decimals = self._validate_request(req)
        except ReportInputError as exc:
            self._reject(exc)
            raise

        logger.info(
            "csrd.build_package.start",
            extra={
                "env": self._environment,
                "modules": len(req.results),
                "period_start": reporting_period.start.isoformat(),
                "period_end": reporting_period.end.isoformat(),
                "decimals": decimals,
            },
        )

        try:
            compilation = self._compiler.compile(req.results, decimals=decimals)
            resolved = resolve_references(
                compilation.facts,
                reporting_period=reporting_period,
                entity=entity,
            )
            instance = build_xbrl_instance(resolved.contexts, resolved.units, resolved.facts)
        except Exception:
            logger.exception("csrd.build_package.error")
            self._record_outcome("error")
            raise

        package = CsrdReportPackage(
            contexts=resolved.contexts,
            units=resolved.units,
            facts=resolved.facts,
            instance=instance,
        )

        self._report_skipped(compilation)
        self._record_success(compilation, time.perf_counter() - started)
        logger.info(
            "csrd.build_package.success",
            extra={
                "facts": len(package.facts),
                "contexts": len(package.contexts),
                "units": len(package.units),
                "skipped": len(compilation.skipped),
            },
        )
        return package

    def execute_for_options(
        self,
        results: Sequence[CalculatedModuleResult],
        options: ReportOptions,
    ) -> CsrdReportPackage:
        """Build a report package from caller options, applying defaults.

        Args:
            results: Calculated module results, in reporting order.
            options: Caller options; only ``profile_id`` is required.

        Returns:
            The compiled CsrdReportPackage.

        Raises:
            ReportInputError: When the options are invalid.
        """
        resolved = self.resolve_options(options)
        return self.execute(
            BuildCsrdReportPackageRequest(
                results=results,
                reporting_period=resolved.reporting_period,
                entity=resolved.entity,
                decimals=resolved.decimals,
            )
        )

    def render_instance_for_options(
        self,
        results: Sequence[CalculatedModuleResult],
        options: ReportOptions,
    ) -> str:
        """Build a report package from caller options and return only its instance."""
        return self.execute_for_options(results, options).instance

    def resolve_options(self, options: ReportOptions) -> ResolvedReportOptions:
        """Apply defaults to caller options.

        Raises:
            ReportInputError: When ``profile_id`` is blank.
        """
        profile_id = (options.profile_id or "").strip()
        if not profile_id:
            exc = ReportInputError("profile_id is required to build a CSRD report.")
            self._reject(exc)
            raise exc

        reporting_period = options.reporting_period or ReportingPeriod.calendar_year(
            self._today().year
        )
        entity = options.entity_identifier or EntityIdentifier(
            scheme=self._default_entity_scheme,
            value=profile_id,
        )
        decimals = self._default_decimals if options.decimals is None else options.decimals
        return ResolvedReportOptions(
            profile_id=profile_id,
            reporting_period=reporting_period,
            entity=entity,
            decimals=decimals,
        )

    # ------------------------------------------------------------------ #
    # Validation                                                         #
    # ------------------------------------------------------------------ #

    def _validate_request(
        self, req: BuildCsrdReportPackageRequest
    ) -> tuple[ReportingPeriod, EntityIdentifier, int]:
        period = req.reporting_period
        if period is None or period.start is None or period.end is None:
            raise ReportInputError("Reporting period start and end are required for CSRD XBRL.")
        if period.start > period.end:
            raise ReportInputError(
                "Reporting period start must not be after its end.",
                details={"start": period.start.isoformat(), "end": period.end.isoformat()},
            )

        entity = req.entity
        if entity is None or not (entity.scheme or "").strip() or not (entity.value or "").strip():
            raise ReportInputError("Entity identifier scheme and value are required for CSRD XBRL.")

        decimals = self._default_decimals if req.decimals is None else req.decimals
        if decimals < 0:
            raise ReportInputError(
                "decimals must be a non-negative integer.",
                details={"decimals": decimals},
            )
        return period, entity, decimals

    # ------------------------------------------------------------------ #
    # Observability                                                      #
    # ------------------------------------------------------------------ #

    def _reject(self, exc: ReportInputError) -> None:
        logger.warning(
            "csrd.build_package.invalid_input",
            extra={"code": exc.code, "reason": exc.message, "details": exc.details},
        )
        self._record_outcome("invalid_input")

    def _report_skipped(self, compilation: FactCompilation) -> None:
        for item in compilation.skipped:
            logger.debug(
                "csrd.build_package.skipped",
                extra={
                    "module_id": item.module_id,
                    "concept_key": item.concept_key,
                    "reason": item.reason.value,
                },
            )
            if self._metrics_enabled:
                get_report_skipped_items_total().labels(reason=item.reason.value).inc()

    def _record_outcome(self, outcome: str) -> None:
        if self._metrics_enabled:
            get_report_builds_total().labels(outcome=outcome).inc()

    def _record_success(self, compilation: FactCompilation, elapsed: float) -> None:
        if not self._metrics_enabled:
            return
        get_report_builds_total().labels(outcome="success").inc()
        get_report_build_duration_seconds().observe(elapsed)
        facts_total = get_report_facts_total()
        for origin, count in compilation.count_by_origin().items():
            if count:
                facts_total.labels(origin=origin.value).inc(count)


__all__ = [
    "ReportOptions",
    "BuildCsrdReportPackageRequest",
    "ResolvedReportOptions",
    "BuildCsrdReportPackageUseCase",
    "build_xbrl_instance",
]
