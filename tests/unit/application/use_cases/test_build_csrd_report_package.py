# tests/unit/application/use_cases/test_build_csrd_report_package.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Tests for the report-package use case."""

from __future__ import annotations

import logging
from datetime import date

import pytest
from defusedxml import ElementTree as ET

from csrd_xbrl.application.use_cases.reports.build_csrd_report_package import (
    BuildCsrdReportPackageRequest,
    BuildCsrdReportPackageUseCase,
    ReportOptions,
    build_xbrl_instance,
)
from csrd_xbrl.domain.entities.module_result import BooleanFact, NumericFact, TableFact, TextFact
from csrd_xbrl.domain.entities.reporting import EntityIdentifier, ReportingPeriod
from csrd_xbrl.domain.exceptions.csrd import ReportInputError
from csrd_xbrl.domain.services.esrs_taxonomy import get_concept_definition
from csrd_xbrl.infrastructure.logging.logger import (
    bind_compilation_id,
    get_compilation_id,
    reset_compilation_id,
)

_LOGGER = "csrd_xbrl.application.use_cases.reports.build_csrd_report_package"
_ESRS = "{https://xbrl.efrag.org/taxonomy/esrs/2023-12-22}"
_ENTITY = EntityIdentifier(scheme="s", value="v")


def _use_case(**kwargs) -> BuildCsrdReportPackageUseCase:
    kwargs.setdefault("metrics_enabled", False)
    kwargs.setdefault("today", lambda: date(2025, 6, 15))
    return BuildCsrdReportPackageUseCase(**kwargs)


def test_scope1_line_in_instance(mixed_scope_results, reporting_period, entity) -> None:
    package = _use_case().execute(
        BuildCsrdReportPackageRequest(
            results=mixed_scope_results, reporting_period=reporting_period, entity=entity
        )
    )

    assert (
        '<esrs:GrossScope1GreenhouseGasEmissions contextRef="ctx_reporting_period" '
        'unitRef="unit_tCO2e" decimals="3">19.75</esrs:GrossScope1GreenhouseGasEmissions>'
    ) in package.instance
    assert [f.value for f in package.find_facts("esrs:MarketBasedGreenhouseGasEmissions")] == ["53.95"]
    assert [c.id for c in package.contexts] == ["ctx_reporting_period"]
    assert [u.id for u in package.units] == ["unit_tCO2e"]


def test_package_is_consistent(result_factory, reporting_period, entity) -> None:
    results = [
        result_factory("A1", 5.0),
        result_factory(
            "S1",
            70.0,
            unit="social score",
            facts=(
                NumericFact("S1TotalHeadcount", 148, decimals=0),
                TextFact("GOVOversightNarrative", "Board oversees climate risk."),
            ),
            tables=(TableFact("S1HeadcountBreakdownTable", ({"segment": "HQ", "count": 148},)),),
        ),
        result_factory("E1Targets", unit="", facts=(BooleanFact("E1TargetsPresent", True),)),
    ]

    package = _use_case().execute(
        BuildCsrdReportPackageRequest(results=results, reporting_period=reporting_period, entity=entity)
    )

    context_ids = {c.id for c in package.contexts}
    unit_ids = {u.id for u in package.units}
    for fact in package.facts:
        assert fact.context_ref in context_ids
        assert fact.unit_ref is None or fact.unit_ref in unit_ids
    assert len(context_ids) == len(package.contexts) <= 2
    assert len(unit_ids) == len(package.units)

    root = ET.fromstring(package.instance.encode("utf-8"))
    assert len(root.findall(f"{_ESRS}GrossScope1GreenhouseGasEmissions")) == 1
    headcount = root.find(f"{_ESRS}S1TotalEmployees")
    assert headcount.get("contextRef") == "ctx_reporting_period_instant"
    assert headcount.get("unitRef") == "unit_pure"
    assert headcount.get("decimals") == "0"
    table = root.find(f"{_ESRS}S1HeadcountBreakdownTable")
    assert '"segment":"HQ"' in table.text
    targets_name = get_concept_definition("E1TargetsPresent").local_name
    targets = root.findall(f"{_ESRS}{targets_name}")
    assert targets[0].text == "true"
    assert targets[0].get("unitRef") is None
    assert targets[0].get("decimals") is None


def test_compilation_is_deterministic(mixed_scope_results, reporting_period, entity) -> None:
    req = BuildCsrdReportPackageRequest(
        results=mixed_scope_results, reporting_period=reporting_period, entity=entity
    )
    use_case = _use_case()

    assert use_case.execute(req) == use_case.execute(req)


@pytest.mark.parametrize(
    ("period", "entity"),
    [
        (None, _ENTITY),
        (ReportingPeriod(start=None, end=date(2024, 12, 31)), _ENTITY),  # type: ignore[arg-type]
        (ReportingPeriod(start=date(2025, 1, 1), end=date(2024, 12, 31)), _ENTITY),
        (ReportingPeriod.calendar_year(2024), None),
        (ReportingPeriod.calendar_year(2024), EntityIdentifier(scheme="", value="v")),
        (ReportingPeriod.calendar_year(2024), EntityIdentifier(scheme="s", value="  ")),
    ],
)
def test_structural_preconditions_fail_closed(period, entity) -> None:
    with pytest.raises(ReportInputError) as info:
        _use_case().execute(
            BuildCsrdReportPackageRequest(results=[], reporting_period=period, entity=entity)
        )

    assert info.value.code == "INVALID_REPORT_INPUT"


def test_negative_decimals_rejected(reporting_period, entity) -> None:
    with pytest.raises(ReportInputError):
        _use_case().execute(
            BuildCsrdReportPackageRequest(
                results=[], reporting_period=reporting_period, entity=entity, decimals=-2
            )
        )


def test_options_defaults(mixed_scope_results) -> None:
    use_case = _use_case()

    resolved = use_case.resolve_options(ReportOptions(profile_id="profile-42"))
    package = use_case.execute_for_options(mixed_scope_results, ReportOptions(profile_id="profile-42"))

    assert resolved.reporting_period == ReportingPeriod(date(2025, 1, 1), date(2025, 12, 31))
    assert resolved.entity == EntityIdentifier(scheme="urn:org:eaas:profile", value="profile-42")
    assert resolved.decimals == 3
    context = package.contexts[0]
    assert context.entity.value == "profile-42"
    assert "<xbrli:startDate>2025-01-01</xbrli:startDate>" in package.instance


def test_options_override_defaults(mixed_scope_results, reporting_period, entity) -> None:
    options = ReportOptions(
        profile_id="p",
        reporting_period=reporting_period,
        entity_identifier=entity,
        decimals=0,
    )

    package = _use_case().execute_for_options(mixed_scope_results, options)

    assert package.contexts[0].entity == entity
    assert package.find_facts("esrs:GrossScope1GreenhouseGasEmissions")[0].value == "20"


def test_use_case_defaults_come_from_constructor(mixed_scope_results) -> None:
    use_case = _use_case(default_decimals=1, default_entity_scheme="urn:example")

    resolved = use_case.resolve_options(ReportOptions(profile_id="p"))

    assert resolved.decimals == 1
    assert resolved.entity.scheme == "urn:example"


def test_blank_profile_id_rejected() -> None:
    with pytest.raises(ReportInputError):
        _use_case().execute_for_options([], ReportOptions(profile_id="  "))


def test_render_instance_for_options_matches_package(mixed_scope_results) -> None:
    use_case = _use_case()
    options = ReportOptions(profile_id="p")

    instance = use_case.render_instance_for_options(mixed_scope_results, options)
    package = use_case.execute_for_options(mixed_scope_results, options)

    assert instance == package.instance
    assert instance == build_xbrl_instance(package.contexts, package.units, package.facts)


def test_logs_start_success_and_skips(result_factory, reporting_period, entity, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger=_LOGGER)
    results = [result_factory("S1", unit="", facts=(NumericFact("NotAConcept", 1.0),))]

    _use_case().execute(
        BuildCsrdReportPackageRequest(results=results, reporting_period=reporting_period, entity=entity)
    )

    by_message = {r.getMessage(): r for r in caplog.records if r.name == _LOGGER}
    assert "csrd.build_package.start" in by_message
    skipped = by_message["csrd.build_package.skipped"]
    assert skipped.levelno == logging.DEBUG
    assert (skipped.module_id, skipped.concept_key, skipped.reason) == ("S1", "NotAConcept", "unknown_concept")
    success = by_message["csrd.build_package.success"]
    assert (success.facts, success.contexts, success.units, success.skipped) == (6, 1, 1, 1)


def test_logs_invalid_input_as_warning(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger=_LOGGER)

    with pytest.raises(ReportInputError):
        _use_case().execute(BuildCsrdReportPackageRequest(results=[], reporting_period=None, entity=None))

    warnings = [r for r in caplog.records if r.getMessage() == "csrd.build_package.invalid_input"]
    assert len(warnings) == 1
    assert warnings[0].levelno == logging.WARNING
    assert warnings[0].code == "INVALID_REPORT_INPUT"


def test_reordering_results_reorders_module_facts_only(result_factory, reporting_period, entity) -> None:
    results = [
        result_factory("A1", 5.0),
        result_factory("S1", unit="", facts=(NumericFact("S1TotalHeadcount", 148, decimals=0),)),
        result_factory("G1", unit="", facts=(TextFact("GOVOversightNarrative", "Board oversight."),)),
        result_factory("E1Targets", unit="", facts=(BooleanFact("E1TargetsPresent", True),)),
    ]
    use_case = _use_case()

    forward = use_case.execute(
        BuildCsrdReportPackageRequest(results=results, reporting_period=reporting_period, entity=entity)
    )
    backward = use_case.execute(
        BuildCsrdReportPackageRequest(
            results=list(reversed(results)), reporting_period=reporting_period, entity=entity
        )
    )

    assert forward.facts[:6] == backward.facts[:6]
    assert forward.facts[6:] == tuple(reversed(backward.facts[6:]))
    assert len(forward.facts) == 9
    assert sorted(map(repr, forward.facts)) == sorted(map(repr, backward.facts))


def test_compilation_id_is_scoped_to_execute(mixed_scope_results, reporting_period, entity) -> None:
    before = get_compilation_id()
    token = bind_compilation_id("outer-build")
    try:
        _use_case().execute(
            BuildCsrdReportPackageRequest(
                results=mixed_scope_results, reporting_period=reporting_period, entity=entity
            )
        )
        after = get_compilation_id()
    finally:
        reset_compilation_id(token)

    assert after == "outer-build"
    assert get_compilation_id() == before


def test_compilation_id_is_restored_after_rejection() -> None:
    before = get_compilation_id()

    with pytest.raises(ReportInputError):
        _use_case().execute(BuildCsrdReportPackageRequest(results=[], reporting_period=None, entity=None))

    assert get_compilation_id() == before


def test_start_log_carries_environment(reporting_period, entity, caplog) -> None:
    caplog.set_level(logging.INFO, logger=_LOGGER)

    _use_case(environment="staging").execute(
        BuildCsrdReportPackageRequest(results=[], reporting_period=reporting_period, entity=entity)
    )

    start = next(r for r in caplog.records if r.getMessage() == "csrd.build_package.start")
    assert start.env == "staging"


def test_resolve_options_leaves_decimals_check_to_execute() -> None:
    use_case = _use_case()
    options = ReportOptions(profile_id="p", decimals=-1)

    assert use_case.resolve_options(options).decimals == -1
    with pytest.raises(ReportInputError):
        use_case.execute_for_options([], options)
