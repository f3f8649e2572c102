# tests/unit/domain/services/test_context_unit_resolver.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Tests for context and unit resolution."""

from __future__ import annotations

from datetime import date

import pytest

from csrd_xbrl.domain.entities.xbrl_instance import DurationPeriod, InstantPeriod, PreparedFact
from csrd_xbrl.domain.enums.esrs import PeriodType
from csrd_xbrl.domain.exceptions.csrd import UnknownConceptError
from csrd_xbrl.domain.services.context_unit_resolver import (
    DURATION_CONTEXT_ID,
    INSTANT_CONTEXT_ID,
    build_context,
    resolve_references,
    unit_measure_for,
    unit_ref_for,
)


def _prepared(key: str, period_type: PeriodType, unit_id: str | None = None, decimals: str | None = None):
    return PreparedFact(
        concept_key=key, value="1", period_type=period_type, unit_id=unit_id, decimals=decimals
    )


def test_unit_ids_and_measures() -> None:
    assert unit_ref_for("tCO2e") == "unit_tCO2e"
    assert unit_measure_for("tCO2e") == "utr:tCO2e"
    assert unit_measure_for("pure") == "xbrli:pure"


def test_build_context_anchors(reporting_period, entity) -> None:
    duration = build_context(PeriodType.DURATION, reporting_period=reporting_period, entity=entity)
    instant = build_context(PeriodType.INSTANT, reporting_period=reporting_period, entity=entity)

    assert duration.id == DURATION_CONTEXT_ID == "ctx_reporting_period"
    assert duration.period == DurationPeriod(start=date(2024, 1, 1), end=date(2024, 12, 31))
    assert instant.id == INSTANT_CONTEXT_ID == "ctx_reporting_period_instant"
    assert instant.period == InstantPeriod(instant=date(2024, 12, 31))
    assert duration.entity == entity


def test_contexts_and_units_are_created_once_in_first_use_order(reporting_period, entity) -> None:
    prepared = [
        _prepared("S1TotalHeadcount", PeriodType.INSTANT, "pure", "0"),
        _prepared("scope1", PeriodType.DURATION, "tCO2e", "3"),
        _prepared("scope3", PeriodType.DURATION, "tCO2e", "3"),
        _prepared("E1TargetsPresent", PeriodType.DURATION),
        _prepared("S1AverageWeeklyHours", PeriodType.DURATION, "hour", "1"),
    ]

    resolved = resolve_references(prepared, reporting_period=reporting_period, entity=entity)

    assert [c.id for c in resolved.contexts] == [INSTANT_CONTEXT_ID, DURATION_CONTEXT_ID]
    assert [u.id for u in resolved.units] == ["unit_pure", "unit_tCO2e", "unit_hour"]
    assert [u.measures for u in resolved.units] == [("xbrli:pure",), ("utr:tCO2e",), ("utr:hour",)]


def test_facts_reference_resolved_contexts_and_units(reporting_period, entity) -> None:
    prepared = [
        _prepared("S1TotalHeadcount", PeriodType.INSTANT, "pure", "0"),
        _prepared("E1TargetsPresent", PeriodType.DURATION),
    ]

    resolved = resolve_references(prepared, reporting_period=reporting_period, entity=entity)
    context_ids = {c.id for c in resolved.contexts}
    unit_ids = {u.id for u in resolved.units}

    headcount, targets = resolved.facts
    assert headcount.concept == "esrs:S1TotalEmployees"
    assert headcount.context_ref == INSTANT_CONTEXT_ID
    assert headcount.unit_ref == "unit_pure"
    assert headcount.decimals == "0"
    assert targets.unit_ref is None
    assert targets.decimals is None
    for fact in resolved.facts:
        assert fact.context_ref in context_ids
        assert fact.unit_ref is None or fact.unit_ref in unit_ids


def test_no_facts_means_no_contexts(reporting_period, entity) -> None:
    resolved = resolve_references([], reporting_period=reporting_period, entity=entity)

    assert resolved.contexts == ()
    assert resolved.units == ()
    assert resolved.facts == ()


def test_unknown_concept_fails_closed(reporting_period, entity) -> None:
    with pytest.raises(UnknownConceptError):
        resolve_references(
            [_prepared("NotAConcept", PeriodType.DURATION)],
            reporting_period=reporting_period,
            entity=entity,
        )
