# tests/unit/domain/services/test_fact_compiler.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Tests for the ESRS fact compiler."""

from __future__ import annotations

import json
import math

import pytest

from csrd_xbrl.domain.entities.module_result import (
    BooleanFact,
    NumericFact,
    TableFact,
    TextFact,
)
from csrd_xbrl.domain.enums.esrs import PeriodType
from csrd_xbrl.domain.services.esrs_taxonomy import EMISSION_CONCEPT_KEYS
from csrd_xbrl.domain.services.fact_compiler import (
    FactCompiler,
    FactOrigin,
    SkipReason,
    normalize_table_row,
    serialize_table_rows,
)


def _by_key(compilation):
    return {fact.concept_key: fact for fact in compilation.facts}


def test_mandatory_emission_facts_come_first_even_without_results() -> None:
    compilation = FactCompiler().compile([])

    assert [f.concept_key for f in compilation.facts] == list(EMISSION_CONCEPT_KEYS)
    for fact in compilation.facts:
        assert fact.value == "0"
        assert fact.unit_id == "tCO2e"
        assert fact.decimals == "3"
        assert fact.period_type is PeriodType.DURATION
    assert compilation.count_by_origin()[FactOrigin.MANDATORY] == 6


def test_mixed_scope_totals_are_formatted(mixed_scope_results) -> None:
    facts = _by_key(FactCompiler().compile(mixed_scope_results))

    assert facts["scope1"].value == "19.75"
    assert facts["scope2LocationBased"].value == "35"
    assert facts["scope2MarketBased"].value == "29.9"
    assert facts["scope3"].value == "4.3"
    assert facts["totalMarketBased"].value == "53.95"


def test_default_decimals_override_applies_to_mandatory_facts(mixed_scope_results) -> None:
    facts = _by_key(FactCompiler().compile(mixed_scope_results, decimals=0))

    assert facts["scope1"].value == "20"
    assert facts["scope1"].decimals == "0"


def test_negative_default_decimals_rejected() -> None:
    with pytest.raises(ValueError):
        FactCompiler().compile([], decimals=-1)


def test_net_revenue_intensity_is_derived(result_factory, net_revenue_intensity) -> None:
    results = [
        result_factory("A1", 1200.0),
        result_factory("B1", 480.0, intensities=(net_revenue_intensity(100_000_000.0),)),
        result_factory("C1", 87.5),
    ]

    compilation = FactCompiler().compile(results)
    facts = _by_key(compilation)

    assert facts["scope1"].value == "1200"
    assert facts["totalLocationBased"].value == "1767.5"
    location = facts["E1IntensityLocationBasedPerNetRevenue"]
    market = facts["E1IntensityMarketBasedPerNetRevenue"]
    assert location.value == "0.000017675"
    assert location.decimals == "9"
    assert location.unit_id == "Emissions_per_Monetary"
    assert market.value == "0.000017675"
    assert [f.concept_key for f in compilation.facts][-2:] == [
        "E1IntensityLocationBasedPerNetRevenue",
        "E1IntensityMarketBasedPerNetRevenue",
    ]
    assert compilation.count_by_origin()[FactOrigin.INTENSITY] == 2


def test_no_intensity_without_denominator(result_factory) -> None:
    facts = _by_key(FactCompiler().compile([result_factory("A1", 5.0)]))

    assert "E1IntensityLocationBasedPerNetRevenue" not in facts
    assert "E1IntensityMarketBasedPerNetRevenue" not in facts


def test_module_intensity_fact_suppresses_derived_one(result_factory, net_revenue_intensity) -> None:
    results = [
        result_factory(
            "E1Targets",
            unit="",
            facts=(NumericFact("E1IntensityLocationBasedPerNetRevenue", 0.5, decimals=2),),
            intensities=(net_revenue_intensity(1000.0),),
        ),
        result_factory("A1", 10.0),
    ]

    compilation = FactCompiler().compile(results)
    location = [f for f in compilation.facts if f.concept_key == "E1IntensityLocationBasedPerNetRevenue"]

    assert len(location) == 1
    assert location[0].value == "0.5"
    assert location[0].decimals == "2"
    assert _by_key(compilation)["E1IntensityMarketBasedPerNetRevenue"].value == "0.01"
    assert any(
        s.concept_key == "E1IntensityLocationBasedPerNetRevenue"
        and s.reason is SkipReason.ALREADY_REPORTED
        for s in compilation.skipped
    )


def test_numeric_fact_uses_registry_unit_and_period(result_factory) -> None:
    results = [
        result_factory(
            "S1",
            75.0,
            unit="social score",
            facts=(
                NumericFact("S1TotalHeadcount", 148, decimals=0),
                NumericFact("S1AverageWeeklyHours", 37.5, decimals=1),
            ),
        ),
        result_factory("S4", 60.0, unit="social score", facts=(NumericFact("S4EscalationTimeframeDays", 14),)),
    ]

    facts = _by_key(FactCompiler().compile(results))

    headcount = facts["S1TotalHeadcount"]
    assert (headcount.value, headcount.unit_id, headcount.decimals) == ("148", "pure", "0")
    assert headcount.period_type is PeriodType.INSTANT
    hours = facts["S1AverageWeeklyHours"]
    assert (hours.value, hours.unit_id, hours.decimals) == ("37.5", "hour", "1")
    assert hours.period_type is PeriodType.DURATION
    days = facts["S4EscalationTimeframeDays"]
    assert (days.value, days.unit_id, days.decimals) == ("14", "day", "3")


def test_unit_override_wins_over_registry_unit(result_factory) -> None:
    fact = NumericFact("E1EnergyConsumptionTotalKwh", 1500.0, unit_id="MWh")

    compiled = _by_key(FactCompiler().compile([result_factory("B1", 1.0, facts=(fact,))]))

    assert compiled["E1EnergyConsumptionTotalKwh"].unit_id == "MWh"


def test_boolean_fact(result_factory) -> None:
    results = [result_factory("E1Targets", unit="", facts=(BooleanFact("E1TargetsPresent", True),))]

    fact = _by_key(FactCompiler().compile(results))["E1TargetsPresent"]

    assert fact.value == "true"
    assert fact.unit_id is None
    assert fact.decimals is None


def test_text_fact_is_trimmed_and_blank_text_skipped(result_factory) -> None:
    results = [
        result_factory(
            "GOV",
            unit="",
            facts=(
                TextFact("GOVOversightNarrative", "  Board oversees climate risk.  "),
                TextFact("GOVManagementNarrative", "   "),
            ),
        )
    ]

    compilation = FactCompiler().compile(results)
    facts = _by_key(compilation)

    assert facts["GOVOversightNarrative"].value == "Board oversees climate risk."
    assert facts["GOVOversightNarrative"].unit_id is None
    assert "GOVManagementNarrative" not in facts
    assert [(s.module_id, s.reason) for s in compilation.skipped] == [("GOV", SkipReason.EMPTY_TEXT)]


def test_unknown_and_non_finite_facts_are_skipped(result_factory) -> None:
    results = [
        result_factory(
            "S1",
            unit="",
            facts=(
                NumericFact("NotAConcept", 1.0),
                NumericFact("S1TotalHeadcount", math.nan),
                NumericFact("S1AverageWeeklyHours", math.inf),
            ),
        )
    ]

    compilation = FactCompiler().compile(results)

    assert len(compilation.facts) == 6
    assert [s.reason for s in compilation.skipped] == [
        SkipReason.UNKNOWN_CONCEPT,
        SkipReason.NON_FINITE_NUMBER,
        SkipReason.NON_FINITE_NUMBER,
    ]


def test_negative_fact_decimals_are_skipped(result_factory) -> None:
    results = [result_factory("S1", unit="", facts=(NumericFact("S1TotalHeadcount", 3, decimals=-1),))]

    compilation = FactCompiler().compile(results)

    assert "S1TotalHeadcount" not in _by_key(compilation)
    assert compilation.skipped[0].reason is SkipReason.INVALID_DECIMALS


def test_module_fact_for_emission_concept_is_ignored(result_factory) -> None:
    results = [
        result_factory("A1", 12.0),
        result_factory("E1Targets", unit="", facts=(NumericFact("scope1", 999.0),)),
    ]

    compilation = FactCompiler().compile(results)
    scope1 = [f for f in compilation.facts if f.concept_key == "scope1"]

    assert len(scope1) == 1
    assert scope1[0].value == "12"
    assert compilation.skipped[0].reason is SkipReason.ALREADY_REPORTED


def test_facts_follow_module_order_then_tables(result_factory) -> None:
    results = [
        result_factory(
            "S1",
            unit="",
            facts=(NumericFact("S1TotalHeadcount", 10),),
            tables=(TableFact("S1HeadcountBreakdownTable", ({"segment": "HQ", "count": 10},)),),
        ),
        result_factory("E1Targets", unit="", facts=(BooleanFact("E1TargetsPresent", False),)),
    ]

    compilation = FactCompiler().compile(results)

    assert [f.concept_key for f in compilation.facts[6:]] == [
        "S1TotalHeadcount",
        "S1HeadcountBreakdownTable",
        "E1TargetsPresent",
    ]
    assert compilation.origins[6:] == (FactOrigin.MODULE, FactOrigin.TABLE, FactOrigin.MODULE)


def test_table_is_serialized_as_compact_sorted_json(result_factory) -> None:
    rows = (
        {"segment": "HQ", "female": 40, "male": 60.0, "note": None},
        {"segment": "Plant", "female": 5, "male": 20},
    )
    results = [result_factory("S1", unit="", tables=(TableFact("S1HeadcountBreakdownTable", rows),))]

    fact = _by_key(FactCompiler().compile(results))["S1HeadcountBreakdownTable"]

    assert fact.value == (
        '[{"female":40,"male":60,"note":null,"segment":"HQ"},'
        '{"female":5,"male":20,"segment":"Plant"}]'
    )
    assert '"segment":"HQ"' in fact.value
    assert fact.unit_id is None
    assert fact.decimals is None


def test_empty_tables_are_skipped(result_factory) -> None:
    results = [
        result_factory(
            "S1",
            unit="",
            tables=(
                TableFact("S1HeadcountBreakdownTable", ()),
                TableFact("S1EmploymentContractBreakdownTable", ({}, {})),
            ),
        )
    ]

    compilation = FactCompiler().compile(results)

    assert len(compilation.facts) == 6
    assert [s.reason for s in compilation.skipped] == [SkipReason.EMPTY_TABLE, SkipReason.EMPTY_TABLE]


def test_normalize_table_row() -> None:
    row = {"b": 2.0, "a": "x", "c": math.nan, "d": None, "e": True, "f": 1.25}

    normalized = normalize_table_row(row)

    assert list(normalized) == ["a", "b", "c", "d", "e", "f"]
    assert normalized["c"] is None
    assert normalized["d"] is None
    assert normalized["b"] == 2 and isinstance(normalized["b"], int)
    assert normalized["e"] is True
    assert normalized["f"] == 1.25


def test_serialize_table_rows_keeps_unicode() -> None:
    serialized = serialize_table_rows([{"site": "København"}])

    assert serialized == '[{"site":"København"}]'
    assert json.loads(serialized) == [{"site": "København"}]
    assert serialize_table_rows([]) is None


def test_null_cells_are_kept_as_json_null() -> None:
    assert serialize_table_rows([{"topic": "Bribery", "owner": None}]) == (
        '[{"owner":null,"topic":"Bribery"}]'
    )
    assert serialize_table_rows([{"owner": None}]) == '[{"owner":null}]'


def test_table_of_null_cells_is_reported(result_factory) -> None:
    table = TableFact("S1HeadcountBreakdownTable", ({"owner": None}, {}))
    results = [result_factory("S1", unit="", tables=(table,))]

    compilation = FactCompiler().compile(results)

    assert _by_key(compilation)["S1HeadcountBreakdownTable"].value == '[{"owner":null}]'
    assert compilation.skipped == ()
