# src/csrd_xbrl/domain/entities/module_result.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Calculation-module output value objects.

Purpose:
    Provide the read-only view of calculation-module results consumed by the
    XBRL compilation pipeline. Each module reports a headline scalar (value
    plus unit label) and may declare ESRS facts, ESRS tables, and intensity
    descriptors.

Layer:
    domain

Notes:
    - These objects are produced by the calculation-module collaborator
      (through the DTO mapper) and are never mutated by the pipeline.
    - Declared facts are modelled as one variant per value kind so that the
      normalization path is chosen by type, not by inspecting optional
      fields:
        * NumericFact  → fixed-point number with decimals and unit.
        * BooleanFact  → literal ``true``/``false`` token.
        * TextFact     → trimmed narrative text.
        * TableFact    → ordered rows of scalar cells.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

from csrd_xbrl.domain.enums.esrs import IntensityBasis

CellValue: TypeAlias = str | int | float | bool | None
TableRow: TypeAlias = Mapping[str, CellValue]


@dataclass(frozen=True, slots=True)
class NumericFact:
    """Module-declared numeric ESRS fact.

    Attributes:
        concept_key:
            Registry key of the concept (e.g., "E1EnergyConsumptionTotalKwh").
        value:
            Numeric value. Non-finite values are dropped during compilation.
        unit_id:
            Optional unit override. When None, the registry unit applies.
        decimals:
            Optional rounding precision override. When None, the compilation
            default applies.
    """

    concept_key: str
    value: int | float | Decimal
    unit_id: str | None = None
    decimals: int | None = None


@dataclass(frozen=True, slots=True)
class BooleanFact:
    """Module-declared boolean ESRS fact (serialized as ``true``/``false``)."""

    concept_key: str
    value: bool
    unit_id: str | None = None


@dataclass(frozen=True, slots=True)
class TextFact:
    """Module-declared narrative ESRS fact. Blank text is dropped."""

    concept_key: str
    value: str
    unit_id: str | None = None


ModuleFact: TypeAlias = NumericFact | BooleanFact | TextFact


@dataclass(frozen=True, slots=True)
class TableFact:
    """Module-declared ESRS table.

    Attributes:
        concept_key:
            Registry key of the table concept.
        rows:
            Ordered rows. The column set is whatever the module chose; the
            compiler treats it as opaque. Cells set to None are absent.
    """

    concept_key: str
    rows: tuple[TableRow, ...]


@dataclass(frozen=True, slots=True)
class IntensityDescriptor:
    """Emission-intensity descriptor reported by a module.

    Attributes:
        basis:
            Denominator basis (net revenue, production, energy, employees).
        value:
            Intensity value computed by the module itself.
        denominator_value:
            Denominator used by the module (e.g., net revenue in DKK).
        label:
            Human-readable label.
        unit:
            Unit label of the intensity value.
        denominator_unit:
            Unit label of the denominator.
    """

    basis: IntensityBasis | str
    value: float | None
    denominator_value: float | None
    label: str = ""
    unit: str = ""
    denominator_unit: str = ""


@dataclass(frozen=True, slots=True)
class ModuleResult:
    """Result bag produced by a single calculation module.

    Attributes:
        value:
            Headline scalar. Missing values are represented as None.
        unit:
            Unit label of the headline scalar (e.g., "t CO2e", "social score").
        facts:
            Declared ESRS facts, in module order.
        tables:
            Declared ESRS tables, in module order.
        intensities:
            Emission-intensity descriptors.
        assumptions:
            Assumptions listed by the module (passthrough only).
        trace:
            Calculation trace lines (passthrough only).
        warnings:
            Data-quality warnings raised by the module (passthrough only).
    """

    value: float | None
    unit: str
    facts: tuple[ModuleFact, ...] = ()
    tables: tuple[TableFact, ...] = ()
    intensities: tuple[IntensityDescriptor, ...] = ()
    assumptions: tuple[str, ...] = ()
    trace: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CalculatedModuleResult:
    """A module result tagged with its module identifier and title.

    Attributes:
        module_id:
            Topic identifier (e.g., "A1", "B7", "E1Targets").
        title:
            Display title of the module.
        result:
            The module's result bag.
    """

    module_id: str
    title: str
    result: ModuleResult


__all__ = [
    "CellValue",
    "TableRow",
    "NumericFact",
    "BooleanFact",
    "TextFact",
    "ModuleFact",
    "TableFact",
    "IntensityDescriptor",
    "ModuleResult",
    "CalculatedModuleResult",
]
