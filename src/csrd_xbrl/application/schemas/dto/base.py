# src/csrd_xbrl/application/schemas/dto/base.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base DTOs (Application Layer).

Purpose:
    Canonical Pydantic bases for all application-layer DTOs. Transport-agnostic.
    Field names are snake_case in Python and camelCase on the wire, matching
    the calculation-module JSON contract.

Layer: application/schemas/dto
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """Base class for application-layer DTOs produced by this service.

    Notes:
        - Must not import HTTP-specific bases.
        - Enforces strict fields (`extra='forbid'`).
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, object]:
        """Return a JSON-compatible dict with camelCase keys and unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ModuleContractDTO(BaseModel):
    """Base class for DTOs describing calculation-module output.

    Notes:
        - Calculation modules attach many presentation-only fields (trends,
          narratives, charts) the compiler does not read; they are ignored.
        - Strings are kept verbatim; trimming is a compilation concern.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, object]:
        """Return a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
