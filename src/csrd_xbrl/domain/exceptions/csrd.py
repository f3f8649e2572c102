# src/csrd_xbrl/domain/exceptions/csrd.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""CSRD reporting domain exceptions.

Purpose:
    Provide the two fatal error types of the XBRL compilation pipeline.

Layer:
    domain

Notes:
    - Only structural preconditions raise. Per-fact and per-table data-quality
      problems are handled by omitting the offending item and never surface
      as exceptions.
"""

from __future__ import annotations

from csrd_xbrl.domain.exceptions.base import CsrdError


class UnknownConceptError(CsrdError, KeyError):
    """Raised when a concept key is not registered in the ESRS taxonomy.

    This signals a programming or configuration defect, not bad input data.
    """

    code = "UNKNOWN_CONCEPT"

    def __str__(self) -> str:
        """Return the message without KeyError's repr-quoting."""
        return self.message


class ReportInputError(CsrdError, ValueError):
    """Raised when report options or compilation inputs are structurally invalid.

    Examples are a missing reporting period bound, an entity identifier
    without scheme or value, or a missing profile identifier.
    """

    code = "INVALID_REPORT_INPUT"


__all__ = ["UnknownConceptError", "ReportInputError"]
