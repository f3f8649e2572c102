# src/csrd_xbrl/domain/exceptions/base.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for CSRD reporting exceptions. Every error carries a
    stable ``code`` so callers can map failures deterministically (HTTP
    statuses, metrics labels, log fields) without parsing messages.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any


class CsrdError(Exception):
    """Base class for all CSRD domain/application exceptions.

    Attributes:
        code:
            Stable error code suitable for mapping to transports and metrics.
        message:
            Human-readable error message.
        details:
            Optional machine-readable diagnostic payload used by adapters and
            logging code.
    """

    code: str = "CSRD_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        """Initialize a CsrdError instance.

        Args:
            message:
                Human-readable error message, safe to surface to callers.
            details:
                Optional structured diagnostic payload for logs or adapters.

        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        """Return the human-readable message for this error."""
        # Details stay out of the string form; they are for structured logs.
        return self.message


__all__ = ["CsrdError"]
