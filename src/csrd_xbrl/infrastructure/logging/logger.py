# src/csrd_xbrl/infrastructure/logging/logger.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory that produce JSON logs suitable for ingestion by log pipelines.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Automatic enrichment with ``compilation_id`` (one per report build) and
      the caller's ``request_id`` via contextvars.
    * Structured fields passed through ``extra={...}`` are merged into the
      payload.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
    log.info("csrd.build_package.start", extra={"modules": 12})
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar, Token
from datetime import UTC, datetime
from typing import Any, Final

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "set_compilation_context",
    "bind_compilation_id",
    "reset_compilation_id",
    "get_compilation_id",
    "get_request_id",
]

_REQUEST_ID_ENV_KEY: Final[str] = "REQUEST_ID"

# Per-call correlation context (task-local via contextvars).
_COMPILATION_ID_CTX: ContextVar[str | None] = ContextVar("csrd_compilation_id", default=None)
_REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("csrd_request_id", default=None)

# LogRecord attributes that are not user-supplied structured fields.
_RESERVED_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
    | {"message", "asctime", "compilation_id", "request_id"}
)


def set_compilation_context(
    *,
    compilation_id: str | None = None,
    request_id: str | None = None,
) -> None:
    """Set correlation identifiers on the current context.

    Args:
        compilation_id: Identifier of the report build in progress, if any.
        request_id: Identifier of the caller's request, if any.

    Notes:
        Passing only one of the arguments updates that value and leaves the
        other unchanged.
    """
    if compilation_id is not None:
        _COMPILATION_ID_CTX.set(compilation_id)
    if request_id is not None:
        _REQUEST_ID_CTX.set(request_id)


def bind_compilation_id(compilation_id: str) -> Token[str | None]:
    """Set the compilation id and return a token that restores the previous one."""
    return _COMPILATION_ID_CTX.set(compilation_id)


def reset_compilation_id(token: Token[str | None]) -> None:
    """Restore the compilation id that was current before ``bind_compilation_id``."""
    _COMPILATION_ID_CTX.reset(token)


def get_compilation_id() -> str | None:
    """Return the current compilation id from contextvars, if any."""
    return _COMPILATION_ID_CTX.get(None)


def get_request_id() -> str | None:
    """Return the current request id from contextvars, if any."""
    return _REQUEST_ID_CTX.get(None)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and structured extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        cid = getattr(record, "compilation_id", None) or _COMPILATION_ID_CTX.get(None)
        if cid:
            payload["compilation_id"] = cid

        rid = (
            getattr(record, "request_id", None)
            or _REQUEST_ID_CTX.get(None)
            or os.getenv(_REQUEST_ID_ENV_KEY)
        )
        if rid:
            payload["request_id"] = rid

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        # Fields passed via ``extra={...}`` land on the record as attributes.
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key not in payload:
                payload[key] = value

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)

    if root.handlers:
        # Already configured; avoid duplicate handlers.
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup for global defaults.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
