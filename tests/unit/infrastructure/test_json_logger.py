# tests/unit/infrastructure/test_json_logger.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
from __future__ import annotations

import json
import logging
import sys
from datetime import date

import pytest

from csrd_xbrl.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_compilation_id,
    get_json_logger,
    set_compilation_context,
)


def _render(record_msg: str, level: int = logging.INFO, **extra) -> dict:
    """Format a record carrying ``extra`` attributes and return the parsed JSON."""
    logger = logging.getLogger("test.csrd.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_json_logger",
        lno=1,
        msg=record_msg,
        args=(),
        exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return json.loads(_JsonFormatter().format(record))


def test_basic_fields() -> None:
    payload = _render("hello")

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.csrd.logger"
    assert "ts" in payload


def test_extras_are_merged_and_serialized_with_str_fallback() -> None:
    payload = _render("csrd.build_package.success", facts=9, period_end=date(2024, 12, 31))

    assert payload["facts"] == 9
    assert payload["period_end"] == "2024-12-31"


def test_compilation_id_from_context() -> None:
    set_compilation_context(compilation_id="cmp-1", request_id="req-1")

    payload = _render("x")

    assert get_compilation_id() == "cmp-1"
    assert payload["compilation_id"] == "cmp-1"
    assert payload["request_id"] == "req-1"


def test_record_attribute_beats_context() -> None:
    set_compilation_context(compilation_id="cmp-ctx")

    assert _render("x", compilation_id="cmp-record")["compilation_id"] == "cmp-record"


def test_exception_info_is_included() -> None:
    logger = logging.getLogger("test.csrd.logger.exc")
    try:
        raise ValueError("boom")
    except ValueError:
        record = logger.makeRecord(logger.name, logging.ERROR, "f", 1, "failure", (), sys.exc_info())

    payload = json.loads(_JsonFormatter().format(record))

    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_configure_root_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    configure_root_logging("debug")
    configure_root_logging("warning")

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, _JsonFormatter)


def test_get_json_logger_propagates() -> None:
    assert get_json_logger("csrd.test").propagate is True
