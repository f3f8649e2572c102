# src/csrd_xbrl/infrastructure/observability/metrics.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Prometheus metrics for CSRD report builds (registry-aware, hot-reload safe).

Collectors are created lazily through get-or-create accessors bound to the
**current** ``prometheus_client.REGISTRY``:

    - Safe under hot reload and tests that swap the default registry.
    - No duplicate-registration errors.
    - Cache automatically resets when the active registry changes.

Example:
    get_report_builds_total().labels(outcome="success").inc()
    get_report_build_duration_seconds().observe(0.004)
"""

from __future__ import annotations

import logging
import threading
from contextlib import suppress
from typing import Final, TypeVar

import prometheus_client as prom
from prometheus_client import Counter, Histogram

_log = logging.getLogger(__name__)

# Report builds are CPU-only and typically sub-millisecond to tens of ms.
_BUCKETS: Final[tuple[float, ...]] = (
    0.0005,
    0.001,
    0.0025,
    0.005,
    0.010,
    0.025,
    0.050,
    0.100,
    0.250,
    0.500,
    1.000,
)

_C = TypeVar("_C", Counter, Histogram)

_registry_id: int | None = None
_cache: dict[str, Counter | Histogram] = {}
_lock = threading.RLock()


# ---------------------------------------------------------------------------
# Registry-handling primitives


def _ensure_registry() -> None:
    """Reset the cache if the active registry changed."""
    global _registry_id
    with _lock:
        rid = id(prom.REGISTRY)
        if _registry_id is None or _registry_id != rid:
            _cache.clear()
            _registry_id = rid


def _lookup_existing(name: str, kind: type[_C]) -> _C | None:
    """Return a collector already registered on the active registry, if any."""
    with _lock, suppress(Exception):
        mapping = getattr(prom.REGISTRY, "_names_to_collectors", None)
        if isinstance(mapping, dict):
            col = mapping.get(name)
            if isinstance(col, kind):
                return col
    return None


def _get_or_create(
    kind: type[_C],
    name: str,
    help_text: str,
    *,
    labelnames: tuple[str, ...] = (),
    **kwargs: object,
) -> _C:
    """Get or create a registry-bound collector with stable identity.

    1. Return from module cache if present for the active registry.
    2. If the registry already has a collector by this name, reuse it.
    3. Otherwise, register a new collector on the active registry.
    4. If concurrent registration triggers a duplication error, retry step 2.
    """
    _ensure_registry()
    with _lock:
        cached = _cache.get(name)
        if isinstance(cached, kind):
            return cached

        existing = _lookup_existing(name, kind)
        if existing is not None:
            _cache[name] = existing
            return existing

        try:
            collector = kind(name, help_text, labelnames, registry=prom.REGISTRY, **kwargs)
        except ValueError as exc:
            if "Duplicated timeseries" in str(exc):
                again = _lookup_existing(name, kind)
                if again is not None:
                    _cache[name] = again
                    return again
            _log.exception("Failed to register Prometheus collector %s", name)
            raise
        _cache[name] = collector
        return collector


# ---------------------------------------------------------------------------
# Report build metrics


def get_report_builds_total() -> Counter:
    """Return counter for report package builds.

    Labels:
        outcome: ``success``, ``invalid_input`` or ``error``.
    """
    return _get_or_create(
        Counter,
        "csrd_report_builds_total",
        "CSRD report package builds by outcome.",
        labelnames=("outcome",),
    )


def get_report_facts_total() -> Counter:
    """Return counter for facts emitted into instances.

    Labels:
        origin: ``mandatory``, ``module``, ``table`` or ``intensity``.
    """
    return _get_or_create(
        Counter,
        "csrd_report_facts_total",
        "Facts emitted into CSRD XBRL instances by originating pass.",
        labelnames=("origin",),
    )


def get_report_skipped_items_total() -> Counter:
    """Return counter for module items omitted from instances.

    Labels:
        reason: Skip reason (e.g. ``unknown_concept``, ``empty_text``).
    """
    return _get_or_create(
        Counter,
        "csrd_report_skipped_items_total",
        "Module-declared facts and tables omitted from CSRD XBRL instances.",
        labelnames=("reason",),
    )


def get_report_build_duration_seconds() -> Histogram:
    """Return histogram for report package build latency."""
    return _get_or_create(
        Histogram,
        "csrd_report_build_duration_seconds",
        "Latency (seconds) of CSRD report package builds.",
        buckets=_BUCKETS,
    )


__all__ = [
    "get_report_builds_total",
    "get_report_facts_total",
    "get_report_skipped_items_total",
    "get_report_build_duration_seconds",
]
