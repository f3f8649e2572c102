# src/csrd_xbrl/domain/services/xbrl_serializer.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""XBRL instance document serializer.

Purpose:
    Render contexts, units, and facts into a self-contained XBRL 2.1
    instance document referencing the ESRS taxonomy.

Layer:
    domain/services

Notes:
    - Pure and side-effect free; identical input yields byte-identical
      output.
    - Elements are written in the order contexts → units → facts, each list
      in the order given.
    - Text content and attribute values are escaped for ``& < > " '``.
    - ``unitRef`` and ``decimals`` attributes are only written when set.
    - The layout (two-space indentation, one element per line, aligned
      namespace declarations) is part of the wire contract.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final
from xml.sax.saxutils import escape

from csrd_xbrl.domain.entities.xbrl_instance import (
    DurationPeriod,
    XBRLContext,
    XBRLFact,
    XBRLUnit,
)
from csrd_xbrl.domain.services.esrs_taxonomy import ESRS_NAMESPACE, ESRS_PREFIX

XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>'

NAMESPACES: Final[tuple[tuple[str, str], ...]] = (
    ("xbrli", "http://www.xbrl.org/2003/instance"),
    ("link", "http://www.xbrl.org/2003/linkbase"),
    ("xlink", "http://www.w3.org/1999/xlink"),
    ("utr", "http://www.xbrl.org/2009/utr"),
    ("dtr-types", "http://www.xbrl.org/dtr/type/2024-01-31"),
    (ESRS_PREFIX, ESRS_NAMESPACE),
)

_QUOTE_ENTITIES: Final[dict[str, str]] = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str) -> str:
    """Escape the five XML special characters in ``value``."""
    return escape(value, _QUOTE_ENTITIES)


def _root_open_tag() -> str:
    root = "<xbrli:xbrl "
    declarations = [f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES]
    # Continuation lines align with the first declaration.
    return root + ("\n" + " " * len(root)).join(declarations) + ">"


def render_context(context: XBRLContext) -> str:
    """Render one ``xbrli:context`` element."""
    entity = context.entity
    lines = [
        f'  <xbrli:context id="{escape_xml(context.id)}">',
        "    <xbrli:entity>",
        f'      <xbrli:identifier scheme="{escape_xml(entity.scheme)}">'
        f"{escape_xml(entity.value)}</xbrli:identifier>",
        "    </xbrli:entity>",
        "    <xbrli:period>",
    ]
    period = context.period
    if isinstance(period, DurationPeriod):
        lines.append(f"      <xbrli:startDate>{escape_xml(period.start.isoformat())}</xbrli:startDate>")
        lines.append(f"      <xbrli:endDate>{escape_xml(period.end.isoformat())}</xbrli:endDate>")
    else:
        lines.append(f"      <xbrli:instant>{escape_xml(period.instant.isoformat())}</xbrli:instant>")
    lines.append("    </xbrli:period>")
    lines.append("  </xbrli:context>")
    return "\n".join(lines)


def render_unit(unit: XBRLUnit) -> str:
    """Render one ``xbrli:unit`` element."""
    lines = [f'  <xbrli:unit id="{escape_xml(unit.id)}">']
    lines.extend(f"    <xbrli:measure>{escape_xml(measure)}</xbrli:measure>" for measure in unit.measures)
    lines.append("  </xbrli:unit>")
    return "\n".join(lines)


def render_fact(fact: XBRLFact) -> str:
    """Render one fact element, omitting absent optional attributes."""
    attributes = [f'contextRef="{escape_xml(fact.context_ref)}"']
    if fact.unit_ref:
        attributes.append(f'unitRef="{escape_xml(fact.unit_ref)}"')
    if fact.decimals:
        attributes.append(f'decimals="{escape_xml(fact.decimals)}"')
    return f"  <{fact.concept} {' '.join(attributes)}>{escape_xml(fact.value)}</{fact.concept}>"


def render_instance(
    contexts: Sequence[XBRLContext],
    units: Sequence[XBRLUnit],
    facts: Sequence[XBRLFact],
) -> str:
    """Render a complete XBRL instance document.

    Args:
        contexts:
            Contexts referenced by the facts.
        units:
            Units referenced by the facts.
        facts:
            Facts in emission order.

    Returns:
        The instance document as a string (no trailing newline).
    """
    sections = [
        "\n".join(render_context(context) for context in contexts),
        "\n".join(render_unit(unit) for unit in units),
        "\n".join(render_fact(fact) for fact in facts),
    ]
    return "\n".join(
        [XML_DECLARATION, _root_open_tag(), *(s for s in sections if s), "</xbrli:xbrl>"]
    )


__all__ = [
    "XML_DECLARATION",
    "NAMESPACES",
    "escape_xml",
    "render_context",
    "render_unit",
    "render_fact",
    "render_instance",
]
