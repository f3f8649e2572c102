# src/csrd_xbrl/domain/services/numeric_format.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Fixed-point formatting for numeric XBRL fact values.

Values are rounded half-up at ``decimals`` places and then rendered without
insignificant trailing zeros, without a dangling decimal point, and never in
scientific notation. The ``decimals`` attribute written next to the value
records the rounding precision, not the number of visible digits.
"""

from __future__ import annotations

import math
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext

_WORKING_PRECISION = 96


def is_finite_number(value: object) -> bool:
    """Return True for finite int/float/Decimal values (booleans excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def to_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a number to Decimal via its shortest round-trip representation."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_decimal(value: int | float | Decimal, decimals: int) -> str:
    """Format ``value`` at ``decimals`` places of fixed-point precision.

    Args:
        value:
            Number to format. Non-finite values render as ``"0"``.
        decimals:
            Number of decimal places to round to. Must be non-negative.

    Returns:
        Plain decimal string with trailing zeros stripped, e.g.
        ``format_decimal(1767.5, 3) == "1767.5"`` and
        ``format_decimal(-0.0001, 3) == "0"``.

    Raises:
        ValueError:
            If ``decimals`` is negative.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative; got {decimals}.")
    if not is_finite_number(value):
        return "0"

    number = to_decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the requested places.
        ctx.prec = max(_WORKING_PRECISION, number.adjusted() + decimals + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        quantum = Decimal(1).scaleb(-decimals)
        rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)

    if rounded.is_zero():
        return "0"

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


__all__ = ["format_decimal", "is_finite_number", "to_decimal"]
